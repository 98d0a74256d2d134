# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocol definition for same-class bean-method self-invocation detection.

The bean-proxy validator needs one answer per configuration class: does any
bean method of this class call another bean method of the same class
directly? Such calls only behave as singletons under CGLIB proxying, so the
answer decides whether ``proxyBeanMethods`` may be disabled.

The default implementation (``RegexSelfInvocationDetector``) is a raw-text
heuristic. Keeping it behind this protocol lets a parse-tree based detector
replace it without touching the validator's pass/fail contract.

Example Usage:
    ```python
    from omnibase_build.protocols import ProtocolSelfInvocationDetector

    class TreeSitterSelfInvocationDetector:
        def has_self_invocation(self, source_text: str) -> bool:
            tree = parser.parse(source_text.encode())
            return any(_is_local_bean_call(node) for node in _walk(tree))

    detector = TreeSitterSelfInvocationDetector()
    assert isinstance(detector, ProtocolSelfInvocationDetector)
    verify_bean_proxying(root, detector=detector)
    ```
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolSelfInvocationDetector(Protocol):
    """Detects same-class invocation of bean methods in a source file."""

    def has_self_invocation(self, source_text: str) -> bool:
        """Return True if a bean method is invoked from within its own class.

        Args:
            source_text: Raw text of a single configuration class file.

        Returns:
            True when at least one bean method is called in addition to
            being declared.
        """
        ...


__all__: list[str] = ["ProtocolSelfInvocationDetector"]
