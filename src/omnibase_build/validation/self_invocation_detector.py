# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Regex-based bean-method self-invocation detector.

Text-pattern heuristic, not semantic analysis: identifiers are not resolved,
so a public method whose name also appears as a call on an unrelated object
counts as a self-invocation, and a bean method called through ``this::name``
does not.
"""

from __future__ import annotations

import re
from typing import Final

# public <ReturnType>[<Generic>...] <name>(
PATTERN_BEAN_METHOD: Final[re.Pattern[str]] = re.compile(
    r"public\s\w+(<\w+>)*\s(\w+)\("
)


class RegexSelfInvocationDetector:
    """Counts ``<name>(`` occurrences for every public method in a file.

    A count of one is the declaration itself; anything above one means the
    method is also called somewhere in the same file.

    Example:
        >>> detector = RegexSelfInvocationDetector()
        >>> detector.has_self_invocation(
        ...     "public DataSource dataSource() { return build(); }\\n"
        ...     "public Repo repo() { return new Repo(dataSource()); }"
        ... )
        True
    """

    def extract_bean_methods(self, source_text: str) -> list[str]:
        """Return public method names in order of declaration."""
        return [match.group(2) for match in PATTERN_BEAN_METHOD.finditer(source_text)]

    def count_invocations(self, source_text: str, method_name: str) -> int:
        """Count ``<method_name>(`` occurrences, declaration included."""
        return len(re.findall(method_name + r"\(", source_text))

    def has_self_invocation(self, source_text: str) -> bool:
        for method_name in self.extract_bean_methods(source_text):
            if self.count_invocations(source_text, method_name) > 1:
                return True
        return False


__all__: list[str] = ["PATTERN_BEAN_METHOD", "RegexSelfInvocationDetector"]
