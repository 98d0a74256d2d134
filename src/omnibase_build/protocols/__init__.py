# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocol definitions for omnibase_build.

Protocols:
    - ProtocolSelfInvocationDetector: Interface for bean-method self-invocation
      detection used by the bean-proxy validator
"""

from omnibase_build.protocols.protocol_self_invocation_detector import (
    ProtocolSelfInvocationDetector,
)

__all__ = [
    "ProtocolSelfInvocationDetector",
]
