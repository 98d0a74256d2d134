# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build Check Enumerations Module.

Exports:
    EnumBuildCheckErrorCode: Classification of build-convention check failures
    EnumTaskStatus: Outcome of one task run against one project
"""

from omnibase_build.enums.enum_build_check_error_code import (
    EnumBuildCheckErrorCode,
)
from omnibase_build.enums.enum_task_status import EnumTaskStatus

__all__: list[str] = [
    "EnumBuildCheckErrorCode",
    "EnumTaskStatus",
]
