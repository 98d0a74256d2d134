# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Outcome status of a single task run against a single project."""

from __future__ import annotations

from enum import Enum


class EnumTaskStatus(str, Enum):
    """Status of one (project, task) execution.

    Values:
        PASSED: The task completed without reporting a violation.
        FAILED: The task raised a build-convention failure.
        SKIPPED: The task never ran because an earlier failure stopped the run.
        ERROR: The task crashed with an unexpected exception.
    """

    PASSED = "passed"
    """Task completed without reporting a violation."""

    FAILED = "failed"
    """Task reported a build-convention violation."""

    SKIPPED = "skipped"
    """Task not executed (fail-fast stop)."""

    ERROR = "error"
    """Task crashed with an unexpected exception."""

    def is_failure(self) -> bool:
        """Return True if this status makes the overall run fail."""
        return self in (EnumTaskStatus.FAILED, EnumTaskStatus.ERROR)

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumTaskStatus"]
