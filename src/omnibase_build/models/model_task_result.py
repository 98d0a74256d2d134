# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Outcome of one task executed against one project."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_build.enums import EnumBuildCheckErrorCode, EnumTaskStatus


class ModelTaskResult(BaseModel):
    """Result of a single (project, task) execution.

    Attributes:
        task_name: Registered task name (e.g. ``validate-test-suites``).
        project_display_name: Display name of the project the task ran on.
        status: Outcome status.
        message: Failure or error message; empty when passed.
        error_code: Code of the raised build-check failure, if any.
        duration_ms: Wall-clock duration of the task in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    task_name: str
    project_display_name: str
    status: EnumTaskStatus
    message: str = Field(default="")
    error_code: EnumBuildCheckErrorCode | None = Field(default=None)
    duration_ms: float = Field(default=0.0, ge=0.0)

    @property
    def is_failure(self) -> bool:
        return self.status.is_failure()

    def format_for_ci(self) -> str:
        """Format as a single ``::error``-style line for CI annotations."""
        code = f" [{self.error_code}]" if self.error_code is not None else ""
        return f"::error title={self.task_name}{code}::{self.project_display_name}: {self.message}"


__all__: list[str] = ["ModelTaskResult"]
