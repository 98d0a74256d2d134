# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Aggregate report of a task-runner invocation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_build.enums import EnumTaskStatus
from omnibase_build.models.model_task_result import ModelTaskResult


class ModelFinalizerOutcome(BaseModel):
    """Outcome of one end-of-run finalizer.

    Attributes:
        name: Finalizer name as registered.
        succeeded: False if the finalizer raised.
        message: Error message when the finalizer failed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    succeeded: bool
    message: str = Field(default="")


class ModelBuildReport(BaseModel):
    """All task results of one run, in (project, task) order.

    Finalizer failures are reported but never change ``passed``; a run's
    verdict is decided by its tasks alone.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    results: tuple[ModelTaskResult, ...] = Field(default=())
    finalizers: tuple[ModelFinalizerOutcome, ...] = Field(default=())

    @property
    def failures(self) -> list[ModelTaskResult]:
        return [r for r in self.results if r.is_failure]

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def count(self, status: EnumTaskStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    def format_summary(self) -> str:
        """Return a one-line summary such as ``5 passed, 1 failed, 2 skipped``."""
        parts = [
            f"{self.count(status)} {status.value}"
            for status in EnumTaskStatus
            if self.count(status)
        ]
        verdict = "PASSED" if self.passed else "FAILED"
        return f"Build checks {verdict}: {', '.join(parts) or 'no tasks run'}"

    def format_for_ci(self) -> list[str]:
        """Return one CI annotation line per failed task."""
        return [r.format_for_ci() for r in self.failures]


__all__: list[str] = ["ModelBuildReport", "ModelFinalizerOutcome"]
