# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build Check Error Context Model.

Bundles the structured fields attached to every build-check error so that
error constructors keep a small parameter list.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelBuildErrorContext(BaseModel):
    """Structured context for build-check errors.

    Attributes:
        project_name: Display name of the project being checked.
        task_name: Name of the task that failed.
        target_path: File or directory the failure refers to.
        correlation_id: Identifier tying log records to a single run.

    Example:
        >>> context = ModelBuildErrorContext.with_correlation(
        ...     project_name="project ':core'",
        ...     task_name="validate-test-suites",
        ... )
        >>> raise MissingTestSuiteError("...", test_class_count=3, context=context)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_name: str | None = Field(
        default=None, description="Display name of the project being checked"
    )
    task_name: str | None = Field(default=None, description="Name of the failing task")
    target_path: Path | None = Field(
        default=None, description="File or directory the failure refers to"
    )
    correlation_id: UUID | None = Field(
        default=None, description="Identifier tying log records to a single run"
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelBuildErrorContext:
        """Create a context, generating a uuid4 correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelBuildErrorContext"]
