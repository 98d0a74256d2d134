# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Registration record for a named, independently schedulable task."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from omnibase_build.models.model_build_checks_config import ModelBuildChecksConfig
from omnibase_build.models.model_project import ModelProject

TaskCallable = Callable[[ModelProject, ModelBuildChecksConfig], object]


class ModelTaskDefinition(BaseModel):
    """A task the runner can execute per project.

    The callable raises a ``BuildCheckError`` subclass to signal failure; its
    return value is ignored.

    Attributes:
        name: Task name used on the command line.
        description: One-line description for ``list-tasks``.
        action: Callable invoked as ``action(project, config)``.
        is_validator: False for housekeeping tasks that mutate the tree.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(pattern=r"^[a-z][a-z0-9-]*$")
    description: str
    action: TaskCallable
    is_validator: bool = Field(default=True)


__all__: list[str] = ["ModelTaskDefinition", "TaskCallable"]
