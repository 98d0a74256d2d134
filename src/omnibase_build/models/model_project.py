# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Project unit model.

A project is a directory subtree with the conventional JVM layout
(``src/main/java``, ``src/main/resources``, ``src/test/java``). It lives only
for the duration of one run and is never mutated.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from omnibase_build.models.model_build_checks_config import ModelBuildChecksConfig


class ModelProject(BaseModel):
    """A single build-project unit.

    Attributes:
        root: Canonical (resolved) path of the project directory.
        display_name: Human-readable name used in failure messages, following
            the Gradle convention (``root project 'x'`` / ``project ':a:b'``).

    Example:
        >>> project = ModelProject.for_directory(Path("services/api"), Path("."))
        >>> project.display_name
        "project ':services:api'"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: Path = Field(description="Canonical path of the project directory")
    display_name: str = Field(min_length=1, description="Name used in messages")

    @classmethod
    def for_directory(
        cls, directory: Path, repository_root: Path | None = None
    ) -> ModelProject:
        """Build a project model for ``directory``.

        Args:
            directory: The project directory.
            repository_root: Root of the multi-project build. When omitted (or
                equal to ``directory``) the project is treated as the root
                project.

        Returns:
            ModelProject with a canonical root and a Gradle-style display name.
        """
        root = directory.resolve()
        base = (repository_root or directory).resolve()
        if root == base:
            return cls(root=root, display_name=f"root project '{root.name}'")
        try:
            relative = root.relative_to(base)
        except ValueError:
            return cls(root=root, display_name=f"project '{root.name}'")
        return cls(root=root, display_name=f"project ':{':'.join(relative.parts)}'")

    def main_source_root(self, config: ModelBuildChecksConfig) -> Path:
        return self.root / config.main_source_dir

    def main_resources_root(self, config: ModelBuildChecksConfig) -> Path:
        return self.root / config.main_resources_dir

    def test_source_root(self, config: ModelBuildChecksConfig) -> Path:
        return self.root / config.test_source_dir

    def __str__(self) -> str:
        return self.display_name


__all__: list[str] = ["ModelProject"]
