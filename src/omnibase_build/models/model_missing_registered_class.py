# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A registered configuration class with no corresponding source file."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ModelMissingRegisteredClass(BaseModel):
    """A spring.factories entry whose source file is absent.

    Attributes:
        registration_key: The spring.factories key the class was listed under.
        class_name: Fully-qualified class name as written in the file.
        expected_path: Source path that was expected to exist.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    registration_key: str
    class_name: str
    expected_path: Path

    def format_human_readable(self) -> str:
        return f"{self.class_name} ({self.registration_key}): {self.expected_path}"


__all__: list[str] = ["ModelMissingRegisteredClass"]
