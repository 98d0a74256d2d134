# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Violation model for configuration classes lacking a proxy declaration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ModelProxyDeclarationViolation(BaseModel):
    """A ``@Configuration`` class that must declare ``proxyBeanMethods``.

    Attributes:
        file_path: Path of the offending source file.
        bean_methods: Public method names found in the file, in order of
            appearance. Kept for diagnostics only.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_path: Path
    bean_methods: tuple[str, ...] = Field(default=())

    @property
    def class_file_name(self) -> str:
        return self.file_path.name

    def format_human_readable(self) -> str:
        return (
            f"Configuration class {self.class_file_name} should be marked with "
            "proxyBeanMethods = false"
        )


__all__: list[str] = ["ModelProxyDeclarationViolation"]
