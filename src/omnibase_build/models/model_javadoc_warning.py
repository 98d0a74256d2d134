# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A single warning line emitted by the javadoc tool."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelJavadocWarning(BaseModel):
    """Javadoc warning captured from tool output.

    Attributes:
        line_number: 1-based line number within the captured output.
        message: The warning line, stripped of surrounding whitespace.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    line_number: int = Field(ge=1)
    message: str

    def format_human_readable(self) -> str:
        return f"Javadoc warning: {self.message}"


__all__: list[str] = ["ModelJavadocWarning"]
