# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Result of scanning a test source root for suites and test classes."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


def compiled_unit_name(test_class_file: Path, source_extension: str = ".java") -> str:
    """Return the ``.class`` reference name for a test source file.

    Example:
        >>> compiled_unit_name(Path("com/acme/FooTests.java"))
        'FooTests.class'
    """
    return test_class_file.name.replace(source_extension, ".class")


class ModelTestSuiteScan(BaseModel):
    """Suite files and test classes found under a test source root.

    Attributes:
        suite_files: Files named ``*TestsSuite<ext>``, sorted.
        test_class_files: Files named ``*Tests<ext>`` minus base/abstract
            classes, sorted.
        source_extension: Extension used to derive compiled-unit names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    suite_files: tuple[Path, ...] = Field(default=())
    test_class_files: tuple[Path, ...] = Field(default=())
    source_extension: str = Field(default=".java")

    @property
    def test_class_references(self) -> list[str]:
        """Sorted, de-duplicated compiled-unit names of all test classes."""
        return sorted(
            {
                compiled_unit_name(path, self.source_extension)
                for path in self.test_class_files
            }
        )

    def missing_from(self, suite_text: str) -> list[str]:
        """Return the sorted, de-duplicated references absent from ``suite_text``."""
        return [ref for ref in self.test_class_references if ref not in suite_text]


__all__: list[str] = ["ModelTestSuiteScan", "compiled_unit_name"]
