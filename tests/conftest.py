# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_build tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from omnibase_build.models import ModelBuildChecksConfig, ModelProject

# =============================================================================
# Project Tree Helpers
# =============================================================================


def write_file(path: Path, content: str = "") -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _suite_source(*class_names: str, name: str = "MyTestsSuite") -> str:
    """Return a JUnit suite class referencing ``class_names``."""
    classes = ", ".join(f"{class_name}.class" for class_name in class_names)
    return (
        "package com.acme;\n\n"
        f"@SelectClasses({{{classes}}})\n"
        f"public class {name} {{\n}}\n"
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config() -> ModelBuildChecksConfig:
    """Default build-check configuration."""
    return ModelBuildChecksConfig()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory named ``core``."""
    directory = tmp_path / "core"
    directory.mkdir()
    return directory


@pytest.fixture
def project(project_dir: Path) -> ModelProject:
    """Root project model for ``project_dir``."""
    return ModelProject.for_directory(project_dir)


@pytest.fixture
def make_file(project_dir: Path) -> Callable[[str, str], Path]:
    """Factory writing a file relative to ``project_dir``."""

    def _make(relative: str, content: str = "") -> Path:
        return write_file(project_dir / relative, content)

    return _make


@pytest.fixture
def suite_source() -> Callable[..., str]:
    """Factory rendering a suite class that references the given test classes."""
    return _suite_source
