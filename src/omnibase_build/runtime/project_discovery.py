# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Project unit discovery for multi-project builds."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from omnibase_build.models import ModelBuildChecksConfig, ModelProject

logger = logging.getLogger(__name__)

BUILD_FILE_NAMES: Final[frozenset[str]] = frozenset(
    {"build.gradle", "build.gradle.kts", "pom.xml"}
)


def discover_projects(
    root: Path,
    config: ModelBuildChecksConfig | None = None,
) -> list[ModelProject]:
    """Return the root project followed by every nested project.

    A nested project is any sub-directory containing a build file
    (``build.gradle``, ``build.gradle.kts`` or ``pom.xml``). Directories listed
    in ``discovery_skip_directories`` are not descended into.

    Args:
        root: Repository root; always returned as the first project.
        config: Supplies the skip list; defaults apply when omitted.

    Returns:
        Projects ordered by relative path, root first.
    """
    config = config or ModelBuildChecksConfig()
    root = root.resolve()
    skip = frozenset(config.discovery_skip_directories)
    nested: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skip)
        current = Path(dirpath)
        if current != root and BUILD_FILE_NAMES.intersection(filenames):
            nested.append(current)

    nested.sort(key=lambda p: p.relative_to(root).parts)
    projects = [ModelProject.for_directory(root, root)]
    projects.extend(ModelProject.for_directory(path, root) for path in nested)
    logger.debug(
        "Discovered projects",
        extra={"root": str(root), "count": len(projects)},
    )
    return projects


__all__: list[str] = ["BUILD_FILE_NAMES", "discover_projects"]
