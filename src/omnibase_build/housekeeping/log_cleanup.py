# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build log cleanup.

Deletes log files, compressed logs and merge leftovers (``*.orig``) from a
project tree. Used both as the ``clean-logs`` task and as an end-of-run
finalizer registered with the task runner.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from omnibase_build.models import (
    DEFAULT_CLEANUP_PATTERNS,
    ModelBuildChecksConfig,
    ModelProject,
)

logger = logging.getLogger(__name__)


def find_log_files(
    project_dir: Path,
    patterns: Iterable[str] = DEFAULT_CLEANUP_PATTERNS,
    skip_directories: Iterable[str] = (".git",),
) -> list[Path]:
    """Return the sorted, de-duplicated files matching any cleanup pattern."""
    skip = frozenset(skip_directories)
    matches: set[Path] = set()
    for pattern in patterns:
        for path in project_dir.glob(pattern):
            if not path.is_file():
                continue
            if any(part in skip for part in path.relative_to(project_dir).parts[:-1]):
                continue
            matches.add(path)
    return sorted(matches)


def clean_logs(
    project_dir: Path,
    patterns: Iterable[str] = DEFAULT_CLEANUP_PATTERNS,
    skip_directories: Iterable[str] = (".git",),
) -> list[Path]:
    """Delete matching files under ``project_dir``.

    Args:
        project_dir: Directory to clean recursively.
        patterns: Glob patterns relative to ``project_dir``.
        skip_directories: Directory names whose contents are never deleted.

    Returns:
        Sorted list of deleted files. Files that vanish or cannot be deleted
        are logged and left out.
    """
    deleted: list[Path] = []
    for path in find_log_files(project_dir, patterns, skip_directories):
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(
                "Failed to delete file",
                extra={"file": str(path), "error": str(e)},
            )
            continue
        logger.info("Deleted %s", path)
        deleted.append(path)
    return deleted


def clean_project_logs(
    project: ModelProject,
    config: ModelBuildChecksConfig | None = None,
) -> list[Path]:
    """Task-runner entry point for ``clean-logs``."""
    config = config or ModelBuildChecksConfig()
    return clean_logs(
        project.root,
        patterns=config.cleanup_patterns,
        skip_directories=config.cleanup_skip_directories,
    )


__all__: list[str] = ["clean_logs", "clean_project_logs", "find_log_files"]
