# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Javadoc warning gate.

Treats any javadoc warning as a build failure. The javadoc tool reports
warnings as ``<file>:<line>: warning: <text>``; every captured output line
containing `` warning: `` is collected.

The captured output is read from ``<project>/build/javadoc.log`` by default
(configurable via ``javadoc_log``). Projects without captured output pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from omnibase_build.errors import JavadocWarningError, ModelBuildErrorContext
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelJavadocWarning,
    ModelProject,
)

logger = logging.getLogger(__name__)

TASK_NAME = "check-javadoc"

WARNING_MARKER = " warning: "


def find_javadoc_warnings(lines: Iterable[str]) -> list[ModelJavadocWarning]:
    """Return every warning line, in output order."""
    return [
        ModelJavadocWarning(line_number=number, message=line.strip())
        for number, line in enumerate(lines, start=1)
        if WARNING_MARKER in line
    ]


def check_javadoc_output(
    lines: Iterable[str],
    context: ModelBuildErrorContext | None = None,
) -> None:
    """Fail if the captured javadoc output contains warnings.

    Raises:
        JavadocWarningError: Carrying every warning found.
    """
    warnings = find_javadoc_warnings(lines)
    if warnings:
        raise JavadocWarningError(warnings, context=context)


def verify_javadoc(
    project: ModelProject,
    config: ModelBuildChecksConfig | None = None,
) -> None:
    """Task-runner entry point: check the project's captured javadoc output."""
    config = config or ModelBuildChecksConfig()
    log_file = project.root / config.javadoc_log
    if not log_file.is_file():
        logger.debug(
            "No javadoc output captured, skipping",
            extra={"project": project.display_name, "path": str(log_file)},
        )
        return

    text = log_file.read_text(encoding="utf-8", errors="replace")
    check_javadoc_output(
        text.splitlines(),
        context=ModelBuildErrorContext(
            project_name=project.display_name,
            task_name=TASK_NAME,
            target_path=log_file,
        ),
    )


__all__ = [
    "WARNING_MARKER",
    "check_javadoc_output",
    "find_javadoc_warnings",
    "verify_javadoc",
]
