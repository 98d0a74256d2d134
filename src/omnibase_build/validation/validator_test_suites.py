# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Test-Suite Completeness Validator.

Ensures a project's aggregate ``*TestsSuite`` class references every
individual ``*Tests`` class under ``src/test/java``.

Rules (checked in order):
    1. More than one test class and no suite -> MissingTestSuiteError
    2. More than one suite -> AmbiguousTestSuiteError
    3. Exactly one suite that does not mention ``<TestClass>.class`` for every
       test class -> IncompleteTestSuiteError

Base and abstract test classes (``*Base?Tests``, ``*Abstract?Tests`` with at
least one character between the prefix and ``Tests``) are never required in
the suite. Membership is a plain substring check on the suite's text.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from omnibase_build.errors import (
    AmbiguousTestSuiteError,
    IncompleteTestSuiteError,
    MissingTestSuiteError,
    ModelBuildErrorContext,
)
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelProject,
    ModelTestSuiteScan,
)

logger = logging.getLogger(__name__)

TASK_NAME = "validate-test-suites"


def _name_patterns(
    source_extension: str,
) -> tuple[re.Pattern[str], re.Pattern[str], re.Pattern[str]]:
    ext = re.escape(source_extension)
    return (
        re.compile(rf".*TestsSuite{ext}"),
        re.compile(rf".*Tests{ext}"),
        re.compile(rf".*(Base|Abstract).+Tests{ext}"),
    )


def scan_test_sources(test_root: Path, source_extension: str = ".java") -> ModelTestSuiteScan:
    """Collect suite files and test class files under ``test_root``.

    Args:
        test_root: Test source root (e.g. ``src/test/java``).
        source_extension: Source file extension, including the dot.

    Returns:
        ModelTestSuiteScan with sorted suite and test class paths.
    """
    suite_pattern, test_pattern, exclude_pattern = _name_patterns(source_extension)
    suites: list[Path] = []
    test_classes: list[Path] = []

    for path in test_root.rglob(f"*{source_extension}"):
        if not path.is_file():
            continue
        name = path.name
        if suite_pattern.fullmatch(name):
            suites.append(path)
        elif test_pattern.fullmatch(name) and not exclude_pattern.fullmatch(name):
            test_classes.append(path)

    return ModelTestSuiteScan(
        suite_files=tuple(sorted(suites)),
        test_class_files=tuple(sorted(test_classes)),
        source_extension=source_extension,
    )


def _print_missing_classes(
    suite_file: Path, project_name: str, missing: list[str]
) -> None:
    """Write the diagnostic list of missing classes to standard output."""
    print(
        f"{suite_file.name} of {project_name} does not include:\n"
        f"{', '.join(missing)}"
    )


def validate_test_suites(
    project: ModelProject,
    config: ModelBuildChecksConfig | None = None,
) -> None:
    """Ensure the project's TestsSuite exists, is unique and is complete.

    Args:
        project: Project to check.
        config: Layout configuration; defaults to the conventional layout.

    Raises:
        MissingTestSuiteError: Several test classes but no suite.
        AmbiguousTestSuiteError: More than one suite.
        IncompleteTestSuiteError: The suite omits test classes; the sorted
            list of missing ``.class`` references is printed first.
    """
    config = config or ModelBuildChecksConfig()
    test_root = project.test_source_root(config)
    if not test_root.exists():
        logger.debug(
            "No test sources, skipping",
            extra={"project": project.display_name, "path": str(test_root)},
        )
        return

    scan = scan_test_sources(test_root, config.source_extension)
    context = ModelBuildErrorContext(
        project_name=project.display_name,
        task_name=TASK_NAME,
        target_path=test_root,
    )
    test_class_count = len(scan.test_class_files)

    if test_class_count > 1 and not scan.suite_files:
        raise MissingTestSuiteError(
            project.display_name, test_class_count, context=context
        )

    if len(scan.suite_files) > 1:
        raise AmbiguousTestSuiteError(
            project.display_name, scan.suite_files, context=context
        )

    if not scan.suite_files:
        return

    suite_file = scan.suite_files[0]
    suite_text = suite_file.read_text(encoding="utf-8", errors="replace")
    missing = scan.missing_from(suite_text)
    if missing:
        _print_missing_classes(suite_file, project.display_name, missing)
        raise IncompleteTestSuiteError(
            missing,
            suite_file,
            context=context.model_copy(update={"target_path": suite_file}),
        )

    logger.debug(
        "Test suite complete",
        extra={
            "project": project.display_name,
            "suite": str(suite_file),
            "test_classes": test_class_count,
        },
    )


__all__ = [
    "scan_test_sources",
    "validate_test_suites",
]
