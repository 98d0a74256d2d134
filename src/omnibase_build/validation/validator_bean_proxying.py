# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Bean-Proxy Declaration Validator for Spring @Configuration classes.

Examines ``*Configuration.java`` files carrying the ``@Configuration``
annotation and checks whether bean-method proxying can be disabled. When no
bean method of a class is invoked from within that class, the class must
carry an explicit declaration of the form::

    @Configuration(value = "fooConfiguration", proxyBeanMethods = false)

Scope and Design:
    This is raw-text pattern matching, not semantic analysis. The
    self-invocation decision is delegated to a ProtocolSelfInvocationDetector
    (RegexSelfInvocationDetector by default), so a parse-tree based detector
    can be swapped in without changing this validator's contract.

    Classes WITH detected self-invocation are not checked at all; only
    classes without it must declare ``proxyBeanMethods``.

Usage:
    >>> from omnibase_build.validation.validator_bean_proxying import (
    ...     verify_bean_proxying,
    ... )
    >>> verify_bean_proxying(Path("."))  # raises MissingProxyDeclarationError
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from omnibase_build.errors import MissingProxyDeclarationError, ModelBuildErrorContext
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelProject,
    ModelProxyDeclarationViolation,
)
from omnibase_build.protocols import ProtocolSelfInvocationDetector
from omnibase_build.validation.self_invocation_detector import (
    PATTERN_BEAN_METHOD,
    RegexSelfInvocationDetector,
)

logger = logging.getLogger(__name__)

TASK_NAME = "verify-bean-proxying"

CONFIGURATION_MARKER: Final[str] = "@Configuration"
CONFIGURATION_FILE_SUFFIX: Final[str] = "Configuration"

PATTERN_PROXY_DECLARATION: Final[re.Pattern[str]] = re.compile(
    r"@Configuration\(value\s*=\s*\"(\w+)\",\s*proxyBeanMethods\s*=\s*(false|true)\)"
)

_DEFAULT_EXCLUDE_DIRS: frozenset[str] = frozenset({".git"})


def has_proxy_declaration(source_text: str) -> bool:
    """Return True if the text declares ``proxyBeanMethods`` explicitly."""
    return PATTERN_PROXY_DECLARATION.search(source_text) is not None


def _iter_configuration_files(
    root: Path, source_extension: str, exclude_dirs: frozenset[str]
) -> list[Path]:
    suffix = CONFIGURATION_FILE_SUFFIX + source_extension
    candidates = [
        path
        for path in root.rglob(f"*{suffix}")
        if path.is_file()
        and not any(part in exclude_dirs for part in path.relative_to(root).parts[:-1])
    ]
    return sorted(candidates)


def validate_bean_proxying_in_file(
    filepath: Path,
    detector: ProtocolSelfInvocationDetector | None = None,
) -> ModelProxyDeclarationViolation | None:
    """Check a single configuration class file.

    Args:
        filepath: Path to a ``*Configuration.java`` file.
        detector: Self-invocation detector; defaults to the regex heuristic.

    Returns:
        A violation if the file needs, but lacks, a proxy declaration;
        None otherwise (including files without the ``@Configuration`` marker
        and unreadable files).
    """
    detector = detector or RegexSelfInvocationDetector()
    try:
        content = filepath.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(
            "Failed to read file",
            extra={"file": str(filepath), "error": str(e)},
        )
        return None

    if CONFIGURATION_MARKER not in content:
        return None

    if detector.has_self_invocation(content):
        logger.debug(
            "Bean methods invoke each other, proxying required",
            extra={"file": str(filepath)},
        )
        return None

    if has_proxy_declaration(content):
        return None

    bean_methods = tuple(
        match.group(2) for match in PATTERN_BEAN_METHOD.finditer(content)
    )
    return ModelProxyDeclarationViolation(file_path=filepath, bean_methods=bean_methods)


def find_proxy_declaration_violations(
    root: Path,
    *,
    detector: ProtocolSelfInvocationDetector | None = None,
    source_extension: str = ".java",
    exclude_dirs: frozenset[str] | None = None,
) -> list[ModelProxyDeclarationViolation]:
    """Scan ``root`` recursively and return every violation, in path order."""
    detector = detector or RegexSelfInvocationDetector()
    if exclude_dirs is None:
        exclude_dirs = _DEFAULT_EXCLUDE_DIRS

    violations: list[ModelProxyDeclarationViolation] = []
    for filepath in _iter_configuration_files(root, source_extension, exclude_dirs):
        violation = validate_bean_proxying_in_file(filepath, detector)
        if violation is not None:
            violations.append(violation)
    return violations


def verify_bean_proxying(
    root: Path,
    *,
    detector: ProtocolSelfInvocationDetector | None = None,
    source_extension: str = ".java",
    project_name: str | None = None,
) -> None:
    """Fail if any configuration class under ``root`` lacks a proxy declaration.

    Args:
        root: Directory to scan recursively.
        detector: Self-invocation detector; defaults to the regex heuristic.
        source_extension: Source file extension, including the dot.
        project_name: Display name used in the error context.

    Raises:
        MissingProxyDeclarationError: Listing every offending class file.
    """
    violations = find_proxy_declaration_violations(
        root, detector=detector, source_extension=source_extension
    )
    if violations:
        raise MissingProxyDeclarationError(
            violations,
            context=ModelBuildErrorContext(
                project_name=project_name,
                task_name=TASK_NAME,
                target_path=root,
            ),
        )


def verify_project_bean_proxying(
    project: ModelProject,
    config: ModelBuildChecksConfig | None = None,
) -> None:
    """Task-runner entry point: scan the project's ``src`` directory.

    Scanning ``src`` rather than the project root keeps nested subprojects
    from being reported once per enclosing project.
    """
    config = config or ModelBuildChecksConfig()
    source_root = project.root / "src"
    if not source_root.is_dir():
        return
    verify_bean_proxying(
        source_root,
        source_extension=config.source_extension,
        project_name=project.display_name,
    )


__all__ = [
    "PATTERN_PROXY_DECLARATION",
    "find_proxy_declaration_violations",
    "has_proxy_declaration",
    "validate_bean_proxying_in_file",
    "verify_bean_proxying",
    "verify_project_bean_proxying",
]
