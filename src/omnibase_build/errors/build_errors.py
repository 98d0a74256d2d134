# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build-Check Error Classes.

Error Hierarchy:
    BuildCheckError (base build-check error)
    ├── ProtocolConfigurationError
    ├── MissingRegisteredClassError
    ├── MissingProxyDeclarationError
    ├── MissingTestSuiteError
    ├── AmbiguousTestSuiteError
    ├── IncompleteTestSuiteError
    └── JavadocWarningError

All errors:
    - Carry an EnumBuildCheckErrorCode classification
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelBuildErrorContext for bundled context parameters
    - Keep any extra keyword context in ``extra_context`` for debugging

Every error is non-recoverable for the (project, task) pair that raised it.
The task runner records it and decides whether the run continues.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from omnibase_build.enums import EnumBuildCheckErrorCode
from omnibase_build.errors.model_build_error_context import ModelBuildErrorContext
from omnibase_build.models.model_javadoc_warning import ModelJavadocWarning
from omnibase_build.models.model_missing_registered_class import (
    ModelMissingRegisteredClass,
)
from omnibase_build.models.model_proxy_declaration_violation import (
    ModelProxyDeclarationViolation,
)


class BuildCheckError(Exception):
    """Base class for every build-convention failure.

    Example:
        >>> context = ModelBuildErrorContext(
        ...     project_name="project ':core'",
        ...     task_name="verify-spring-factories",
        ... )
        >>> raise BuildCheckError(
        ...     "Check failed",
        ...     error_code=EnumBuildCheckErrorCode.MISSING_REGISTERED_CLASS,
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumBuildCheckErrorCode,
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize BuildCheckError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Failure classification
            context: Bundled context (project, task, target path, correlation ID)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or ModelBuildErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> object:
        return self.context.correlation_id

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(BuildCheckError):
    """Raised when the checker's own configuration is invalid.

    Used for malformed configuration files, unknown task names and invalid
    option values. Reported with exit code 2 by the CLI.
    """

    def __init__(
        self,
        message: str,
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message,
            error_code=EnumBuildCheckErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class MissingRegisteredClassError(BuildCheckError):
    """Raised when a spring.factories entry has no matching source file.

    Attributes:
        missing: Every registered class without a source file, in
            registration order.
    """

    def __init__(
        self,
        missing: Sequence[ModelMissingRegisteredClass],
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.missing = tuple(missing)
        paths = ", ".join(str(m.expected_path) for m in self.missing)
        super().__init__(
            f"Spring configuration class does not exist: {paths}",
            error_code=EnumBuildCheckErrorCode.MISSING_REGISTERED_CLASS,
            context=context,
            **extra_context,
        )

    @property
    def missing_class_names(self) -> list[str]:
        return [m.class_name for m in self.missing]


class MissingProxyDeclarationError(BuildCheckError):
    """Raised when configuration classes lack an explicit proxy declaration.

    Attributes:
        violations: One entry per offending configuration class file.
    """

    def __init__(
        self,
        violations: Sequence[ModelProxyDeclarationViolation],
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.violations = tuple(violations)
        super().__init__(
            "; ".join(v.format_human_readable() for v in self.violations),
            error_code=EnumBuildCheckErrorCode.MISSING_PROXY_DECLARATION,
            context=context,
            **extra_context,
        )


class MissingTestSuiteError(BuildCheckError):
    """Raised when a project has several test classes but no TestsSuite."""

    def __init__(
        self,
        project_name: str,
        test_class_count: int,
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.test_class_count = test_class_count
        super().__init__(
            f"Project {project_name} is missing a TestsSuite class, "
            f"while it contains {test_class_count} tests",
            error_code=EnumBuildCheckErrorCode.MISSING_TEST_SUITE,
            context=context,
            **extra_context,
        )


class AmbiguousTestSuiteError(BuildCheckError):
    """Raised when a project has more than one TestsSuite."""

    def __init__(
        self,
        project_name: str,
        suite_files: Sequence[Path],
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.suite_files = tuple(suite_files)
        super().__init__(
            f"Project {project_name} has more than one TestsSuite",
            error_code=EnumBuildCheckErrorCode.AMBIGUOUS_TEST_SUITE,
            context=context,
            **extra_context,
        )


class IncompleteTestSuiteError(BuildCheckError):
    """Raised when the TestsSuite does not reference every test class.

    Attributes:
        missing_classes: Sorted, de-duplicated compiled-unit names
            (``FooTests.class``) absent from the suite.
        suite_file: The suite file that was inspected.
    """

    def __init__(
        self,
        missing_classes: Sequence[str],
        suite_file: Path,
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.missing_classes = sorted(set(missing_classes))
        self.suite_file = suite_file
        super().__init__(
            f"Found {len(self.missing_classes)} missing test class(es) in test suites",
            error_code=EnumBuildCheckErrorCode.INCOMPLETE_TEST_SUITE,
            context=context,
            **extra_context,
        )


class JavadocWarningError(BuildCheckError):
    """Raised when captured javadoc output contains warnings.

    Attributes:
        warnings: Every warning line found, in output order.
    """

    def __init__(
        self,
        warnings: Sequence[ModelJavadocWarning],
        context: ModelBuildErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.warnings = tuple(warnings)
        super().__init__(
            self.warnings[0].format_human_readable()
            if self.warnings
            else "Javadoc warning",
            error_code=EnumBuildCheckErrorCode.JAVADOC_WARNING,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "AmbiguousTestSuiteError",
    "BuildCheckError",
    "IncompleteTestSuiteError",
    "JavadocWarningError",
    "MissingProxyDeclarationError",
    "MissingRegisteredClassError",
    "MissingTestSuiteError",
    "ProtocolConfigurationError",
]
