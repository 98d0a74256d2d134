# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build Check Errors Module.

Exports:
    ModelBuildErrorContext: Configuration model for bundled error context
    BuildCheckError: Base build-check error class
    ProtocolConfigurationError: Invalid checker configuration
    MissingRegisteredClassError: spring.factories class without source file
    MissingProxyDeclarationError: @Configuration class without proxyBeanMethods
    MissingTestSuiteError: Test classes present but no TestsSuite
    AmbiguousTestSuiteError: More than one TestsSuite
    IncompleteTestSuiteError: TestsSuite omits test classes
    JavadocWarningError: Javadoc emitted warnings

Error Sanitization Guidelines:
    Messages name projects, files and classes only. They are printed to the
    build console verbatim, so never include file contents beyond the
    offending class or method names.
"""

from omnibase_build.errors.build_errors import (
    AmbiguousTestSuiteError,
    BuildCheckError,
    IncompleteTestSuiteError,
    JavadocWarningError,
    MissingProxyDeclarationError,
    MissingRegisteredClassError,
    MissingTestSuiteError,
    ProtocolConfigurationError,
)
from omnibase_build.errors.model_build_error_context import ModelBuildErrorContext

__all__: list[str] = [
    "AmbiguousTestSuiteError",
    "BuildCheckError",
    "IncompleteTestSuiteError",
    "JavadocWarningError",
    "MissingProxyDeclarationError",
    "MissingRegisteredClassError",
    "MissingTestSuiteError",
    "ModelBuildErrorContext",
    "ProtocolConfigurationError",
]
