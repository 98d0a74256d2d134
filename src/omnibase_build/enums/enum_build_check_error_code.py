# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Error codes for build-convention check failures."""

from __future__ import annotations

from enum import Enum


class EnumBuildCheckErrorCode(str, Enum):
    """Classification of build-convention check failures.

    Every failure raised by a validator carries exactly one of these codes so
    that the task runner and CI output can group failures without parsing
    human-readable messages.

    Values:
        MISSING_REGISTERED_CLASS: A spring.factories entry has no source file.
        MISSING_PROXY_DECLARATION: A configuration class lacks an explicit
            ``proxyBeanMethods`` declaration.
        MISSING_TEST_SUITE: Several test classes exist but no TestsSuite does.
        AMBIGUOUS_TEST_SUITE: More than one TestsSuite exists in a project.
        INCOMPLETE_TEST_SUITE: The TestsSuite omits one or more test classes.
        JAVADOC_WARNING: The javadoc tool emitted warnings.
        INVALID_CONFIGURATION: The checker itself is misconfigured.
    """

    MISSING_REGISTERED_CLASS = "missing_registered_class"
    MISSING_PROXY_DECLARATION = "missing_proxy_declaration"
    MISSING_TEST_SUITE = "missing_test_suite"
    AMBIGUOUS_TEST_SUITE = "ambiguous_test_suite"
    INCOMPLETE_TEST_SUITE = "incomplete_test_suite"
    JAVADOC_WARNING = "javadoc_warning"
    INVALID_CONFIGURATION = "invalid_configuration"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumBuildCheckErrorCode"]
