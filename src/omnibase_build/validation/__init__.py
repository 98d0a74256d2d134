# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build-convention validators.

Each validator is a pure function of a project's file tree: it returns None
when the convention holds and raises a BuildCheckError subclass otherwise.

Validators:
    - verify_spring_factories: spring.factories classes exist as sources
    - verify_bean_proxying: @Configuration classes declare proxyBeanMethods
    - validate_test_suites: the TestsSuite references every test class
    - verify_javadoc / check_javadoc_output: javadoc emitted no warnings
"""

from omnibase_build.validation.self_invocation_detector import (
    PATTERN_BEAN_METHOD,
    RegexSelfInvocationDetector,
)
from omnibase_build.validation.validator_bean_proxying import (
    PATTERN_PROXY_DECLARATION,
    find_proxy_declaration_violations,
    has_proxy_declaration,
    validate_bean_proxying_in_file,
    verify_bean_proxying,
    verify_project_bean_proxying,
)
from omnibase_build.validation.validator_javadoc import (
    check_javadoc_output,
    find_javadoc_warnings,
    verify_javadoc,
)
from omnibase_build.validation.validator_spring_factories import (
    expected_source_path,
    find_missing_registered_classes,
    load_registration_entries,
    verify_spring_factories,
)
from omnibase_build.validation.validator_test_suites import (
    scan_test_sources,
    validate_test_suites,
)

__all__: list[str] = [
    "PATTERN_BEAN_METHOD",
    "PATTERN_PROXY_DECLARATION",
    "RegexSelfInvocationDetector",
    "check_javadoc_output",
    "expected_source_path",
    "find_javadoc_warnings",
    "find_missing_registered_classes",
    "find_proxy_declaration_violations",
    "has_proxy_declaration",
    "load_registration_entries",
    "scan_test_sources",
    "validate_bean_proxying_in_file",
    "validate_test_suites",
    "verify_bean_proxying",
    "verify_javadoc",
    "verify_project_bean_proxying",
    "verify_spring_factories",
]
