# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the test-suite completeness validator.

Test Coverage:
- TestScanTestSources: suite / test class / base-class classification
- TestValidateTestSuites: missing, ambiguous and incomplete suites
"""

from __future__ import annotations

import pytest

from omnibase_build.enums import EnumBuildCheckErrorCode
from omnibase_build.errors import (
    AmbiguousTestSuiteError,
    IncompleteTestSuiteError,
    MissingTestSuiteError,
)
from omnibase_build.validation import scan_test_sources, validate_test_suites

pytestmark = [pytest.mark.unit]

TEST_ROOT = "src/test/java/com/acme"


class TestScanTestSources:
    """Tests for scan_test_sources()."""

    def test_classifies_suites_and_test_classes(self, make_file, project_dir) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/nested/BarTests.java")
        make_file(f"{TEST_ROOT}/MyTestsSuite.java")
        make_file(f"{TEST_ROOT}/Helper.java")

        scan = scan_test_sources(project_dir / "src/test/java")

        assert [p.name for p in scan.suite_files] == ["MyTestsSuite.java"]
        assert sorted(p.name for p in scan.test_class_files) == [
            "BarTests.java",
            "FooTests.java",
        ]

    def test_excludes_base_and_abstract_test_classes(
        self, make_file, project_dir
    ) -> None:
        make_file(f"{TEST_ROOT}/AbstractBaseTests.java")
        make_file(f"{TEST_ROOT}/AbstractWebTests.java")
        make_file(f"{TEST_ROOT}/BaseIntegrationTests.java")
        make_file(f"{TEST_ROOT}/FooTests.java")

        scan = scan_test_sources(project_dir / "src/test/java")

        assert [p.name for p in scan.test_class_files] == ["FooTests.java"]

    def test_bare_base_tests_is_not_excluded(self, make_file, project_dir) -> None:
        """At least one character must separate the prefix from ``Tests``."""
        make_file(f"{TEST_ROOT}/BaseTests.java")

        scan = scan_test_sources(project_dir / "src/test/java")

        assert [p.name for p in scan.test_class_files] == ["BaseTests.java"]

    def test_ignores_other_extensions(self, make_file, project_dir) -> None:
        make_file(f"{TEST_ROOT}/FooTests.kt")
        make_file(f"{TEST_ROOT}/FooTests.java.orig")

        scan = scan_test_sources(project_dir / "src/test/java")

        assert scan.test_class_files == ()
        assert scan.suite_files == ()

    def test_test_class_references_are_compiled_unit_names(
        self, make_file, project_dir
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/other/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")

        scan = scan_test_sources(project_dir / "src/test/java")

        assert scan.test_class_references == ["BarTests.class", "FooTests.class"]


class TestValidateTestSuites:
    """Tests for validate_test_suites()."""

    def test_passes_without_test_sources(self, project, config) -> None:
        validate_test_suites(project, config)

    @pytest.mark.parametrize("count", [0, 1])
    def test_no_suite_required_below_threshold(
        self, make_file, project, config, count: int
    ) -> None:
        for index in range(count):
            make_file(f"{TEST_ROOT}/Case{index}Tests.java")
        make_file(f"{TEST_ROOT}/Helper.java")

        validate_test_suites(project, config)

    def test_missing_suite_with_several_test_classes(
        self, make_file, project, config
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")

        with pytest.raises(MissingTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert str(exc_info.value) == (
            "Project root project 'core' is missing a TestsSuite class, "
            "while it contains 2 tests"
        )
        assert exc_info.value.test_class_count == 2
        assert exc_info.value.error_code == EnumBuildCheckErrorCode.MISSING_TEST_SUITE

    def test_two_suites_are_ambiguous_regardless_of_content(
        self, make_file, project, config, suite_source
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/OneTestsSuite.java", suite_source("FooTests"))
        make_file(f"{TEST_ROOT}/TwoTestsSuite.java", suite_source("FooTests"))

        with pytest.raises(AmbiguousTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert "has more than one TestsSuite" in str(exc_info.value)
        assert len(exc_info.value.suite_files) == 2

    def test_complete_suite_passes(
        self, make_file, project, config, suite_source
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")
        make_file(f"{TEST_ROOT}/AbstractBaseTests.java")
        make_file(
            f"{TEST_ROOT}/MyTestsSuite.java", suite_source("FooTests", "BarTests")
        )

        validate_test_suites(project, config)

    def test_incomplete_suite_lists_missing_class(
        self, make_file, project, config, suite_source, capsys
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")
        make_file(f"{TEST_ROOT}/AbstractBaseTests.java")
        suite = make_file(f"{TEST_ROOT}/MyTestsSuite.java", suite_source("FooTests"))

        with pytest.raises(IncompleteTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        error = exc_info.value
        assert error.missing_classes == ["BarTests.class"]
        assert error.suite_file == suite.resolve()
        assert error.context.target_path == suite.resolve()
        assert str(error) == "Found 1 missing test class(es) in test suites"

        out = capsys.readouterr().out
        assert "MyTestsSuite.java of root project 'core' does not include:" in out
        assert "does not include:\nBarTests.class\n" in out

    def test_removing_one_reference_reports_exactly_that_class(
        self, make_file, project, config, suite_source
    ) -> None:
        names = ["AlphaTests", "BetaTests", "GammaTests"]
        for name in names:
            make_file(f"{TEST_ROOT}/{name}.java")
        make_file(f"{TEST_ROOT}/MyTestsSuite.java", suite_source(*names))
        validate_test_suites(project, config)

        make_file(
            f"{TEST_ROOT}/MyTestsSuite.java", suite_source("AlphaTests", "GammaTests")
        )
        with pytest.raises(IncompleteTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert exc_info.value.missing_classes == ["BetaTests.class"]

    def test_single_test_class_with_suite_must_be_referenced(
        self, make_file, project, config, suite_source
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/MyTestsSuite.java", suite_source())

        with pytest.raises(IncompleteTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert exc_info.value.missing_classes == ["FooTests.class"]

    def test_missing_classes_sorted(
        self, make_file, project, config, suite_source
    ) -> None:
        for name in ("ZedTests", "AppleTests", "MidTests"):
            make_file(f"{TEST_ROOT}/{name}.java")
        make_file(f"{TEST_ROOT}/MyTestsSuite.java", suite_source())

        with pytest.raises(IncompleteTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert exc_info.value.missing_classes == [
            "AppleTests.class",
            "MidTests.class",
            "ZedTests.class",
        ]

    def test_custom_test_source_dir(self, make_file, project, config) -> None:
        custom = config.model_copy(update={"test_source_dir": "test"})
        make_file("test/FooTests.java")
        make_file("test/BarTests.java")

        with pytest.raises(MissingTestSuiteError):
            validate_test_suites(project, custom)

    def test_latin1_suite_file_passes(self, make_file, project, config) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")
        suite = make_file(f"{TEST_ROOT}/MyTestsSuite.java")
        suite.write_bytes(b"// \xe9\n@SelectClasses({FooTests.class, BarTests.class})")

        validate_test_suites(project, config)

    def test_latin1_suite_file_reports_missing(
        self, make_file, project, config
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")
        suite = make_file(f"{TEST_ROOT}/MyTestsSuite.java")
        suite.write_bytes(b"// Auteur: Ren\xe9\n@SelectClasses({FooTests.class})")

        with pytest.raises(IncompleteTestSuiteError) as exc_info:
            validate_test_suites(project, config)

        assert exc_info.value.missing_classes == ["BarTests.class"]

    def test_missing_list_printed_as_one_block(
        self, make_file, project, config, suite_source, capsys
    ) -> None:
        make_file(f"{TEST_ROOT}/FooTests.java")
        make_file(f"{TEST_ROOT}/BarTests.java")
        make_file(f"{TEST_ROOT}/MyTestsSuite.java", suite_source())

        with pytest.raises(IncompleteTestSuiteError):
            validate_test_suites(project, config)

        assert capsys.readouterr().out == (
            "MyTestsSuite.java of root project 'core' does not include:\n"
            "BarTests.class, FooTests.class\n"
        )
