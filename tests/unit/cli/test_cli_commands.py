# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the omnibase-build CLI commands.

Tests the Click command interface including:
- run (exit codes 0 / 1 / 2, keep-going, log cleanup)
- list-tasks and list-projects
- single-project check commands
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from omnibase_build import __version__
from omnibase_build.cli.commands import cli

pytestmark = [pytest.mark.unit]


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def repo_without_suite(tmp_path: Path) -> Path:
    """Repository whose root project has two tests and no TestsSuite."""
    _write(tmp_path / "src/test/java/com/acme/FooTests.java")
    _write(tmp_path / "src/test/java/com/acme/BarTests.java")
    return tmp_path


class TestCLIGroup:
    """Tests for the top-level command group."""

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("run", "list-tasks", "list-projects", "validate-test-suites"):
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunCommand:
    """Tests for `omnibase-build run`."""

    def test_clean_repository_passes(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["run", "--root", str(tmp_path)])
        assert result.exit_code == 0
        assert "Build checks PASSED" in result.output

    def test_failure_exits_one(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        result = runner.invoke(cli, ["run", "--root", str(repo_without_suite)])

        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "is missing a TestsSuite class, while it contains 2 tests" in result.output
        assert "SKIP" in result.output

    def test_keep_going_runs_remaining_tasks(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        result = runner.invoke(
            cli, ["run", "--root", str(repo_without_suite), "--keep-going"]
        )

        assert result.exit_code == 1
        assert "SKIP" not in result.output
        assert "check-javadoc" in result.output

    def test_selected_task_only(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        result = runner.invoke(
            cli, ["run", "check-javadoc", "--root", str(repo_without_suite)]
        )

        assert result.exit_code == 0
        assert "validate-test-suites" not in result.output

    def test_unknown_task_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["run", "no-such-task", "--root", str(tmp_path)])

        assert result.exit_code == 2
        assert "Unknown task 'no-such-task'" in result.output

    def test_bad_config_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        _write(tmp_path / ".omnibase-build.yaml", "jobs: zero\n")

        result = runner.invoke(cli, ["run", "--root", str(tmp_path)])

        assert result.exit_code == 2
        assert "Configuration error" in result.output

    def test_invalid_jobs_is_usage_error(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["run", "--root", str(tmp_path), "--jobs", "0"])
        assert result.exit_code == 2

    def test_clean_logs_flag(self, runner: CliRunner, tmp_path: Path) -> None:
        log = _write(tmp_path / "build.log", "x")

        result = runner.invoke(
            cli, ["run", "check-javadoc", "--root", str(tmp_path), "--clean-logs"]
        )

        assert result.exit_code == 0
        assert not log.exists()

    def test_parallel_jobs(self, runner: CliRunner, tmp_path: Path) -> None:
        for name in ("a", "b", "c"):
            _write(tmp_path / name / "build.gradle")

        result = runner.invoke(cli, ["run", "--root", str(tmp_path), "-j", "3"])

        assert result.exit_code == 0
        assert "16 passed" in result.output


class TestListCommands:
    """Tests for list-tasks and list-projects."""

    def test_list_tasks(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["list-tasks"])
        assert result.exit_code == 0
        for name in (
            "verify-spring-factories",
            "verify-bean-proxying",
            "validate-test-suites",
            "check-javadoc",
            "clean-logs",
        ):
            assert name in result.output

    def test_list_projects(self, runner: CliRunner, tmp_path: Path) -> None:
        _write(tmp_path / "core" / "build.gradle")

        result = runner.invoke(cli, ["list-projects", "--root", str(tmp_path)])

        assert result.exit_code == 0
        assert "root project" in result.output
        assert "project ':core'" in result.output


class TestSingleProjectCommands:
    """Tests for the per-task commands."""

    def test_validate_test_suites_fail(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        result = runner.invoke(cli, ["validate-test-suites", str(repo_without_suite)])

        assert result.exit_code == 1
        assert "Test suites: FAIL" in result.output

    def test_validate_test_suites_incomplete_prints_missing(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        _write(
            repo_without_suite / "src/test/java/com/acme/MyTestsSuite.java",
            "@SelectClasses({FooTests.class})",
        )

        result = runner.invoke(cli, ["validate-test-suites", str(repo_without_suite)])

        assert result.exit_code == 1
        assert "does not include:" in result.output
        assert "BarTests.class" in result.output

    def test_validate_test_suites_latin1_suite_incomplete(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        suite = repo_without_suite / "src/test/java/com/acme/MyTestsSuite.java"
        suite.write_bytes(b"// \xe9\n@SelectClasses({FooTests.class})")

        result = runner.invoke(cli, ["validate-test-suites", str(repo_without_suite)])

        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "Test suites: FAIL" in result.output
        assert "BarTests.class" in result.output

    def test_validate_test_suites_latin1_suite_complete(
        self, runner: CliRunner, repo_without_suite: Path
    ) -> None:
        suite = repo_without_suite / "src/test/java/com/acme/MyTestsSuite.java"
        suite.write_bytes(b"// \xe9\n@SelectClasses({FooTests.class, BarTests.class})")

        result = runner.invoke(cli, ["validate-test-suites", str(repo_without_suite)])

        assert result.exit_code == 0
        assert "Test suites: PASS" in result.output

    def test_verify_spring_factories_pass(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["verify-spring-factories", str(tmp_path)])

        assert result.exit_code == 0
        assert "Spring factories: PASS" in result.output

    def test_verify_spring_factories_fail(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        _write(
            tmp_path / "src/main/resources/META-INF/spring.factories",
            "org.springframework.boot.autoconfigure.EnableAutoConfiguration="
            "com.acme.Missing\n",
        )

        result = runner.invoke(cli, ["verify-spring-factories", str(tmp_path)])

        assert result.exit_code == 1
        assert "Spring configuration class does not exist" in result.output

    def test_verify_bean_proxying_fail(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        _write(
            tmp_path / "src/main/java/FooConfiguration.java",
            "@Configuration\npublic class FooConfiguration {\n"
            "    public Foo foo() { return new Foo(); }\n}\n",
        )

        result = runner.invoke(cli, ["verify-bean-proxying", str(tmp_path)])

        assert result.exit_code == 1
        assert "FooConfiguration.java should be marked with" in result.output

    def test_check_javadoc_from_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check-javadoc"], input="Foo.java:3: warning: no comment\n"
        )

        assert result.exit_code == 1
        assert "Javadoc warning: Foo.java:3: warning: no comment" in result.output

    def test_check_javadoc_clean_file(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        log = _write(tmp_path / "javadoc.log", "Generating index.html...\n")

        result = runner.invoke(cli, ["check-javadoc", str(log)])

        assert result.exit_code == 0
        assert "Javadoc: PASS" in result.output

    def test_clean_logs(self, runner: CliRunner, tmp_path: Path) -> None:
        _write(tmp_path / "a.log")
        _write(tmp_path / "b.orig")
        source = _write(tmp_path / "src/A.java")

        result = runner.invoke(cli, ["clean-logs", str(tmp_path)])

        assert result.exit_code == 0
        assert "Cleaned 2 file(s)" in result.output
        assert source.exists()
