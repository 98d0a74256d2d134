# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
omnibase-build CLI Commands.

Provides the command-line interface for running build-convention checks
across a multi-project repository, or one check against one project.

Exit codes:
    0: All checks passed
    1: A check failed (or crashed)
    2: Configuration or usage error
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_build import __version__
from omnibase_build.enums import EnumTaskStatus
from omnibase_build.errors import BuildCheckError, ProtocolConfigurationError
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelBuildReport,
    ModelProject,
)

console = Console(soft_wrap=True)

EXIT_CONFIG_ERROR = 2

_STATUS_STYLES: dict[EnumTaskStatus, str] = {
    EnumTaskStatus.PASSED: "bold green",
    EnumTaskStatus.FAILED: "bold red",
    EnumTaskStatus.ERROR: "bold red",
    EnumTaskStatus.SKIPPED: "yellow",
}

_STATUS_LABELS: dict[EnumTaskStatus, str] = {
    EnumTaskStatus.PASSED: "PASS",
    EnumTaskStatus.FAILED: "FAIL",
    EnumTaskStatus.ERROR: "ERROR",
    EnumTaskStatus.SKIPPED: "SKIP",
}

_verbose_option = click.option(
    "--verbose", "-v", is_flag=True, default=False, help="Enable debug logging"
)

_directory = click.Path(exists=True, file_okay=False, path_type=Path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _config_failure(error: ProtocolConfigurationError) -> SystemExit:
    console.print(f"[bold red]Configuration error:[/bold red] {escape(str(error))}")
    return SystemExit(EXIT_CONFIG_ERROR)


@click.group()
@click.version_option(__version__, prog_name="omnibase-build")
def cli() -> None:
    """Build-convention checks for JVM multi-project repositories."""


@cli.command("run")
@click.argument("tasks", nargs=-1)
@click.option(
    "--root",
    type=_directory,
    default=Path("."),
    show_default=True,
    help="Repository root to discover projects under",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: <root>/.omnibase-build.yaml)",
)
@click.option(
    "--keep-going",
    is_flag=True,
    default=False,
    help="Run every task even after a failure",
)
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=None,
    help="Number of projects checked concurrently (default: config jobs)",
)
@click.option(
    "--clean-logs/--no-clean-logs",
    default=None,
    help="Delete build logs once all tasks finished (default: config value)",
)
@_verbose_option
def run_cmd(
    tasks: tuple[str, ...],
    root: Path,
    config_path: Path | None,
    keep_going: bool,
    jobs: int | None,
    clean_logs: bool | None,
    verbose: bool,
) -> None:
    """Run TASKS (default: every validator) over all discovered projects."""
    from omnibase_build.runtime import load_config, run_build_checks

    _configure_logging(verbose)
    try:
        config = load_config(
            config_path,
            root=root,
            fail_fast=False if keep_going else None,
            jobs=jobs,
            clean_logs_on_finish=clean_logs,
        )
        report = run_build_checks(root, list(tasks) or None, config)
    except ProtocolConfigurationError as e:
        raise _config_failure(e) from e

    _print_report(report)
    raise SystemExit(report.exit_code)


@cli.command("list-tasks")
def list_tasks_cmd() -> None:
    """List the available tasks in default execution order."""
    from omnibase_build.runtime import build_default_registry

    table = Table(title="Build Check Tasks")
    table.add_column("Task", style="cyan", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Description")
    for definition in build_default_registry().list_definitions():
        table.add_row(
            definition.name,
            "validator" if definition.is_validator else "housekeeping",
            definition.description,
        )
    console.print(table)


@cli.command("list-projects")
@click.option("--root", type=_directory, default=Path("."), show_default=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
)
def list_projects_cmd(root: Path, config_path: Path | None) -> None:
    """List the projects discovered under ROOT."""
    from omnibase_build.runtime import discover_projects, load_config

    try:
        config = load_config(config_path, root=root)
    except ProtocolConfigurationError as e:
        raise _config_failure(e) from e

    for project in discover_projects(root, config):
        console.print(
            f"[cyan]{escape(project.display_name)}[/cyan]  {escape(str(project.root))}"
        )


def _run_single_check(name: str, project_dir: Path, check: Callable[..., object]) -> None:
    """Run one validator against one project directory and exit."""
    from omnibase_build.runtime import load_config

    try:
        config = load_config(root=project_dir)
    except ProtocolConfigurationError as e:
        raise _config_failure(e) from e

    project = ModelProject.for_directory(project_dir)
    console.print(f"[bold blue]{name}: {escape(project.display_name)}...[/bold blue]")
    try:
        check(project, config)
    except ProtocolConfigurationError as e:
        raise _config_failure(e) from e
    except BuildCheckError as e:
        console.print(f"[bold red]{name}: FAIL[/bold red]")
        console.print(f"  [red]{escape(str(e))}[/red]")
        raise SystemExit(1) from e
    console.print(f"[bold green]{name}: PASS[/bold green]")
    raise SystemExit(0)


@cli.command("verify-spring-factories")
@click.argument("project_dir", type=_directory, default=Path("."))
@_verbose_option
def verify_spring_factories_cmd(project_dir: Path, verbose: bool) -> None:
    """Check that classes registered in spring.factories exist as sources."""
    from omnibase_build.validation import verify_spring_factories

    _configure_logging(verbose)
    _run_single_check("Spring factories", project_dir, verify_spring_factories)


@cli.command("verify-bean-proxying")
@click.argument("root", type=_directory, default=Path("."))
@_verbose_option
def verify_bean_proxying_cmd(root: Path, verbose: bool) -> None:
    """Check @Configuration classes under ROOT declare proxyBeanMethods."""
    from omnibase_build.validation import verify_bean_proxying

    def _check(project: ModelProject, config: ModelBuildChecksConfig) -> None:
        verify_bean_proxying(
            project.root,
            source_extension=config.source_extension,
            project_name=project.display_name,
        )

    _configure_logging(verbose)
    _run_single_check("Bean proxying", root, _check)


@cli.command("validate-test-suites")
@click.argument("project_dir", type=_directory, default=Path("."))
@_verbose_option
def validate_test_suites_cmd(project_dir: Path, verbose: bool) -> None:
    """Check the project's TestsSuite exists and lists every test class."""
    from omnibase_build.validation import validate_test_suites

    _configure_logging(verbose)
    _run_single_check("Test suites", project_dir, validate_test_suites)


@cli.command("check-javadoc")
@click.argument("logfile", type=click.File("r"), default="-")
@_verbose_option
def check_javadoc_cmd(logfile: TextIO, verbose: bool) -> None:
    """Fail if captured javadoc output (LOGFILE or stdin) has warnings."""
    from omnibase_build.errors import JavadocWarningError
    from omnibase_build.validation import check_javadoc_output

    _configure_logging(verbose)
    try:
        check_javadoc_output(logfile)
    except JavadocWarningError as e:
        console.print("[bold red]Javadoc: FAIL[/bold red]")
        for warning in e.warnings:
            console.print(f"  [red]{escape(warning.format_human_readable())}[/red]")
        raise SystemExit(1) from e
    console.print("[bold green]Javadoc: PASS[/bold green]")


@cli.command("clean-logs")
@click.argument("project_dir", type=_directory, default=Path("."))
@_verbose_option
def clean_logs_cmd(project_dir: Path, verbose: bool) -> None:
    """Delete log files, compressed logs and *.orig files under PROJECT_DIR."""
    from omnibase_build.housekeeping import clean_project_logs
    from omnibase_build.runtime import load_config

    _configure_logging(verbose)
    try:
        config = load_config(root=project_dir)
    except ProtocolConfigurationError as e:
        raise _config_failure(e) from e

    deleted = clean_project_logs(ModelProject.for_directory(project_dir), config)
    for path in deleted:
        console.print(f"  [dim]deleted {escape(str(path))}[/dim]")
    console.print(f"[bold green]Cleaned {len(deleted)} file(s)[/bold green]")


def _print_report(report: ModelBuildReport) -> None:
    """Print one line per task result, then finalizer problems and a summary."""
    for result in report.results:
        label = _STATUS_LABELS[result.status]
        style = _STATUS_STYLES[result.status]
        console.print(
            f"[{style}]{label}[/{style}] {escape(result.task_name)} "
            f"({escape(result.project_display_name)})"
        )
        if result.message:
            console.print(f"  [red]{escape(result.message)}[/red]")

    for outcome in report.finalizers:
        if not outcome.succeeded:
            console.print(
                f"[yellow]Finalizer {escape(outcome.name)} failed: "
                f"{escape(outcome.message)}[/yellow]"
            )

    style = "bold green" if report.passed else "bold red"
    console.print(f"\n[{style}]{escape(report.format_summary())}[/{style}]")


if __name__ == "__main__":
    cli()
