# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Task Runner - executes named build-check tasks across project units.

The runner is the orchestrating build driver for the validators:

    - Each (project, task) pair is an independent unit of work.
    - A BuildCheckError becomes a FAILED result; any other exception becomes
      an ERROR result. Neither affects other projects' state.
    - With fail-fast (default) the first failure stops scheduling; every task
      not yet started is reported as SKIPPED.
    - With ``jobs > 1`` projects run concurrently on a thread pool. Tasks of
      one project always run sequentially, and results are reported in
      (project, task) order regardless of completion order.
    - Registered finalizers run exactly once per ``run()``, after all tasks,
      whatever the outcome, including unexpected exceptions.

Example:
    >>> runner = TaskRunner(load_config(root=root))
    >>> runner.register_finalizer("clean-logs", lambda: clean_logs(root))
    >>> report = runner.run(discover_projects(root))
    >>> sys.exit(report.exit_code)
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from uuid import uuid4

from omnibase_build.enums import EnumTaskStatus
from omnibase_build.errors import BuildCheckError
from omnibase_build.housekeeping.log_cleanup import clean_project_logs
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelBuildReport,
    ModelFinalizerOutcome,
    ModelProject,
    ModelTaskDefinition,
    ModelTaskResult,
)
from omnibase_build.runtime.project_discovery import discover_projects
from omnibase_build.runtime.registry_task import RegistryTask, build_default_registry

logger = logging.getLogger(__name__)


class TaskRunner:
    """Runs registered tasks over projects and collects a build report.

    Attributes:
        config: Shared configuration passed to every task.
        fail_fast: Stop scheduling work after the first failure.
        jobs: Number of projects processed concurrently.
    """

    def __init__(
        self,
        config: ModelBuildChecksConfig | None = None,
        *,
        registry: RegistryTask | None = None,
        fail_fast: bool | None = None,
        jobs: int | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Shared configuration; defaults to ModelBuildChecksConfig().
            registry: Task registry; defaults to the built-in tasks.
            fail_fast: Overrides ``config.fail_fast`` when given.
            jobs: Overrides ``config.jobs`` when given (minimum 1).
        """
        self.config = config or ModelBuildChecksConfig()
        self.registry = registry or build_default_registry()
        self.fail_fast = self.config.fail_fast if fail_fast is None else fail_fast
        self.jobs = max(1, self.config.jobs if jobs is None else jobs)
        self._finalizers: list[tuple[str, Callable[[], object]]] = []

    def register_finalizer(self, name: str, finalizer: Callable[[], object]) -> None:
        """Register a callable to run once at the end of every ``run()``."""
        self._finalizers.append((name, finalizer))

    def run(
        self,
        projects: Sequence[ModelProject],
        task_names: Sequence[str] | None = None,
    ) -> ModelBuildReport:
        """Run tasks over projects.

        Args:
            projects: Projects in execution order.
            task_names: Task names in execution order; defaults to
                ``config.default_tasks``.

        Returns:
            ModelBuildReport with one result per (project, task) pair.

        Raises:
            ProtocolConfigurationError: If a task name is unknown. Raised
                before any task or finalizer runs.
        """
        definitions = self.registry.resolve(
            list(task_names) if task_names else list(self.config.default_tasks)
        )
        run_id = uuid4()
        logger.info(
            "Starting build checks",
            extra={
                "correlation_id": str(run_id),
                "projects": len(projects),
                "tasks": [d.name for d in definitions],
                "fail_fast": self.fail_fast,
                "jobs": self.jobs,
            },
        )

        results: list[ModelTaskResult] = []
        outcomes: list[ModelFinalizerOutcome] = []
        try:
            results = self._execute(projects, definitions)
        finally:
            outcomes = self._run_finalizers()

        report = ModelBuildReport(results=tuple(results), finalizers=tuple(outcomes))
        logger.info(
            report.format_summary(),
            extra={"correlation_id": str(run_id)},
        )
        return report

    def _execute(
        self,
        projects: Sequence[ModelProject],
        definitions: Sequence[ModelTaskDefinition],
    ) -> list[ModelTaskResult]:
        stop = threading.Event()
        if self.jobs == 1 or len(projects) <= 1:
            results: list[ModelTaskResult] = []
            for project in projects:
                results.extend(self._run_project(project, definitions, stop))
            return results

        with ThreadPoolExecutor(
            max_workers=self.jobs, thread_name_prefix="omnibase-build"
        ) as executor:
            futures = [
                executor.submit(self._run_project, project, definitions, stop)
                for project in projects
            ]
            return [result for future in futures for result in future.result()]

    def _run_project(
        self,
        project: ModelProject,
        definitions: Sequence[ModelTaskDefinition],
        stop: threading.Event,
    ) -> list[ModelTaskResult]:
        results: list[ModelTaskResult] = []
        for definition in definitions:
            if stop.is_set():
                results.append(
                    ModelTaskResult(
                        task_name=definition.name,
                        project_display_name=project.display_name,
                        status=EnumTaskStatus.SKIPPED,
                    )
                )
                continue

            result = self._run_task(project, definition)
            results.append(result)
            if result.is_failure and self.fail_fast:
                stop.set()
        return results

    def _run_task(
        self, project: ModelProject, definition: ModelTaskDefinition
    ) -> ModelTaskResult:
        logger.debug(
            "Running task",
            extra={"task": definition.name, "project": project.display_name},
        )
        started = time.perf_counter()
        status = EnumTaskStatus.PASSED
        message = ""
        error_code = None
        try:
            definition.action(project, self.config)
        except BuildCheckError as e:
            status = EnumTaskStatus.FAILED
            message = str(e)
            error_code = e.error_code
        except Exception as e:  # catch-all-ok: one task's crash is reported, not propagated
            logger.exception(
                "Task crashed",
                extra={"task": definition.name, "project": project.display_name},
            )
            status = EnumTaskStatus.ERROR
            message = f"{type(e).__name__}: {e}"

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Task %s on %s: %s",
            definition.name,
            project.display_name,
            status.value,
            extra={"duration_ms": round(duration_ms, 2)},
        )
        return ModelTaskResult(
            task_name=definition.name,
            project_display_name=project.display_name,
            status=status,
            message=message,
            error_code=error_code,
            duration_ms=duration_ms,
        )

    def _run_finalizers(self) -> list[ModelFinalizerOutcome]:
        outcomes: list[ModelFinalizerOutcome] = []
        for name, finalizer in self._finalizers:
            try:
                finalizer()
            except Exception as e:  # catch-all-ok: finalizers never mask task results
                logger.warning(
                    "Finalizer failed",
                    extra={
                        "finalizer": name,
                        "error_type": type(e).__name__,
                        "error": str(e),
                    },
                )
                outcomes.append(
                    ModelFinalizerOutcome(
                        name=name, succeeded=False, message=f"{type(e).__name__}: {e}"
                    )
                )
                continue
            outcomes.append(ModelFinalizerOutcome(name=name, succeeded=True))
        return outcomes


def register_log_cleanup(
    runner: TaskRunner, projects: Sequence[ModelProject]
) -> None:
    """Register a finalizer cleaning build logs from every project."""

    def _clean_all() -> None:
        for project in projects:
            clean_project_logs(project, runner.config)

    runner.register_finalizer("clean-logs", _clean_all)


def run_build_checks(
    root: Path,
    task_names: Sequence[str] | None = None,
    config: ModelBuildChecksConfig | None = None,
    *,
    fail_fast: bool | None = None,
    jobs: int | None = None,
) -> ModelBuildReport:
    """Discover projects under ``root`` and run tasks over all of them.

    Log cleanup is registered as a finalizer when
    ``config.clean_logs_on_finish`` is set.
    """
    config = config or ModelBuildChecksConfig()
    projects = discover_projects(root, config)
    runner = TaskRunner(config, fail_fast=fail_fast, jobs=jobs)
    if config.clean_logs_on_finish:
        register_log_cleanup(runner, projects)
    return runner.run(projects, task_names)


__all__: list[str] = ["TaskRunner", "register_log_cleanup", "run_build_checks"]
