# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Task Registry - single source of truth for named build-check tasks.

Every task the runner can execute is registered here under a command-line
name. Registration order is preserved and defines the default execution
order of ``omnibase-build run``.

Example Usage:
    ```python
    from omnibase_build.runtime.registry_task import build_default_registry

    registry = build_default_registry()
    registry.list_keys()
    # ['verify-spring-factories', 'verify-bean-proxying',
    #  'validate-test-suites', 'check-javadoc', 'clean-logs']
    definition = registry.get("validate-test-suites")
    definition.action(project, config)
    ```
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from omnibase_build.errors import ModelBuildErrorContext, ProtocolConfigurationError
from omnibase_build.housekeeping.log_cleanup import clean_project_logs
from omnibase_build.models import ModelTaskDefinition
from omnibase_build.validation.validator_bean_proxying import (
    verify_project_bean_proxying,
)
from omnibase_build.validation.validator_javadoc import verify_javadoc
from omnibase_build.validation.validator_spring_factories import (
    verify_spring_factories,
)
from omnibase_build.validation.validator_test_suites import validate_test_suites


class RegistryTask:
    """Thread-safe ordered registry of task definitions."""

    def __init__(self) -> None:
        self._tasks: dict[str, ModelTaskDefinition] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(self, definition: ModelTaskDefinition) -> None:
        """Register a task.

        Raises:
            ProtocolConfigurationError: If the name is already registered.
        """
        with self._lock:
            if definition.name in self._tasks:
                raise ProtocolConfigurationError(
                    f"Task already registered: {definition.name}",
                    context=ModelBuildErrorContext(task_name=definition.name),
                )
            self._tasks[definition.name] = definition

    def get(self, name: str) -> ModelTaskDefinition:
        """Resolve a task by name.

        Raises:
            ProtocolConfigurationError: If no task has that name.
        """
        with self._lock:
            definition = self._tasks.get(name)
            known = list(self._tasks)
        if definition is None:
            raise ProtocolConfigurationError(
                f"Unknown task '{name}'. Available tasks: {', '.join(known)}",
                context=ModelBuildErrorContext(task_name=name),
            )
        return definition

    def resolve(self, names: Sequence[str]) -> list[ModelTaskDefinition]:
        """Resolve several names at once, failing before anything runs."""
        return [self.get(name) for name in names]

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._tasks)

    def list_definitions(self) -> list[ModelTaskDefinition]:
        with self._lock:
            return list(self._tasks.values())

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tasks


def build_default_registry() -> RegistryTask:
    """Create a registry holding every built-in task, in default order."""
    registry = RegistryTask()
    registry.register(
        ModelTaskDefinition(
            name="verify-spring-factories",
            description=(
                "Examine spring.factories and ensure @Configuration classes "
                "can be located"
            ),
            action=verify_spring_factories,
        )
    )
    registry.register(
        ModelTaskDefinition(
            name="verify-bean-proxying",
            description=(
                "Examine @Configuration files and check whether proxying bean "
                "methods can be disabled"
            ),
            action=verify_project_bean_proxying,
        )
    )
    registry.register(
        ModelTaskDefinition(
            name="validate-test-suites",
            description="Ensure the project contains a tests suite listing every test class",
            action=validate_test_suites,
        )
    )
    registry.register(
        ModelTaskDefinition(
            name="check-javadoc",
            description="Fail when captured javadoc output contains warnings",
            action=verify_javadoc,
        )
    )
    registry.register(
        ModelTaskDefinition(
            name="clean-logs",
            description="Clean build log files",
            action=clean_project_logs,
            is_validator=False,
        )
    )
    return registry


__all__: list[str] = ["RegistryTask", "build_default_registry"]
