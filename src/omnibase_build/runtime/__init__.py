# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Runtime: configuration, project discovery, task registry and runner."""

from omnibase_build.runtime.config_loader import DEFAULT_CONFIG_FILENAME, load_config
from omnibase_build.runtime.project_discovery import (
    BUILD_FILE_NAMES,
    discover_projects,
)
from omnibase_build.runtime.registry_task import RegistryTask, build_default_registry
from omnibase_build.runtime.task_runner import (
    TaskRunner,
    register_log_cleanup,
    run_build_checks,
)

__all__: list[str] = [
    "BUILD_FILE_NAMES",
    "DEFAULT_CONFIG_FILENAME",
    "RegistryTask",
    "TaskRunner",
    "build_default_registry",
    "discover_projects",
    "load_config",
    "register_log_cleanup",
    "run_build_checks",
]
