# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Configuration model for build-convention checks.

Loaded from ``.omnibase-build.yaml`` (see ``runtime.config_loader``); every
field has a default matching the conventional Gradle/Maven layout, so an
absent configuration file is equivalent to ``ModelBuildChecksConfig()``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TASKS: tuple[str, ...] = (
    "verify-spring-factories",
    "verify-bean-proxying",
    "validate-test-suites",
    "check-javadoc",
)

DEFAULT_CLEANUP_PATTERNS: tuple[str, ...] = (
    "**/*.log",
    "**/*.gz",
    "**/*.log.gz",
    "**/*.orig",
)

DEFAULT_DISCOVERY_SKIP_DIRECTORIES: tuple[str, ...] = (
    ".git",
    ".gradle",
    "build",
    "out",
    "target",
    "node_modules",
)


class ModelBuildChecksConfig(BaseModel):
    """Settings shared by every task in a run.

    Attributes:
        main_source_dir: Main source root relative to a project.
        main_resources_dir: Main resources root relative to a project.
        test_source_dir: Test source root relative to a project.
        source_extension: Extension of source files (including the dot).
        spring_factories_path: Registration file relative to the resources root.
        javadoc_log: Captured javadoc output relative to a project.
        cleanup_patterns: Glob patterns deleted by ``clean-logs``.
        cleanup_skip_directories: Directory names never touched by cleanup.
        discovery_skip_directories: Directory names not searched for projects.
        default_tasks: Tasks run when none are named explicitly.
        fail_fast: Stop scheduling work after the first failure.
        jobs: Number of projects checked concurrently.
        clean_logs_on_finish: Register log cleanup as an end-of-run finalizer.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    main_source_dir: str = Field(default="src/main/java")
    main_resources_dir: str = Field(default="src/main/resources")
    test_source_dir: str = Field(default="src/test/java")
    source_extension: str = Field(default=".java")
    spring_factories_path: str = Field(default="META-INF/spring.factories")
    javadoc_log: str = Field(default="build/javadoc.log")
    cleanup_patterns: tuple[str, ...] = Field(default=DEFAULT_CLEANUP_PATTERNS)
    cleanup_skip_directories: tuple[str, ...] = Field(default=(".git",))
    discovery_skip_directories: tuple[str, ...] = Field(
        default=DEFAULT_DISCOVERY_SKIP_DIRECTORIES
    )
    default_tasks: tuple[str, ...] = Field(default=DEFAULT_TASKS)
    fail_fast: bool = Field(default=True)
    jobs: int = Field(default=1, ge=1)
    clean_logs_on_finish: bool = Field(default=False)

    @field_validator("source_extension")
    @classmethod
    def _validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"source_extension must start with '.', got {v!r}")
        return v


__all__: list[str] = [
    "DEFAULT_CLEANUP_PATTERNS",
    "DEFAULT_DISCOVERY_SKIP_DIRECTORIES",
    "DEFAULT_TASKS",
    "ModelBuildChecksConfig",
]
