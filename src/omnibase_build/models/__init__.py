# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build Check Models Module.

Pydantic models shared by validators, the task runner and the CLI. All models
are frozen; nothing here performs I/O.
"""

from omnibase_build.models.model_build_checks_config import (
    DEFAULT_CLEANUP_PATTERNS,
    DEFAULT_DISCOVERY_SKIP_DIRECTORIES,
    DEFAULT_TASKS,
    ModelBuildChecksConfig,
)
from omnibase_build.models.model_build_report import (
    ModelBuildReport,
    ModelFinalizerOutcome,
)
from omnibase_build.models.model_javadoc_warning import ModelJavadocWarning
from omnibase_build.models.model_missing_registered_class import (
    ModelMissingRegisteredClass,
)
from omnibase_build.models.model_project import ModelProject
from omnibase_build.models.model_proxy_declaration_violation import (
    ModelProxyDeclarationViolation,
)
from omnibase_build.models.model_registration_entries import (
    AUTO_CONFIGURATION_KEY,
    BOOTSTRAP_CONFIGURATION_KEY,
    ModelRegistrationEntries,
)
from omnibase_build.models.model_task_definition import (
    ModelTaskDefinition,
    TaskCallable,
)
from omnibase_build.models.model_task_result import ModelTaskResult
from omnibase_build.models.model_test_suite_scan import (
    ModelTestSuiteScan,
    compiled_unit_name,
)

__all__: list[str] = [
    "AUTO_CONFIGURATION_KEY",
    "BOOTSTRAP_CONFIGURATION_KEY",
    "DEFAULT_CLEANUP_PATTERNS",
    "DEFAULT_DISCOVERY_SKIP_DIRECTORIES",
    "DEFAULT_TASKS",
    "ModelBuildChecksConfig",
    "ModelBuildReport",
    "ModelFinalizerOutcome",
    "ModelJavadocWarning",
    "ModelMissingRegisteredClass",
    "ModelProject",
    "ModelProxyDeclarationViolation",
    "ModelRegistrationEntries",
    "ModelTaskDefinition",
    "ModelTaskResult",
    "ModelTestSuiteScan",
    "TaskCallable",
    "compiled_unit_name",
]
