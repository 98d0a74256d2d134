# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Spring Configuration Factories Validator.

Examines ``src/main/resources/META-INF/spring.factories`` and ensures every
class registered as bootstrap configuration or auto-configuration can be
located as a source file under ``src/main/java``.

Policy:
    - Only the two registration keys modelled by ModelRegistrationEntries
      are checked; any other key is ignored.
    - A project without a spring.factories file passes trivially.
    - All missing classes are reported together, bootstrap key first.

Usage:
    >>> from omnibase_build.validation.validator_spring_factories import (
    ...     verify_spring_factories,
    ... )
    >>> verify_spring_factories(ModelProject.for_directory(Path(".")))
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from omnibase_build.errors import (
    MissingRegisteredClassError,
    ModelBuildErrorContext,
    ProtocolConfigurationError,
)
from omnibase_build.models import (
    ModelBuildChecksConfig,
    ModelMissingRegisteredClass,
    ModelProject,
    ModelRegistrationEntries,
)
from omnibase_build.utils.util_java_properties import load_properties

logger = logging.getLogger(__name__)

TASK_NAME = "verify-spring-factories"


def spring_factories_file(
    project: ModelProject, config: ModelBuildChecksConfig
) -> Path:
    """Return the location of the project's spring.factories file."""
    return project.main_resources_root(config) / config.spring_factories_path


def expected_source_path(
    project: ModelProject, class_name: str, config: ModelBuildChecksConfig
) -> Path:
    """Map a fully-qualified class name to its expected source file.

    Example:
        >>> expected_source_path(project, "com.acme.FooConfiguration", config)
        PosixPath('/repo/core/src/main/java/com/acme/FooConfiguration.java')
    """
    relative = class_name.replace(".", os.sep) + config.source_extension
    return project.main_source_root(config) / relative


def load_registration_entries(path: Path) -> ModelRegistrationEntries:
    """Parse a spring.factories file into its typed registration entries.

    Raises:
        ProtocolConfigurationError: If the file contains a malformed escape.
    """
    try:
        properties = load_properties(path)
    except ValueError as e:
        raise ProtocolConfigurationError(
            f"Malformed registration file {path}: {e}",
            context=ModelBuildErrorContext(task_name=TASK_NAME, target_path=path),
        ) from e
    return ModelRegistrationEntries.from_properties(properties)


def find_missing_registered_classes(
    project: ModelProject,
    entries: ModelRegistrationEntries,
    config: ModelBuildChecksConfig,
) -> list[ModelMissingRegisteredClass]:
    """Return every registered class whose source file does not exist."""
    missing: list[ModelMissingRegisteredClass] = []
    for registration_key, class_name in entries.iter_registrations():
        source_path = expected_source_path(project, class_name, config)
        if source_path.exists():
            logger.debug(
                "Registered class located",
                extra={"class_name": class_name, "path": str(source_path)},
            )
            continue
        missing.append(
            ModelMissingRegisteredClass(
                registration_key=registration_key,
                class_name=class_name,
                expected_path=source_path,
            )
        )
    return missing


def verify_spring_factories(
    project: ModelProject,
    config: ModelBuildChecksConfig | None = None,
) -> None:
    """Ensure classes registered in spring.factories exist as source files.

    Args:
        project: Project to check.
        config: Layout configuration; defaults to the conventional layout.

    Raises:
        MissingRegisteredClassError: If any registered class has no source
            file.
        ProtocolConfigurationError: If the registration file is malformed.
    """
    config = config or ModelBuildChecksConfig()
    factories_file = spring_factories_file(project, config)
    if not factories_file.exists():
        logger.debug(
            "No spring.factories file, skipping",
            extra={"project": project.display_name, "path": str(factories_file)},
        )
        return

    entries = load_registration_entries(factories_file)
    missing = find_missing_registered_classes(project, entries, config)
    if missing:
        raise MissingRegisteredClassError(
            missing,
            context=ModelBuildErrorContext(
                project_name=project.display_name,
                task_name=TASK_NAME,
                target_path=factories_file,
            ),
        )


__all__ = [
    "expected_source_path",
    "find_missing_registered_classes",
    "load_registration_entries",
    "spring_factories_file",
    "verify_spring_factories",
]
