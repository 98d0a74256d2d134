# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Build Checks Configuration Loader.

Loads ``.omnibase-build.yaml`` into ModelBuildChecksConfig.

Configuration File Structure:
    ```yaml
    test_source_dir: src/test/java
    default_tasks:
      - verify-spring-factories
      - validate-test-suites
    fail_fast: false
    jobs: 4
    clean_logs_on_finish: true
    ```

The loader validates:
    - File existence (only when a path is given explicitly)
    - File size (at most 1 MiB)
    - YAML syntax validity
    - Required structure (top level must be a mapping)
    - Field names and types (via the pydantic model, unknown keys rejected)

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_build.errors import ModelBuildErrorContext, ProtocolConfigurationError
from omnibase_build.models import ModelBuildChecksConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".omnibase-build.yaml"

MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def _config_error(message: str, path: Path) -> ProtocolConfigurationError:
    return ProtocolConfigurationError(
        message,
        context=ModelBuildErrorContext.with_correlation(
            task_name="load_config",
            target_path=path,
        ),
    )


def load_config(
    config_path: str | Path | None = None,
    root: Path | None = None,
    **overrides: object,
) -> ModelBuildChecksConfig:
    """Load build-check configuration.

    Args:
        config_path: Explicit configuration file. Must exist when given.
        root: Directory searched for ``.omnibase-build.yaml`` when no explicit
            path is given. Defaults to the current directory. A missing
            default file yields the default configuration.
        **overrides: Field values taking precedence over the file (``None``
            values are ignored so unset CLI options fall through).

    Returns:
        Validated, frozen configuration.

    Raises:
        ProtocolConfigurationError: If the file is missing (explicit path),
            too large, not valid YAML, not a mapping, or fails validation.

    Example:
        >>> config = load_config(root=Path("."), fail_fast=False)
        >>> config.fail_fast
        False
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise _config_error(f"Configuration file not found: {path}", path)
    else:
        path = (root or Path.cwd()) / DEFAULT_CONFIG_FILENAME

    data: dict[str, object] = {}
    if path.is_file():
        data = _read_config_file(path)
        logger.debug("Loaded configuration", extra={"path": str(path)})

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ModelBuildChecksConfig.model_validate(data)
    except ValidationError as e:
        raise _config_error(f"Invalid configuration in {path}: {e}", path) from e


def _read_config_file(path: Path) -> dict[str, object]:
    try:
        size = path.stat().st_size
    except OSError as e:
        raise _config_error(f"Cannot stat configuration file {path}: {e}", path) from e
    if size > MAX_CONFIG_SIZE_BYTES:
        raise _config_error(
            f"Configuration file {path} exceeds {MAX_CONFIG_SIZE_BYTES} bytes", path
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise _config_error(f"Invalid YAML in {path}: {e}", path) from e
    except OSError as e:
        raise _config_error(f"Cannot read configuration file {path}: {e}", path) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise _config_error(
            f"Configuration in {path} must be a mapping, got {type(raw).__name__}",
            path,
        )
    return dict(raw)


__all__: list[str] = ["DEFAULT_CONFIG_FILENAME", "load_config"]
