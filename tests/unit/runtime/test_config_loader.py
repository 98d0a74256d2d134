# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from omnibase_build.errors import ProtocolConfigurationError
from omnibase_build.runtime import DEFAULT_CONFIG_FILENAME, load_config
from omnibase_build.runtime.config_loader import MAX_CONFIG_SIZE_BYTES

pytestmark = [pytest.mark.unit]


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_default_file_yields_defaults(self, tmp_path: Path) -> None:
        config = load_config(root=tmp_path)
        assert config.fail_fast is True
        assert config.test_source_dir == "src/test/java"

    def test_reads_default_file_from_root(self, tmp_path: Path) -> None:
        (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
            "fail_fast: false\njobs: 3\ndefault_tasks:\n  - validate-test-suites\n"
        )

        config = load_config(root=tmp_path)

        assert config.fail_fast is False
        assert config.jobs == 3
        assert config.default_tasks == ("validate-test-suites",)

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("")
        assert load_config(root=tmp_path).jobs == 1

    def test_overrides_take_precedence_and_none_is_ignored(
        self, tmp_path: Path
    ) -> None:
        (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("jobs: 3\nfail_fast: false\n")

        config = load_config(root=tmp_path, jobs=5, fail_fast=None)

        assert config.jobs == 5
        assert config.fail_fast is False

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProtocolConfigurationError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("jobs: [1, 2\n")
        with pytest.raises(ProtocolConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ProtocolConfigurationError, match="must be a mapping"):
            load_config(path)

    def test_unknown_field(self, tmp_path: Path) -> None:
        path = tmp_path / "unknown.yaml"
        path.write_text("colour: blue\n")
        with pytest.raises(ProtocolConfigurationError, match="Invalid configuration"):
            load_config(path)

    def test_oversized_file(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.yaml"
        path.write_text("# " + "x" * MAX_CONFIG_SIZE_BYTES + "\n")
        with pytest.raises(ProtocolConfigurationError, match="exceeds"):
            load_config(path)

    def test_error_carries_correlation_id(self, tmp_path: Path) -> None:
        with pytest.raises(ProtocolConfigurationError) as exc_info:
            load_config(tmp_path / "nope.yaml")
        assert exc_info.value.correlation_id is not None
