# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Command-line interface for omnibase-build."""

from omnibase_build.cli.commands import cli

__all__: list[str] = ["cli"]
