# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Utility functions for omnibase_build."""

from omnibase_build.utils.util_java_properties import (
    load_properties,
    parse_properties,
)

__all__: list[str] = [
    "load_properties",
    "parse_properties",
]
