# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Housekeeping tasks that modify a project tree."""

from omnibase_build.housekeeping.log_cleanup import (
    clean_logs,
    clean_project_logs,
    find_log_files,
)

__all__: list[str] = ["clean_logs", "clean_project_logs", "find_log_files"]
