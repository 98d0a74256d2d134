#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
omnibase-build Validation Script.

Run build-convention checks over a repository with its configured defaults.
Can be used standalone or as part of pre-commit hooks.

Usage:
    python scripts/validate.py [--verbose] [--keep-going]
    python scripts/validate.py verify-spring-factories
    python scripts/validate.py verify-bean-proxying
    python scripts/validate.py validate-test-suites
    python scripts/validate.py check-javadoc
    python scripts/validate.py all --root path/to/repo
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from omnibase_build.errors import ProtocolConfigurationError  # noqa: E402
from omnibase_build.runtime import (  # noqa: E402
    build_default_registry,
    load_config,
    run_build_checks,
)


def run_all(
    root: Path, tasks: list[str] | None, verbose: bool, keep_going: bool
) -> int:
    """Run the selected tasks and print a plain-text report."""
    print("Running omnibase-build checks...")
    print("=" * 50)

    config = load_config(root=root, fail_fast=False if keep_going else None)
    report = run_build_checks(root, tasks, config)

    for result in report.results:
        if verbose or result.is_failure:
            print(
                f"{result.task_name} ({result.project_display_name}): "
                f"{result.status.value.upper()}"
            )
            if result.message:
                print(f"  - {result.message}")

    print("=" * 50)
    print(report.format_summary())
    for line in report.format_for_ci():
        print(line)
    return report.exit_code


def main() -> int:
    """Main entry point."""
    registry = build_default_registry()
    parser = argparse.ArgumentParser(description="omnibase-build Validation Script")
    parser.add_argument(
        "task",
        nargs="?",
        default="all",
        choices=["all", *registry.list_keys()],
        help="Which task to run (default: all validators)",
    )
    parser.add_argument(
        "--root", type=Path, default=Path("."), help="Repository root (default: .)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--keep-going",
        "-k",
        action="store_true",
        help="Keep running tasks after the first failure",
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    tasks = None if args.task == "all" else [args.task]
    try:
        return run_all(args.root, tasks, args.verbose, args.keep_going)
    except ProtocolConfigurationError as e:
        print(f"Configuration error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
