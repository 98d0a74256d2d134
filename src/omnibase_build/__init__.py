# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""omnibase-build: build-convention checks for JVM multi-project repositories.

Validators enforce the conventions a Spring-based multi-project build relies
on (registered configuration classes exist, configuration classes declare bean
proxying, every project has a complete tests suite, javadoc is warning-free).
The task runner applies them to every discovered project and the ``omnibase-build``
command exposes them on the command line.
"""

__version__ = "0.3.0"

__all__: list[str] = ["__version__"]
