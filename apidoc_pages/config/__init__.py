"""Load and validate build configuration YAML for apidoc page builds.

This subpackage parses the project's ``apidoc.yaml`` file, applies defaults
for every omitted key, and produces a typed :class:`BuildConfig` that the
build driver consumes. It also owns the logging setup applied by the CLI.

Examples
--------
>>> from pathlib import Path
>>> from apidoc_pages.config import load_build_config
>>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
>>> config.output_dir  # doctest: +SKIP
PosixPath('pages')
"""

from .loader import load_build_config
from .logging import get_logger, parse_log_level, setup_logging
from .models import BuildConfig, BuildConfigError

__all__ = [
    "BuildConfig",
    "BuildConfigError",
    "get_logger",
    "load_build_config",
    "parse_log_level",
    "setup_logging",
]
