"""Cyclopts CLI entrypoint for generating apidoc module pages.

The ``apidoc`` console script defined here renders one static HTML page per
module descriptor found in the configured data directory. Typical usage is
running ``apidoc build`` locally or in CI after editing descriptors or the
page template.

Examples
--------
Build every page for the default configuration:

>>> from apidoc_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from apidoc_pages.cli import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    BuildConfig,
    get_logger,
    load_build_config,
    parse_log_level,
    setup_logging,
)
from .generator import DescriptorError, SiteBuilder

DEFAULT_CONFIG = Path("config/apidoc.yaml")

app = App(name="apidoc", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None) -> BuildConfig:
    """Load ``config``, or the default file when present, else built-in defaults."""
    if config is not None:
        return load_build_config(config)
    if DEFAULT_CONFIG.exists():
        return load_build_config(DEFAULT_CONFIG)
    return BuildConfig()


@app.command(help="Render one HTML page per module descriptor.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = None,
    template: typ.Annotated[
        Path | None,
        Parameter(help="Override the HTML template", env_var="INPUT_TEMPLATE"),
    ] = None,
    source_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the descriptor folder", env_var="INPUT_SOURCE_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    log_level: typ.Annotated[
        str | None,
        Parameter(help="Logging level (e.g. INFO, DEBUG)", env_var="INPUT_LOG_LEVEL"),
    ] = None,
) -> None:
    """Build every module page for the requested configuration.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``apidoc.yaml`` configuration file. When ``None``,
        ``config/apidoc.yaml`` is used if it exists, otherwise built-in
        defaults apply.
    template : Path or None, optional
        Override for the HTML template path.
    source_dir : Path or None, optional
        Override for the directory holding module descriptors and the table
        of contents.
    output_dir : Path or None, optional
        Override for the directory receiving generated pages.
    log_level : str or None, optional
        Logging level name or number; falls back to ``APIDOC_LOG_LEVEL`` and
        then ``INFO``.

    Returns
    -------
    None
        Writes pages and prints each written path.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name or number.
    SystemExit
        With status 1 when a module descriptor cannot be read or parsed.
    """
    level = parse_log_level(log_level)
    if log_level and level is None:
        msg = f"Unknown log level '{log_level}'."
        raise ValueError(msg)
    setup_logging(level)
    logger = get_logger("apidoc")

    build_config = _resolve_config(config)
    overrides: dict[str, Path] = {}
    if template:
        overrides["template_path"] = template
    if source_dir:
        overrides["source_dir"] = source_dir
    if output_dir:
        overrides["output_dir"] = output_dir
    if overrides:
        build_config = dc.replace(build_config, **overrides)

    try:
        written = SiteBuilder(build_config, logger=logger).run()
    except DescriptorError as exc:
        logger.error("Build aborted: %s", exc)
        sys.exit(1)
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `apidoc` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
