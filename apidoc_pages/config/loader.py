"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _normalize_extension,
    _normalize_names,
    _optional_str,
    _require_mapping,
)
from .models import BuildConfig


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing where a build reads and writes.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/apidoc.yaml``).

    Returns
    -------
    BuildConfig
        Parsed build configuration with defaults applied for every key the
        file omits.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    BuildConfigError
        If a field holds a value of the wrong shape (for example, a page
        extension without a leading dot).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from apidoc_pages.config import load_build_config
    >>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
    >>> config.toc_path  # doctest: +SKIP
    PosixPath('data/table-of-contents.json')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return _build_config(_require_mapping(raw.get("build"), key="build"))


def _build_config(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    """Build a BuildConfig from the ``build`` mapping, keeping defaults."""
    defaults = BuildConfig()
    template = _optional_str(payload.get("template"))
    source_dir = _optional_str(payload.get("source_dir"))
    output_dir = _optional_str(payload.get("output_dir"))
    toc_filename = _optional_str(payload.get("table_of_contents"))
    return BuildConfig(
        template_path=Path(template) if template else defaults.template_path,
        source_dir=Path(source_dir) if source_dir else defaults.source_dir,
        output_dir=Path(output_dir) if output_dir else defaults.output_dir,
        toc_filename=toc_filename or defaults.toc_filename,
        ignore=_normalize_names(payload.get("ignore"), key="ignore"),
        page_extension=_normalize_extension(
            payload.get("page_extension"), defaults.page_extension
        ),
    )


__all__ = ["load_build_config"]
