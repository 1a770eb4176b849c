"""Typed dataclasses describing apidoc build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from apidoc_pages._constants import DEFAULT_PAGE_EXTENSION, DEFAULT_TOC_FILENAME


class BuildConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class BuildConfig:
    """A fully resolved build definition sourced from YAML config.

    Attributes
    ----------
    template_path : Path
        HTML template containing the placeholder tokens.
    source_dir : Path
        Directory holding the module descriptors and the table of contents.
    output_dir : Path
        Directory receiving one rendered page per module descriptor.
    toc_filename : str
        Base name of the table-of-contents file inside ``source_dir``.
    ignore : tuple[str, ...]
        Additional descriptor base names that never produce a page.
    page_extension : str
        Extension appended to each descriptor stem to name its page.
    """

    template_path: Path = Path("template.html")
    source_dir: Path = Path("data")
    output_dir: Path = Path("pages")
    toc_filename: str = DEFAULT_TOC_FILENAME
    ignore: tuple[str, ...] = ()
    page_extension: str = DEFAULT_PAGE_EXTENSION

    @property
    def toc_path(self) -> Path:
        """Return the location of the table-of-contents descriptor."""
        return self.source_dir / self.toc_filename

    @property
    def ignored_names(self) -> frozenset[str]:
        """Return every descriptor base name excluded from page generation."""
        return frozenset((self.toc_filename, *self.ignore))


__all__ = ["BuildConfig", "BuildConfigError"]
