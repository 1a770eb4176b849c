"""High-level orchestration for module page generation.

This module coordinates a whole build: it reads the page template and the
table of contents once, then turns every module descriptor in the source
directory into one HTML page. It exposes :class:`SiteBuilder`, which consumes
a :class:`~apidoc_pages.config.BuildConfig` and reports progress through the
logger it is given.

Example
-------
>>> from pathlib import Path
>>> from apidoc_pages.config import load_build_config
>>> from apidoc_pages.generator import SiteBuilder
>>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('pages/widget.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ

from apidoc_pages._constants import SOURCE_GLOB

from .assembler import assemble, render_fragments
from .descriptors import load_module, load_table_of_contents, load_template
from .renderer import HtmlFragmentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from apidoc_pages.config import BuildConfig


class SiteBuilder:
    """Render every module descriptor into a static HTML page."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        logger: logging.Logger | None = None,
        renderer: HtmlFragmentRenderer | None = None,
    ) -> None:
        """Initialize the builder with configuration and collaborators.

        Parameters
        ----------
        config : BuildConfig
            Template, source, and output locations for the build.
        logger : logging.Logger, optional
            Receives progress and warning messages; defaults to this module's
            logger.
        renderer : HtmlFragmentRenderer, optional
            Fragment renderer; defaults to one using the package templates.
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.renderer = renderer or HtmlFragmentRenderer()

    def run(self) -> list[Path]:
        """Build and write one page per module descriptor.

        Returns
        -------
        list[Path]
            Paths to the written pages, in build order.

        Raises
        ------
        DescriptorError
            Raised when a module descriptor cannot be read or parsed. Pages
            written before the failure remain; no later module is built.
        """
        template = load_template(self.config.template_path, self.logger)
        toc = load_table_of_contents(self.config.toc_path, self.logger)

        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for source_path in self.module_paths():
            output_path = out_dir / f"{source_path.stem}{self.config.page_extension}"
            self.logger.info("Building page: %s", output_path)
            module = load_module(source_path, self.logger)
            html = assemble(template, render_fragments(module, toc, self.renderer))
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def module_paths(self) -> list[Path]:
        """Return the module descriptors to build, sorted by file name."""
        ignored = self.config.ignored_names
        return sorted(
            path
            for path in self.config.source_dir.glob(SOURCE_GLOB)
            if path.name not in ignored and path.is_file()
        )


__all__ = ["SiteBuilder"]
