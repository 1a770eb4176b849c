"""Render module descriptors into the HTML fragments substituted into pages."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from apidoc_pages._constants import TOC_CURRENT_CLASS

from .models import ListUsage, TextUsage

if typ.TYPE_CHECKING:
    from .models import BasicUsage, MethodDescriptor, TableOfContents

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only, leaving every other character untouched."""
    return value.translate(_ASCII_LOWER)


def page_href(module_name: str) -> str:
    """Return the link target used for ``module_name`` in the navigation."""
    return _ascii_lower(module_name).replace(" ", "-")


def method_name(signature: str) -> str:
    """Return the part of a method signature before its first ``(``."""
    return signature.split("(", 1)[0]


def summary_anchor(signature: str) -> str:
    """Return the in-page link target used by the method summary table."""
    return _ascii_lower(method_name(signature)).replace(" ", "-")


def detail_anchor(signature: str) -> str:
    """Return the id given to a method's detail heading.

    Spaces are kept as-is here, unlike :func:`summary_anchor`, so a method
    name containing spaces gets a summary link that does not resolve.
    """
    return _ascii_lower(method_name(signature))


class HtmlFragmentRenderer:
    """Render navigation, usage, and method fragments with shared templates."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment used for every fragment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the fragment templates; defaults to the
            package ``templates`` directory.

        Notes
        -----
        Autoescaping is off: descriptor text is trusted and may contain HTML,
        which is emitted unchanged.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - descriptors carry raw HTML
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(
            page_href=page_href,
            method_name=method_name,
            summary_anchor=summary_anchor,
            detail_anchor=detail_anchor,
        )

    def table_of_contents(self, toc: TableOfContents, current: str) -> str:
        """Render one list item per section, marking links to ``current``.

        Parameters
        ----------
        toc : TableOfContents
            Sections and module names, rendered in stored order.
        current : str
            Class name of the page being built; every link whose label equals
            it exactly receives the ``toc-current`` class.

        Returns
        -------
        str
            Outer ``<li>`` items, each wrapping an inner ``<ul>`` of links.
        """
        return self._render(
            "toc.jinja", toc=toc, current=current, current_class=TOC_CURRENT_CLASS
        )

    def basic_usage(self, usage: BasicUsage) -> str:
        """Render basic usage as an HTML list or a single paragraph."""
        match usage:
            case ListUsage():
                return self._render("basic_usage_list.jinja", usage=usage)
            case TextUsage():
                return self._render("basic_usage_text.jinja", usage=usage)
        msg = f"Unsupported basic usage value: {usage!r}"
        raise TypeError(msg)

    def method_summary(self, methods: typ.Mapping[str, MethodDescriptor]) -> str:
        """Render one summary table row per method, in descriptor order.

        Methods without a return type show ``void`` in the type cell.
        """
        return self._render("method_summary.jinja", methods=methods)

    def method_detail(self, methods: typ.Mapping[str, MethodDescriptor]) -> str:
        """Render the detail block for every method, separated by ``<br/>``."""
        return self._render("method_detail.jinja", methods=methods)

    def _render(self, template_name: str, **context: object) -> str:
        """Render the named fragment template with ``context``."""
        return self.env.get_template(template_name).render(**context)


__all__ = [
    "HtmlFragmentRenderer",
    "detail_anchor",
    "method_name",
    "page_href",
    "summary_anchor",
]
