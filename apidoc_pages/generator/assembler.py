"""Merge rendered fragments into the page template."""

from __future__ import annotations

import typing as typ

from apidoc_pages._constants import PLACEHOLDERS

if typ.TYPE_CHECKING:
    from .models import ModuleDescriptor, TableOfContents
    from .renderer import HtmlFragmentRenderer


def assemble(template: str, fragments: typ.Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder token with its fragment.

    Parameters
    ----------
    template : str
        Page template text containing literal tokens such as ``{name}``.
    fragments : Mapping[str, str]
        Fragment HTML keyed by placeholder token, applied in mapping order.

    Returns
    -------
    str
        The template with all supplied tokens substituted.

    Examples
    --------
    >>> assemble("<h1>{name}</h1><title>{name}</title>", {"{name}": "Widget"})
    '<h1>Widget</h1><title>Widget</title>'
    """
    html = template
    for token, fragment in fragments.items():
        html = html.replace(token, fragment)
    return html


def render_fragments(
    module: ModuleDescriptor,
    toc: TableOfContents,
    renderer: HtmlFragmentRenderer,
) -> dict[str, str]:
    """Render every fragment for ``module`` keyed by its placeholder token."""
    rendered = {
        "table_of_contents": renderer.table_of_contents(toc, module.class_name),
        "name": module.class_name,
        "abstract": module.abstract,
        "information": module.information,
        "basic_usage": renderer.basic_usage(module.basic_usage),
        "method_summary": renderer.method_summary(module.methods),
        "method_detail": renderer.method_detail(module.methods),
    }
    return {PLACEHOLDERS[key]: rendered[key] for key in PLACEHOLDERS}


__all__ = ["assemble", "render_fragments"]
