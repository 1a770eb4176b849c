"""Unit tests for template placeholder substitution."""

from __future__ import annotations

from apidoc_pages._constants import PLACEHOLDERS
from apidoc_pages.generator import (
    HtmlFragmentRenderer,
    ModuleDescriptor,
    TableOfContents,
    assemble,
    render_fragments,
)


def test_assemble_replaces_every_occurrence() -> None:
    """A token used twice is replaced in both positions."""
    html = assemble("<title>{name}</title><h1>{name}</h1>", {"{name}": "Widget"})
    assert html == "<title>Widget</title><h1>Widget</h1>"


def test_assemble_leaves_unknown_text_alone() -> None:
    """Text that is not a supplied token is kept verbatim."""
    html = assemble("{name} {unknown} {abstract}", {"{name}": "W", "{abstract}": ""})
    assert html == "W {unknown} "


def test_assemble_empty_template() -> None:
    """An empty template yields an empty page."""
    assert assemble("", {"{name}": "Widget"}) == ""


def test_render_fragments_covers_every_placeholder() -> None:
    """Every placeholder token receives a fragment for a sparse descriptor."""
    module = ModuleDescriptor(class_name="Widget", abstract="A widget.")
    fragments = render_fragments(module, TableOfContents(), HtmlFragmentRenderer())
    assert list(fragments) == list(PLACEHOLDERS.values()), (
        f"expected fragments in placeholder order, got {list(fragments)!r}"
    )
    assert fragments["{name}"] == "Widget"
    assert fragments["{abstract}"] == "A widget."
    assert fragments["{information}"] == ""
    assert fragments["{basicUsage}"] == "<p></p>"
    assert fragments["{methodSummary}"] == ""
    assert fragments["{methodDetail}"] == ""
    assert fragments["{tableOfContents}"] == ""
