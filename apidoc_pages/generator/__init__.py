"""Utilities for loading module descriptors and rendering their pages."""

from .assembler import assemble, render_fragments
from .descriptors import load_module, load_table_of_contents, load_template
from .models import (
    DescriptorError,
    ListUsage,
    MethodDescriptor,
    ModuleDescriptor,
    TableOfContents,
    TextUsage,
)
from .page_generator import SiteBuilder
from .renderer import HtmlFragmentRenderer

__all__ = [
    "DescriptorError",
    "HtmlFragmentRenderer",
    "ListUsage",
    "MethodDescriptor",
    "ModuleDescriptor",
    "SiteBuilder",
    "TableOfContents",
    "TextUsage",
    "assemble",
    "load_module",
    "load_table_of_contents",
    "load_template",
    "render_fragments",
]
