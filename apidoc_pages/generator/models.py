"""Shared dataclasses used by the page generation pipeline.

Descriptor text is stored exactly as read. Nothing here (or downstream)
escapes it, so descriptors may carry inline HTML; a descriptor from an
untrusted source could inject markup or script into the generated page.
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class DescriptorError(RuntimeError):
    """Raised when a module descriptor cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


@dc.dataclass(frozen=True, slots=True)
class TableOfContents:
    """Section names mapped to the module names listed under them, in order."""

    sections: dict[str, tuple[str, ...]] = dc.field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.sections)


@dc.dataclass(frozen=True, slots=True)
class ListUsage:
    """Basic usage rendered as an HTML list.

    Attributes
    ----------
    tag : str
        List container element name, for example ``"ul"`` or ``"ol"``.
    items : tuple[str, ...]
        Raw HTML for each list item.
    """

    tag: str
    items: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class TextUsage:
    """Basic usage rendered as a single paragraph."""

    text: str = ""


BasicUsage = ListUsage | TextUsage


@dc.dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """Documentation for one method of a module.

    ``None`` marks an optional field that was absent (or ``null``) in the
    descriptor; an empty string is a present but blank value.
    """

    description: str = ""
    information: str | None = None
    parameters: dict[str, str] | None = None
    return_type: str | None = None
    return_value: str = ""


@dc.dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    """Structured record describing one documented class or module."""

    class_name: str = ""
    abstract: str = ""
    information: str = ""
    basic_usage: BasicUsage = dc.field(default_factory=TextUsage)
    methods: dict[str, MethodDescriptor] = dc.field(default_factory=dict)


__all__ = [
    "BasicUsage",
    "DescriptorError",
    "ListUsage",
    "MethodDescriptor",
    "ModuleDescriptor",
    "TableOfContents",
    "TextUsage",
]
