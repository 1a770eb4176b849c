"""Read the template, table of contents, and module descriptors from disk.

Every reader takes the caller's logger so problems are reported on the same
channel as build progress. The template and table of contents are shared by
all pages and degrade to empty values when missing or malformed; a module
descriptor is the sole source of its page, so any failure there raises
:class:`~apidoc_pages.generator.models.DescriptorError`.
"""

from __future__ import annotations

import json
import typing as typ

from .models import (
    BasicUsage,
    DescriptorError,
    ListUsage,
    MethodDescriptor,
    ModuleDescriptor,
    TableOfContents,
    TextUsage,
)

if typ.TYPE_CHECKING:
    import logging
    from pathlib import Path

DEFAULT_LIST_TAG = "ul"


def load_template(path: Path, logger: logging.Logger) -> str:
    """Return the HTML template text, or an empty string when unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not load HTML template %s: %s", path, exc)
        return ""


def load_table_of_contents(path: Path, logger: logging.Logger) -> TableOfContents:
    """Load the shared table of contents, degrading to an empty one on errors.

    Parameters
    ----------
    path : Path
        JSON file mapping section names to lists of module names.
    logger : logging.Logger
        Receives a warning for every problem that empties or trims the result.

    Returns
    -------
    TableOfContents
        Sections in file order. Sections whose value is not a list are skipped.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Could not load table of contents %s: %s", path, exc)
        return TableOfContents()
    try:
        raw = json.loads(data)
    except ValueError as exc:
        logger.warning("Could not parse table of contents JSON in %s: %s", path, exc)
        return TableOfContents()
    if not isinstance(raw, dict):
        logger.warning("Table of contents %s is not a JSON object", path)
        return TableOfContents()

    sections: dict[str, tuple[str, ...]] = {}
    for section, modules in raw.items():
        if not isinstance(modules, list):
            logger.warning(
                "Skipping table of contents section %r: expected a list", section
            )
            continue
        sections[section] = tuple(
            _text(name, logger, field=section) for name in modules
        )
    return TableOfContents(sections)


def load_module(path: Path, logger: logging.Logger) -> ModuleDescriptor:
    """Parse a module descriptor file into a :class:`ModuleDescriptor`.

    Raises
    ------
    DescriptorError
        If the file cannot be read, is not valid JSON, or does not hold a
        JSON object. The failure is logged before raising.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Could not load JSON data from %s: %s", path, exc)
        raise DescriptorError(path, "file could not be read") from exc
    try:
        raw = json.loads(data)
    except ValueError as exc:
        logger.error("Could not parse JSON data in %s: %s", path, exc)
        raise DescriptorError(path, f"invalid JSON ({exc})") from exc
    if not isinstance(raw, dict):
        logger.error("Module descriptor %s is not a JSON object", path)
        raise DescriptorError(path, "expected a JSON object")
    return _build_module(raw, logger)


def _build_module(
    raw: typ.Mapping[str, typ.Any], logger: logging.Logger
) -> ModuleDescriptor:
    """Map a decoded descriptor object onto a ModuleDescriptor."""
    methods_raw = raw.get("methods")
    methods: dict[str, MethodDescriptor] = {}
    if isinstance(methods_raw, dict):
        for signature, payload in methods_raw.items():
            methods[signature] = _build_method(signature, payload, logger)
    return ModuleDescriptor(
        class_name=_text(raw.get("class"), logger, field="class"),
        abstract=_text(raw.get("abstract"), logger, field="abstract"),
        information=_text(raw.get("information"), logger, field="information"),
        basic_usage=_build_basic_usage(raw.get("basicUsage"), logger),
        methods=methods,
    )


def _build_basic_usage(value: object, logger: logging.Logger) -> BasicUsage:
    """Decide the basic usage variant from the JSON value's shape."""
    match value:
        case [tag, *items]:
            return ListUsage(
                tag=_text(tag, logger, field="basicUsage") or DEFAULT_LIST_TAG,
                items=tuple(_text(item, logger, field="basicUsage") for item in items),
            )
        case []:
            return ListUsage(tag=DEFAULT_LIST_TAG)
        case _:
            return TextUsage(_text(value, logger, field="basicUsage"))


def _build_method(
    signature: str, payload: object, logger: logging.Logger
) -> MethodDescriptor:
    """Map one entry of ``methods`` onto a MethodDescriptor."""
    if not isinstance(payload, dict):
        logger.warning("Method %r is not a JSON object; rendering it empty", signature)
        return MethodDescriptor()
    return MethodDescriptor(
        description=_text(payload.get("description"), logger, field="description"),
        information=_optional_text(
            payload.get("information"), logger, field="information"
        ),
        parameters=_build_parameters(signature, payload.get("parameters"), logger),
        return_type=_optional_text(
            payload.get("returnType"), logger, field="returnType"
        ),
        return_value=_text(payload.get("returnValue"), logger, field="returnValue"),
    )


def _build_parameters(
    signature: str, value: object, logger: logging.Logger
) -> dict[str, str] | None:
    """Return parameter descriptions; only an absent or null value is ``None``.

    An empty JSON array stands for an empty parameter list. Any other
    non-object value is reported and treated the same way.
    """
    match value:
        case None:
            return None
        case dict():
            return {
                name: _text(text, logger, field="parameters")
                for name, text in value.items()
            }
        case []:
            return {}
        case _:
            logger.warning(
                "Parameters of %r are not a JSON object; rendering an empty table",
                signature,
            )
            return {}


def _text(value: object, logger: logging.Logger, *, field: str) -> str:
    """Return ``value`` as text; JSON ``null`` becomes an empty string.

    Booleans print as ``"1"`` and ``""``. Arrays and objects have no text
    form, so they are reported and rendered empty.
    """
    match value:
        case None:
            return ""
        case str():
            return value
        case bool():
            return "1" if value else ""
        case dict() | list():
            logger.warning("Field %r is not a scalar; rendering it empty", field)
            return ""
        case _:
            return str(value)


def _optional_text(
    value: object, logger: logging.Logger, *, field: str
) -> str | None:
    """Return ``value`` as text, keeping ``None`` to mark an absent field."""
    return None if value is None else _text(value, logger, field=field)


__all__ = ["load_module", "load_table_of_contents", "load_template"]
