"""Utility helpers shared by the apidoc configuration loader."""

from __future__ import annotations

import typing as typ

from .models import BuildConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_names(value: object | None, *, key: str) -> tuple[str, ...]:
    """Normalize a YAML scalar or list into a tuple of non-empty base names."""
    match value:
        case None:
            return ()
        case str():
            return tuple(segment for segment in value.split() if segment)
        case list():
            names: list[str] = []
            for segment in value:
                text = _optional_str(segment)
                if text:
                    names.append(text)
            return tuple(names)
        case _:
            msg = f"'{key}' must be a string or a list of strings."
            raise BuildConfigError(msg)


def _normalize_extension(value: object | None, default: str) -> str:
    """Return a page extension, rejecting values without a leading dot."""
    text = _optional_str(value)
    if text is None:
        return default
    if not text.startswith(".") or text == ".":
        msg = f"Page extension '{text}' must start with '.' and name a suffix."
        raise BuildConfigError(msg)
    return text


def _require_mapping(
    value: object | None, *, key: str
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise BuildConfigError(msg)
    return value


__all__ = [
    "_normalize_extension",
    "_normalize_names",
    "_optional_str",
    "_require_mapping",
]
