"""Static HTML documentation pages generated from JSON module descriptors.

This package exposes the CLI entry point used by ``apidoc build`` to render
one page per module descriptor into a shared HTML template.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from apidoc_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
