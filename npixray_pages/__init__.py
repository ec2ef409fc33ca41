"""Static generator for the NPIxray Medicare billing answers section.

This package merges hand-authored answer shards into one catalog and renders
them as static pages with SEO metadata and Schema.org JSON-LD.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that configures logging and invokes the app.

Examples
--------
>>> from npixray_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
