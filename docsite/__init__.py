"""Content schema, site navigation, and UI state for the documentation site.

This package validates content documents at ingestion time, derives section
membership and previous/next links from the static site map, and defines the
small state stores (theme, mobile navigation, search panel) bound by page
templates. The ``docsite`` console script checks content and navigation from
CI.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
>>> from docsite import app
>>> "docsite" in app.name
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
