"""Validate and load typed content documents.

This subpackage holds the field contracts for the two document kinds
(``doc`` pages and ``changelog_entry`` records), the frozen dataclasses they
validate into, and the loaders that read Markdown collections with YAML front
matter from disk. The primary entry point is :func:`validate_document`, which
either returns a fully typed record or raises a
:class:`SchemaValidationError` listing every violated field.

Examples
--------
>>> from docsite.content import validate_document
>>> entry = validate_document(
...     {
...         "version": "0.4.0",
...         "date": "2024-03-01",
...         "title": "Tensors",
...         "description": "Adds tensors",
...     },
...     "changelog_entry",
... )
>>> entry.breaking
False
"""

from .loader import (
    CollectionReport,
    check_collections,
    load_collection,
    load_entry,
    split_front_matter,
)
from .models import (
    ChangelogEntry,
    ContentDocument,
    ContentEntry,
    ContentError,
    Doc,
    FieldError,
    SchemaValidationError,
)
from .schema import resolve_defaults, validate_document

__all__ = [
    "ChangelogEntry",
    "CollectionReport",
    "ContentDocument",
    "ContentEntry",
    "ContentError",
    "Doc",
    "FieldError",
    "SchemaValidationError",
    "check_collections",
    "load_collection",
    "load_entry",
    "resolve_defaults",
    "split_front_matter",
    "validate_document",
]
