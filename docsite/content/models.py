"""Typed records and errors produced by content validation."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ContentError(ValueError):
    """Raised when a content document cannot be read or accepted."""


@dc.dataclass(frozen=True, slots=True)
class FieldError:
    """A single violated field within a content document.

    Attributes
    ----------
    field : str
        Name of the offending front-matter key.
    expected : str
        Human-readable description of the accepted type.
    actual : str
        Description of what was found, ``"missing"`` when absent.
    """

    field: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.field}: expected {self.expected}, got {self.actual}"


class SchemaValidationError(ContentError):
    """Raised when a document violates its kind's field contract.

    Every violated field is reported, not just the first, so callers can
    surface all problems with a document at once.
    """

    def __init__(
        self,
        kind: str,
        errors: tuple[FieldError, ...],
        *,
        source: Path | None = None,
    ) -> None:
        self.kind = kind
        self.errors = errors
        self.source = source
        super().__init__(self._format())

    @property
    def fields(self) -> tuple[str, ...]:
        """Return the offending field names in declaration order."""
        return tuple(error.field for error in self.errors)

    def with_source(self, source: Path) -> SchemaValidationError:
        """Return a copy of the error attributed to ``source``."""
        return SchemaValidationError(self.kind, self.errors, source=source)

    def _format(self) -> str:
        where = f" in {self.source}" if self.source else ""
        details = "; ".join(str(error) for error in self.errors)
        return f"Invalid {self.kind} document{where}: {details}"


@dc.dataclass(frozen=True, slots=True)
class Doc:
    """A validated documentation page front matter."""

    title: str
    description: str
    section: str
    order: int | float
    draft: bool = False
    last_updated: dt.date | None = None
    contributors: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None


@dc.dataclass(frozen=True, slots=True)
class ChangelogEntry:
    """A validated changelog entry front matter."""

    version: str
    date: dt.date
    title: str
    description: str
    breaking: bool = False
    highlights: tuple[str, ...] | None = None


ContentDocument = Doc | ChangelogEntry


@dc.dataclass(frozen=True, slots=True)
class ContentEntry:
    """A content file paired with its validated front matter.

    Attributes
    ----------
    collection : str
        Collection the file belongs to (``"docs"`` or ``"changelog"``).
    slug : str
        POSIX path of the file relative to its collection, without suffix.
    path : Path
        Filesystem location of the source file.
    data : Doc | ChangelogEntry
        Validated front matter.
    body : str
        Markdown body following the front matter, untouched.
    """

    collection: str
    slug: str
    path: Path
    data: ContentDocument
    body: str


__all__ = [
    "ChangelogEntry",
    "ContentDocument",
    "ContentEntry",
    "ContentError",
    "Doc",
    "FieldError",
    "SchemaValidationError",
]
