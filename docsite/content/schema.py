"""Field contracts for the ``doc`` and ``changelog_entry`` document kinds.

The single entry point is :func:`validate_document`, which turns an untyped
front-matter mapping into a frozen :class:`~docsite.content.models.Doc` or
:class:`~docsite.content.models.ChangelogEntry`. Validation is
fail-complete per field: every violated key is gathered into one
:class:`~docsite.content.models.SchemaValidationError` before anything is
returned, so a document is either fully accepted or entirely rejected.

Examples
--------
>>> from docsite.content.schema import validate_document
>>> doc = validate_document(
...     {"title": "REPL", "description": "Try it", "section": "intro", "order": 4},
...     "doc",
... )
>>> doc.draft, doc.tags
(False, None)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import typing as typ

from docsite._constants import CHANGELOG_KIND, DOC_KIND

from .models import (
    ChangelogEntry,
    ContentDocument,
    Doc,
    FieldError,
    SchemaValidationError,
)

_MISSING: typ.Final = object()


class _Mismatch(Exception):
    """Internal signal that a value failed its type check."""

    def __init__(self, actual: str | None = None) -> None:
        super().__init__(actual)
        self.actual = actual


@dc.dataclass(frozen=True, slots=True)
class _Field:
    key: str
    attr: str
    expected: str
    coerce: cabc.Callable[[object], object]
    required: bool = True
    default: object = _MISSING


@dc.dataclass(frozen=True, slots=True)
class _Schema:
    kind: str
    record: type[Doc] | type[ChangelogEntry]
    fields: tuple[_Field, ...]


def _describe(value: object) -> str:
    return type(value).__name__


def _string(value: object) -> str:
    if isinstance(value, str):
        return value
    raise _Mismatch


def _number(value: object) -> int | float:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise _Mismatch
    return value


def _boolean(value: object) -> bool:
    if isinstance(value, bool):
        return value
    raise _Mismatch


def _date(value: object) -> dt.date:
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                return dt.date.fromisoformat(sanitized)
            except ValueError:
                pass
            try:
                return dt.datetime.fromisoformat(sanitized).date()
            except ValueError:
                raise _Mismatch(f"unparseable date string {text!r}") from None
        case _:
            raise _Mismatch


def _string_list(value: object) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        raise _Mismatch
    for index, item in enumerate(value):
        if not isinstance(item, str):
            actual = f"{_describe(value)} with {_describe(item)} at index {index}"
            raise _Mismatch(actual)
    return tuple(value)


def _string_set(value: object) -> tuple[str, ...]:
    """Return unique strings in first-seen order."""
    return tuple(dict.fromkeys(_string_list(value)))


_DOC_SCHEMA = _Schema(
    kind=DOC_KIND,
    record=Doc,
    fields=(
        _Field("title", "title", "string", _string),
        _Field("description", "description", "string", _string),
        _Field("section", "section", "string", _string),
        _Field("order", "order", "number", _number),
        _Field("draft", "draft", "boolean", _boolean, required=False, default=False),
        _Field("lastUpdated", "last_updated", "date", _date, required=False),
        _Field(
            "contributors",
            "contributors",
            "sequence of string",
            _string_set,
            required=False,
        ),
        _Field("tags", "tags", "sequence of string", _string_set, required=False),
    ),
)

_CHANGELOG_SCHEMA = _Schema(
    kind=CHANGELOG_KIND,
    record=ChangelogEntry,
    fields=(
        _Field("version", "version", "string", _string),
        _Field("date", "date", "date", _date),
        _Field("title", "title", "string", _string),
        _Field("description", "description", "string", _string),
        _Field(
            "breaking", "breaking", "boolean", _boolean, required=False, default=False
        ),
        _Field(
            "highlights",
            "highlights",
            "sequence of string",
            _string_list,
            required=False,
        ),
    ),
)

SCHEMAS: dict[str, _Schema] = {
    DOC_KIND: _DOC_SCHEMA,
    CHANGELOG_KIND: _CHANGELOG_SCHEMA,
}


def resolve_defaults(
    raw: cabc.Mapping[str, typ.Any], kind: str
) -> dict[str, typ.Any]:
    """Return a copy of ``raw`` with defaultable fields filled in.

    Keys holding ``None`` are dropped first, so an empty YAML key counts as
    absent. Keys unknown to the kind are kept here and ignored later.
    """
    schema = _schema_for(kind)
    payload = {key: value for key, value in raw.items() if value is not None}
    for field in schema.fields:
        if field.default is not _MISSING:
            payload.setdefault(field.key, field.default)
    return payload


def validate_document(
    raw: cabc.Mapping[str, typ.Any], kind: str
) -> ContentDocument:
    """Validate ``raw`` front matter against the contract for ``kind``.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Untyped field map, typically parsed YAML front matter.
    kind : str
        Document kind discriminator, ``"doc"`` or ``"changelog_entry"``.

    Returns
    -------
    Doc | ChangelogEntry
        Frozen record with defaults resolved and absent optional fields set
        to ``None``.

    Raises
    ------
    ValueError
        If ``kind`` is not a known document kind.
    TypeError
        If ``raw`` is not a mapping.
    SchemaValidationError
        If any field is missing or mistyped. Every offending field is listed.
    """
    if not isinstance(raw, cabc.Mapping):
        msg = f"Document front matter must be a mapping, got {_describe(raw)}."
        raise TypeError(msg)
    schema = _schema_for(kind)
    payload = resolve_defaults(raw, kind)

    values: dict[str, object] = {}
    errors: list[FieldError] = []
    for field in schema.fields:
        if field.key not in payload:
            if field.required:
                errors.append(FieldError(field.key, field.expected, "missing"))
            else:
                values[field.attr] = None
            continue
        value = payload[field.key]
        try:
            values[field.attr] = field.coerce(value)
        except _Mismatch as exc:
            actual = exc.actual or _describe(value)
            errors.append(FieldError(field.key, field.expected, actual))

    if errors:
        raise SchemaValidationError(schema.kind, tuple(errors))
    return schema.record(**values)  # type: ignore[arg-type]


def _schema_for(kind: str) -> _Schema:
    try:
        return SCHEMAS[kind]
    except KeyError as exc:
        available = ", ".join(sorted(SCHEMAS))
        msg = f"Unknown document kind '{kind}'. Known kinds: {available}"
        raise ValueError(msg) from exc


__all__ = ["SCHEMAS", "resolve_defaults", "validate_document"]
