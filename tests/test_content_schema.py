"""Unit tests for the content document schema.

These tests cover :func:`docsite.content.validate_document` for both document
kinds: default resolution, explicit absence of optional fields, type rules,
and the guarantee that every violated field is reported in one error.

Usage
-----
Run ``pytest tests/test_content_schema.py -v`` to execute the suite.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from docsite.content import (
    ChangelogEntry,
    Doc,
    SchemaValidationError,
    resolve_defaults,
    validate_document,
)


def _doc_payload(**overrides: typ.Any) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "title": "Functions",
        "description": "Defining and calling functions.",
        "section": "core-language",
        "order": 5,
    }
    payload.update(overrides)
    return payload


def _changelog_payload(**overrides: typ.Any) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "version": "0.2.0",
        "date": dt.date(2024, 12, 1),
        "title": "Graph theory",
        "description": "Adds the graph module.",
    }
    payload.update(overrides)
    return payload


def test_doc_defaults_draft_to_false() -> None:
    """A doc omitting ``draft`` validates with ``draft = False``."""
    doc = validate_document(_doc_payload(), "doc")
    assert isinstance(doc, Doc), f"expected a Doc record, got {type(doc)!r}"
    assert doc.draft is False, f"expected draft to default to False, got {doc.draft!r}"


def test_changelog_defaults_breaking_to_false() -> None:
    """A changelog entry omitting ``breaking`` validates with ``breaking = False``."""
    entry = validate_document(_changelog_payload(), "changelog_entry")
    assert isinstance(entry, ChangelogEntry), (
        f"expected a ChangelogEntry record, got {type(entry)!r}"
    )
    assert entry.breaking is False, (
        f"expected breaking to default to False, got {entry.breaking!r}"
    )
    assert entry.highlights is None, "absent highlights should be None"


def test_absent_optional_fields_are_none_not_empty() -> None:
    """Optional fields resolve to None rather than empty collections."""
    doc = validate_document(_doc_payload(), "doc")
    assert doc.last_updated is None
    assert doc.contributors is None
    assert doc.tags is None


def test_missing_title_and_description_are_both_reported() -> None:
    """One error lists every missing required field, not just the first."""
    payload = _doc_payload()
    del payload["title"]
    del payload["description"]
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(payload, "doc")
    error = excinfo.value
    assert error.fields == ("title", "description"), (
        f"expected both missing fields in order, got {error.fields!r}"
    )
    assert all(item.actual == "missing" for item in error.errors)
    assert "title" in str(error)
    assert "description" in str(error)


def test_wrong_types_and_missing_fields_are_collected_together() -> None:
    """Mistyped optional fields are reported alongside missing required ones."""
    payload = _doc_payload(order="first", draft="yes", tags=["a", 3])
    del payload["section"]
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(payload, "doc")
    errors = {item.field: item for item in excinfo.value.errors}
    assert set(errors) == {"section", "order", "draft", "tags"}
    assert errors["order"].expected == "number"
    assert errors["order"].actual == "str"
    assert errors["tags"].actual == "list with int at index 1"


def test_boolean_is_not_a_number() -> None:
    """``order: true`` must not sneak through as the integer 1."""
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(_doc_payload(order=True), "doc")
    assert excinfo.value.fields == ("order",)


def test_float_order_is_accepted() -> None:
    doc = validate_document(_doc_payload(order=2.5), "doc")
    assert doc.order == 2.5


def test_bare_string_is_not_a_sequence() -> None:
    """A single string is rejected where a sequence of strings is expected."""
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(_changelog_payload(highlights="Faster REPL"), "changelog_entry")
    assert excinfo.value.fields == ("highlights",)


def test_sequences_become_tuples_and_sets_drop_duplicates() -> None:
    """Tags keep first-seen order without duplicates; highlights keep all items."""
    doc = validate_document(_doc_payload(tags=["math", "dsp", "math"]), "doc")
    assert doc.tags == ("math", "dsp"), f"unexpected tags {doc.tags!r}"
    entry = validate_document(
        _changelog_payload(highlights=["REPL", "REPL"]), "changelog_entry"
    )
    assert entry.highlights == ("REPL", "REPL")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (dt.date(2024, 1, 15), dt.date(2024, 1, 15)),
        (dt.datetime(2024, 1, 15, 9, 30, tzinfo=dt.UTC), dt.date(2024, 1, 15)),
        ("2024-01-15", dt.date(2024, 1, 15)),
        ("2024-01-15T09:30:00Z", dt.date(2024, 1, 15)),
    ],
)
def test_date_values_are_coerced(raw: object, expected: dt.date) -> None:
    """Dates, datetimes, and ISO strings all validate to a ``date``."""
    entry = validate_document(_changelog_payload(date=raw), "changelog_entry")
    assert entry.date == expected


def test_unparseable_date_is_rejected() -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(_changelog_payload(date="next tuesday"), "changelog_entry")
    (error,) = excinfo.value.errors
    assert error.field == "date"
    assert "next tuesday" in error.actual


def test_null_values_count_as_absent() -> None:
    """An empty YAML key (null) behaves like an omitted key."""
    doc = validate_document(_doc_payload(draft=None, tags=None), "doc")
    assert doc.draft is False
    assert doc.tags is None
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_document(_doc_payload(title=None), "doc")
    assert excinfo.value.fields == ("title",)


def test_unknown_keys_are_ignored() -> None:
    doc = validate_document(_doc_payload(layout="wide"), "doc")
    assert not hasattr(doc, "layout")


def test_camel_case_last_updated_maps_to_record_field() -> None:
    doc = validate_document(_doc_payload(lastUpdated="2024-11-02"), "doc")
    assert doc.last_updated == dt.date(2024, 11, 2)


def test_records_are_immutable() -> None:
    doc = validate_document(_doc_payload(), "doc")
    with pytest.raises(AttributeError):
        doc.title = "Changed"  # type: ignore[misc]


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown document kind 'page'"):
        validate_document(_doc_payload(), "page")


def test_non_mapping_input_is_rejected() -> None:
    with pytest.raises(TypeError):
        validate_document(["title"], "doc")  # type: ignore[arg-type]


def test_resolve_defaults_does_not_mutate_input() -> None:
    raw = _doc_payload()
    resolved = resolve_defaults(raw, "doc")
    assert resolved["draft"] is False
    assert "draft" not in raw, "resolve_defaults should copy its input"
