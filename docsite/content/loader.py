"""Read Markdown content collections and validate their front matter.

Each collection lives in its own directory beneath the content root
(``docs/`` and ``changelog/``) and holds Markdown files that open with a
YAML front-matter block. :func:`load_collection` returns every file as a
:class:`~docsite.content.models.ContentEntry`, while
:func:`check_collections` walks both collections and gathers every failure
into a report instead of stopping at the first bad file.

Examples
--------
>>> from pathlib import Path
>>> from docsite.content.loader import load_collection
>>> docs = load_collection(Path("src/content"), "docs")  # doctest: +SKIP
>>> docs[0].data.title  # doctest: +SKIP
'Introduction'
"""

from __future__ import annotations

import dataclasses as dc
import io
import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from docsite._constants import COLLECTION_KINDS, CONTENT_SUFFIXES, DOC_KIND

from .models import (
    ChangelogEntry,
    ContentEntry,
    ContentError,
    Doc,
    SchemaValidationError,
)
from .schema import validate_document

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


@dc.dataclass(slots=True)
class CollectionReport:
    """Outcome of validating every file across the content collections."""

    checked: list[Path] = dc.field(default_factory=list)
    failures: list[tuple[Path, ContentError]] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when no file failed validation."""
        return not self.failures


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its parsed front matter and Markdown body.

    Parameters
    ----------
    text : str
        Full file contents.

    Returns
    -------
    tuple[dict[str, Any], str]
        Front-matter mapping (empty when the file has none) and the body
        following the closing delimiter.

    Raises
    ------
    ContentError
        If the front matter is unterminated, is not valid YAML, or does not
        parse to a mapping.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        msg = "Front matter is missing its closing '---' delimiter."
        raise ContentError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(io.StringIO(header))
    except YAMLError as exc:
        msg = f"Front matter is not valid YAML: {exc}"
        raise ContentError(msg) from exc
    if loaded is None:
        return {}, body
    if not isinstance(loaded, dict):
        msg = f"Front matter must be a mapping, got {type(loaded).__name__}."
        raise ContentError(msg)
    return dict(loaded), body


def load_entry(
    path: Path, collection: str, *, root: Path | None = None
) -> ContentEntry:
    """Load and validate a single content file.

    Parameters
    ----------
    path : Path
        Markdown file to read.
    collection : str
        Collection the file belongs to; selects the document kind.
    root : Path, optional
        Collection directory used to derive the slug. Defaults to the file's
        parent directory.

    Raises
    ------
    ValueError
        If ``collection`` is unknown.
    ContentError
        If the file cannot be parsed or its front matter is invalid. Schema
        failures are raised as :class:`SchemaValidationError` attributed to
        ``path``.
    """
    kind = _kind_for(collection)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read content file '{path}': {exc}"
        raise ContentError(msg) from exc
    try:
        front_matter, body = split_front_matter(text)
    except ContentError as exc:
        msg = f"{path}: {exc}"
        raise ContentError(msg) from exc
    try:
        data = validate_document(front_matter, kind)
    except SchemaValidationError as exc:
        raise exc.with_source(path) from None
    slug = path.relative_to(root or path.parent).with_suffix("").as_posix()
    logger.debug("Loaded %s entry '%s' from %s", collection, slug, path)
    return ContentEntry(
        collection=collection, slug=slug, path=path, data=data, body=body
    )


def load_collection(
    content_dir: Path, collection: str, *, include_drafts: bool = True
) -> list[ContentEntry]:
    """Load every file of ``collection`` beneath ``content_dir``.

    Docs are ordered by ``(section, order, slug)``; changelog entries are
    ordered newest first. With ``include_drafts=False`` docs flagged as
    drafts are dropped. The first invalid file aborts loading.
    """
    kind = _kind_for(collection)
    root = content_dir / collection
    entries = [
        load_entry(path, collection, root=root) for path in iter_content_files(root)
    ]
    if kind == DOC_KIND:
        if not include_drafts:
            drafts = [entry for entry in entries if _doc(entry).draft]
            for entry in drafts:
                logger.info("Skipping draft doc '%s'", entry.slug)
            entries = [entry for entry in entries if not _doc(entry).draft]
        return sorted(entries, key=_doc_sort_key)
    return sorted(entries, key=_changelog_sort_key)


def check_collections(content_dir: Path) -> CollectionReport:
    """Validate every file of every collection and report all failures."""
    report = CollectionReport()
    for collection in COLLECTION_KINDS:
        root = content_dir / collection
        for path in iter_content_files(root):
            report.checked.append(path)
            try:
                load_entry(path, collection, root=root)
            except ContentError as exc:
                logger.warning("Rejected %s: %s", path, exc)
                report.failures.append((path, exc))
    return report


def iter_content_files(root: Path) -> list[Path]:
    """Return content files beneath ``root`` sorted by relative path."""
    if not root.is_dir():
        return []
    return sorted(
        (
            path
            for path in root.rglob("*")
            if path.is_file() and path.suffix in CONTENT_SUFFIXES
        ),
        key=lambda path: path.relative_to(root).as_posix(),
    )


def _kind_for(collection: str) -> str:
    try:
        return COLLECTION_KINDS[collection]
    except KeyError as exc:
        available = ", ".join(sorted(COLLECTION_KINDS))
        msg = f"Unknown collection '{collection}'. Known collections: {available}"
        raise ValueError(msg) from exc


def _doc(entry: ContentEntry) -> Doc:
    return typ.cast(Doc, entry.data)


def _doc_sort_key(entry: ContentEntry) -> tuple[str, float, str]:
    doc = _doc(entry)
    return (doc.section, doc.order, entry.slug)


def _changelog_sort_key(entry: ContentEntry) -> tuple[int, str]:
    data = typ.cast(ChangelogEntry, entry.data)
    return (-data.date.toordinal(), entry.slug)


__all__ = [
    "CollectionReport",
    "check_collections",
    "iter_content_files",
    "load_collection",
    "load_entry",
    "split_front_matter",
]
