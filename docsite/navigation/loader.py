"""Build navigation trees from YAML and check their invariants."""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import NavigationError, NavigationTree, NavItem, NavSection

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_navigation(path: Path) -> NavigationTree:
    """Load a navigation tree from a YAML file and validate it.

    Parameters
    ----------
    path : Path
        YAML file holding a top-level ``sections`` list.

    Returns
    -------
    NavigationTree
        Immutable tree with the same runtime semantics as the embedded map.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    NavigationError
        If the YAML cannot be parsed, the structure is malformed, or an
        invariant is violated.
    """
    if not path.exists():
        msg = f"Navigation file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Navigation file '{path}' is not valid YAML: {exc}"
        raise NavigationError(msg) from exc
    tree = validate_tree(build_navigation(loaded))
    logger.debug("Loaded %d navigation sections from %s", len(tree), path)
    return tree


def build_navigation(payload: cabc.Mapping[str, typ.Any]) -> NavigationTree:
    """Build a tree from ``{"sections": [{"title", "items": [...]}, ...]}``.

    Only the shape is checked here; see :func:`validate_tree` for the
    cross-item invariants.
    """
    if not isinstance(payload, cabc.Mapping):
        msg = "Top-level navigation structure must be a mapping."
        raise NavigationError(msg)
    sections_raw = payload.get("sections")
    if not isinstance(sections_raw, list):
        msg = "Navigation must define a 'sections' list."
        raise NavigationError(msg)
    return tuple(
        _build_section(raw, f"sections[{index}]")
        for index, raw in enumerate(sections_raw)
    )


def validate_tree(tree: NavigationTree) -> NavigationTree:
    """Return ``tree`` unchanged once every invariant holds.

    Checks that each section has at least one item, that every ``href`` is
    slash-rooted, and that no ``href`` repeats anywhere in the tree (nested
    children included). All problems are reported together.

    Raises
    ------
    NavigationError
        Listing every violation found.
    """
    problems: list[str] = []
    seen: dict[str, str] = {}
    for section in tree:
        if not section.items:
            problems.append(f"section '{section.title}' has no items")
        for item in _walk(section.items):
            if not item.href.startswith("/"):
                problems.append(f"href '{item.href}' must start with '/'")
            if item.href in seen:
                problems.append(
                    f"href '{item.href}' is used by both '{seen[item.href]}' "
                    f"and '{item.title}'"
                )
            else:
                seen[item.href] = item.title
    if problems:
        msg = "Invalid navigation tree: " + "; ".join(problems)
        raise NavigationError(msg)
    return tree


def _walk(items: cabc.Iterable[NavItem]) -> cabc.Iterator[NavItem]:
    for item in items:
        yield item
        yield from _walk(item.children)


def _build_section(raw: object, where: str) -> NavSection:
    if not isinstance(raw, cabc.Mapping):
        msg = f"{where} must be a mapping."
        raise NavigationError(msg)
    title = _required_str(raw, "title", where)
    items_raw = raw.get("items") or []
    if not isinstance(items_raw, list):
        msg = f"{where}.items must be a list."
        raise NavigationError(msg)
    items = tuple(
        _build_item(item, f"{where}.items[{index}]")
        for index, item in enumerate(items_raw)
    )
    return NavSection(title=title, items=items)


def _build_item(raw: object, where: str) -> NavItem:
    if not isinstance(raw, cabc.Mapping):
        msg = f"{where} must be a mapping."
        raise NavigationError(msg)
    children_raw = raw.get("children") or []
    if not isinstance(children_raw, list):
        msg = f"{where}.children must be a list."
        raise NavigationError(msg)
    return NavItem(
        title=_required_str(raw, "title", where),
        href=_required_str(raw, "href", where),
        children=tuple(
            _build_item(child, f"{where}.children[{index}]")
            for index, child in enumerate(children_raw)
        ),
    )


def _required_str(raw: cabc.Mapping[str, typ.Any], key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        msg = f"{where} is missing a '{key}' string."
        raise NavigationError(msg)
    return value.strip()


__all__ = ["build_navigation", "load_navigation", "validate_tree"]
