"""Answer section and previous/next queries over a navigation tree.

Both queries are pure functions of the tree and the page path. Section lookup
accepts sub-pages of an item (``/a/b/details`` belongs to the section holding
``/a/b``) while previous/next traversal only matches an item's exact path, so
a sub-page is never treated as its parent item.

Examples
--------
>>> from docsite.navigation import NAVIGATION, find_current_section, find_prev_next
>>> find_current_section(NAVIGATION, "/docs/core-language/functions/details").title
'Core Language'
>>> find_prev_next(NAVIGATION, "/docs/getting-started/introduction").prev is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .models import NavigationTree, NavItem, NavSection


@dc.dataclass(frozen=True, slots=True)
class PrevNext:
    """Neighbours of a page in the flattened navigation sequence."""

    prev: NavItem | None = None
    next: NavItem | None = None

    def as_dict(self) -> dict[str, NavItem]:
        """Return only the neighbours that exist."""
        payload: dict[str, NavItem] = {}
        if self.prev is not None:
            payload["prev"] = self.prev
        if self.next is not None:
            payload["next"] = self.next
        return payload


def flatten_items(tree: NavigationTree) -> list[NavItem]:
    """Return every section's top-level items in tree order.

    Nested ``children`` are not part of the sequence.
    """
    return [item for section in tree for item in section.items]


def find_current_section(tree: NavigationTree, path: str) -> NavSection | None:
    """Return the first section owning ``path`` or one of its ancestors.

    Parameters
    ----------
    tree : NavigationTree
        Sections to search, in declared order.
    path : str
        Absolute route of the page being rendered.

    Returns
    -------
    NavSection | None
        The first section with an item whose ``href`` equals ``path`` or is a
        strict prefix of it followed by ``/``; ``None`` when nothing matches.
    """
    for section in tree:
        if any(_owns(item, path) for item in section.items):
            return section
    return None


def find_prev_next(tree: NavigationTree, path: str) -> PrevNext:
    """Return the items before and after ``path`` in the flattened tree.

    Only an exact ``href`` match counts. A path outside the tree yields an
    empty :class:`PrevNext`, which is a normal outcome for landing pages.
    """
    items = flatten_items(tree)
    index = next(
        (position for position, item in enumerate(items) if item.href == path),
        None,
    )
    if index is None:
        return PrevNext()
    return PrevNext(
        prev=items[index - 1] if index > 0 else None,
        next=items[index + 1] if index < len(items) - 1 else None,
    )


def _owns(item: NavItem, path: str) -> bool:
    return path == item.href or path.startswith(item.href + "/")


__all__ = ["PrevNext", "find_current_section", "find_prev_next", "flatten_items"]
