"""Typed dataclasses describing the documentation site map."""

from __future__ import annotations

import dataclasses as dc


class NavigationError(ValueError):
    """Raised when a navigation tree is malformed or violates its invariants."""


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A single navigable page entry."""

    title: str
    href: str
    children: tuple[NavItem, ...] = ()

    def as_dict(self) -> dict[str, object]:
        """Return a plain mapping, omitting ``children`` when empty."""
        payload: dict[str, object] = {"title": self.title, "href": self.href}
        if self.children:
            payload["children"] = [child.as_dict() for child in self.children]
        return payload


@dc.dataclass(frozen=True, slots=True)
class NavSection:
    """An ordered grouping of items displayed together in the sidebar."""

    title: str
    items: tuple[NavItem, ...]


NavigationTree = tuple[NavSection, ...]


__all__ = ["NavItem", "NavSection", "NavigationError", "NavigationTree"]
