"""Finite-state stores bound by the presentation layer.

Three independent stores back the page chrome: :class:`ThemeStore` (light or
dark colour scheme), :class:`NavStore` (mobile navigation drawer), and
:class:`SearchStore` (search panel visibility and its query text). Every
operation is total over the store's state space and never raises.

Examples
--------
>>> from docsite.state.stores import SearchStore
>>> search = SearchStore(query="stale")
>>> search.toggle()
>>> (search.open, search.query)
(True, '')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from docsite._constants import (
    DARK_CLASS,
    THEME_DARK,
    THEME_LIGHT,
    THEME_STORAGE_KEY,
    THEMES,
)

if typ.TYPE_CHECKING:
    from .storage import PreferenceStorage

logger = logging.getLogger(__name__)

Theme = typ.Literal["light", "dark"]


@dc.dataclass(slots=True)
class ClassList:
    """Presentation flags observed by the host, like a root element's classes.

    ``mutations`` counts changes that actually altered membership, so
    repeated writes of the same state are observable as no-ops.
    """

    names: set[str] = dc.field(default_factory=set)
    mutations: int = 0

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def toggle(self, name: str, force: bool) -> bool:
        """Set ``name`` present when ``force`` is true, absent otherwise.

        Returns ``True`` when membership changed.
        """
        if (name in self.names) == force:
            return False
        if force:
            self.names.add(name)
        else:
            self.names.discard(name)
        self.mutations += 1
        return True


@dc.dataclass(slots=True)
class ThemeStore:
    """Light/dark colour scheme with a persisted preference.

    Attributes
    ----------
    storage : PreferenceStorage
        Where the chosen theme is persisted and read back from.
    prefers_dark : Callable[[], bool], optional
        Platform colour-scheme signal consulted when nothing was persisted.
    target : ClassList
        Presentation flags receiving the ``dark`` class.
    storage_key : str
        Key under which the preference is stored.
    value : {"light", "dark"}
        Current theme.
    """

    storage: PreferenceStorage
    prefers_dark: cabc.Callable[[], bool] | None = None
    target: ClassList = dc.field(default_factory=ClassList)
    storage_key: str = THEME_STORAGE_KEY
    value: Theme = THEME_LIGHT

    def init(self) -> None:
        """Resolve the theme from storage, then the platform, then ``light``."""
        stored = self.storage.get_item(self.storage_key)
        if stored in THEMES:
            self.value = typ.cast("Theme", stored)
        else:
            if stored is not None:
                logger.warning(
                    "Ignoring unknown persisted theme %r under '%s'",
                    stored,
                    self.storage_key,
                )
            self.value = self._platform_theme()
        self.apply()

    def toggle(self) -> None:
        """Flip between light and dark, persist the choice, and reapply."""
        self.value = THEME_LIGHT if self.value == THEME_DARK else THEME_DARK
        self.storage.set_item(self.storage_key, self.value)
        self.apply()

    def apply(self) -> None:
        """Mirror ``value`` onto the presentation flags. Idempotent."""
        self.target.toggle(DARK_CLASS, self.value == THEME_DARK)

    @property
    def is_dark(self) -> bool:
        return self.value == THEME_DARK

    def _platform_theme(self) -> Theme:
        if self.prefers_dark is not None and self.prefers_dark():
            return THEME_DARK
        return THEME_LIGHT


@dc.dataclass(slots=True)
class NavStore:
    """Visibility of the mobile navigation drawer."""

    open: bool = False

    def toggle(self) -> None:
        self.open = not self.open

    def close(self) -> None:
        self.open = False


@dc.dataclass(slots=True)
class SearchStore:
    """Search panel visibility and the query typed into it.

    Opening always starts from a blank query and closing always clears it;
    there is no way to close the panel while keeping the query.
    """

    open: bool = False
    query: str = ""

    def toggle(self) -> None:
        self.open = not self.open
        if self.open:
            self.query = ""

    def close(self) -> None:
        self.open = False
        self.query = ""


__all__ = ["ClassList", "NavStore", "SearchStore", "Theme", "ThemeStore"]
