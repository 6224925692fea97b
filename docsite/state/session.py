"""Own the UI stores for a single page activation."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from docsite._constants import THEME_STORAGE_KEY

from .stores import ClassList, NavStore, SearchStore, ThemeStore

if typ.TYPE_CHECKING:
    from .storage import PreferenceStorage


@dc.dataclass(slots=True)
class PageSession:
    """The three UI stores shared by every component of one page.

    Build it with :meth:`activate` when the page becomes active and pass it
    by reference to whatever dispatches user events. Dropping the session on
    page unload discards the stores.
    """

    theme: ThemeStore
    nav: NavStore = dc.field(default_factory=NavStore)
    search: SearchStore = dc.field(default_factory=SearchStore)

    @classmethod
    def activate(
        cls,
        storage: PreferenceStorage,
        *,
        prefers_dark: cabc.Callable[[], bool] | None = None,
        target: ClassList | None = None,
        storage_key: str = THEME_STORAGE_KEY,
    ) -> PageSession:
        """Create the stores and resolve the theme before anything reads it.

        Parameters
        ----------
        storage : PreferenceStorage
            Persisted preferences for the current visitor.
        prefers_dark : Callable[[], bool], optional
            Platform colour-scheme signal.
        target : ClassList, optional
            Presentation flags to update; a fresh :class:`ClassList` is used
            when omitted.
        storage_key : str, optional
            Key holding the persisted theme.

        Returns
        -------
        PageSession
            Session whose theme has already been initialised exactly once.
        """
        theme = ThemeStore(
            storage=storage,
            prefers_dark=prefers_dark,
            target=target if target is not None else ClassList(),
            storage_key=storage_key,
        )
        theme.init()
        return cls(theme=theme)


__all__ = ["PageSession"]
