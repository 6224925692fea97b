"""Persistence seam for user preferences such as the colour theme."""

from __future__ import annotations

import typing as typ


class PreferenceStorage(typ.Protocol):
    """Key/value store for persisted preferences.

    Browsers back this with ``localStorage``; the host supplies whatever
    mechanism it has. Reads of unknown keys return ``None``.
    """

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Dict-backed :class:`PreferenceStorage` for tests and server contexts."""

    def __init__(self, initial: typ.Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def __repr__(self) -> str:
        return f"MemoryStorage({self._items!r})"


__all__ = ["MemoryStorage", "PreferenceStorage"]
