"""Reactive UI state contracts consumed by page templates."""

from .session import PageSession
from .storage import MemoryStorage, PreferenceStorage
from .stores import ClassList, NavStore, SearchStore, Theme, ThemeStore

__all__ = [
    "ClassList",
    "MemoryStorage",
    "NavStore",
    "PageSession",
    "PreferenceStorage",
    "SearchStore",
    "Theme",
    "ThemeStore",
]
