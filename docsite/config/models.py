"""Typed dataclasses describing docsite configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docsite._constants import THEME_STORAGE_KEY
from docsite.navigation import NAVIGATION, NavigationTree, load_navigation


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Where content and the site map live, plus UI store settings."""

    content_dir: Path = Path("src/content")
    navigation_path: Path | None = None
    theme_storage_key: str = THEME_STORAGE_KEY

    def navigation(self) -> NavigationTree:
        """Return the configured site map, or the embedded one by default."""
        if self.navigation_path is None:
            return NAVIGATION
        return load_navigation(self.navigation_path)


__all__ = ["SiteConfig", "SiteConfigError"]
