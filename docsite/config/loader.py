"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing content and navigation sources.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative paths inside the file are resolved
        against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or value has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.content_dir  # doctest: +SKIP
    PosixPath('config/../src/content')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent
    defaults = _section(raw, "defaults")
    theme = _section(raw, "theme")

    base = SiteConfig()
    content_dir = _optional_path(defaults.get("content_dir"), "defaults.content_dir")
    navigation_path = _optional_path(
        defaults.get("navigation"), "defaults.navigation"
    )
    storage_key = theme.get("storage_key", base.theme_storage_key)
    if not isinstance(storage_key, str) or not storage_key.strip():
        msg = "theme.storage_key must be a non-empty string."
        raise SiteConfigError(msg)

    return SiteConfig(
        content_dir=base_dir / (content_dir or base.content_dir),
        navigation_path=base_dir / navigation_path if navigation_path else None,
        theme_storage_key=storage_key.strip(),
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating null as empty."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _optional_path(value: object | None, where: str) -> Path | None:
    """Return ``value`` as a Path, or None when empty."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{where} must be a path string."
        raise SiteConfigError(msg)
    text = value.strip()
    return Path(text) if text else None


__all__ = ["load_site_config"]
