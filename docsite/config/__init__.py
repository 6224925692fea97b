"""Load and validate site configuration YAML for docsite.

This subpackage parses the project's ``site.yaml`` file and produces a
:class:`SiteConfig` naming the content root, an optional external site map,
and the key under which the theme preference is persisted. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> len(site.navigation())  # doctest: +SKIP
8
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
