"""Common literal values used across docsite.

These constants keep document kinds, collection names, and theme identifiers
centralized so the schema, loaders, stores, and tests can import the same
values without drifting. Intended for internal use within the docsite package.

Examples
--------
>>> from docsite import _constants
>>> _constants.COLLECTION_KINDS["changelog"]
'changelog_entry'
>>> _constants.THEME_DARK in _constants.THEMES
True
"""

DOC_KIND = "doc"
CHANGELOG_KIND = "changelog_entry"

COLLECTION_KINDS: dict[str, str] = {
    "docs": DOC_KIND,
    "changelog": CHANGELOG_KIND,
}
CONTENT_SUFFIXES = (".md", ".mdx")

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEMES = (THEME_LIGHT, THEME_DARK)
THEME_STORAGE_KEY = "theme"
DARK_CLASS = "dark"
