"""Static site map and the queries derived from it.

The embedded :data:`NAVIGATION` tree describes every documentation page as
ordered sections of items. :func:`find_current_section` and
:func:`find_prev_next` derive sidebar highlighting and previous/next links for
a page path, while :func:`load_navigation` reads an equivalent tree from YAML
when the site map should be editable outside the code.
"""

from .default import NAVIGATION
from .loader import build_navigation, load_navigation, validate_tree
from .models import NavigationError, NavigationTree, NavItem, NavSection
from .resolver import PrevNext, find_current_section, find_prev_next, flatten_items

__all__ = [
    "NAVIGATION",
    "NavItem",
    "NavSection",
    "NavigationError",
    "NavigationTree",
    "PrevNext",
    "build_navigation",
    "find_current_section",
    "find_prev_next",
    "flatten_items",
    "load_navigation",
    "validate_tree",
]
