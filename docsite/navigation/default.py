"""The site map shipped with the documentation site.

The tree is built once at import time from frozen dataclasses and is never
mutated afterwards. Section order and item order define both the sidebar and
the previous/next traversal.
"""

from __future__ import annotations

from .models import NavigationTree, NavItem, NavSection


def _section(title: str, *items: tuple[str, str]) -> NavSection:
    return NavSection(
        title=title,
        items=tuple(NavItem(title=label, href=href) for label, href in items),
    )


NAVIGATION: NavigationTree = (
    _section(
        "Getting Started",
        ("Introduction", "/docs/getting-started/introduction"),
        ("Installation", "/docs/getting-started/installation"),
        ("Quick Start", "/docs/getting-started/quick-start"),
        ("REPL", "/docs/getting-started/repl"),
    ),
    _section(
        "Core Language",
        ("Syntax Basics", "/docs/core-language/syntax-basics"),
        ("Data Types", "/docs/core-language/data-types"),
        ("Operators", "/docs/core-language/operators"),
        ("Variables", "/docs/core-language/variables"),
        ("Functions", "/docs/core-language/functions"),
        ("Records", "/docs/core-language/records"),
        ("Control Flow", "/docs/core-language/control-flow"),
    ),
    _section(
        "Data Structures",
        ("Arrays & Tensors", "/docs/data-structures/arrays-tensors"),
        ("Indexing & Slicing", "/docs/data-structures/indexing-slicing"),
        ("Strings", "/docs/data-structures/strings"),
    ),
    _section(
        "Functional Programming",
        (
            "Higher-Order Functions",
            "/docs/functional-programming/higher-order-functions",
        ),
        ("Do Blocks", "/docs/functional-programming/do-blocks"),
        ("Recursion", "/docs/functional-programming/recursion"),
    ),
    _section(
        "Mathematical Computing",
        (
            "Mathematical Functions",
            "/docs/mathematical-computing/mathematical-functions",
        ),
        ("Linear Algebra", "/docs/mathematical-computing/linear-algebra"),
        ("Complex Numbers", "/docs/mathematical-computing/complex-numbers"),
        ("Numerical Analysis", "/docs/mathematical-computing/numerical-analysis"),
        ("Statistics", "/docs/mathematical-computing/statistics"),
    ),
    _section(
        "Specialized Modules",
        ("DSP", "/docs/specialized-modules/dsp"),
        ("Graph Theory", "/docs/specialized-modules/graph-theory"),
        ("Optimization", "/docs/specialized-modules/optimization"),
        ("Utilities", "/docs/specialized-modules/utilities"),
    ),
    _section(
        "Advanced Topics",
        ("Best Practices", "/docs/advanced-topics/best-practices"),
        ("Examples", "/docs/advanced-topics/examples"),
        ("Performance", "/docs/advanced-topics/performance"),
        ("Mutability", "/docs/advanced-topics/mutability"),
        ("I/O & Persistence", "/docs/advanced-topics/io-persistence"),
        ("Modules", "/docs/advanced-topics/modules"),
        ("While Loops", "/docs/advanced-topics/while-loops"),
        ("Type System", "/docs/advanced-topics/type-system"),
        ("Error Handling", "/docs/advanced-topics/error-handling"),
        ("Pattern Matching", "/docs/advanced-topics/pattern-matching"),
        ("Destructuring", "/docs/advanced-topics/destructuring"),
    ),
    _section(
        "Reference",
        ("Language Reference", "/docs/reference/language-reference"),
        ("Standard Library", "/docs/reference/standard-library"),
        ("CLI Reference", "/docs/reference/cli-reference"),
    ),
)


__all__ = ["NAVIGATION"]
