"""Cyclopts CLI entrypoint for checking docsite content and navigation.

The ``docsite`` console script defined here validates every content document
against its schema, checks the site map invariants, and answers navigation
queries for a page path. Typical usage runs ``docsite check-content`` and
``docsite check-nav`` in CI before the site build, and ``docsite locate`` when
debugging sidebar highlighting or previous/next links.

Examples
--------
Validate all content beneath the configured content root:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Show navigation context for a page as JSON:

>>> from docsite.cli import app
>>> app(["locate", "/docs/core-language/functions", "--json"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .content import SchemaValidationError, check_collections
from .navigation import (
    NavigationError,
    find_current_section,
    find_prev_next,
    flatten_items,
    load_navigation,
    validate_tree,
)

if typ.TYPE_CHECKING:
    from .navigation import NavigationTree, NavItem

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="docsite", config=cyclopts.config.Env("DOCSITE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _load_site(config: Path | None) -> SiteConfig:
    """Load ``config``, or the default file when present, or built-in defaults."""
    if config is not None:
        return load_site_config(config)
    if DEFAULT_CONFIG.exists():
        return load_site_config(DEFAULT_CONFIG)
    return SiteConfig()


def _resolve_tree(config: Path | None, navigation: Path | None) -> NavigationTree:
    if navigation is not None:
        return load_navigation(navigation)
    return _load_site(config).navigation()


def _tree_or_exit(config: Path | None, navigation: Path | None) -> NavigationTree:
    """Return the validated tree, or print the problem and exit with status 1."""
    try:
        return validate_tree(_resolve_tree(config, navigation))
    except (NavigationError, FileNotFoundError) as exc:
        print(f"error {exc}")
        raise SystemExit(1) from exc


def _describe_item(item: NavItem | None) -> str:
    if item is None:
        return "-"
    return f"{item.title} ({item.href})"


@app.command(help="Validate every content document against its schema.")
def check_content(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="DOCSITE_CONFIG")
    ] = None,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the content root", env_var="DOCSITE_CONTENT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Validate the ``docs`` and ``changelog`` collections.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file. Defaults to
        ``config/site.yaml`` when it exists, otherwise built-in defaults.
    content_dir : Path or None, optional
        Content root holding the collection directories; overrides the
        configured value.
    verbose : bool, optional
        Emit debug logging to stderr.

    Raises
    ------
    SystemExit
        With status 1 when at least one document failed validation.
    """
    _configure_logging(verbose)
    root = content_dir or _load_site(config).content_dir
    report = check_collections(root)
    failed = {path for path, _ in report.failures}
    for path in report.checked:
        if path not in failed:
            print(f"ok {_format_path(path)}")
    for path, error in report.failures:
        print(f"error {_format_path(path)}")
        if isinstance(error, SchemaValidationError):
            for field_error in error.errors:
                print(f"  {field_error}")
        else:
            print(f"  {error}")
    print(f"checked {len(report.checked)} files, {len(report.failures)} failed")
    if not report.ok:
        raise SystemExit(1)


@app.command(help="Check the site map for duplicate, unrooted, or empty entries.")
def check_nav(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="DOCSITE_CONFIG")
    ] = None,
    navigation: typ.Annotated[
        Path | None,
        Parameter(help="Navigation YAML to check instead of the configured one"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Validate the navigation tree and summarise its size.

    Raises
    ------
    SystemExit
        With status 1 when the tree is malformed or cannot be loaded.
    """
    _configure_logging(verbose)
    tree = _tree_or_exit(config, navigation)
    print(f"{len(tree)} sections, {len(flatten_items(tree))} items")


@app.command(help="Show the section and previous/next pages for a path.")
def locate(
    path: typ.Annotated[str, Parameter(help="Absolute page route")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="DOCSITE_CONFIG")
    ] = None,
    navigation: typ.Annotated[
        Path | None, Parameter(help="Navigation YAML to query")
    ] = None,
    json_output: typ.Annotated[
        bool, Parameter(name="--json", help="Emit a JSON object")
    ] = False,
) -> None:
    """Print navigation context for ``path``.

    Paths outside the site map are not an error: the section and both
    neighbours are reported as absent.
    """
    tree = _tree_or_exit(config, navigation)
    section = find_current_section(tree, path)
    neighbours = find_prev_next(tree, path)
    if json_output:
        payload = {
            "path": path,
            "section": section.title if section else None,
            "prev": neighbours.prev.as_dict() if neighbours.prev else None,
            "next": neighbours.next.as_dict() if neighbours.next else None,
        }
        print(msgspec.json.encode(payload).decode("utf-8"))
        return
    print(f"section: {section.title if section else '-'}")
    print(f"prev: {_describe_item(neighbours.prev)}")
    print(f"next: {_describe_item(neighbours.next)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
