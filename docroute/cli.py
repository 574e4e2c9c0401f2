"""Cyclopts CLI entrypoint for inspecting the page layout of a node tree.

The ``docroute`` console script loads a YAML tree fixture and an optional
router configuration, then reports which pages the router would emit, how two
nodes link to each other, or where a page policy breaks its own rules. Options
may also be supplied through ``DOCROUTE_*`` environment variables.

Examples
--------
List the pages of a tree:

>>> from docroute.cli import app
>>> app(["pages", "--tree", "tree.yaml"])  # doctest: +SKIP

Resolve a link between two nodes:

>>> app(
...     ["link", "--tree", "tree.yaml", "--source", "core/Foo/bar", "--target", ""]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_router_config
from .router import find_policy_violations
from .tree import load_tree

if typ.TYPE_CHECKING:
    from .router import Router
    from .tree import Node

app = App(name="docroute", config=cyclopts.config.Env("DOCROUTE_", command=False))  # type: ignore[unknown-argument]

TreeOption = typ.Annotated[Path, Parameter(help="Path to the YAML node tree")]
ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to the router configuration")
]


def _load(tree: Path, config: Path | None) -> tuple[Node, Router]:
    """Return the tree root and a router built from the configuration."""
    project = load_tree(tree)
    return project, load_router_config(config).build_router(project)


def _resolve_node(project: Node, path: str) -> Node:
    """Return the node addressed by ``path`` or raise ``ValueError``."""
    node = project.lookup(path)
    if node is None:
        msg = f"No node at '{path}' below '{project.name}'."
        raise ValueError(msg)
    return node


@app.command(help="List every page the router emits for a tree.")
def pages(*, tree: TreeOption, config: ConfigOption = None) -> None:
    """Print one ``<document name>\\t<kind> <name>`` line per page.

    Parameters
    ----------
    tree : Path
        YAML node tree fixture.
    config : Path or None, optional
        Router configuration; defaults apply when omitted.
    """
    _project, router = _load(tree, config)
    for page in router.pages():
        print(f"{page.document_name}\t{page.owner.kind_string} {page.owner.name}")


@app.command(help="Print the relative link from one node to another.")
def link(
    *,
    tree: TreeOption,
    source: typ.Annotated[str, Parameter(help="Name path of the linking node")],
    target: typ.Annotated[str, Parameter(help="Name path of the linked node")],
    config: ConfigOption = None,
) -> None:
    """Print ``router.create_link(source, target)``.

    Name paths are ``/``-separated node names below the Project root; an
    empty path addresses the root itself.

    Raises
    ------
    ValueError
        If either name path does not resolve to a node.
    """
    project, router = _load(tree, config)
    print(
        router.create_link(
            _resolve_node(project, source), _resolve_node(project, target)
        )
    )


@app.command(help="Report nodes that own a page below a node that does not.")
def check(*, tree: TreeOption, config: ConfigOption = None) -> None:
    """Print page-policy violations and exit with status 1 if any exist."""
    project, router = _load(tree, config)
    violations = list(find_policy_violations(project, router.policy))
    for node in violations:
        print(f"{node.kind_string} {node.name}: owns a page below an inline node")
    if violations:
        raise SystemExit(1)
    print("ok")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docroute`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
