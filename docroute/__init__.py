"""Page layout and cross-reference routing for documentation trees.

This package decides which documentation nodes get their own output page,
names those pages, hands out collision-free in-page anchors, and resolves
relative links between any two nodes. Rendering and file writing stay with the
caller; everything here is pure computation over an already built tree.

Exports
-------
- ``Router``: the routing facade bound to one Project tree.
- ``Node`` / ``NodeKind``: the tree the router consumes.
- ``KindPagePolicy`` / ``SinglePagePolicy``: bundled page policies.

Examples
--------
>>> from docroute import Node, NodeKind, Router
>>> project = Node(NodeKind.PROJECT, "MyLib")
>>> core = project.add_child(NodeKind.MODULE, "core")
>>> Router(project).get_document_name(core)
'Module.core.html'
"""

from __future__ import annotations

from .router import (
    BrokenAncestryError,
    KindPagePolicy,
    NonProjectRootError,
    PageModel,
    Router,
    RoutingError,
    SinglePagePolicy,
    single_page_router,
)
from .tree import Node, NodeKind

__all__ = [
    "BrokenAncestryError",
    "KindPagePolicy",
    "Node",
    "NodeKind",
    "NonProjectRootError",
    "PageModel",
    "Router",
    "RoutingError",
    "SinglePagePolicy",
    "single_page_router",
]
