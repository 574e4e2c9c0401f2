"""Shared dataclasses and errors used by the router."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docroute.tree.models import Node


class RoutingError(RuntimeError):
    """Base class for malformed-tree conditions detected while routing."""


class BrokenAncestryError(RoutingError):
    """Raised when a ``parent`` link is missing before a page owner is reached."""


class NonProjectRootError(RoutingError):
    """Raised when a tree's parentless node is not the Project root."""


@dc.dataclass(slots=True)
class PageModel:
    """One output document and the nodes composing it.

    Attributes
    ----------
    owner : Node
        The node owning the page.
    document_name : str
        ``/``-separated output path of the page.
    children_in_page : list[Node]
        Direct children of ``owner`` rendered inline on this page.
    children_not_in_page : list[Node]
        Direct children of ``owner`` rendered on their own pages.
    """

    owner: Node
    document_name: str
    children_in_page: list[Node]
    children_not_in_page: list[Node]


__all__ = [
    "BrokenAncestryError",
    "NonProjectRootError",
    "PageModel",
    "RoutingError",
]
