"""Page-ownership policies deciding which nodes get their own document.

A policy is the single customization seam of the router. It answers
:meth:`has_own_document` and supplies the asset and media directories; every
other routing operation derives from those answers.

Rules a policy must follow:

1. If ``False`` is returned for a node, ``False`` must be returned for all of
   its descendants.
2. If ``True`` is returned for a node, its children may return either value.
3. ``True`` must be returned for the Project root.

Example
-------
>>> from docroute.router.policy import KindPagePolicy
>>> from docroute.tree import Node, NodeKind
>>> project = Node(NodeKind.PROJECT, "MyLib")
>>> KindPagePolicy().has_own_document(project.add_child(NodeKind.CLASS, "Foo"))
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docroute._constants import DEFAULT_ASSET_DIRECTORY, DEFAULT_MEDIA_DIRECTORY
from docroute.tree.models import Node, NodeKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_PAGE_KINDS = (
    NodeKind.MODULE | NodeKind.NAMESPACE | NodeKind.CLASS | NodeKind.INTERFACE
)


class PagePolicy(typ.Protocol):
    """Capability set the router is parameterized with."""

    def has_own_document(self, node: Node) -> bool:
        """Return ``True`` when ``node`` is rendered on its own page."""
        ...

    def get_asset_directory(self) -> str:
        """Return the asset directory relative to the output root."""
        ...

    def get_media_directory(self) -> str:
        """Return the media directory relative to the output root."""
        ...


@dc.dataclass(frozen=True, slots=True)
class KindPagePolicy:
    """Give a page to the Project root and to every node of ``page_kinds``."""

    page_kinds: NodeKind = DEFAULT_PAGE_KINDS
    asset_directory: str = DEFAULT_ASSET_DIRECTORY
    media_directory: str = DEFAULT_MEDIA_DIRECTORY

    def has_own_document(self, node: Node) -> bool:
        """Return ``True`` for the Project root and the configured kinds."""
        return node.kind_of(self.page_kinds | NodeKind.PROJECT)

    def get_asset_directory(self) -> str:
        """Return the configured asset directory."""
        return self.asset_directory

    def get_media_directory(self) -> str:
        """Return the configured media directory."""
        return self.media_directory


@dc.dataclass(frozen=True, slots=True)
class SinglePagePolicy:
    """Collapse the whole tree onto the Project root's page."""

    asset_directory: str = DEFAULT_ASSET_DIRECTORY
    media_directory: str = DEFAULT_MEDIA_DIRECTORY

    def has_own_document(self, node: Node) -> bool:
        """Return ``True`` only for the Project root."""
        return node.is_project()

    def get_asset_directory(self) -> str:
        """Return the configured asset directory."""
        return self.asset_directory

    def get_media_directory(self) -> str:
        """Return the configured media directory."""
        return self.media_directory


DEFAULT_POLICY = KindPagePolicy()
POLICY_NAMES: tuple[str, ...] = ("default", "single-page")


def resolve_policy(
    name: str,
    *,
    page_kinds: NodeKind | None = None,
    asset_directory: str = DEFAULT_ASSET_DIRECTORY,
    media_directory: str = DEFAULT_MEDIA_DIRECTORY,
) -> PagePolicy:
    """Return the policy registered as ``name``.

    Parameters
    ----------
    name : str
        ``"default"`` or ``"single-page"``.
    page_kinds : NodeKind, optional
        Kinds owning a page under the default policy; ignored by
        ``"single-page"``.
    asset_directory, media_directory : str, optional
        Directory overrides passed to the policy.

    Raises
    ------
    ValueError
        If ``name`` is not a registered policy.
    """
    match name:
        case "default":
            return KindPagePolicy(
                page_kinds=DEFAULT_PAGE_KINDS if page_kinds is None else page_kinds,
                asset_directory=asset_directory,
                media_directory=media_directory,
            )
        case "single-page":
            return SinglePagePolicy(
                asset_directory=asset_directory, media_directory=media_directory
            )
        case _:
            known = ", ".join(POLICY_NAMES)
            msg = f"Unknown page policy '{name}'. Known policies: {known}"
            raise ValueError(msg)


def find_policy_violations(root: Node, policy: PagePolicy) -> cabc.Iterator[Node]:
    """Yield nodes given a page although an ancestor was denied one."""
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, ancestor_denied = stack.pop()
        owns = policy.has_own_document(node)
        if owns and ancestor_denied:
            yield node
        denied = ancestor_denied or not owns
        stack.extend((child, denied) for child in reversed(node.children))


__all__ = [
    "DEFAULT_PAGE_KINDS",
    "DEFAULT_POLICY",
    "POLICY_NAMES",
    "KindPagePolicy",
    "PagePolicy",
    "SinglePagePolicy",
    "find_policy_violations",
    "resolve_policy",
]
