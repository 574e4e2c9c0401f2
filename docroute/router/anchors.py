"""Per-page slug registry.

Each page owner gets its own :class:`Slugger`, pre-seeded with the anchors the
page chrome already uses, and a memo of the slugs handed out for nodes. Both
are held in weak-keyed maps so they disappear together with the tree.
"""

from __future__ import annotations

import typing as typ
import weakref

from docroute._constants import RESERVED_ANCHORS

from .slugger import Slugger

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docroute.tree.models import Node


class SlugRegistry:
    """Hand out in-page anchors, one uniquifier and memo per page owner."""

    def __init__(self, reserved: cabc.Iterable[str] = RESERVED_ANCHORS) -> None:
        self._reserved = tuple(reserved)
        self._sluggers: weakref.WeakKeyDictionary[Node, Slugger] = (
            weakref.WeakKeyDictionary()
        )
        self._slugs: weakref.WeakKeyDictionary[
            Node, weakref.WeakKeyDictionary[Node, str]
        ] = weakref.WeakKeyDictionary()

    def slugger_for(self, owner: Node) -> Slugger:
        """Return the page uniquifier for ``owner``, creating it on first use."""
        slugger = self._sluggers.get(owner)
        if slugger is None:
            slugger = Slugger(self._reserved)
            self._sluggers[owner] = slugger
        return slugger

    def header_slug(self, owner: Node, header: str) -> str:
        """Return a fresh anchor for a heading; never memoized."""
        return self.slugger_for(owner).slug(header)

    def node_slug(self, owner: Node, node: Node, label: str) -> str:
        """Return the anchor for ``node`` on ``owner``'s page, issuing it once."""
        slugger = self.slugger_for(owner)
        slugs = self._slugs.get(owner)
        if slugs is None:
            slugs = weakref.WeakKeyDictionary()
            self._slugs[owner] = slugs
        slug = slugs.get(node)
        if slug is None:
            slug = slugger.slug(label)
            slugs[node] = slug
        return slug


__all__ = ["SlugRegistry"]
