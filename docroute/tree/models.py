"""Documentation node tree consumed by the router.

Nodes are plain dataclasses compared and hashed by identity so that the router
can key per-page state on them with weak references. The tree is built once by
an upstream collaborator (or by :mod:`docroute.tree.loader` for fixtures) and
is treated as read-only while routing.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class NodeKind(enum.Flag):
    """Kinds of documentation nodes.

    Members are bit flags so that several kinds can be tested at once with
    :meth:`Node.kind_of`. ``SIGNATURE`` groups every signature-like kind; those
    nodes always share the name of their parent.
    """

    PROJECT = 0x1
    MODULE = 0x2
    NAMESPACE = 0x4
    ENUM = 0x8
    ENUM_MEMBER = 0x10
    VARIABLE = 0x20
    FUNCTION = 0x40
    CLASS = 0x80
    INTERFACE = 0x100
    CONSTRUCTOR = 0x200
    PROPERTY = 0x400
    METHOD = 0x800
    CALL_SIGNATURE = 0x1000
    INDEX_SIGNATURE = 0x2000
    CONSTRUCTOR_SIGNATURE = 0x4000
    PARAMETER = 0x8000
    TYPE_LITERAL = 0x10000
    TYPE_PARAMETER = 0x20000
    ACCESSOR = 0x40000
    GET_SIGNATURE = 0x80000
    SET_SIGNATURE = 0x100000
    TYPE_ALIAS = 0x200000
    REFERENCE = 0x400000

    SIGNATURE = (
        CALL_SIGNATURE
        | INDEX_SIGNATURE
        | CONSTRUCTOR_SIGNATURE
        | GET_SIGNATURE
        | SET_SIGNATURE
    )

    @property
    def kind_string(self) -> str:
        """Return the PascalCase label used in filenames (``"CallSignature"``)."""
        name = self.name or ""
        return "".join(part.capitalize() for part in name.split("_"))

    @classmethod
    def from_string(cls, value: str) -> NodeKind:
        """Parse ``"Class"``, ``"class"``, ``"call-signature"`` or ``"CALL_SIGNATURE"``.

        Raises
        ------
        ValueError
            If ``value`` does not name a known kind.
        """
        wanted = _normalize_kind_name(value)
        for name, member in cls.__members__.items():
            if _normalize_kind_name(name) == wanted:
                return member
        msg = f"Unknown node kind '{value}'."
        raise ValueError(msg)


def _normalize_kind_name(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


@dc.dataclass(eq=False, slots=True, weakref_slot=True)
class Node:
    """A unit in the documentation hierarchy.

    Attributes
    ----------
    kind : NodeKind
        Kind tag of the node; the tree root is always ``NodeKind.PROJECT``.
    name : str
        Display label. Not unique among siblings and not filename-safe.
    parent : Node or None
        Back-reference to the containing node, ``None`` only for the root.
    children : list[Node]
        Ordered child nodes, empty for leaves.
    """

    kind: NodeKind
    name: str
    parent: Node | None = dc.field(default=None, repr=False)
    children: list[Node] = dc.field(default_factory=list, repr=False)

    @property
    def kind_string(self) -> str:
        """Return the filename kind qualifier for this node."""
        return self.kind.kind_string

    def kind_of(self, kind: NodeKind) -> bool:
        """Return ``True`` when this node's kind is one of ``kind``."""
        return bool(self.kind & kind)

    def is_project(self) -> bool:
        """Return ``True`` for the Project root."""
        return self.kind_of(NodeKind.PROJECT)

    def add_child(self, kind: NodeKind, name: str) -> Node:
        """Create a child node, attach it to this node, and return it."""
        child = Node(kind=kind, name=name, parent=self)
        self.children.append(child)
        return child

    def walk(self) -> cabc.Iterator[Node]:
        """Yield this node and all descendants in depth-first pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def lookup(self, path: str) -> Node | None:
        """Resolve a ``/``-separated name path below this node.

        Each segment picks the first child with a matching name. An empty path
        returns this node.
        """
        node: Node | None = self
        for segment in (part for part in path.split("/") if part):
            if node is None:
                break
            node = next(
                (child for child in node.children if child.name == segment), None
            )
        return node


__all__ = ["Node", "NodeKind"]
