"""Build node trees from YAML fixtures.

The production tree comes from an upstream analysis step; this loader exists so
that the CLI and tests can describe small trees declaratively::

    name: MyLib
    children:
      - kind: Module
        name: core
        children:
          - {kind: Class, name: Foo}
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import Node, NodeKind


class TreeLoadError(ValueError):
    """Raised when a tree fixture is malformed."""


def load_tree(path: Path) -> Node:
    """Load a YAML tree fixture and return its Project root.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TreeLoadError
        If the document is not a mapping or any node is malformed.
    """
    if not path.exists():
        msg = f"Tree file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if not isinstance(loaded, dict):
        msg = f"Tree file '{path}' must contain a mapping at the top level."
        raise TreeLoadError(msg)
    return build_tree(loaded)


def build_tree(payload: typ.Mapping[str, typ.Any]) -> Node:
    """Build a tree from nested mappings; the root is always a Project."""
    root = Node(kind=NodeKind.PROJECT, name=_node_name(payload, "<root>"))
    _attach_children(root, payload.get("children"))
    return root


def _attach_children(parent: Node, children: object) -> None:
    if children is None:
        return
    if not isinstance(children, list):
        msg = f"Children of '{parent.name}' must be a list."
        raise TreeLoadError(msg)
    for payload in children:
        if not isinstance(payload, dict):
            msg = f"Child entries of '{parent.name}' must be mappings."
            raise TreeLoadError(msg)
        name = _node_name(payload, parent.name)
        kind = _node_kind(payload, name)
        child = parent.add_child(kind, name)
        _attach_children(child, payload.get("children"))


def _node_name(payload: typ.Mapping[str, typ.Any], context: str) -> str:
    name = payload.get("name")
    if name is None or not str(name).strip():
        msg = f"Node below '{context}' is missing a name."
        raise TreeLoadError(msg)
    return str(name)


def _node_kind(payload: typ.Mapping[str, typ.Any], name: str) -> NodeKind:
    raw = payload.get("kind")
    if raw is None:
        msg = f"Node '{name}' is missing a kind."
        raise TreeLoadError(msg)
    try:
        kind = NodeKind.from_string(str(raw))
    except ValueError as exc:
        raise TreeLoadError(str(exc)) from exc
    if kind is NodeKind.PROJECT:
        msg = f"Node '{name}' cannot be a Project; only the root is."
        raise TreeLoadError(msg)
    return kind


__all__ = ["TreeLoadError", "build_tree", "load_tree"]
