"""Shared fixtures describing small documentation trees."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from docroute.tree import Node, NodeKind


def build_sample_tree() -> SimpleNamespace:
    """Return the MyLib tree: Project -> Module core -> Class Foo -> Method bar."""
    project = Node(NodeKind.PROJECT, "MyLib")
    core = project.add_child(NodeKind.MODULE, "core")
    foo = core.add_child(NodeKind.CLASS, "Foo")
    bar = foo.add_child(NodeKind.METHOD, "bar")
    signature = bar.add_child(NodeKind.CALL_SIGNATURE, "bar")
    return SimpleNamespace(
        project=project, core=core, foo=foo, bar=bar, signature=signature
    )


@pytest.fixture
def sample_tree() -> SimpleNamespace:
    """Provide a fresh MyLib tree for each test."""
    return build_sample_tree()


TREE_YAML = """
name: MyLib
children:
  - kind: Module
    name: core
    children:
      - kind: Class
        name: Foo
        children:
          - kind: Method
            name: bar
      - kind: Interface
        name: Shape
""".strip()


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    """Write the MyLib tree fixture to disk and return its path."""
    path = tmp_path / "tree.yaml"
    path.write_text(TREE_YAML + "\n", encoding="utf-8")
    return path
