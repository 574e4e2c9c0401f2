"""Documentation node trees and YAML fixture loading."""

from .loader import TreeLoadError, build_tree, load_tree
from .models import Node, NodeKind

__all__ = ["Node", "NodeKind", "TreeLoadError", "build_tree", "load_tree"]
