"""Router deciding where each documentation node lives and how to reach it.

:class:`Router` is a fixed algorithm parameterized by a page policy. Given a
Project tree it produces output paths, in-page anchors, and relative links that
the rendering layer uses verbatim. Paths always use ``/`` separators, so the
same string works as a URL and, after separator translation, as a file path.

Example
-------
>>> from docroute.router import Router
>>> from docroute.tree import Node, NodeKind
>>> project = Node(NodeKind.PROJECT, "MyLib")
>>> core = project.add_child(NodeKind.MODULE, "core")
>>> foo = core.add_child(NodeKind.CLASS, "Foo")
>>> bar = foo.add_child(NodeKind.METHOD, "bar")
>>> router = Router(project)
>>> router.get_document_name(bar)
'core/Class.Foo.html'
>>> router.create_link(bar, project)
'../index.html'
"""

from __future__ import annotations

import posixpath
import re
import typing as typ

from docroute._constants import DOCUMENT_SUFFIX, INDEX_FILENAME
from docroute.tree.models import NodeKind

from .anchors import SlugRegistry
from .models import BrokenAncestryError, NonProjectRootError, PageModel
from .policy import DEFAULT_POLICY, SinglePagePolicy

if typ.TYPE_CHECKING:
    from docroute.tree.models import Node

    from .policy import PagePolicy

UNSAFE_FILENAME_PATTERN = re.compile(r"[^A-Za-z0-9._-]|^-")


class Router:
    """Resolve pages, filenames, anchors, and links for one node tree."""

    def __init__(self, project: Node, policy: PagePolicy = DEFAULT_POLICY) -> None:
        """Bind the router to ``project`` and the page policy to apply.

        Parameters
        ----------
        project : Node
            Root of the tree; must be a Project node.
        policy : PagePolicy, optional
            Page-ownership policy; defaults to :data:`DEFAULT_POLICY`.

        Raises
        ------
        NonProjectRootError
            If ``project`` is not a Project node.
        """
        if not project.is_project():
            msg = f"Cannot route a tree rooted at non-Project node '{project.name}'."
            raise NonProjectRootError(msg)
        self.project = project
        self.policy = policy
        self._anchors = SlugRegistry()

    def create_link(self, source: Node, target: Node) -> str:
        """Return a link from ``source``'s page to ``target``, with anchor if needed."""
        link = self._relative(
            self.get_document_name(source), self.get_document_name(target)
        )
        slug = self.create_slug(target)
        return f"{link}#{slug}" if slug else link

    def create_slug(self, node: Node, header: str | None = None) -> str:
        """Return an in-page anchor for ``node`` or for a heading on its page.

        Anchors are unique, case-insensitively, among all anchors issued for the
        page. Without ``header`` the same anchor is returned on every call for
        the same node, and the page owner itself gets ``""``. With ``header`` a
        new anchor is issued on every call, so callers must request exactly one
        per heading occurrence.

        Raises
        ------
        BrokenAncestryError
            If ``node`` is disconnected from its page owner.
        """
        owner = self.document_owner_of(node)
        if node is owner and not header:
            return ""
        if header:
            return self._anchors.header_slug(owner, header)
        return self._anchors.node_slug(owner, node, self._anchor_label(node, owner))

    def create_asset_link(self, source: Node, asset: str) -> str:
        """Return a link from ``source``'s page to a file in the asset directory."""
        return self._relative(
            self.get_document_name(self.document_owner_of(source)),
            posixpath.join(self.get_asset_directory(), asset),
        )

    def create_media_link(self, source: Node, media: str) -> str:
        """Return a link from ``source``'s page to a file in the media directory."""
        return self._relative(
            self.get_document_name(self.document_owner_of(source)),
            posixpath.join(self.get_media_directory(), media),
        )

    def get_asset_directory(self) -> str:
        """Return the asset directory relative to the output root."""
        return self.policy.get_asset_directory()

    def get_media_directory(self) -> str:
        """Return the media directory relative to the output root."""
        return self.policy.get_media_directory()

    def has_own_document(self, node: Node) -> bool:
        """Return ``True`` when ``node`` is rendered on its own page."""
        return self.policy.has_own_document(node)

    def get_document_name(self, node: Node) -> str:
        """Return the output path of the page containing ``node``.

        Produces ``mod/ns/Class.Foo.html`` for a class ``Foo`` in namespace
        ``ns`` of module ``mod``, or ``mod/ns/index.html`` for the namespace
        itself when some of its children own pages. The kind qualifier keeps
        an interface and a namespace of the same name apart.

        Raises
        ------
        BrokenAncestryError
            If ``node`` has no page-owning ancestor.
        NonProjectRootError
            If the page owner does not descend from a Project root.
        """
        owner = self.document_owner_of(node)
        parts: list[str] = []
        current = owner
        while current.parent is not None:
            parts.append(self.safe_filename(current.name))
            current = current.parent
        if not current.is_project():
            msg = (
                f"Cannot name the document of '{owner.name}': its root "
                f"'{current.name}' is not a Project."
            )
            raise NonProjectRootError(msg)
        parts.reverse()

        if owner.is_project() or self._any_children_have_own_document(owner):
            return "/".join([*parts, INDEX_FILENAME])

        filename = (
            f"{owner.kind_string}.{self.safe_filename(owner.name)}{DOCUMENT_SUFFIX}"
        )
        return "/".join([*parts[:-1], filename])

    def get_children_in_page(self, node: Node) -> list[Node]:
        """Return direct children rendered inline on ``node``'s page."""
        return [child for child in node.children if not self.has_own_document(child)]

    def get_children_not_in_page(self, node: Node) -> list[Node]:
        """Return direct children rendered on pages of their own."""
        return [child for child in node.children if self.has_own_document(child)]

    def document_owner_of(self, node: Node) -> Node:
        """Return the node whose page ``node`` is rendered on.

        Raises
        ------
        BrokenAncestryError
            If the parent chain ends before an accepted node is found.
        """
        current = node
        while not self.has_own_document(current):
            if current.parent is None:
                msg = f"Rendered node '{node.name}' has no parent with a document."
                raise BrokenAncestryError(msg)
            current = current.parent
        return current

    def pages(self) -> list[PageModel]:
        """Return every page of the tree in depth-first pre-order."""
        return [
            PageModel(
                owner=node,
                document_name=self.get_document_name(node),
                children_in_page=self.get_children_in_page(node),
                children_not_in_page=self.get_children_not_in_page(node),
            )
            for node in self.project.walk()
            if self.has_own_document(node)
        ]

    @staticmethod
    def safe_filename(name: str) -> str:
        """Replace characters outside ``[A-Za-z0-9._-]`` and a leading ``-``.

        Empty and dot-only names (``"."``, ``".."``) would address the current
        or parent directory, so every character of them becomes ``_``.
        """
        if not name.strip("."):
            return "_" * max(len(name), 1)
        return UNSAFE_FILENAME_PATTERN.sub("_", name)

    def _anchor_label(self, node: Node, owner: Node) -> str:
        """Join the names between ``owner`` and ``node``, skipping signatures."""
        parts: list[str] = []
        current = node
        while current is not owner:
            # Signatures always repeat their parent's name.
            if not current.kind_of(NodeKind.SIGNATURE):
                parts.append(current.name)
            if current.parent is None:
                msg = (
                    f"Node '{node.name}' is disconnected from its page "
                    f"owner '{owner.name}'."
                )
                raise BrokenAncestryError(msg)
            current = current.parent
        parts.reverse()
        return "-".join(parts)

    def _any_children_have_own_document(self, node: Node) -> bool:
        return any(self.has_own_document(child) for child in node.children)

    @staticmethod
    def _relative(from_document: str, target: str) -> str:
        """Return ``target`` relative to the directory holding ``from_document``."""
        start = posixpath.join("/", posixpath.dirname(from_document))
        return posixpath.relpath(posixpath.join("/", target), start)


def single_page_router(project: Node) -> Router:
    """Return a router rendering the whole tree on the Project's page."""
    return Router(project, policy=SinglePagePolicy())


__all__ = ["UNSAFE_FILENAME_PATTERN", "Router", "single_page_router"]
