"""Typed dataclasses describing router configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docroute._constants import DEFAULT_ASSET_DIRECTORY, DEFAULT_MEDIA_DIRECTORY
from docroute.router.core import Router
from docroute.router.policy import DEFAULT_PAGE_KINDS, resolve_policy

if typ.TYPE_CHECKING:
    from docroute.router.policy import PagePolicy
    from docroute.tree.models import Node, NodeKind


class RouterConfigError(ValueError):
    """Raised when the router configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RouterConfig:
    """A fully resolved router definition sourced from YAML config."""

    policy: str = "default"
    page_kinds: NodeKind = DEFAULT_PAGE_KINDS
    asset_directory: str = DEFAULT_ASSET_DIRECTORY
    media_directory: str = DEFAULT_MEDIA_DIRECTORY

    def build_policy(self) -> PagePolicy:
        """Return the page policy described by this configuration."""
        try:
            return resolve_policy(
                self.policy,
                page_kinds=self.page_kinds,
                asset_directory=self.asset_directory,
                media_directory=self.media_directory,
            )
        except ValueError as exc:
            raise RouterConfigError(str(exc)) from exc

    def build_router(self, project: Node) -> Router:
        """Return a router for ``project`` using the configured policy."""
        return Router(project, policy=self.build_policy())


__all__ = ["RouterConfig", "RouterConfigError"]
