"""Page layout, anchors, and relative links for documentation node trees."""

from .anchors import SlugRegistry
from .core import Router, single_page_router
from .models import BrokenAncestryError, NonProjectRootError, PageModel, RoutingError
from .policy import (
    DEFAULT_PAGE_KINDS,
    DEFAULT_POLICY,
    KindPagePolicy,
    PagePolicy,
    SinglePagePolicy,
    find_policy_violations,
    resolve_policy,
)
from .slugger import Slugger

__all__ = [
    "DEFAULT_PAGE_KINDS",
    "DEFAULT_POLICY",
    "BrokenAncestryError",
    "KindPagePolicy",
    "NonProjectRootError",
    "PageModel",
    "PagePolicy",
    "Router",
    "RoutingError",
    "SinglePagePolicy",
    "SlugRegistry",
    "Slugger",
    "find_policy_violations",
    "resolve_policy",
    "single_page_router",
]
