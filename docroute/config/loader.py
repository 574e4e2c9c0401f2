"""Load router configuration YAML into typed dataclasses."""

from __future__ import annotations

import functools
import operator
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docroute.router.policy import POLICY_NAMES
from docroute.tree.models import NodeKind

from .models import RouterConfig, RouterConfigError


def load_router_config(path: Path | None) -> RouterConfig:
    """Load the YAML configuration describing the page policy.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML file. ``None`` returns the defaults.

    Returns
    -------
    RouterConfig
        Parsed configuration with defaults applied for missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RouterConfigError
        If the policy name, a page kind, or a directory is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docroute.config import load_router_config
    >>> config = load_router_config(Path("docroute.yaml"))  # doctest: +SKIP
    >>> config.policy  # doctest: +SKIP
    'default'
    """
    if path is None:
        return RouterConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    section = loaded.get("router", {}) or {}
    if not isinstance(section, dict):
        msg = "The 'router' section must be a mapping."
        raise RouterConfigError(msg)
    return build_router_config(section)


def build_router_config(payload: typ.Mapping[str, typ.Any]) -> RouterConfig:
    """Build a RouterConfig from a mapping, validating each field."""
    base = RouterConfig()
    policy = str(payload.get("policy", base.policy)).strip()
    if policy not in POLICY_NAMES:
        known = ", ".join(POLICY_NAMES)
        msg = f"Unknown page policy '{policy}'. Known policies: {known}"
        raise RouterConfigError(msg)

    page_kinds = base.page_kinds
    if "page_kinds" in payload:
        page_kinds = _parse_page_kinds(payload["page_kinds"])

    return RouterConfig(
        policy=policy,
        page_kinds=page_kinds,
        asset_directory=_directory(payload, "asset_directory", base.asset_directory),
        media_directory=_directory(payload, "media_directory", base.media_directory),
    )


def _parse_page_kinds(value: object) -> NodeKind:
    """Combine a list of kind names into a single flag."""
    if not isinstance(value, list) or not value:
        msg = "'page_kinds' must be a non-empty list of node kinds."
        raise RouterConfigError(msg)
    kinds: list[NodeKind] = []
    for entry in value:
        try:
            kinds.append(NodeKind.from_string(str(entry)))
        except ValueError as exc:
            raise RouterConfigError(str(exc)) from exc
    return functools.reduce(operator.or_, kinds)


def _directory(payload: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    """Return the directory with surrounding slashes removed; reject empty values."""
    raw = payload.get(key, default)
    text = str(raw).strip().strip("/") if raw is not None else ""
    if not text:
        msg = f"'{key}' must be a non-empty relative path."
        raise RouterConfigError(msg)
    return text


__all__ = ["build_router_config", "load_router_config"]
