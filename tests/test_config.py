"""Unit tests for loading router configuration YAML."""

from __future__ import annotations

import typing as typ

import pytest

from docroute.config import (
    RouterConfig,
    RouterConfigError,
    build_router_config,
    load_router_config,
)
from docroute.router import KindPagePolicy, SinglePagePolicy
from docroute.tree import NodeKind

if typ.TYPE_CHECKING:
    from pathlib import Path
    from types import SimpleNamespace


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "docroute.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_without_file() -> None:
    """Without a file the default configuration applies."""
    config = load_router_config(None)
    assert config == RouterConfig()
    assert isinstance(config.build_policy(), KindPagePolicy)


def test_load_full_config(tmp_path: Path, sample_tree: SimpleNamespace) -> None:
    """Every configured key reaches the built router."""
    path = _write_config(
        tmp_path,
        """
router:
  policy: default
  page_kinds: [Module]
  asset_directory: /static/
  media_directory: img
""",
    )
    config = load_router_config(path)
    assert config.page_kinds is NodeKind.MODULE
    assert config.asset_directory == "static", (
        f"expected slashes to be stripped, got {config.asset_directory!r}"
    )
    router = config.build_router(sample_tree.project)
    assert router.get_document_name(sample_tree.bar) == "Module.core.html"
    assert router.create_media_link(sample_tree.bar, "a.png") == "img/a.png"


def test_single_page_config(tmp_path: Path, sample_tree: SimpleNamespace) -> None:
    """The single-page policy can be selected by name."""
    path = _write_config(tmp_path, "router:\n  policy: single-page\n")
    config = load_router_config(path)
    assert isinstance(config.build_policy(), SinglePagePolicy)
    router = config.build_router(sample_tree.project)
    assert router.get_document_name(sample_tree.foo) == "index.html"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty document falls back to the defaults."""
    path = _write_config(tmp_path, "# nothing here")
    assert load_router_config(path) == RouterConfig()


def test_missing_file(tmp_path: Path) -> None:
    """A missing configuration file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_router_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A non-mapping document raises TypeError."""
    path = _write_config(tmp_path, "- router")
    with pytest.raises(TypeError):
        load_router_config(path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"policy": "per-member"}, "Unknown page policy"),
        ({"page_kinds": ["Widget"]}, "Unknown node kind"),
        ({"page_kinds": []}, "non-empty list"),
        ({"page_kinds": "Class"}, "non-empty list"),
        ({"asset_directory": ""}, "asset_directory"),
        ({"media_directory": "/"}, "media_directory"),
    ],
)
def test_invalid_values(payload: dict[str, typ.Any], message: str) -> None:
    """Invalid configuration values raise RouterConfigError."""
    with pytest.raises(RouterConfigError, match=message):
        build_router_config(payload)


def test_unknown_policy_on_dataclass() -> None:
    """Building an unknown policy raises RouterConfigError."""
    with pytest.raises(RouterConfigError):
        RouterConfig(policy="nope").build_policy()
