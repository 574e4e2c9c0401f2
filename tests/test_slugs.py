"""Unit tests for the label uniquifier and the per-page slug registry."""

from __future__ import annotations

import gc

from docroute._constants import RESERVED_ANCHORS
from docroute.router import Router, SlugRegistry, Slugger
from docroute.tree import Node, NodeKind


def test_slugger_normalizes_labels() -> None:
    """Labels are lower-cased and stripped of punctuation."""
    slugger = Slugger()
    assert slugger.slug("Getting Started!") == "getting-started"
    assert slugger.slug("Foo-bar") == "foo-bar"


def test_slugger_appends_counter_on_repeat() -> None:
    """Repeated labels receive increasing numeric suffixes."""
    slugger = Slugger()
    issued = [slugger.slug("Example") for _ in range(3)]
    assert issued == ["example", "example-1", "example-2"]


def test_slugger_skips_suffixes_already_issued() -> None:
    """A literal ``foo-1`` label forces the counter past it."""
    slugger = Slugger()
    assert slugger.slug("foo-1") == "foo-1"
    assert slugger.slug("foo") == "foo"
    assert slugger.slug("foo") == "foo-2"


def test_slugger_reserves_identifiers() -> None:
    """Reserved identifiers are never issued again."""
    slugger = Slugger(RESERVED_ANCHORS)
    assert "main" in slugger
    assert slugger.slug("Theme") == "theme-1"


def test_slugger_keeps_unicode_and_falls_back_for_empty_labels() -> None:
    """Unicode survives and empty labels fall back to a fixed anchor."""
    slugger = Slugger()
    assert slugger.slug("Überblick") == "überblick"
    assert slugger.slug("$$") == "anchor"
    assert slugger.slug("!!") == "anchor-1"


def test_registry_memoizes_node_slugs_only() -> None:
    """Node anchors are memoized while heading anchors are not."""
    registry = SlugRegistry()
    owner = Node(NodeKind.CLASS, "Foo")
    node = owner.add_child(NodeKind.METHOD, "run")
    assert registry.node_slug(owner, node, "run") == "run"
    assert registry.node_slug(owner, node, "run") == "run"
    assert registry.header_slug(owner, "run") == "run-1"
    assert registry.header_slug(owner, "run") == "run-2"


def test_registry_state_is_released_with_the_tree() -> None:
    """Per-page state is dropped once its owner is collected."""
    registry = SlugRegistry()
    owner = Node(NodeKind.CLASS, "Foo")
    node = owner.add_child(NodeKind.METHOD, "run")
    registry.node_slug(owner, node, "run")
    assert len(registry._sluggers) == 1

    del owner, node
    gc.collect()
    assert len(registry._sluggers) == 0, "page state should not outlive its owner"
    assert len(registry._slugs) == 0


def test_slugger_treats_case_folded_labels_as_equal() -> None:
    """Labels that only match after case folding still get distinct anchors."""
    slugger = Slugger()
    first = slugger.slug("Straße")
    second = slugger.slug("STRASSE")
    assert first == "straße"
    assert second == "strasse-1"
    assert "STRASSE" in slugger


def test_node_slugs_differ_after_case_folding() -> None:
    """Node anchors on one page stay distinct under ``str.casefold``."""
    project = Node(NodeKind.PROJECT, "MyLib")
    klass = project.add_child(NodeKind.CLASS, "Street")
    members = [
        klass.add_child(NodeKind.PROPERTY, name) for name in ("Straße", "STRASSE")
    ]
    router = Router(project)
    slugs = [router.create_slug(member) for member in members]
    folded = {slug.casefold() for slug in slugs}
    assert len(folded) == len(slugs), f"case-folded anchors collide: {slugs!r}"
