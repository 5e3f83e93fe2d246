from __future__ import annotations

"""
Unit tests for the documentation Tree Model.

Verifies:
1. Trail composition never includes the item's own slug.
2. Language segment injection is idempotent.
3. Parent back-references are weak and read-only.
"""

import gc

import pytest

from docscompiler.domain.languages import ClientType
from docscompiler.domain.tree_models import (
    Document,
    Folder,
    compose_trail,
    compose_virtual_trail,
    inject_language_segment,
    iter_tree,
    strip_extension,
)


@pytest.mark.parametrize("parent_trail, parent_slug, expected", [
    ("", "", ""),
    ("", "guide", "guide"),
    ("guide", "client", "guide/client"),
    ("guide\\client", "api", "guide/client/api"),
    ("guide/", "/api/", "guide/api"),
])
def test_compose_trail_joins_ancestor_segments(parent_trail, parent_slug, expected):
    assert compose_trail(parent_trail, parent_slug) == expected


def test_compose_trail_excludes_own_slug():
    """The child's slug must never end up in its own trail."""
    parent = Folder(title="Guide", slug="guide", trail="docs")
    child = Document(title="Intro", slug="intro.markdown", owner=parent)

    child.trail = compose_trail(parent.trail, parent.slug)

    assert child.trail == "docs/guide"
    assert not child.trail.endswith(child.slug)


def test_compose_virtual_trail_injects_language_once():
    assert compose_virtual_trail("", "guide", ClientType.JAVA) == "guide/Java"
    assert compose_virtual_trail("guide/Java", "api", ClientType.JAVA) == "guide/Java/api"


def test_compose_virtual_trail_none_language_matches_trail():
    assert compose_virtual_trail("guide", "api", ClientType.NONE) == compose_trail("guide", "api")


@pytest.mark.parametrize("language", [ClientType.JAVA, ClientType.DOTNET, ClientType.HTTP])
def test_inject_language_segment_is_idempotent(language):
    once = inject_language_segment("guide/api", language)
    twice = inject_language_segment(once, language)

    assert once == twice
    assert once.split("/").count(language.value) == 1


def test_nested_fan_out_keeps_single_segment():
    """Composing twice under the same language does not duplicate the segment."""
    outer = compose_virtual_trail("", "guide", ClientType.DOTNET)
    inner = compose_virtual_trail(outer, "client", ClientType.DOTNET)

    assert inner == "guide/DotNet/client"


def test_parent_reference_is_weak():
    parent = Folder(title="Root")
    child = Document(title="Intro", slug="intro.markdown", owner=parent)
    assert child.parent is parent

    del parent
    gc.collect()

    assert child.parent is None


def test_root_has_no_parent_and_empty_trails():
    root = Folder(title="Home")

    assert root.parent is None
    assert root.trail == ""
    assert root.virtual_trail == ""
    assert root.full_slug == ""


def test_strip_extension():
    assert strip_extension("intro.markdown") == "intro"
    assert strip_extension("index") == "index"


def test_iter_tree_is_depth_first_in_manifest_order():
    root = Folder(title="Root")
    guide = Folder(title="Guide", slug="guide", owner=root)
    a = Document(title="A", slug="a.markdown", owner=guide)
    b = Document(title="B", slug="b.markdown", owner=root)
    guide.children.append(a)
    root.children.extend([guide, b])

    assert list(iter_tree(root)) == [guide, a, b]
