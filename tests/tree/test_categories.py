# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : test_categories.py
#   file_relpath : tests/tree/test_categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the category index and linking phases."""

from __future__ import annotations

from sitesetdoc.tree.categories import (
    build_category_index,
    link_categories,
    unreachable_categories,
)
from sitesetdoc.tree.model import CategoryDefinition


def test_label_precedence_explicit_then_translation() -> None:
    """Explicit labels win; translated labels fill in; otherwise empty."""
    index = build_category_index(
        [
            CategoryDefinition("a", explicit_label="Explicit"),
            CategoryDefinition("b"),
            CategoryDefinition("c"),
        ],
        {"a": "Translated A", "b": "Translated B"},
    )

    assert [index[k].label for k in ("a", "b", "c")] == ["Explicit", "Translated B", ""]


def test_index_does_not_link() -> None:
    """Phase one only creates nodes."""
    index = build_category_index(
        [CategoryDefinition("parent"), CategoryDefinition("child", parent_id="parent")], {}
    )

    assert index["parent"].children == []


def test_child_declared_before_parent_is_linked() -> None:
    """Linking happens after indexing, so declaration order does not matter."""
    index = build_category_index(
        [CategoryDefinition("child", parent_id="parent"), CategoryDefinition("parent")], {}
    )
    roots = link_categories(index)

    assert [r.id for r in roots] == ["parent"]
    assert [c.id for c in roots[0].children] == ["child"]


def test_unknown_parent_makes_a_root() -> None:
    """A node whose parent is not declared becomes a root."""
    index = build_category_index([CategoryDefinition("child", "Child", "missing")], {})
    roots = link_categories(index)

    assert [r.id for r in roots] == ["child"]
    assert "missing" not in index


def test_roots_and_children_keep_declaration_order() -> None:
    """Both the root list and child lists follow the declaration order."""
    index = build_category_index(
        [
            CategoryDefinition("b"),
            CategoryDefinition("a"),
            CategoryDefinition("a.2", parent_id="a"),
            CategoryDefinition("a.1", parent_id="a"),
        ],
        {},
    )
    roots = link_categories(index)

    assert [r.id for r in roots] == ["b", "a"]
    assert [c.id for c in index["a"].children] == ["a.2", "a.1"]


def test_each_child_has_exactly_one_parent() -> None:
    """A node appears once, either as a root or under its parent."""
    index = build_category_index(
        [
            CategoryDefinition("r"),
            CategoryDefinition("x", parent_id="r"),
            CategoryDefinition("y", parent_id="x"),
        ],
        {},
    )
    roots = link_categories(index)

    seen: list[str] = []
    stack = list(roots)
    while stack:
        node = stack.pop()
        seen.append(node.id)
        stack.extend(node.children)
    assert sorted(seen) == ["r", "x", "y"]


def test_cycle_members_are_unreachable() -> None:
    """Nodes in a parent cycle, and their children, hang below no root."""
    index = build_category_index(
        [
            CategoryDefinition("top"),
            CategoryDefinition("a", parent_id="b"),
            CategoryDefinition("b", parent_id="a"),
            CategoryDefinition("self", parent_id="self"),
            CategoryDefinition("below", parent_id="a"),
        ],
        {},
    )
    roots = link_categories(index)

    assert [r.id for r in roots] == ["top"]
    assert [n.id for n in unreachable_categories(index, roots)] == ["a", "b", "self", "below"]


def test_acyclic_index_has_no_unreachable_nodes() -> None:
    """Every node of a well-formed index is reachable."""
    index = build_category_index(
        [CategoryDefinition("child", parent_id="parent"), CategoryDefinition("parent")], {}
    )

    assert unreachable_categories(index, link_categories(index)) == []
