# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : strategies_sitesetdoc.py
#   file_relpath : tests/strategies_sitesetdoc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating category forests and settings documents.

Generated forests are acyclic by construction: every category may only name a
parent that was generated before it. The declaration order is then shuffled so
that parents are frequently declared after their children.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

# Labels never contain the rootline separator, so segments can be counted.
LABEL_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 _-"


@dataclass(frozen=True)
class ForestSample:
    """A generated category forest.

    Attributes:
        categories (dict[str, dict[str, str]]): The ``categories`` mapping, in
            (shuffled) declaration order.
        depths (dict[str, int]): Depth of every category (roots have depth 0).
    """

    categories: dict[str, dict[str, str]]
    depths: dict[str, int]


s_label: st.SearchStrategy[str] = st.text(alphabet=LABEL_ALPHABET, min_size=1, max_size=12).filter(
    lambda s: s.strip() != "" and " > " not in s
)


@st.composite
def s_category_forest(draw: Draw, max_size: int = 12) -> ForestSample:
    """Generate an acyclic category declaration mapping."""
    size: int = draw(st.integers(min_value=1, max_value=max_size))
    ids: list[str] = [f"cat{i}" for i in range(size)]
    parents: dict[str, str] = {}
    depths: dict[str, int] = {}
    for i, cid in enumerate(ids):
        parent: str = draw(st.sampled_from([""] + ids[:i]))
        parents[cid] = parent
        depths[cid] = depths[parent] + 1 if parent else 0

    order: list[str] = draw(st.permutations(ids))
    categories: dict[str, dict[str, str]] = {}
    for cid in order:
        declaration: dict[str, str] = {"label": draw(s_label)}
        if parents[cid]:
            declaration["parent"] = parents[cid]
        categories[cid] = declaration
    return ForestSample(categories=categories, depths=depths)


@st.composite
def s_settings_for(draw: Draw, category_ids: list[str], max_size: int = 10) -> dict[str, Any]:
    """Generate a ``settings`` mapping referencing known and unknown categories."""
    size: int = draw(st.integers(min_value=0, max_value=max_size))
    references: list[str] = category_ids + ["", "undeclared.a", "undeclared.b"]
    defaults = st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-1000, max_value=1000),
        st.floats(allow_nan=False, allow_infinity=False, width=32),
        st.text(alphabet=LABEL_ALPHABET, max_size=8),
        st.lists(st.integers(min_value=0, max_value=9), max_size=3),
    )
    settings: dict[str, Any] = {}
    for i in range(size):
        settings[f"setting{i}"] = {
            "type": draw(st.sampled_from(["string", "int", "bool", "color"])),
            "default": draw(defaults),
            "category": draw(st.sampled_from(references)),
        }
    return settings
