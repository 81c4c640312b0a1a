# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : categories.py
#   file_relpath : src/sitesetdoc/tree/categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build the category node table and link it into a forest.

Category declarations may name a parent that is declared later or not at all,
so construction happens in two phases: `build_category_index` creates every
node, then `link_categories` attaches each node to its parent (or to the root
list when the parent is unknown).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitesetdoc.config.logging import get_logger
from sitesetdoc.tree.model import CategoryNode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.tree.model import CategoryDefinition

logger: SitesetLogger = get_logger(__name__)

CategoryIndex = dict[str, CategoryNode]


def build_category_index(
    declarations: Iterable[CategoryDefinition],
    category_labels: Mapping[str, str],
) -> CategoryIndex:
    """Create one unlinked node per declared category.

    The label is the explicit label, else the translated label, else ``""``.

    Args:
        declarations (Iterable[CategoryDefinition]): Declarations in source order.
        category_labels (Mapping[str, str]): Translated category labels.

    Returns:
        CategoryIndex: Nodes keyed by id, in declaration order.
    """
    index: CategoryIndex = {}
    for declaration in declarations:
        label = declaration.explicit_label or category_labels.get(declaration.id) or ""
        index[declaration.id] = CategoryNode(
            id=declaration.id,
            label=label,
            parent_id=declaration.parent_id,
        )
    return index


def link_categories(index: CategoryIndex) -> list[CategoryNode]:
    """Attach every node to its parent and return the root list.

    A node whose parent is empty or not in ``index`` becomes a root. Children
    and roots keep the index (declaration) order.

    Args:
        index (CategoryIndex): Table built by `build_category_index`.

    Returns:
        list[CategoryNode]: The root nodes.
    """
    roots: list[CategoryNode] = []
    for node in index.values():
        parent = index.get(node.parent_id) if node.parent_id else None
        if parent is not None:
            parent.children.append(node)
        else:
            if node.parent_id:
                logger.debug(
                    "Category %r references unknown parent %r; treating it as a root",
                    node.id,
                    node.parent_id,
                )
            roots.append(node)
    return roots


def unreachable_categories(
    index: CategoryIndex, roots: Iterable[CategoryNode]
) -> list[CategoryNode]:
    """Return the nodes that no root leads to, in index order.

    Every node has at most one parent, so these are exactly the members of a
    parent cycle (a node naming itself included) and everything below them.
    Such nodes are linked to each other but never to the rendered tree.

    Args:
        index (CategoryIndex): Table after `link_categories`.
        roots (Iterable[CategoryNode]): Roots returned by `link_categories`.

    Returns:
        list[CategoryNode]: The detached nodes.
    """
    reached: set[str] = set()
    pending = list(roots)
    while pending:
        node = pending.pop()
        if node.id in reached:
            continue
        reached.add(node.id)
        pending.extend(node.children)
    return [node for node in index.values() if node.id not in reached]
