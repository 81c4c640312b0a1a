# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : assembler.py
#   file_relpath : src/sitesetdoc/tree/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attach setting entries to categories and render the output forest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitesetdoc.config.keys import Field
from sitesetdoc.config.logging import get_logger
from sitesetdoc.constants import CATEGORY_FACET, GLOBAL_CATEGORY_ID
from sitesetdoc.core.anchors import reduce_anchor
from sitesetdoc.tree.model import CategoryNode, CategoryOutputNode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.tree.categories import CategoryIndex
    from sitesetdoc.tree.model import SettingEntry

logger: SitesetLogger = get_logger(__name__)


def attach_entry(
    index: CategoryIndex,
    roots: list[CategoryNode],
    category_id: str,
    entry: SettingEntry,
) -> CategoryNode:
    """Append ``entry`` to its category, creating an orphan category if needed.

    An orphan is a category referenced by a setting but never declared
    (including ``""`` for uncategorized settings). It gets an empty label, is
    added to ``index`` and appended to ``roots`` on first reference, so later
    settings with the same id share it.

    Args:
        index (CategoryIndex): Node table; mutated when an orphan is created.
        roots (list[CategoryNode]): Root list; mutated when an orphan is created.
        category_id (str): The entry's category id.
        entry (SettingEntry): The entry to attach.

    Returns:
        CategoryNode: The node the entry was attached to.
    """
    node = index.get(category_id)
    if node is None:
        logger.debug("Creating orphan category %r for setting %r", category_id, entry.id)
        node = CategoryNode(id=category_id)
        index[category_id] = node
        roots.append(node)
    node.settings.append(entry)
    return node


def render_category(node: CategoryNode, *, id_prefix: str = "") -> CategoryOutputNode:
    """Render one category and, recursively, its descendants.

    Args:
        node (CategoryNode): Linked category node.
        id_prefix (str): Prefix for anchors.

    Returns:
        CategoryOutputNode: Rendered child categories followed by the node's settings.
    """
    children: list[CategoryOutputNode | SettingEntry] = [
        render_category(child, id_prefix=id_prefix) for child in node.children
    ]
    children.extend(node.settings)

    key = node.id or GLOBAL_CATEGORY_ID
    fields: dict[str, str] = {Field.SEARCH_FACET: CATEGORY_FACET}
    if node.label:
        fields[Field.LABEL] = node.label
    return CategoryOutputNode(
        id=key,
        anchor=reduce_anchor(f"{id_prefix}category-{key}"),
        label=node.label,
        extra_fields=fields,
        children=children,
    )


def render_forest(
    roots: Iterable[CategoryNode], *, id_prefix: str = ""
) -> list[CategoryOutputNode]:
    """Render every root category depth first, in root-list order."""
    return [render_category(root, id_prefix=id_prefix) for root in roots]


def assemble(
    entries: Iterable[tuple[SettingEntry, str]],
    index: CategoryIndex,
    roots: list[CategoryNode],
    *,
    id_prefix: str = "",
) -> list[CategoryOutputNode]:
    """Attach ``(entry, category_id)`` pairs in order, then render the forest.

    Within one category, settings keep the order in which they are given.

    Args:
        entries (Iterable[tuple[SettingEntry, str]]): Entries with their category ids.
        index (CategoryIndex): Linked node table.
        roots (list[CategoryNode]): Root list returned by `link_categories`.
        id_prefix (str): Prefix for anchors.

    Returns:
        list[CategoryOutputNode]: The output forest.
    """
    for entry, category_id in entries:
        attach_entry(index, roots, category_id, entry)
    return render_forest(roots, id_prefix=id_prefix)
