# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : entries.py
#   file_relpath : src/sitesetdoc/tree/entries.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build one `SettingEntry` per setting definition.

Label and description resolution: a non-empty value written in the definition
wins over the translation; without either the value is absent (``None``).

Default values are formatted by kind:

==========  =================================
kind        displayed as
==========  =================================
null        ``null``
boolean     ``true`` / ``false``
string      ``"value"`` (embedded quotes are not escaped)
float       two decimals, e.g. ``1.50``
integer     decimal digits
structured  JSON, indented by four spaces
other       ``unkown``
==========  =================================

An empty string default documents as "no default".
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from sitesetdoc.config.keys import Field
from sitesetdoc.config.logging import get_logger
from sitesetdoc.constants import SETTING_FACET, UNKNOWN_VALUE_TOKEN
from sitesetdoc.core.anchors import reduce_anchor
from sitesetdoc.core.errors import CategoryCycleError
from sitesetdoc.tree.model import SettingEntry, ValueKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.tree.model import (
        CategoryNode,
        DefaultValue,
        ResolvedLabels,
        SettingDefinition,
    )

logger: SitesetLogger = get_logger(__name__)

ROOTLINE_SEPARATOR: str = " > "


def pretty_json(value: Any) -> str:
    """Serialize structured data the way defaults and enums are displayed."""
    return json.dumps(value, indent=4, default=str)


def format_default(value: DefaultValue) -> str:
    """Return the display text of a default value.

    Args:
        value (DefaultValue): The classified default.

    Returns:
        str: The formatted value (see the module docstring).
    """
    match value.kind:
        case ValueKind.NULL:
            return "null"
        case ValueKind.BOOLEAN:
            return "true" if value.raw else "false"
        case ValueKind.STRING:
            return f'"{value.raw}"'
        case ValueKind.FLOAT:
            return f"{value.raw:.2f}"
        case ValueKind.INTEGER:
            return str(value.raw)
        case ValueKind.STRUCTURED:
            return pretty_json(value.raw)
        case ValueKind.OTHER:
            return UNKNOWN_VALUE_TOKEN


def category_rootline(index: Mapping[str, CategoryNode], category_id: str) -> str:
    """Return the ancestor label chain of a category, root-most first.

    The walk stops at a node without a (known) parent or with an empty label;
    that node's label is the first segment. An unknown ``category_id`` yields
    ``""``.

    Args:
        index (Mapping[str, CategoryNode]): The category node table.
        category_id (str): Category to describe.

    Returns:
        str: Labels joined by ``" > "``, e.g. ``"Styles > Links"``.

    Raises:
        CategoryCycleError: If the parent chain revisits a category.
    """
    labels: list[str] = []
    seen: set[str] = set()
    # Orphans are only created when the entry is attached, so an undeclared id
    # has no rootline yet, not even its own key.
    node = index.get(category_id)
    while node is not None:
        if node.id in seen:
            raise CategoryCycleError(
                f"Category {category_id!r} has a cyclic parent chain via {node.id!r}",
                entry_id=category_id,
            )
        seen.add(node.id)
        labels.append(node.label)
        if not node.parent_id or not node.label:
            break
        # An undeclared parent ends the chain; its key never becomes a segment.
        node = index.get(node.parent_id)
    return ROOTLINE_SEPARATOR.join(reversed(labels))


def _first_text(explicit: str | None, fallback: str | None) -> str | None:
    if explicit:
        return explicit
    return fallback


def build_entry(
    definition: SettingDefinition,
    labels: ResolvedLabels,
    index: Mapping[str, CategoryNode],
    *,
    id_prefix: str = "",
) -> SettingEntry:
    """Build the display entry of one setting.

    Extra fields, in order: ``Label`` (when resolved), ``Enum`` (when given),
    ``Category`` (when the rootline is non-empty), the definition's other
    scalar keys, and always ``searchFacet``.

    Args:
        definition (SettingDefinition): The parsed setting.
        labels (ResolvedLabels): Translated labels and descriptions.
        index (Mapping[str, CategoryNode]): The category node table.
        id_prefix (str): Prefix for the entry's anchor.

    Returns:
        SettingEntry: The entry.

    Raises:
        CategoryCycleError: If the setting's category has a cyclic parent chain.
    """
    resolved_label = _first_text(
        definition.explicit_label, labels.setting_labels.get(definition.id)
    )
    resolved_description = _first_text(
        definition.explicit_description,
        labels.setting_descriptions.get(definition.id),
    )
    default = definition.default
    formatted_default = (
        None if default is None or default.is_empty else format_default(default)
    )
    rootline = category_rootline(index, definition.category_id)

    fields: dict[str, str] = {}
    if resolved_label is not None:
        fields[Field.LABEL] = resolved_label
    if definition.enum_values is not None:
        fields[Field.ENUM] = pretty_json(definition.enum_values)
    if rootline:
        fields[Field.CATEGORY] = rootline
    for name, value in definition.extra.items():
        fields.setdefault(name, value)
    fields[Field.SEARCH_FACET] = SETTING_FACET

    logger.trace("Built setting %r (category rootline %r)", definition.id, rootline)
    return SettingEntry(
        id=definition.id,
        anchor=reduce_anchor(id_prefix + definition.id),
        display_key=definition.id,
        type_label=definition.type,
        resolved_label=resolved_label,
        resolved_description=resolved_description,
        formatted_default=formatted_default,
        category_rootline=rootline,
        extra_fields=fields,
    )
