# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : labels.py
#   file_relpath : src/sitesetdoc/tree/labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve translation entries into label and description mappings.

Translation ids are dotted and carry their target in a prefix:

=============================  ==========================
id                             target
=============================  ==========================
``settings.description.<id>``  setting description
``settings.<id>``              setting label
``categories.<id>``            category label
=============================  ==========================

Anything else is ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitesetdoc.config.keys import Xliff
from sitesetdoc.config.logging import get_logger
from sitesetdoc.tree.model import ResolvedLabels

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.tree.model import TranslationEntry

logger: SitesetLogger = get_logger(__name__)


def resolve_labels(entries: Iterable[TranslationEntry]) -> ResolvedLabels:
    """Split translation entries into setting labels, descriptions and category labels.

    Entries with an empty value are skipped. On duplicate ids within one
    mapping, the last entry wins.

    Args:
        entries (Iterable[TranslationEntry]): Entries in source order.

    Returns:
        ResolvedLabels: The three mappings, keyed by setting/category id.
    """
    resolved = ResolvedLabels()
    # Most specific prefix first: "settings.description." is also a "settings." id.
    buckets: tuple[tuple[str, dict[str, str]], ...] = (
        (Xliff.PREFIX_SETTING_DESCRIPTION, resolved.setting_descriptions),
        (Xliff.PREFIX_SETTING_LABEL, resolved.setting_labels),
        (Xliff.PREFIX_CATEGORY_LABEL, resolved.category_labels),
    )
    for entry in entries:
        if not entry.value:
            continue
        for prefix, target in buckets:
            if entry.id.startswith(prefix):
                target[entry.id[len(prefix) :]] = entry.value
                break
        else:
            logger.trace("Ignoring translation id %r", entry.id)
    return resolved
