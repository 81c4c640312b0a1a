# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : anchors.py
#   file_relpath : src/sitesetdoc/core/anchors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Anchor normalization for rendered node ids."""

from __future__ import annotations

import re
import unicodedata

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def reduce_anchor(raw: str) -> str:
    """Reduce an arbitrary string to a lower-case ASCII slug.

    Accented characters are transliterated to their base letter; every run of
    other characters collapses to a single ``-``.

    Args:
        raw (str): Raw anchor text, e.g. ``"myset-styles.content.Link_Color"``.

    Returns:
        str: The slug, e.g. ``"myset-styles-content-link-color"``.
    """
    ascii_text = unicodedata.normalize("NFKD", raw).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG_RE.sub("-", ascii_text.lower()).strip("-")
