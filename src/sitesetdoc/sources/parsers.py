# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : parsers.py
#   file_relpath : src/sitesetdoc/sources/parsers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse YAML definition documents and XLIFF translation files."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

import yaml

from sitesetdoc.config.keys import Xliff
from sitesetdoc.core.errors import SourceParseError
from sitesetdoc.tree.model import TranslationEntry


def parse_structured(text: str, *, path: str = "") -> Any:
    """Parse a YAML (or JSON) document into plain Python data.

    Args:
        text (str): Document text.
        path (str): Logical path, used in error messages only.

    Returns:
        Any: The parsed document; ``None`` for an empty document.

    Raises:
        SourceParseError: If the text is not valid YAML.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SourceParseError(
            f"Cannot parse YAML from {path or '<text>'}: {exc}", path=path
        ) from exc


def _local_name(tag: object) -> str:
    # "{urn:oasis:names:tc:xliff:document:1.2}trans-unit" -> "trans-unit"
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def parse_xliff(text: str, *, path: str = "") -> list[TranslationEntry]:
    """Extract ``(id, source text)`` pairs from an XLIFF document.

    Elements are matched by local name, so XLIFF files with or without the
    ``urn:oasis:names:tc:xliff:document:1.2`` namespace are accepted. Only the
    first ``<source>`` of each ``<trans-unit>`` is read; a unit without one
    yields an empty value.

    Args:
        text (str): XLIFF document text.
        path (str): Logical path, used in error messages only.

    Returns:
        list[TranslationEntry]: Entries in document order.

    Raises:
        SourceParseError: If the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise SourceParseError(
            f"Cannot parse XML from {path or '<text>'}: {exc}", path=path
        ) from exc

    entries: list[TranslationEntry] = []
    for unit in root.iter():
        if _local_name(unit.tag) != Xliff.ELEMENT_TRANS_UNIT:
            continue
        value = ""
        for child in unit.iter():
            if child is not unit and _local_name(child.tag) == Xliff.ELEMENT_SOURCE:
                value = "".join(child.itertext())
                break
        entries.append(TranslationEntry(id=unit.get(Xliff.ATTR_ID, ""), value=value))
    return entries
