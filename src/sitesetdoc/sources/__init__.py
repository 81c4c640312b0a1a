# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/sources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source documents: loading by logical path, parsing, and sibling discovery."""

from __future__ import annotations

from sitesetdoc.sources.loader import FileSystemLoader, MappingLoader, TextLoader

__all__ = ["FileSystemLoader", "MappingLoader", "TextLoader"]
