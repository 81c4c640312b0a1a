# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : errors.py
#   file_relpath : src/sitesetdoc/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while loading sources and building the settings tree.

Two families exist:

- *Fatal* source errors (`SourceMissingError`, `SourceMalformedError`) abort a
  build before any node is created.
- *Entry* errors (`MalformedEntryError` and subclasses) concern one setting or
  category; the builder skips that entry and carries on.

`SourceNotFoundError` and `SourceParseError` are raised by the loader and
parsers for any document; the builder decides whether they are fatal
(settings source) or recoverable (categories, config.yaml, translations).
"""

from __future__ import annotations


class SiteSetDocError(Exception):
    """Base class for all SiteSetDoc errors."""


class SourceError(SiteSetDocError):
    """A source document could not be used.

    Attributes:
        path (str): Logical path of the document.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class SourceNotFoundError(SourceError):
    """A logical path does not resolve to a readable file."""


class SourceParseError(SourceError):
    """A document could be read but not parsed."""


class SourceMissingError(SourceError):
    """The settings definition source cannot be located or read."""


class SourceMalformedError(SourceError):
    """The settings definition source lacks a usable ``settings`` mapping."""


class MalformedEntryError(SiteSetDocError):
    """A single setting or category entry is unusable.

    Attributes:
        entry_id (str): Id of the offending setting or category.
    """

    def __init__(self, message: str, *, entry_id: str) -> None:
        super().__init__(message)
        self.entry_id = entry_id


class CategoryCycleError(MalformedEntryError):
    """A category's parent chain loops back onto itself."""
