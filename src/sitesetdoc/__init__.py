# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SiteSetDoc package.

SiteSetDoc turns a site set's ``settings.definitions.yaml`` (plus optional
category declarations and XLIFF labels) into a categorized reference tree that
a documentation renderer can display. It exposes both a CLI and a small typed
API for automation.
"""

from __future__ import annotations

from sitesetdoc.tree.builder import build_forest, build_settings_reference, process_directive
from sitesetdoc.tree.model import (
    CategoryOutputNode,
    ErrorPlaceholder,
    SettingEntry,
    SettingsReference,
)

__all__ = [
    "CategoryOutputNode",
    "ErrorPlaceholder",
    "SettingEntry",
    "SettingsReference",
    "build_forest",
    "build_settings_reference",
    "process_directive",
]
