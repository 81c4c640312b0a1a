# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: build options, TOML loading, keys and logging."""

from __future__ import annotations

from sitesetdoc.config.model import BuildOptions, MutableBuildOptions, parse_menu_fields

__all__ = ["BuildOptions", "MutableBuildOptions", "parse_menu_fields"]
