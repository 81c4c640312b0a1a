# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : keys.py
#   file_relpath : src/sitesetdoc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names for SiteSetDoc inputs and configuration.

This module defines the authoritative string constants used when reading:
    - site set definition documents (``settings.definitions.yaml``),
    - the site set ``config.yaml``,
    - XLIFF translation ids,
    - SiteSetDoc's own TOML configuration (``sitesetdoc.toml`` and
      ``[tool.sitesetdoc]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external input API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Yaml:
    """Keys of site set YAML documents."""

    # settings.definitions.yaml
    SECTION_SETTINGS: Final[str] = "settings"
    SECTION_CATEGORIES: Final[str] = "categories"

    # settings.<id>
    KEY_TYPE: Final[str] = "type"
    KEY_DEFAULT: Final[str] = "default"
    KEY_ENUM: Final[str] = "enum"
    KEY_LABEL: Final[str] = "label"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_CATEGORY: Final[str] = "category"

    # categories.<id>
    KEY_PARENT: Final[str] = "parent"

    # config.yaml
    KEY_LABELS: Final[str] = "labels"

    SETTING_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_TYPE, KEY_DEFAULT, KEY_ENUM, KEY_LABEL, KEY_DESCRIPTION, KEY_CATEGORY}
    )


class Xliff:
    """Element names and id prefixes of XLIFF translation files.

    Prefixes are listed most specific first; `settings.description.` must be
    tested before `settings.`.
    """

    ELEMENT_TRANS_UNIT: Final[str] = "trans-unit"
    ELEMENT_SOURCE: Final[str] = "source"
    ATTR_ID: Final[str] = "id"

    PREFIX_SETTING_DESCRIPTION: Final[str] = "settings.description."
    PREFIX_SETTING_LABEL: Final[str] = "settings."
    PREFIX_CATEGORY_LABEL: Final[str] = "categories."


class Field:
    """Names of extra fields attached to rendered nodes."""

    LABEL: Final[str] = "Label"
    ENUM: Final[str] = "Enum"
    CATEGORY: Final[str] = "Category"
    SEARCH_FACET: Final[str] = "searchFacet"


class Toml:
    """TOML keys of SiteSetDoc's own configuration.

    The same keys are valid at the top level of ``sitesetdoc.toml`` and inside
    ``[tool.sitesetdoc]`` of ``pyproject.toml``.
    """

    KEY_NAME: Final[str] = "name"
    KEY_CAPTION: Final[str] = "caption"
    KEY_DISPLAY: Final[str] = "display"
    KEY_NOINDEX: Final[str] = "noindex"
    KEY_CATEGORIES_FILE: Final[str] = "categories_file"
    KEY_LABELS_FILE: Final[str] = "labels_file"
    KEY_DOCUMENTATION_ROOT: Final[str] = "documentation_root"
    KEY_PROJECT_ROOT: Final[str] = "project_root"

    # [fields] table: column name -> spec string (e.g. "max=40")
    SECTION_FIELDS: Final[str] = "fields"

    # Directive option names that never become extra columns.
    RESERVED_FIELD_NAMES: Final[frozenset[str]] = frozenset(
        {"name", "class", "caption", "display", "noindex"}
    )
