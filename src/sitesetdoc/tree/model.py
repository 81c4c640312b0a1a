# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : model.py
#   file_relpath : src/sitesetdoc/tree/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data shapes of the settings tree.

Input side:
    - `TranslationEntry`: one ``(id, value)`` pair of the translation source.
    - `SettingDefinition` / `CategoryDefinition`: one parsed YAML entry each.
    - `DefaultValue`: a setting default tagged with its `ValueKind`.

Construction side:
    - `CategoryNode`: mutable node of the temporary node table.

Output side (immutable, handed to a renderer):
    - `SettingEntry`, `CategoryOutputNode`, `SettingsReference`, `ErrorPlaceholder`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sitesetdoc.config.keys import Yaml
from sitesetdoc.core.errors import MalformedEntryError


class ValueKind(Enum):
    """Kinds of setting default values, as far as formatting is concerned."""

    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"
    STRUCTURED = "structured"
    OTHER = "other"


@dataclass(frozen=True)
class DefaultValue:
    """A setting's default value tagged with its kind.

    Attributes:
        kind (ValueKind): Classification made once by `from_raw`.
        raw (Any): The value as parsed from YAML.
    """

    kind: ValueKind
    raw: Any

    @classmethod
    def from_raw(cls, raw: Any) -> DefaultValue:
        """Classify a parsed YAML value.

        ``bool`` is tested before ``int`` since it is a subclass of it. Values
        YAML can produce beyond the plain kinds (dates, timestamps) are `OTHER`.
        """
        kind: ValueKind
        if raw is None:
            kind = ValueKind.NULL
        elif isinstance(raw, bool):
            kind = ValueKind.BOOLEAN
        elif isinstance(raw, str):
            kind = ValueKind.STRING
        elif isinstance(raw, float):
            kind = ValueKind.FLOAT
        elif isinstance(raw, int):
            kind = ValueKind.INTEGER
        elif isinstance(raw, (list, tuple, Mapping)):
            kind = ValueKind.STRUCTURED
        else:
            kind = ValueKind.OTHER
        return cls(kind=kind, raw=raw)

    @property
    def is_empty(self) -> bool:
        """True for the empty string, which documents as "no default"."""
        return self.kind is ValueKind.STRING and self.raw == ""


@dataclass(frozen=True)
class TranslationEntry:
    """One translation unit: a dotted id and its source text."""

    id: str
    value: str


@dataclass(frozen=True)
class ResolvedLabels:
    """Label mappings extracted from the translation source."""

    setting_labels: dict[str, str] = field(default_factory=dict)
    setting_descriptions: dict[str, str] = field(default_factory=dict)
    category_labels: dict[str, str] = field(default_factory=dict)


def _scalar_to_str(value: Any) -> str | None:
    # YAML scalars as a template would print them: booleans lowercase and
    # integral floats without a fraction ("1.0" -> "1").
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _reference_id(value: Any) -> str:
    # Category references may be written as YAML integers; booleans are not ids.
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return ""


@dataclass(frozen=True)
class SettingDefinition:
    """One entry of the ``settings`` mapping.

    Attributes:
        id (str): Setting id (the mapping key).
        type (str): Declared type, coerced to a string (``""`` when absent).
        default (DefaultValue | None): Default value; ``None`` when the key is absent.
        enum_values (list[Any] | Mapping[str, Any] | None): Allowed values, when given.
        explicit_label (str | None): Label written in the definition itself.
        explicit_description (str | None): Description written in the definition itself.
        category_id (str): Referenced category (``""`` = uncategorized).
        extra (dict[str, str]): Other scalar keys, rendered as strings.
    """

    id: str
    type: str = ""
    default: DefaultValue | None = None
    enum_values: list[Any] | Mapping[str, Any] | None = None
    explicit_label: str | None = None
    explicit_description: str | None = None
    category_id: str = ""
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, setting_id: str, data: object) -> SettingDefinition:
        """Parse one setting entry.

        Args:
            setting_id (str): The setting's key.
            data (object): The parsed YAML value under that key.

        Returns:
            SettingDefinition: The parsed definition.

        Raises:
            MalformedEntryError: If ``data`` is not a mapping or its ``type`` is not a scalar.
        """
        if not isinstance(data, Mapping):
            raise MalformedEntryError(
                f"Setting {setting_id!r} is not a mapping ({type(data).__name__})",
                entry_id=setting_id,
            )
        raw_type = data.get(Yaml.KEY_TYPE)
        type_label = "" if raw_type is None else _scalar_to_str(raw_type)
        if type_label is None:
            raise MalformedEntryError(
                f"Setting {setting_id!r} has a non-scalar type {raw_type!r}",
                entry_id=setting_id,
            )
        raw_enum = data.get(Yaml.KEY_ENUM)
        extra: dict[str, str] = {}
        for key, value in data.items():
            name = str(key)
            if name in Yaml.SETTING_KEYS:
                continue
            rendered = _scalar_to_str(value)
            if rendered is not None:
                extra[name] = rendered
        return cls(
            id=setting_id,
            type=type_label,
            default=DefaultValue.from_raw(data[Yaml.KEY_DEFAULT])
            if Yaml.KEY_DEFAULT in data
            else None,
            enum_values=raw_enum if isinstance(raw_enum, (list, Mapping)) else None,
            explicit_label=_optional_str(data.get(Yaml.KEY_LABEL)),
            explicit_description=_optional_str(data.get(Yaml.KEY_DESCRIPTION)),
            category_id=_reference_id(data.get(Yaml.KEY_CATEGORY)),
            extra=extra,
        )


@dataclass(frozen=True)
class CategoryDefinition:
    """One entry of the ``categories`` mapping."""

    id: str
    explicit_label: str | None = None
    parent_id: str = ""

    @classmethod
    def from_mapping(cls, category_id: str, data: object) -> CategoryDefinition:
        """Parse one category entry.

        Raises:
            MalformedEntryError: If ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise MalformedEntryError(
                f"Category {category_id!r} is not a mapping ({type(data).__name__})",
                entry_id=category_id,
            )
        return cls(
            id=category_id,
            explicit_label=_optional_str(data.get(Yaml.KEY_LABEL)),
            parent_id=_reference_id(data.get(Yaml.KEY_PARENT)),
        )


@dataclass(frozen=True)
class SettingEntry:
    """A documented setting, ready for rendering.

    Attributes:
        id (str): Setting id.
        anchor (str): Normalized anchor id (prefixed with the menu name, if any).
        display_key (str): Text shown as the entry's title.
        type_label (str): Declared type.
        resolved_label (str | None): Explicit or translated label.
        resolved_description (str | None): Explicit or translated description.
        formatted_default (str | None): Default value as displayed, ``None`` if there is none.
        category_rootline (str): Ancestor labels joined by ``" > "``.
        extra_fields (dict[str, str]): Named display fields, in display order.
    """

    id: str
    anchor: str
    display_key: str
    type_label: str
    resolved_label: str | None = None
    resolved_description: str | None = None
    formatted_default: str | None = None
    category_rootline: str = ""
    extra_fields: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "kind": "setting",
            "id": self.id,
            "anchor": self.anchor,
            "key": self.display_key,
            "type": self.type_label,
            "label": self.resolved_label,
            "description": self.resolved_description,
            "default": self.formatted_default,
            "category": self.category_rootline,
            "fields": dict(self.extra_fields),
        }


@dataclass(eq=False)
class CategoryNode:
    """Mutable node of the category table used during construction.

    Nodes compare by identity: two orphan nodes with equal content are still
    distinct categories.
    """

    id: str
    label: str = ""
    parent_id: str = ""
    children: list[CategoryNode] = field(default_factory=list)
    settings: list[SettingEntry] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryOutputNode:
    """A rendered category: child categories first, then its own settings."""

    id: str
    anchor: str
    label: str
    extra_fields: dict[str, str] = field(default_factory=dict)
    children: list[CategoryOutputNode | SettingEntry] = field(default_factory=list)

    @property
    def categories(self) -> list[CategoryOutputNode]:
        """Child categories, in order."""
        return [c for c in self.children if isinstance(c, CategoryOutputNode)]

    @property
    def settings(self) -> list[SettingEntry]:
        """Directly attached settings, in order."""
        return [c for c in self.children if isinstance(c, SettingEntry)]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "kind": "category",
            "id": self.id,
            "anchor": self.anchor,
            "label": self.label,
            "fields": dict(self.extra_fields),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class SettingsReference:
    """Result of one build: the category forest plus menu metadata."""

    anchor: str
    source: str
    categories: list[CategoryOutputNode]
    caption: str = ""
    display: str = "table"
    noindex: bool = False
    fields: dict[str, dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "anchor": self.anchor,
            "source": self.source,
            "caption": self.caption,
            "display": self.display,
            "noindex": self.noindex,
            "fields": {k: dict(v) for k, v in self.fields.items()},
            "categories": [c.to_dict() for c in self.categories],
        }


@dataclass(frozen=True)
class ErrorPlaceholder:
    """Stand-in returned instead of a `SettingsReference` when a build fails."""

    message: str
    reason: str = ""
