# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : model.py
#   file_relpath : src/sitesetdoc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build options and their merge policy.

This module defines:
    - `BuildOptions`: an immutable snapshot consumed by the tree builder.
    - `MutableBuildOptions`: a mutable builder used while layering defaults,
      TOML configuration and CLI flags; it can be frozen into `BuildOptions`.

Precedence:
    defaults < TOML file < CLI flags. Only values that are explicitly set by a
    layer override the previous one.

Path semantics:
    - Paths declared in a TOML file are normalized against that file's directory.
    - CLI paths are normalized against the invocation CWD.
    - ``categories_file`` and ``labels_file`` are *logical* paths and may use the
      ``PROJECT:`` prefix; they are resolved by the loader, not here.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sitesetdoc.config.io import (
    extract_tool_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from sitesetdoc.config.keys import Toml
from sitesetdoc.config.logging import get_logger
from sitesetdoc.constants import CONFIG_FILE_NAME, DEFAULT_DISPLAY, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from sitesetdoc.config.io import TomlTable
    from sitesetdoc.config.logging import SitesetLogger

logger: SitesetLogger = get_logger(__name__)

_MAX_SPEC_RE = re.compile(r"^max=(\d+)$")


def parse_menu_fields(options: Mapping[str, object]) -> dict[str, dict[str, int]]:
    """Turn extra column options into menu field specifications.

    Reserved option names are dropped. A value of the form ``max=N`` becomes
    ``{"max": N}``; any other value yields an empty specification.

    Args:
        options (Mapping[str, object]): Column name to raw option value.

    Returns:
        dict[str, dict[str, int]]: Column name to field specification, in input order.
    """
    fields: dict[str, dict[str, int]] = {}
    for name, raw in options.items():
        if name in Toml.RESERVED_FIELD_NAMES:
            continue
        spec: dict[str, int] = {}
        if isinstance(raw, str):
            match = _MAX_SPEC_RE.match(raw.strip())
            if match:
                spec["max"] = int(match.group(1))
        fields[name] = spec
    return fields


@dataclass(frozen=True)
class BuildOptions:
    """Immutable options for one settings reference build.

    Attributes:
        name (str): Menu name; when non-empty, ``"<name>-"`` prefixes every anchor.
        caption (str): Caption shown above the rendered menu.
        display (str): Display mode hint for the renderer (``table`` by default).
        noindex (bool): If True, the renderer should not index the entries.
        fields (Mapping[str, Mapping[str, int]]): Extra columns and their specs.
        categories_file (str | None): Logical path of a separate category document.
        labels_file (str | None): Logical path of the XLIFF labels file.
        documentation_root (Path): Root against which plain logical paths resolve.
        project_root (Path): Root against which ``PROJECT:`` paths resolve.
    """

    name: str = ""
    caption: str = ""
    display: str = DEFAULT_DISPLAY
    noindex: bool = False
    fields: Mapping[str, Mapping[str, int]] = field(default_factory=dict)
    categories_file: str | None = None
    labels_file: str | None = None
    documentation_root: Path = field(default_factory=Path.cwd)
    project_root: Path = field(default_factory=Path.cwd)

    @property
    def id_prefix(self) -> str:
        """Prefix prepended to every anchor of this build."""
        return f"{self.name}-" if self.name else ""

    def thaw(self) -> MutableBuildOptions:
        """Return a mutable copy of these options."""
        return MutableBuildOptions(
            name=self.name,
            caption=self.caption,
            display=self.display,
            noindex=self.noindex,
            fields={k: dict(v) for k, v in self.fields.items()},
            categories_file=self.categories_file,
            labels_file=self.labels_file,
            documentation_root=self.documentation_root,
            project_root=self.project_root,
        )


@dataclass
class MutableBuildOptions:
    """Mutable builder for `BuildOptions`.

    ``None`` means "not set by this layer" for the optional paths; the other
    attributes carry defaults and are overridden by `merge_toml_dict` and
    `apply_cli_args`.
    """

    name: str = ""
    caption: str = ""
    display: str = DEFAULT_DISPLAY
    noindex: bool = False
    fields: dict[str, dict[str, int]] = field(default_factory=dict)
    categories_file: str | None = None
    labels_file: str | None = None
    documentation_root: Path = field(default_factory=Path.cwd)
    project_root: Path = field(default_factory=Path.cwd)

    def freeze(self) -> BuildOptions:
        """Return an immutable snapshot of the current options."""
        return BuildOptions(
            name=self.name,
            caption=self.caption,
            display=self.display or DEFAULT_DISPLAY,
            noindex=self.noindex,
            fields={k: dict(v) for k, v in self.fields.items()},
            categories_file=self.categories_file,
            labels_file=self.labels_file,
            documentation_root=self.documentation_root,
            project_root=self.project_root,
        )

    def merge_toml_dict(self, table: TomlTable, *, base_dir: Path) -> MutableBuildOptions:
        """Overlay a SiteSetDoc TOML table on these options.

        Args:
            table (TomlTable): The ``sitesetdoc.toml`` table (or ``[tool.sitesetdoc]``).
            base_dir (Path): Directory of the TOML file; relative roots resolve against it.

        Returns:
            MutableBuildOptions: ``self``, for chaining.
        """
        name = get_string_value_or_none(table, Toml.KEY_NAME)
        if name is not None:
            self.name = name
        caption = get_string_value_or_none(table, Toml.KEY_CAPTION)
        if caption is not None:
            self.caption = caption
        display = get_string_value_or_none(table, Toml.KEY_DISPLAY)
        if display:
            self.display = display
        noindex = get_bool_value_or_none(table, Toml.KEY_NOINDEX)
        if noindex is not None:
            self.noindex = noindex

        categories_file = get_string_value_or_none(table, Toml.KEY_CATEGORIES_FILE)
        if categories_file:
            self.categories_file = categories_file
        labels_file = get_string_value_or_none(table, Toml.KEY_LABELS_FILE)
        if labels_file:
            self.labels_file = labels_file

        docs_root = get_string_value_or_none(table, Toml.KEY_DOCUMENTATION_ROOT)
        if docs_root:
            self.documentation_root = (base_dir / docs_root).resolve()
        project_root = get_string_value_or_none(table, Toml.KEY_PROJECT_ROOT)
        if project_root:
            self.project_root = (base_dir / project_root).resolve()

        self.fields.update(parse_menu_fields(get_table_value(table, Toml.SECTION_FIELDS)))
        return self

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableBuildOptions:
        """Overlay CLI arguments on these options.

        Keys with a ``None`` value (or empty tuples) are treated as "not given".

        Args:
            args (Mapping[str, Any]): Parsed CLI arguments keyed by option name.

        Returns:
            MutableBuildOptions: ``self``, for chaining.
        """
        for key in (Toml.KEY_NAME, Toml.KEY_CAPTION, Toml.KEY_DISPLAY):
            value = args.get(key)
            if value is not None:
                setattr(self, key, str(value))
        if args.get(Toml.KEY_NOINDEX):
            self.noindex = True
        for key in (Toml.KEY_CATEGORIES_FILE, Toml.KEY_LABELS_FILE):
            value = args.get(key)
            if value:
                setattr(self, key, str(value))
        for key in (Toml.KEY_DOCUMENTATION_ROOT, Toml.KEY_PROJECT_ROOT):
            value = args.get(key)
            if value:
                setattr(self, key, Path(value).resolve())

        raw_fields: dict[str, object] = {}
        for item in args.get(Toml.SECTION_FIELDS) or ():
            column, _, spec = str(item).partition("=")
            raw_fields[column.strip()] = spec
        self.fields.update(parse_menu_fields(raw_fields))
        return self

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableBuildOptions:
        """Build options from defaults overlaid with one TOML file.

        Args:
            path (Path): ``sitesetdoc.toml`` or ``pyproject.toml``.

        Returns:
            MutableBuildOptions: The merged options.
        """
        data = load_toml_dict(path)
        table = extract_tool_table(data, is_pyproject=path.name == PYPROJECT_FILE_NAME)
        logger.debug("Loaded %d config key(s) from %s", len(table), path)
        return cls().merge_toml_dict(table, base_dir=path.parent.resolve())

    @staticmethod
    def discover_config_file(start: Path) -> Path | None:
        """Return the config file to use for a run started in ``start``.

        ``sitesetdoc.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
        only counts when it has a ``[tool.sitesetdoc]`` table.

        Args:
            start (Path): Directory to look in (typically the CWD).

        Returns:
            Path | None: The config file, or ``None`` if none applies.
        """
        candidate = start / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = start / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_tool_table(load_toml_dict(pyproject), is_pyproject=True):
            return pyproject
        return None
