# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : test_build_options.py
#   file_relpath : tests/config/test_build_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for build options: TOML layering, CLI overrides and discovery."""

from __future__ import annotations

from pathlib import Path

from sitesetdoc.config.model import BuildOptions, MutableBuildOptions, parse_menu_fields
from tests.conftest import parametrize

CONFIG_TOML = """\
name = "main"
caption = "Site settings"
display = "list"
noindex = true
categories_file = "PROJECT:/Configuration/categories.yaml"
labels_file = "PROJECT:/Resources/labels.xlf"
documentation_root = "Documentation"
project_root = "."

[fields]
type = "max=20"
label = "wide"
caption = "max=5"
"""


@parametrize(
    ("options", "expected"),
    [
        ({"type": "max=20"}, {"type": {"max": 20}}),
        ({"label": " max=7 "}, {"label": {"max": 7}}),
        ({"label": "wide", "type": None}, {"label": {}, "type": {}}),
        ({"name": "x", "class": "y", "caption": "c", "display": "d", "noindex": "1"}, {}),
    ],
)
def test_parse_menu_fields(options: dict[str, object], expected: dict[str, dict[str, int]]) -> None:
    """Reserved names are dropped; ``max=N`` becomes a width limit."""
    assert parse_menu_fields(options) == expected


def test_defaults() -> None:
    """Default options use the table display and no anchor prefix."""
    options = BuildOptions()

    assert options.display == "table"
    assert options.id_prefix == ""
    assert options.categories_file is None
    assert BuildOptions(name="main").id_prefix == "main-"


def test_freeze_thaw_roundtrip() -> None:
    """Thawing and freezing again keeps every value."""
    options = BuildOptions(name="n", caption="c", noindex=True, fields={"a": {"max": 1}})

    assert options.thaw().freeze() == options


def test_from_toml_file(tmp_path: Path) -> None:
    """A TOML file sets every option; roots resolve against its directory."""
    path = tmp_path / "sitesetdoc.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")

    options = MutableBuildOptions.from_toml_file(path).freeze()

    assert options.name == "main"
    assert options.caption == "Site settings"
    assert options.display == "list"
    assert options.noindex is True
    assert options.categories_file == "PROJECT:/Configuration/categories.yaml"
    assert options.labels_file == "PROJECT:/Resources/labels.xlf"
    assert options.documentation_root == (tmp_path / "Documentation").resolve()
    assert options.project_root == tmp_path.resolve()
    assert options.fields == {"type": {"max": 20}, "label": {}}


def test_pyproject_tool_table(tmp_path: Path) -> None:
    """``[tool.sitesetdoc]`` in ``pyproject.toml`` is read."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n\n[tool.sitesetdoc]\nname = "py"\n', encoding="utf-8")

    assert MutableBuildOptions.from_toml_file(path).freeze().name == "py"


def test_cli_args_override_toml(tmp_path: Path) -> None:
    """CLI values win over the TOML layer; unset CLI values keep it."""
    path = tmp_path / "sitesetdoc.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")

    options = (
        MutableBuildOptions.from_toml_file(path)
        .apply_cli_args(
            {
                "name": "cli",
                "caption": None,
                "display": None,
                "noindex": False,
                "labels_file": "other.xlf",
                "project_root": str(tmp_path / "proj"),
                "fields": ("type=max=3", "description"),
            }
        )
        .freeze()
    )

    assert options.name == "cli"
    assert options.caption == "Site settings"
    assert options.noindex is True
    assert options.labels_file == "other.xlf"
    assert options.categories_file == "PROJECT:/Configuration/categories.yaml"
    assert options.project_root == (tmp_path / "proj").resolve()
    assert options.fields == {"type": {"max": 3}, "label": {}, "description": {}}


def test_discover_prefers_sitesetdoc_toml(tmp_path: Path) -> None:
    """``sitesetdoc.toml`` wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text("[tool.sitesetdoc]\nname = 'a'\n", encoding="utf-8")
    (tmp_path / "sitesetdoc.toml").write_text("name = 'b'\n", encoding="utf-8")

    assert MutableBuildOptions.discover_config_file(tmp_path) == tmp_path / "sitesetdoc.toml"


def test_discover_requires_tool_table_in_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.sitesetdoc]`` is not a config file."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")

    assert MutableBuildOptions.discover_config_file(tmp_path) is None

    (tmp_path / "pyproject.toml").write_text("[tool.sitesetdoc]\nname = 'x'\n", encoding="utf-8")

    assert MutableBuildOptions.discover_config_file(tmp_path) == tmp_path / "pyproject.toml"
