# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : emitters.py
#   file_relpath : src/sitesetdoc/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emitters turning a `SettingsReference` into console output.

The ``render_*`` functions are pure and return text; ``emit_*`` functions write
through a `ConsoleLike`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from sitesetdoc.config.keys import Field
from sitesetdoc.tree.model import CategoryOutputNode, SettingEntry

if TYPE_CHECKING:
    from collections.abc import Callable

    from sitesetdoc.cli.console import ConsoleLike
    from sitesetdoc.core.diagnostics import DiagnosticLog
    from sitesetdoc.tree.model import SettingsReference

    Styler = Callable[..., str]

INDENT: str = "  "


def _plain(text: str, **_style: Any) -> str:
    return text


def _indent_block(text: str, prefix: str) -> str:
    return ("\n" + prefix).join(text.splitlines())


def _render_text_setting(
    entry: SettingEntry, depth: int, *, verbosity: int, styled: Styler
) -> list[str]:
    prefix = INDENT * depth
    head = f"{prefix}{styled(entry.display_key, bold=True)} ({entry.type_label})"
    if entry.formatted_default is not None:
        head += f" = {_indent_block(entry.formatted_default, prefix + INDENT)}"
    lines = [head]
    if verbosity > 0:
        for name, value in entry.extra_fields.items():
            if name == Field.SEARCH_FACET:
                continue
            lines.append(f"{prefix}{INDENT}{name}: {_indent_block(value, prefix + INDENT * 2)}")
        if entry.resolved_description:
            lines.append(f"{prefix}{INDENT}{styled(entry.resolved_description, dim=True)}")
    return lines


def _render_text_category(
    node: CategoryOutputNode, depth: int, *, verbosity: int, styled: Styler
) -> list[str]:
    prefix = INDENT * depth
    title = f"{node.label} [{node.id}]" if node.label else f"[{node.id}]"
    lines = [f"{prefix}{styled(title, fg='cyan', bold=True)}"]
    for child in node.children:
        if isinstance(child, CategoryOutputNode):
            lines.extend(
                _render_text_category(child, depth + 1, verbosity=verbosity, styled=styled)
            )
        else:
            lines.extend(_render_text_setting(child, depth + 1, verbosity=verbosity, styled=styled))
    return lines


def render_text(
    reference: SettingsReference, *, verbosity: int = 0, styled: Styler = _plain
) -> str:
    """Render the reference as an indented tree.

    With ``verbosity > 0`` every setting also lists its extra fields (except
    the search facet) and its description.
    """
    lines: list[str] = []
    if reference.caption:
        lines.append(styled(reference.caption, underline=True))
    for node in reference.categories:
        lines.extend(_render_text_category(node, 0, verbosity=verbosity, styled=styled))
    return "\n".join(lines)


def render_json(reference: SettingsReference) -> str:
    """Render the reference as an indented JSON document."""
    return json.dumps(reference.to_dict(), indent=2)


def _md_cell(value: str | None) -> str:
    if not value:
        return ""
    return value.replace("|", "\\|").replace("\n", "<br>")


def _render_markdown_category(node: CategoryOutputNode, depth: int) -> list[str]:
    level = min(depth + 2, 6)
    lines = [f"{'#' * level} {node.label or node.id} {{#{node.anchor}}}", ""]
    settings = node.settings
    if settings:
        lines.append("| Setting | Type | Default | Label |")
        lines.append("| --- | --- | --- | --- |")
        for entry in settings:
            default = f"`{_md_cell(entry.formatted_default)}`" if entry.formatted_default else ""
            lines.append(
                f"| `{entry.display_key}` | {_md_cell(entry.type_label)} | {default} "
                f"| {_md_cell(entry.resolved_label)} |"
            )
        lines.append("")
    for child in node.categories:
        lines.extend(_render_markdown_category(child, depth + 1))
    return lines


def render_markdown(reference: SettingsReference) -> str:
    """Render the reference as Markdown: one section per category.

    A category's own settings are listed in a table before its subsections.
    """
    lines: list[str] = [f"# {reference.caption or 'Site set settings'}", ""]
    for node in reference.categories:
        lines.extend(_render_markdown_category(node, 0))
    return "\n".join(lines).rstrip() + "\n"


def emit_diagnostics(console: ConsoleLike, diagnostics: DiagnosticLog) -> None:
    """Write collected diagnostics to stderr, colored by level."""
    for diag in diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")
