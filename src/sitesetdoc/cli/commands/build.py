# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : build.py
#   file_relpath : src/sitesetdoc/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SiteSetDoc `build` command.

Builds the settings reference of one ``settings.definitions.yaml`` and prints
it as a tree, JSON or Markdown.

Option precedence: defaults < ``sitesetdoc.toml`` / ``[tool.sitesetdoc]`` <
command-line flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sitesetdoc.cli.cli_types import EnumChoiceParam
from sitesetdoc.cli.emitters import emit_diagnostics, render_json, render_markdown, render_text
from sitesetdoc.cli.errors import (
    SiteSetDocConfigError,
    SiteSetDocFileNotFoundError,
    SiteSetDocSourceMalformedError,
)
from sitesetdoc.cli.options import OutputFormat
from sitesetdoc.config.logging import get_logger
from sitesetdoc.config.model import BuildOptions, MutableBuildOptions
from sitesetdoc.constants import ERROR_PLACEHOLDER_TEXT
from sitesetdoc.core.diagnostics import DiagnosticLog
from sitesetdoc.core.errors import SourceMalformedError, SourceMissingError
from sitesetdoc.sources.loader import FileSystemLoader
from sitesetdoc.tree.builder import build_settings_reference

if TYPE_CHECKING:
    from sitesetdoc.cli.console import ConsoleLike

logger = get_logger(__name__)


def resolve_build_options(
    *,
    config_file: Path | None,
    no_config: bool,
    cli_args: dict[str, object],
) -> BuildOptions:
    """Layer defaults, the TOML config file and CLI flags into `BuildOptions`.

    Args:
        config_file (Path | None): Explicit config file (``--config``).
        no_config (bool): Skip config discovery in the working directory.
        cli_args (dict[str, object]): CLI values keyed by option name.

    Returns:
        BuildOptions: The frozen options.

    Raises:
        SiteSetDocConfigError: If ``config_file`` is given but cannot be read.
    """
    if config_file is not None:
        if not config_file.is_file():
            raise SiteSetDocConfigError(f"Config file not found: {config_file}")
        options = MutableBuildOptions.from_toml_file(config_file)
    else:
        discovered = None if no_config else MutableBuildOptions.discover_config_file(Path.cwd())
        options = (
            MutableBuildOptions.from_toml_file(discovered) if discovered else MutableBuildOptions()
        )
        if discovered:
            logger.info("Using configuration from %s", discovered)
    return options.apply_cli_args(cli_args).freeze()


@click.command(
    name="build",
    help=(
        "Build the settings reference of SETTINGS_FILE, a logical path such as "
        "'Configuration/settings.definitions.yaml' or "
        "'PROJECT:/Configuration/Sets/Base/settings.definitions.yaml'."
    ),
)
@click.argument("source", metavar="SETTINGS_FILE")
@click.option(
    "--categories",
    "categories_file",
    default=None,
    help="Logical path of a separate document with a 'categories' mapping.",
)
@click.option(
    "--labels",
    "labels_file",
    default=None,
    help="Logical path of the XLIFF labels file (default: from config.yaml, else labels.xlf).",
)
@click.option("--name", default=None, help="Menu name; prefixes every anchor with '<name>-'.")
@click.option("--caption", default=None, help="Caption of the settings menu.")
@click.option("--display", default=None, help="Display mode hint for renderers (default: table).")
@click.option("--noindex", is_flag=True, default=False, help="Mark entries as not indexed.")
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="Extra column, as NAME or NAME=max=N. May be repeated.",
)
@click.option(
    "--docs-root",
    "documentation_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root for plain logical paths (default: current directory).",
)
@click.option(
    "--project-root",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root for 'PROJECT:' logical paths (default: current directory).",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read options from this TOML file instead of discovering one.",
)
@click.option("--no-config", is_flag=True, default=False, help="Ignore local config files.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def build_command(
    *,
    source: str,
    categories_file: str | None,
    labels_file: str | None,
    name: str | None,
    caption: str | None,
    display: str | None,
    noindex: bool,
    fields: tuple[str, ...],
    documentation_root: Path | None,
    project_root: Path | None,
    config_file: Path | None,
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Build and print the settings reference of SETTINGS_FILE."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    options = resolve_build_options(
        config_file=config_file,
        no_config=no_config,
        cli_args={
            "name": name,
            "caption": caption,
            "display": display,
            "noindex": noindex,
            "fields": fields,
            "categories_file": categories_file,
            "labels_file": labels_file,
            "documentation_root": documentation_root,
            "project_root": project_root,
        },
    )
    loader = FileSystemLoader(options.documentation_root, options.project_root)
    diagnostics = DiagnosticLog()

    try:
        reference = build_settings_reference(
            source, loader=loader, options=options, diagnostics=diagnostics
        )
    except SourceMissingError as exc:
        logger.warning("%s", exc)
        raise SiteSetDocFileNotFoundError(f"{ERROR_PLACEHOLDER_TEXT} {exc}") from exc
    except SourceMalformedError as exc:
        logger.warning("%s", exc)
        raise SiteSetDocSourceMalformedError(f"{ERROR_PLACEHOLDER_TEXT} {exc}") from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(render_json(reference))
    elif fmt == OutputFormat.MARKDOWN:
        console.print(render_markdown(reference), nl=False)
    else:
        console.print(render_text(reference, verbosity=verbosity, styled=console.styled))

    if verbosity >= 0:
        emit_diagnostics(console, diagnostics)
    if verbosity > 1:
        stats = diagnostics.stats()
        console.warn(
            f"{stats.total} diagnostic(s): {stats.n_warning} warning(s), {stats.n_error} error(s)"
        )
