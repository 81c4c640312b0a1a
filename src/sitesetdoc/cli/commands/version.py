# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : version.py
#   file_relpath : src/sitesetdoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SiteSetDoc `version` command.

Prints the current SiteSetDoc version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sitesetdoc.cli.cli_types import EnumChoiceParam
from sitesetdoc.cli.options import OutputFormat
from sitesetdoc.constants import SITESETDOC_VERSION

if TYPE_CHECKING:
    from sitesetdoc.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SiteSetDoc.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SiteSetDoc.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SITESETDOC_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SiteSetDoc Version\n")
        console.print(f"**SiteSetDoc version: {SITESETDOC_VERSION}**")
    else:
        console.print(console.styled(SITESETDOC_VERSION, bold=True))
