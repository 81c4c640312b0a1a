# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from sitesetdoc.constants import SITESETDOC_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_installed_version() -> None:
    """It prints the installed package version."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SITESETDOC_VERSION


@mark_cli
def test_version_json() -> None:
    """JSON output is a single object."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": SITESETDOC_VERSION}


@mark_cli
def test_version_markdown() -> None:
    """Markdown output has a heading and the version."""
    result = run_cli(["version", "--format", "MARKDOWN"])

    assert_SUCCESS(result)
    assert result.output.startswith("# SiteSetDoc Version")
    assert SITESETDOC_VERSION in result.output
