# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: group-level behavior (help, verbosity flags)."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_no_command_prints_hint_and_help() -> None:
    """Running without a subcommand shows a hint and the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "sitesetdoc build SETTINGS_FILE" in result.output
    assert "build" in result.output
    assert "version" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` and ``-q`` cannot be combined."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_build_help_lists_options() -> None:
    """The build command documents its options."""
    result = run_cli(["build", "--help"])

    assert_SUCCESS(result)
    for option in ("--categories", "--labels", "--name", "--field", "--project-root", "--format"):
        assert option in result.output
