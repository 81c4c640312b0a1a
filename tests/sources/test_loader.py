# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : test_loader.py
#   file_relpath : tests/sources/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for logical path loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sitesetdoc.core.errors import SourceNotFoundError
from sitesetdoc.sources.loader import FileSystemLoader, MappingLoader
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _tree(tmp_path: Path) -> tuple[Path, Path]:
    project = tmp_path / "project"
    docs = project / "Documentation"
    docs.mkdir(parents=True)
    (docs / "local.yaml").write_text("in docs", encoding="utf-8")
    (project / "shared.yaml").write_text("in project", encoding="utf-8")
    return docs, project


def test_plain_paths_resolve_against_documentation_root(tmp_path: Path) -> None:
    """Plain logical paths are read from the documentation root."""
    docs, project = _tree(tmp_path)

    assert FileSystemLoader(docs, project).load_text("local.yaml") == "in docs"


@parametrize("path", ["PROJECT:/shared.yaml", "PROJECT:shared.yaml"])
def test_project_prefix_switches_root(tmp_path: Path, path: str) -> None:
    """``PROJECT:`` paths are read from the project root."""
    docs, project = _tree(tmp_path)

    assert FileSystemLoader(docs, project).load_text(path) == "in project"


def test_project_root_defaults_to_documentation_root(tmp_path: Path) -> None:
    """Without a project root both forms share one root."""
    docs, _project = _tree(tmp_path)

    assert FileSystemLoader(docs).load_text("PROJECT:/local.yaml") == "in docs"


@parametrize("path", ["../shared.yaml", "PROJECT:/../outside.yaml", "/../../etc/hosts"])
def test_paths_may_not_escape_their_root(tmp_path: Path, path: str) -> None:
    """Traversal out of a root is rejected before touching the file."""
    docs, project = _tree(tmp_path)
    (tmp_path / "outside.yaml").write_text("secret", encoding="utf-8")

    with pytest.raises(SourceNotFoundError) as excinfo:
        FileSystemLoader(docs, project).load_text(path)
    assert excinfo.value.path == path


def test_missing_file_raises(tmp_path: Path) -> None:
    """A file that does not exist cannot be loaded."""
    docs, project = _tree(tmp_path)

    with pytest.raises(SourceNotFoundError):
        FileSystemLoader(docs, project).load_text("nope.yaml")


def test_directory_is_not_a_source(tmp_path: Path) -> None:
    """Only regular files are loaded."""
    docs, project = _tree(tmp_path)

    with pytest.raises(SourceNotFoundError):
        FileSystemLoader(docs, project).load_text("PROJECT:/Documentation")


def test_undecodable_file_raises(tmp_path: Path) -> None:
    """Files that are not UTF-8 are reported as unreadable."""
    docs, project = _tree(tmp_path)
    (docs / "latin1.yaml").write_bytes(b"caf\xe9\xff")

    with pytest.raises(SourceNotFoundError):
        FileSystemLoader(docs, project).load_text("latin1.yaml")


def test_mapping_loader() -> None:
    """The in-memory loader serves exact paths only."""
    loader = MappingLoader({"a.yaml": "text"})

    assert loader.load_text("a.yaml") == "text"
    with pytest.raises(SourceNotFoundError):
        loader.load_text("b.yaml")


@parametrize("path", ["a\x00b.xlf", "PROJECT:/Configuration/\x00"])
def test_invalid_path_is_reported_as_not_found(tmp_path: Path, path: str) -> None:
    """A path the filesystem cannot represent is an unavailable source."""
    docs, project = _tree(tmp_path)

    with pytest.raises(SourceNotFoundError) as excinfo:
        FileSystemLoader(docs, project).load_text(path)
    assert excinfo.value.path == path
