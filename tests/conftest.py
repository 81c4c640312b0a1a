# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SiteSetDoc test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small builders for site set source documents.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
import yaml

from sitesetdoc.config import logging
from sitesetdoc.sources.loader import MappingLoader

if TYPE_CHECKING:
    from collections.abc import Mapping

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_sitesetdoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SiteSetDoc's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SITESETDOC_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failing tests show how the tree was built.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def yaml_text(data: Mapping[str, Any]) -> str:
    """Serialize a mapping as a YAML document (key order preserved)."""
    return yaml.safe_dump(dict(data), sort_keys=False)


def xliff_text(units: Mapping[str, str], *, namespaced: bool = True) -> str:
    """Build a minimal XLIFF 1.2 document from ``id -> source text`` pairs."""
    xmlns = ' xmlns="urn:oasis:names:tc:xliff:document:1.2"' if namespaced else ""
    body = "".join(
        f'      <trans-unit id="{unit_id}"><source>{text}</source></trans-unit>\n'
        for unit_id, text in units.items()
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<xliff version="1.2"{xmlns}>\n'
        '  <file source-language="en" datatype="plaintext" original="labels.xlf">\n'
        "    <body>\n"
        f"{body}"
        "    </body>\n"
        "  </file>\n"
        "</xliff>\n"
    )


def make_loader(documents: Mapping[str, str | Mapping[str, Any]]) -> MappingLoader:
    """Return a `MappingLoader`; mapping values are serialized as YAML."""
    return MappingLoader(
        {path: doc if isinstance(doc, str) else yaml_text(doc) for path, doc in documents.items()}
    )


@pytest.fixture
def site_set(tmp_path: Path) -> Path:
    """Create a small project with one site set on disk.

    Layout::

        <tmp>/project/
            Configuration/Sets/Base/settings.definitions.yaml
            Configuration/Sets/Base/labels.xlf
            Documentation/

    Returns:
        Path: The project root.
    """
    project = tmp_path / "project"
    set_dir = project / "Configuration" / "Sets" / "Base"
    set_dir.mkdir(parents=True)
    (project / "Documentation").mkdir()
    (set_dir / "settings.definitions.yaml").write_text(
        yaml_text(
            {
                "categories": {
                    "styles": {"label": "Styles"},
                    "styles.links": {"parent": "styles"},
                },
                "settings": {
                    "styles.links.color": {
                        "type": "color",
                        "default": "#0000ff",
                        "category": "styles.links",
                    },
                    "debug": {"type": "bool", "default": False},
                },
            }
        ),
        encoding="utf-8",
    )
    (set_dir / "labels.xlf").write_text(
        xliff_text(
            {
                "categories.styles.links": "Links",
                "settings.styles.links.color": "Link color",
                "settings.description.styles.links.color": "Color of all links.",
            }
        ),
        encoding="utf-8",
    )
    return project
