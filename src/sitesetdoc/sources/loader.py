# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : loader.py
#   file_relpath : src/sitesetdoc/sources/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load source documents by *logical path*.

A logical path is what a documentation author writes, for example
``Configuration/settings.definitions.yaml`` or
``PROJECT:/Configuration/Sets/Base/settings.definitions.yaml``.

Documentation usually lives in a ``Documentation/`` subdirectory of the
project it describes, so plain paths resolve against the *documentation root*.
The ``PROJECT:`` prefix switches to the *project root* so that files next to
the documentation (site sets, labels) can be referenced. Neither form may
escape its root.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from sitesetdoc.config.logging import get_logger
from sitesetdoc.constants import PROJECT_PATH_PREFIX
from sitesetdoc.core.errors import SourceNotFoundError

if TYPE_CHECKING:
    from sitesetdoc.config.logging import SitesetLogger

logger: SitesetLogger = get_logger(__name__)


class TextLoader(Protocol):
    """Capability used by the builder to fetch source documents."""

    def load_text(self, path: str) -> str:
        """Return the text of the document at logical ``path``.

        Raises:
            SourceNotFoundError: If the document cannot be located or read.
        """
        ...


class FileSystemLoader:
    """Load logical paths from the local filesystem.

    Args:
        documentation_root (Path): Root for plain logical paths.
        project_root (Path | None): Root for ``PROJECT:`` paths; defaults to
            ``documentation_root``.
    """

    def __init__(self, documentation_root: Path, project_root: Path | None = None) -> None:
        self.documentation_root = documentation_root.resolve()
        self.project_root = (project_root or documentation_root).resolve()

    def resolve(self, path: str) -> Path:
        """Map a logical path to a filesystem path inside its root.

        Args:
            path (str): Logical path, optionally prefixed with ``PROJECT:``.

        Returns:
            Path: The absolute filesystem path.

        Raises:
            SourceNotFoundError: If the path escapes its root or is not a valid
                filesystem path (for example one with a NUL byte).
        """
        if path.startswith(PROJECT_PATH_PREFIX):
            root = self.project_root
            relative = path[len(PROJECT_PATH_PREFIX) :]
        else:
            root = self.documentation_root
            relative = path
        try:
            candidate = (root / relative.lstrip("/")).resolve()
        except (OSError, ValueError) as exc:
            raise SourceNotFoundError(f"Invalid path {path!r}: {exc}", path=path) from exc
        if not candidate.is_relative_to(root):
            raise SourceNotFoundError(f"Path {path} points outside of {root}", path=path)
        return candidate

    def load_text(self, path: str) -> str:
        """Return the UTF-8 text of the document at logical ``path``.

        Raises:
            SourceNotFoundError: If the document does not exist or cannot be read.
        """
        fs_path = self.resolve(path)
        if not fs_path.is_file():
            raise SourceNotFoundError(f"Cannot find the source at {fs_path}", path=path)
        try:
            text = fs_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceNotFoundError(
                f"Cannot load file from path {fs_path}: {exc}", path=path
            ) from exc
        logger.trace("Loaded %s (%d chars) from %s", path, len(text), fs_path)
        return text


class MappingLoader:
    """Serve documents from an in-memory mapping of logical path to text."""

    def __init__(self, documents: Mapping[str, str]) -> None:
        self.documents = dict(documents)

    def load_text(self, path: str) -> str:
        """Return the stored text for ``path``.

        Raises:
            SourceNotFoundError: If no document is stored under ``path``.
        """
        try:
            return self.documents[path]
        except KeyError:
            raise SourceNotFoundError(f"Cannot find the source at {path}", path=path) from None
