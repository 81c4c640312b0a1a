# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : discovery.py
#   file_relpath : src/sitesetdoc/sources/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the optional documents that accompany a settings definition file.

A site set directory typically looks like::

    Configuration/Sets/Base/
        config.yaml                  # may declare `labels: EXT:my_ext/...xlf`
        settings.definitions.yaml
        labels.xlf                   # used when config.yaml names no labels file
"""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING

from sitesetdoc.config.keys import Yaml
from sitesetdoc.config.logging import get_logger
from sitesetdoc.constants import (
    DEFAULT_LABELS_FILE_NAME,
    PROJECT_PATH_PREFIX,
    SET_CONFIG_FILE_NAME,
)
from sitesetdoc.core.errors import SourceError
from sitesetdoc.sources.parsers import parse_structured

if TYPE_CHECKING:
    from sitesetdoc.config.logging import SitesetLogger
    from sitesetdoc.sources.loader import TextLoader

logger: SitesetLogger = get_logger(__name__)

_EXTENSION_PREFIX_RE = re.compile(r"^EXT:[^/]*/")


def sibling_path(source: str, name: str) -> str:
    """Return the logical path of ``name`` in the directory of ``source``.

    Args:
        source (str): Logical path of a document, e.g. ``PROJECT:/Sets/A/settings.yaml``.
        name (str): File name of the sibling.

    Returns:
        str: e.g. ``PROJECT:/Sets/A/config.yaml``.
    """
    directory = posixpath.dirname(source)
    return posixpath.join(directory, name) if directory else name


def rewrite_extension_path(path: str) -> str:
    """Map an ``EXT:<extension>/`` reference onto the rendered project.

    Extension references are assumed to point into the project being
    documented, so ``EXT:my_ext/Resources/labels.xlf`` becomes
    ``PROJECT:/Resources/labels.xlf``. Other paths are returned unchanged.
    """
    return _EXTENSION_PREFIX_RE.sub(f"{PROJECT_PATH_PREFIX}/", path, count=1)


def locate_labels_file(source: str, loader: TextLoader, *, explicit: str | None = None) -> str:
    """Return the logical path of the translation file for ``source``.

    Precedence: ``explicit`` > ``labels`` in the sibling ``config.yaml`` >
    sibling ``labels.xlf``. A missing or malformed ``config.yaml`` is ignored.

    Args:
        source (str): Logical path of the settings definition file.
        loader (TextLoader): Loader used to read ``config.yaml``.
        explicit (str | None): Labels file requested by the caller.

    Returns:
        str: Logical path of the translation file (it may not exist).
    """
    if explicit:
        return explicit

    config_path = sibling_path(source, SET_CONFIG_FILE_NAME)
    labels: object = None
    try:
        data = parse_structured(loader.load_text(config_path), path=config_path)
    except SourceError as exc:
        logger.debug("Ignoring optional %s: %s", config_path, exc)
    else:
        if isinstance(data, dict):
            labels = data.get(Yaml.KEY_LABELS)

    if isinstance(labels, str) and labels:
        return rewrite_extension_path(labels)
    return sibling_path(source, DEFAULT_LABELS_FILE_NAME)
