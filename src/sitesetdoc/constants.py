# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : constants.py
#   file_relpath : src/sitesetdoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SiteSetDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SITESETDOC_VERSION: str = get_version("sitesetdoc")

# Environment variable consulted by `setup_logging()` when no level is given:
LOG_LEVEL_ENV_VAR: str = "SITESETDOC_LOG_LEVEL"

# Config files discovered in the working directory (first match wins):
CONFIG_FILE_NAME: str = "sitesetdoc.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "sitesetdoc"

# Optional siblings of the settings definition file:
SET_CONFIG_FILE_NAME: str = "config.yaml"
DEFAULT_LABELS_FILE_NAME: str = "labels.xlf"

# Logical path prefix that resolves against the project root instead of the
# documentation root.
PROJECT_PATH_PREFIX: str = "PROJECT:"

# Search facets attached to every rendered node.
SETTING_FACET: str = "Site Setting"
CATEGORY_FACET: str = "Site Setting Category"

# Id used for the implicit category of uncategorized settings.
GLOBAL_CATEGORY_ID: str = "_global"

# Text of the placeholder returned when the settings cannot be built.
ERROR_PLACEHOLDER_TEXT: str = "The site set settings cannot be displayed."

# Fallback token of `format_default()` for values of unknown kind (sic).
UNKNOWN_VALUE_TOKEN: str = "unkown"

DEFAULT_DISPLAY: str = "table"
