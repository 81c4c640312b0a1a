# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __main__.py
#   file_relpath : src/sitesetdoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SiteSetDoc via ``python -m sitesetdoc``.

Delegates directly to `sitesetdoc.cli.main.cli`, so the module form and the
``sitesetdoc`` console script share a single entry point.

Examples:
    Build the reference tree of a site set::

        python -m sitesetdoc build Configuration/Sets/Base/settings.definitions.yaml
"""

from __future__ import annotations

from sitesetdoc.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
