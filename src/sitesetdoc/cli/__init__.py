# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SiteSetDoc command-line interface (Click)."""
