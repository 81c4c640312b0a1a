# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the sources, tree and CLI layers."""
