# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : __init__.py
#   file_relpath : src/sitesetdoc/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Construction of the categorized settings tree.

Data flows strictly upward:

1. `labels` resolves translation entries into label/description mappings.
2. `categories` indexes category declarations and links them into a forest.
3. `entries` builds one `SettingEntry` per setting definition.
4. `assembler` attaches entries to categories and renders the output forest.

`builder` wires the source documents into that flow.
"""
