# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/catalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packaged schema catalog resources (``default-catalog.toml``)."""
