# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream package.

UIStream turns an untrusted, incrementally produced JSONL patch stream into an
immutable UI tree, validates and repairs its elements against a schema
catalog, grades the tree with deterministic rules and normalizes known
generation anti-patterns. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations
