# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for UIStream."""
