# topmark:header:start
#
#   project      : UIStream
#   file         : __main__.py
#   file_relpath : src/uistream/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m uistream``."""

from uistream.cli.main import cli

if __name__ == "__main__":
    cli()
