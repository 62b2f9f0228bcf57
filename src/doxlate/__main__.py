# doxlate:header:start
#
#   project      : Doxlate
#   file         : __main__.py
#   file_relpath : src/doxlate/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Allow ``python -m doxlate``."""

from doxlate.cli.main import cli

if __name__ == "__main__":
    cli()
