# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Subcommands of the ``doxlate`` CLI."""
