# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Configuration layer for Doxlate.

Submodules:
    * `doxlate.config.logging`: TRACE level, colored formatter and logger setup.
    * `doxlate.config.keys`: canonical TOML section and key names.
    * `doxlate.config.model`: `MutableConfig` (builder) and frozen `Config`.
    * `doxlate.config.io`: TOML loading with `tomlkit`.

This package initializer stays import-free so that low-level modules can use
`doxlate.config.logging` without pulling in the registry.
"""

from __future__ import annotations
