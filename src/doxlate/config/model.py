# doxlate:header:start
#
#   project      : Doxlate
#   file         : model.py
#   file_relpath : src/doxlate/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate configuration model: mutable builder and frozen runtime snapshot.

Immutability:
    - `Config` is ``frozen=True`` and stores a read-only tag overlay plus a
      frozenset of removals. Use `Config.thaw` -> edit -> `MutableConfig.freeze`
      for updates.
    - `MutableConfig` collects values from defaults, TOML sources and CLI
      options with last-wins semantics.

TOML I/O lives in `doxlate.config.io`; this module only interprets tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from doxlate.config.io import (
    extract_doxlate_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table,
    load_toml_dict,
    warn_unknown_keys,
)
from doxlate.config.keys import Toml
from doxlate.config.logging import get_logger
from doxlate.constants import DEFAULT_LINE_PREFIX
from doxlate.errors import ConfigError
from doxlate.registry.handlers import HandlerKind, TagHandler
from doxlate.registry.tags import get_tag_registry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from doxlate.config.io import TomlTable
    from doxlate.config.logging import DoxlateLogger
    from doxlate.registry.tags import TagRegistry

logger: DoxlateLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Doxlate.

    Attributes:
        line_prefix (str): Continuation prefix of every generated comment line.
        strip_params (bool): Drop ``param`` blocks naming parameters the declaration
            does not have. ``False`` keeps them all, like a per-declaration
            ``doxygen:nostripparams`` feature applied globally.
        debug_translator (bool): Log the intermediate trees at DEBUG level.
        tag_overrides (Mapping[str, TagHandler]): Entries added to or replacing the
            built-in tag table.
        disabled_tags (frozenset[str]): Built-in commands removed from the table.
        config_files (tuple[str, ...]): Sources merged into this config.
    """

    line_prefix: str = DEFAULT_LINE_PREFIX
    strip_params: bool = True
    debug_translator: bool = False
    tag_overrides: Mapping[str, TagHandler] = field(
        default_factory=lambda: MappingProxyType({})
    )
    disabled_tags: frozenset[str] = frozenset()
    config_files: tuple[str, ...] = ()

    @property
    def has_tag_overlay(self) -> bool:
        """Whether this config changes the built-in tag table."""
        return bool(self.tag_overrides) or bool(self.disabled_tags)

    def registry(self) -> TagRegistry:
        """Return the tag registry this configuration translates with.

        Without an overlay this is the shared built-in registry.
        """
        base: TagRegistry = get_tag_registry()
        if not self.has_tag_overlay:
            return base
        return base.with_overlay(self.tag_overrides, self.disabled_tags)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            line_prefix=self.line_prefix,
            strip_params=self.strip_params,
            debug_translator=self.debug_translator,
            tag_overrides=dict(self.tag_overrides),
            disabled_tags=set(self.disabled_tags),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging sources.

    ``None`` means "not set by this layer" so that merging keeps the value of
    the layer below.
    """

    line_prefix: str | None = None
    strip_params: bool | None = None
    debug_translator: bool | None = None
    tag_overrides: dict[str, TagHandler] = field(default_factory=lambda: {})
    disabled_tags: set[str] = field(default_factory=lambda: set())
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls(
            line_prefix=DEFAULT_LINE_PREFIX,
            strip_params=True,
            debug_translator=False,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, source: str = "<dict>") -> MutableConfig:
        """Build a layer from a Doxlate settings table.

        Args:
            table (TomlTable): The settings (top level of ``doxlate.toml`` or
                ``[tool.doxlate]``).
            source (str): Name used in log messages and ``config_files``.

        Returns:
            MutableConfig: A layer holding only the values present in ``table``.

        Raises:
            ConfigError: If a value has the wrong type or a tag entry is invalid.
        """
        warn_unknown_keys(table, source)

        formatting: TomlTable = get_table(table, Toml.SECTION_FORMATTING)
        translation: TomlTable = get_table(table, Toml.SECTION_TRANSLATION)
        tags: TomlTable = get_table(table, Toml.SECTION_TAGS)

        draft = cls(
            line_prefix=get_string_value_or_none(formatting, Toml.KEY_LINE_PREFIX),
            strip_params=get_bool_value_or_none(translation, Toml.KEY_STRIP_PARAMS),
            debug_translator=get_bool_value_or_none(translation, Toml.KEY_DEBUG),
            config_files=[source],
        )

        for name, value in tags.items():
            if value is False:
                draft.disabled_tags.add(name)
                continue
            draft.tag_overrides[name] = _parse_tag_entry(name, value, source)

        logger.debug(
            "Loaded config layer from %s: %d tag overrides, %d disabled tags",
            source,
            len(draft.tag_overrides),
            len(draft.disabled_tags),
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a layer from ``doxlate.toml`` or ``pyproject.toml``."""
        data: TomlTable = load_toml_dict(path)
        return cls.from_toml_dict(extract_doxlate_table(path, data), source=str(path))

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` win.

        Tag overrides and removals accumulate; a later override re-enables a
        command an earlier layer disabled.
        """
        tag_overrides: dict[str, TagHandler] = {**self.tag_overrides, **other.tag_overrides}
        disabled: set[str] = (self.disabled_tags - set(other.tag_overrides)) | other.disabled_tags
        for name in other.disabled_tags:
            tag_overrides.pop(name, None)
        return MutableConfig(
            line_prefix=other.line_prefix if other.line_prefix is not None else self.line_prefix,
            strip_params=(
                other.strip_params if other.strip_params is not None else self.strip_params
            ),
            debug_translator=(
                other.debug_translator
                if other.debug_translator is not None
                else self.debug_translator
            ),
            tag_overrides=tag_overrides,
            disabled_tags=disabled,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`; unset values take defaults."""
        return Config(
            line_prefix=self.line_prefix if self.line_prefix is not None else DEFAULT_LINE_PREFIX,
            strip_params=self.strip_params if self.strip_params is not None else True,
            debug_translator=bool(self.debug_translator),
            tag_overrides=MappingProxyType(dict(self.tag_overrides)),
            disabled_tags=frozenset(self.disabled_tags),
            config_files=tuple(self.config_files),
        )


def _parse_tag_entry(name: str, value: Any, source: str) -> TagHandler:
    if not isinstance(value, dict):
        raise ConfigError(
            f"{source}: [tags] entry '{name}' must be a table or false, got {value!r}"
        )
    entry: TomlTable = cast("TomlTable", value)
    for key in entry:
        if key not in Toml.ALLOWED_TAG_KEYS:
            logger.warning("%s: unknown key '%s' in [tags] entry '%s' ignored", source, key, name)
    handler: str | None = get_string_value_or_none(entry, Toml.KEY_HANDLER)
    if handler is None:
        raise ConfigError(f"{source}: [tags] entry '{name}' requires '{Toml.KEY_HANDLER}'")
    try:
        kind: HandlerKind = HandlerKind.parse(handler)
    except ValueError as exc:
        raise ConfigError(f"{source}: [tags] entry '{name}': {exc}") from exc
    return TagHandler(kind, get_string_value_or_none(entry, Toml.KEY_ARG) or "")


def load_config(*paths: Path) -> Config:
    """Merge the defaults with every TOML source in ``paths`` (later wins)."""
    draft: MutableConfig = MutableConfig.from_defaults()
    for path in paths:
        draft = draft.merge_with(MutableConfig.from_toml_file(path))
    return draft.freeze()
