# doxlate:header:start
#
#   project      : Doxlate
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Pytest configuration for the Doxlate test suite.

Provides typed marker helpers, entity builders shared across test modules and
a TRACE-level logging setup for the whole run.

Notes:
    Build configurations with `doxlate.config.model.MutableConfig` and
    `freeze()` them; never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from doxlate.config import logging
from doxlate.config.model import MutableConfig
from doxlate.declaration import Declaration
from doxlate.tree.entity import Entity

if TYPE_CHECKING:
    from doxlate.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# Type of a decorator that returns the callable it wraps.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_doxlate_env_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ``DOXLATE_LOG_LEVEL`` from the developer shell does not leak in.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to drop the variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- entity builders -----------------------------------------------------------


def text(data: str) -> Entity:
    """Plain text run."""
    return Entity.text(data)


def endl() -> Entity:
    """Blank-line marker."""
    return Entity.endline()


def node(tag: str, *children: Entity) -> Entity:
    """Inner node with ``children``."""
    return Entity.node(tag, children)


def param(name: str, *body: Entity) -> Entity:
    """``param`` block naming ``name``."""
    return Entity.node("param", [text(name), *body])


def declaration(*tree: Entity, parameters: tuple[str, ...] = (), **kwargs: Any) -> Declaration:
    """Documented declaration carrying a pre-parsed ``tree``."""
    kwargs.setdefault("comment", "")
    return Declaration(name="Subject", parameters=parameters, tree=list(tree), **kwargs)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``."""
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()
