# topmark:header:start
#
#   project      : IniFmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the IniFmt test suite.

This file sets up typed marks, global fixtures and the logging configuration for
test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    with `inifmt.config.MutableConfig`, then `freeze()` into a
    `inifmt.config.Config`. To tweak a frozen config, `thaw()` it, edit the
    draft and `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from inifmt.config import MutableConfig, logging
from inifmt.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from inifmt.config import Config

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a callable and returns the same callable type.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_formatter: DecoratorType[Any] = as_typed_mark(pytest.mark.formatter)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_inifmt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure IniFmt's runtime log level is not forced via env during tests.

    A developer may have exported ``INIFMT_LOG_LEVEL`` in their shell; the CLI
    would then write log records to stderr and break output assertions.
    ``FORCE_COLOR``/``NO_COLOR`` are cleared for the same reason.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to manipulate environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE and register the Hypothesis profiles.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)

    # Example counts for property tests; `--hypothesis-profile=thorough` selects the large one.
    settings.register_profile("inifmt", max_examples=150, deadline=None)
    settings.register_profile("thorough", max_examples=2000, deadline=None)
    settings.load_profile("inifmt")


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated project directory.

    The directory holds an ``inifmt.toml`` with ``root = true`` so config
    discovery never escapes into the surrounding filesystem.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "inifmt.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field values applied on top of the defaults
            (e.g. ``per_section=True``).

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_args(overrides)
    return draft.freeze()
