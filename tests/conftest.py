# topmark:header:start
#
#   project      : AlignChar
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Pytest configuration for the AlignChar test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs with `alignchar.config.AlignConfig(...)` directly, or through
      `alignchar.config.MutableAlignConfig` and `freeze()`.
    - Do **not** mutate a frozen `AlignConfig`. If you need to tweak one,
      call `AlignConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from alignchar.config import logging
from alignchar.config.model import AlignConfig
from alignchar.constants import LOG_LEVEL_ENV_VAR
from alignchar.core.engine import ProcessResult, process

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_alignchar_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure AlignChar's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    ALIGNCHAR_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so per-line decisions are exercised in every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> AlignConfig:
    """Return a frozen `AlignConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values passed to `AlignConfig`.

    Returns:
        AlignConfig: The (unvalidated) configuration.
    """
    return AlignConfig(**overrides)


def run_process(data: bytes, config: AlignConfig | None = None) -> tuple[bytes, ProcessResult]:
    """Run the engine over in-memory bytes.

    Args:
        data (bytes): Input content.
        config (AlignConfig | None): Alignment settings (defaults if None).

    Returns:
        tuple[bytes, ProcessResult]: The output bytes and the run counters.
    """
    out = io.BytesIO()
    result: ProcessResult = process(io.BytesIO(data), out, config or AlignConfig())
    return out.getvalue(), result


class FailingReader(io.RawIOBase):
    """Binary stream that yields ``data`` and then raises `OSError` on the next read."""

    def __init__(self, data: bytes = b"") -> None:
        super().__init__()
        self._data = data
        self._pos = 0

    def readable(self) -> bool:
        """Report the stream as readable."""
        return True

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes, or fail once the data is exhausted."""
        if self._pos >= len(self._data):
            raise OSError("simulated read failure")
        chunk = self._data[self._pos : self._pos + max(size, 1)]
        self._pos += len(chunk)
        return chunk


class FailingWriter(io.BytesIO):
    """In-memory sink that accepts ``limit`` bytes and then raises `OSError`."""

    def __init__(self, limit: int = 0) -> None:
        super().__init__()
        self._limit = limit

    def write(self, data: Any) -> int:
        """Store ``data`` unless it would exceed the limit."""
        if self.tell() + len(data) > self._limit:
            raise OSError("simulated write failure")
        return super().write(data)
