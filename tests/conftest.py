"""Global pytest fixtures for stuff."""

from __future__ import annotations

from typing import Any

import pytest

from stuff.config import LogConfig


class RecordingSink:
    """Console-like sink that remembers every call as (method, args)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def log(self, *args: Any) -> None:
        self.calls.append(("log", args))

    def warn(self, *args: Any) -> None:
        self.calls.append(("warn", args))

    def error(self, *args: Any) -> None:
        self.calls.append(("error", args))


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh recording sink per test."""
    return RecordingSink()


@pytest.fixture
def debug_config() -> LogConfig:
    """Debug mode on with the ``net``, ``warn`` and ``error`` channels enabled."""
    return LogConfig(debug=True, channels=frozenset({"net", "warn", "error"}))
