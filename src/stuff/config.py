"""Configuration for channel-gated debug logging.

This module centralizes the debug flag and the list of enabled log channels,
either built directly or read from the environment:

- ``STUFF_DEBUG``: debug flag (``1/true/yes/on`` or ``0/false/no/off``).
- ``STUFF_LOG_CHANNELS``: channel names separated by commas and/or spaces.
"""

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

DEBUG_ENV_VAR = "STUFF_DEBUG"  # pragma: no mutate
LOG_CHANNELS_ENV_VAR = "STUFF_LOG_CHANNELS"  # pragma: no mutate

TRUTHY = frozenset({"1", "true", "yes", "on"})
FALSY = frozenset({"", "0", "false", "no", "off"})


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidDebugFlagError(ConfigError, ValueError):
    """Raised when the debug flag is not a recognized boolean string."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid value for {DEBUG_ENV_VAR}: {value!r}. "
            f"Expected one of {sorted(TRUTHY | FALSY - {''})}."
        )
        self.value = value


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Debug flag and enabled channels, fixed for the lifetime of a logger."""

    debug: bool = False
    channels: frozenset[str] = field(default_factory=frozenset)


def parse_channels(value: str | Iterable[str]) -> frozenset[str]:
    """Normalize channel names into a set.

    Accepts either a single string (which may contain several comma/space-
    separated names) or a sequence of such strings. Empty fragments are
    dropped.
    """
    if isinstance(value, str):
        value = [value]
    channels: set[str] = set()
    for v in value:
        channels.update(s for s in re.split(r"[,\s]+", v) if s)
    return frozenset(channels)


def parse_debug_flag(value: str | None) -> bool:
    """Interpret a boolean-ish string; ``None`` and ``""`` mean False.

    Raises:
        InvalidDebugFlagError: If the value is not recognized.
    """
    normalized = (value or "").strip().lower()
    if normalized in TRUTHY:
        return True
    if normalized in FALSY:
        return False
    raise InvalidDebugFlagError(value or "")


def load_log_config(environ: Mapping[str, str] | None = None) -> LogConfig:
    """Build a `LogConfig` from environment variables.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`; override in
            tests.

    Returns:
        The configuration. Unset variables give a disabled debug flag and no
        channels.

    Raises:
        InvalidDebugFlagError: If `STUFF_DEBUG` holds an unrecognized value.
    """
    if environ is None:
        environ = os.environ
    return LogConfig(
        debug=parse_debug_flag(environ.get(DEBUG_ENV_VAR)),
        channels=parse_channels(environ.get(LOG_CHANNELS_ENV_VAR, "")),
    )
