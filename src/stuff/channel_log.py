"""Debug logging gated by named channels.

A `ChannelLogger` only emits when debug mode is on and the message's channel
is listed in its `LogConfig`. Messages go to a console-like sink: any object
with ``log``, ``warn`` and ``error`` methods. A missing sink, or a sink
lacking the method for a message type, silently drops the message.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, Protocol, TypeAlias

from stuff.config import LogConfig
from stuff.logging import LoggingSink

MessageType: TypeAlias = Literal["log", "warn", "error"]

WARN_CHANNEL = "warn"
ERROR_CHANNEL = "error"

# pylint: disable=too-few-public-methods


class Sink(Protocol):
    """Console-like target for channel messages."""

    def log(self, *args: Any) -> None: ...  # pragma: no cover

    def warn(self, *args: Any) -> None: ...  # pragma: no cover

    def error(self, *args: Any) -> None: ...  # pragma: no cover


_DEFAULT_SINK: Any = object()


class ChannelLogger:
    """Channel-gated logger bound to a fixed configuration.

    Args:
        config: Debug flag and enabled channels. Not modified afterwards.
        sink: Where enabled messages go. Defaults to a `LoggingSink`; pass
            ``None`` for a logger that never emits.
    """

    __slots__ = ("_config", "_sink")

    def __init__(self, config: LogConfig, sink: Sink | None = _DEFAULT_SINK) -> None:
        self._config = config
        self._sink = LoggingSink() if sink is _DEFAULT_SINK else sink

    @property
    def config(self) -> LogConfig:
        """Return the configuration this logger was built with."""
        return self._config

    @property
    def sink(self) -> Sink | None:
        """Return the sink, or None if the logger has none."""
        return self._sink

    def enabled_for(self, channel: str) -> bool:
        """Return True if messages on ``channel`` are emitted.

        Requires debug mode and ``channel`` among the configured channels.
        Unknown channels are simply disabled.
        """
        return self._config.debug and channel in self._config.channels

    def log(self, channel: str, args: Sequence[Any]) -> None:
        """Log ``args`` to ``channel``."""
        self._emit(channel, "log", args)

    def warn(self, args: Sequence[Any]) -> None:
        """Log ``args`` as a warning on the ``warn`` channel."""
        self._emit(WARN_CHANNEL, "warn", args)

    def error(self, args: Sequence[Any]) -> None:
        """Log ``args`` as an error on the ``error`` channel."""
        self._emit(ERROR_CHANNEL, "error", args)

    def _emit(self, channel: str, message_type: MessageType, args: Sequence[Any]) -> None:
        if not self.enabled_for(channel):
            return
        method = getattr(self._sink, message_type, None)
        if callable(method):
            method(*args)
