"""Logging helpers used by the application.

This module provides utilities for configuring console logging with Rich and
the default sink for channel logging, which routes channel messages into the
stdlib ``logging`` tree. It also provides a filter that annotates third-party
log records with a short prefix used by console formatting.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from stuff.config import LogConfig

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "stuff"
CHANNELS_LOGGER_NAME = f"{PROJECT_PREFIX}.channels"
CONSOLE_HANDLER_NAME = f"{PROJECT_PREFIX}-console"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def setup_logging(config: LogConfig, color: bool = True) -> RichHandler:
    """Attach a console handler to the root logger.

    The handler sits on the root logger so third-party records reach it too
    (and get their short prefix outside debug mode). The root logger is set to
    DEBUG when ``config.debug`` is on and to INFO otherwise. Calling this again
    replaces the handler installed by the previous call instead of stacking a
    second one.

    Args:
        config: The logging configuration.
        color: Enable color output when True.

    Returns:
        RichHandler: The handler that was attached.
    """
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(existing)
            existing.close()

    level = logging.DEBUG if config.debug else logging.INFO
    handler = config_console_handler(level=level, debug_mode=config.debug, color=color)
    handler.set_name(CONSOLE_HANDLER_NAME)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler


class LoggingSink:
    """Console-like sink that forwards channel messages to a stdlib logger.

    ``log`` emits at INFO, ``warn`` at WARNING and ``error`` at ERROR. The
    arguments are joined with spaces, the way a browser console prints them,
    and formatting is deferred to the logging machinery.

    Args:
        logger: Target logger. Defaults to the ``stuff.channels`` logger.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(CHANNELS_LOGGER_NAME)

    def _emit(self, level: int, args: tuple[Any, ...]) -> None:
        self.logger.log(level, " ".join(["%s"] * len(args)), *args)

    def log(self, *args: Any) -> None:
        """Emit ``args`` at INFO."""
        self._emit(logging.INFO, args)

    def warn(self, *args: Any) -> None:
        """Emit ``args`` at WARNING."""
        self._emit(logging.WARNING, args)

    def error(self, *args: Any) -> None:
        """Emit ``args`` at ERROR."""
        self._emit(logging.ERROR, args)
