"""Logging utilities for the translator.

The translation core never logs. Loggers are injected into the components
around it (bytecode reader, command line) as an optional ``ILoggable``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any

import click


class LogLevel(IntEnum):
    """Log levels for the translator logger."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class ILoggable(ABC):
    """Interface for logging functionality."""

    @abstractmethod
    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        """Log a message at the specified level."""
        ...

    def debug(self, message: str, *args: Any) -> None:
        """Log a debug message."""
        self.log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log an info message."""
        self.log(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args: Any) -> None:
        """Log a warning message."""
        self.log(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log an error message."""
        self.log(LogLevel.ERROR, message, *args)


class ClickLogger(ILoggable):
    """Writes ``[LEVEL] message`` lines to stderr through ``click.echo``.

    Messages below ``min_level`` are dropped. Positional ``args`` are
    interpolated with ``%`` formatting, only when the message is emitted.
    """

    def __init__(self, min_level: LogLevel = LogLevel.WARNING) -> None:
        self.min_level = min_level

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        if level < self.min_level:
            return
        if args:
            message = message % args
        click.echo(f"[{level.name}] {message}", err=True)
