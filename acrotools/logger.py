"""Levelled log messages tagged with sender and receiver."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Callable, Optional


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


_PREFIXES = {
    LogLevel.DEBUG: "D]",
    LogLevel.INFO: "I]",
    LogLevel.WARN: "W]",
    LogLevel.ERROR: "E]",
    LogLevel.FATAL: "F]",
}


def _timestamp(now: datetime) -> str:
    return now.strftime("[%Y/%m/%d %H:%M:%S.") + f"{now.microsecond // 1000:03d}-"


class Logger:
    """Formats log lines and hands them to a sink callable."""

    def __init__(
        self,
        sink: Optional[Callable[[str], None]] = None,
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        self.sink = sink
        self.level = LogLevel(level)

    def set_level(self, level: LogLevel) -> None:
        """Set the lowest level that is still emitted."""
        self.level = LogLevel(level)

    def format_message(self, level: LogLevel, sender: str, receiver: str, fmt: str, *args) -> str:
        """Build the message body, without the timestamp."""
        text = fmt % args if args else fmt
        return f"{_PREFIXES[LogLevel(level)]}[{sender}][{receiver}]{text}"

    def log(self, level: LogLevel, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        """Emit a timestamped line; return it, or None if the level is filtered."""
        level = LogLevel(level)
        if self.level > level:
            return None
        line = _timestamp(datetime.now()) + self.format_message(level, sender, receiver, fmt, *args)
        if self.sink is not None:
            self.sink(line)
        return line

    def debug(self, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        return self.log(LogLevel.DEBUG, sender, receiver, fmt, *args)

    def info(self, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        return self.log(LogLevel.INFO, sender, receiver, fmt, *args)

    def warn(self, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        return self.log(LogLevel.WARN, sender, receiver, fmt, *args)

    def error(self, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        return self.log(LogLevel.ERROR, sender, receiver, fmt, *args)

    def fatal(self, sender: str, receiver: str, fmt: str, *args) -> Optional[str]:
        return self.log(LogLevel.FATAL, sender, receiver, fmt, *args)