"""Engine and application loggers sharing a console and a file sink."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["TRACE", "init", "shutdown", "get_core_logger", "get_client_logger"]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_TIME_FORMAT = "%H:%M:%S"
_RESET = "\033[0m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}


class _EngineLogger(logging.Logger):
    def trace(self, msg, *args, **kwargs) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, color: bool) -> None:
        super().__init__("[%(asctime)s] %(name)s: %(message)s", datefmt=_TIME_FORMAT)
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if self._color:
            return f"{_COLORS.get(record.levelno, '')}{text}{_RESET}"
        return text


class _FileFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s", datefmt=_TIME_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = record.levelname.lower()
        return super().format(record)


@dataclass
class _Loggers:
    core: Optional[_EngineLogger] = None
    client: Optional[_EngineLogger] = None
    handlers: list[logging.Handler] = field(default_factory=list)


_loggers = _Loggers()


def _make_logger(name: str, handlers: list[logging.Handler]) -> _EngineLogger:
    logger = _EngineLogger(name, TRACE)
    logger.propagate = False
    for handler in handlers:
        logger.addHandler(handler)
    return logger


def init(log_file: str = "PhysiXal.log") -> None:
    """Create the PHYSIXAL and APP loggers; the log file is truncated."""
    if _loggers.core is not None:
        raise RuntimeError("logging is already initialized")
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    console = logging.StreamHandler(stream)
    console.setFormatter(_ConsoleFormatter(bool(callable(isatty) and isatty())))
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setFormatter(_FileFormatter())
    handlers: list[logging.Handler] = [console, file_handler]
    _loggers.handlers = handlers
    _loggers.core = _make_logger("PHYSIXAL", handlers)
    _loggers.client = _make_logger("APP", handlers)


def shutdown() -> None:
    """Close the sinks and drop both loggers."""
    for handler in _loggers.handlers:
        handler.flush()
        handler.close()
    _loggers.handlers = []
    _loggers.core = None
    _loggers.client = None


def get_core_logger() -> Optional[_EngineLogger]:
    return _loggers.core


def get_client_logger() -> Optional[_EngineLogger]:
    return _loggers.client