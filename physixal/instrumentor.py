"""Scope timing written out as a Chrome trace-event JSON file."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import ClassVar, Optional, TextIO

from .log import get_core_logger

__all__ = [
    "ProfileResult",
    "Instrumentor",
    "InstrumentationTimer",
    "cleanup_output_string",
]

_HEADER = '{"otherData": {},"traceEvents":[{}'
_FOOTER = "]}"


@dataclass(frozen=True)
class ProfileResult:
    """One timed scope: start in microseconds, elapsed whole microseconds."""

    name: str
    start: float
    elapsed_time: int
    thread_id: int


def _report_error(message: str) -> None:
    logger = get_core_logger()
    if logger is not None:
        logger.error(message)


class Instrumentor:
    """Writes profile results of the open session to its file."""

    _instance: ClassVar[Optional["Instrumentor"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session_name: Optional[str] = None
        self._stream: Optional[TextIO] = None

    @classmethod
    def get(cls) -> "Instrumentor":
        """The process-wide instrumentor."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def current_session(self) -> Optional[str]:
        return self._session_name

    def begin_session(self, name: str, filepath: str = "results.json") -> None:
        """Open a session writing to filepath, closing any session already open."""
        with self._lock:
            if self._session_name is not None:
                # Later output meant for the old session lands in the new one,
                # which beats leaving a malformed file behind.
                _report_error(
                    f"Instrumentor.begin_session('{name}') when session "
                    f"'{self._session_name}' already open."
                )
                self._end_session_locked()
            try:
                stream = open(filepath, "w", encoding="utf-8")
            except OSError:
                _report_error(f"Instrumentor could not open results file '{filepath}'.")
                return
            self._stream = stream
            self._session_name = name
            stream.write(_HEADER)
            stream.flush()

    def end_session(self) -> None:
        with self._lock:
            self._end_session_locked()

    def _end_session_locked(self) -> None:
        if self._session_name is None or self._stream is None:
            return
        self._stream.write(_FOOTER)
        self._stream.close()
        self._stream = None
        self._session_name = None

    def write_profile(self, result: ProfileResult) -> None:
        """Append one trace event; ignored when no session is open."""
        entry = (
            ',{"cat":"function",'
            f'"dur":{result.elapsed_time},'
            f'"name":"{result.name}",'
            '"ph":"X","pid":0,'
            f'"tid":{result.thread_id},'
            f'"ts":{result.start:.3f}'
            "}"
        )
        with self._lock:
            if self._session_name is not None and self._stream is not None:
                self._stream.write(entry)
                self._stream.flush()


class InstrumentationTimer:
    """Times a scope from construction until stop() or leaving the with block."""

    def __init__(self, name: str, instrumentor: Optional[Instrumentor] = None) -> None:
        self.name = name
        self._instrumentor = instrumentor
        self._stopped = False
        self._start_ns = time.perf_counter_ns()

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        end_ns = time.perf_counter_ns()
        elapsed = end_ns // 1000 - self._start_ns // 1000
        result = ProfileResult(self.name, self._start_ns / 1000, elapsed, threading.get_ident())
        (self._instrumentor or Instrumentor.get()).write_profile(result)
        self._stopped = True

    def __enter__(self) -> "InstrumentationTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._stopped:
            self.stop()


def cleanup_output_string(expr: str, remove: str) -> str:
    """Drop occurrences of remove and turn double quotes into single quotes.

    After a removed occurrence the next character is always copied, so
    back-to-back occurrences leave the second one in place.
    """
    out: list[str] = []
    index = 0
    while index < len(expr):
        if remove and expr.startswith(remove, index):
            index += len(remove)
        if index < len(expr):
            char = expr[index]
            out.append("'" if char == '"' else char)
        index += 1
    return "".join(out)