"""A small structured logger taking a message and alternating key/value pairs."""

from __future__ import annotations

import logging
import threading
from typing import Any


class Logger:
    """Logs messages with trailing key/value pairs through the standard library."""

    def __init__(self, backend: logging.Logger | None = None) -> None:
        self._backend = backend if backend is not None else logging.getLogger("rollshares")
        self._lock = threading.Lock()

    @staticmethod
    def _format(msg: str, keyvals: tuple[Any, ...]) -> str:
        parts = [msg]
        pairs = list(keyvals)
        if len(pairs) % 2:
            pairs.append("(missing)")
        parts.extend(f"{key}={value}" for key, value in zip(pairs[::2], pairs[1::2]))
        return " ".join(parts)

    def _log(self, level: int, msg: str, keyvals: tuple[Any, ...]) -> None:
        with self._lock:
            self._backend.log(level, self._format(msg, keyvals))

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, args)