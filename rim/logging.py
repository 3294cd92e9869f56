"""Logging utilities with timing and event tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional


class Logger:
    """Application logger with timestamps and event counts."""

    def __init__(self, enabled: bool = True):
        self._start_time: float = time.perf_counter()
        self._event: int = 0
        self.enabled = enabled

    @property
    def event(self) -> int:
        """Number of input events dispatched so far."""
        return self._event

    def increment_event(self) -> None:
        """Increment event counter."""
        self._event += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp and event number."""
        if not self.enabled:
            return
        line = f"[{self.elapsed:7.3f}s E{self._event:06d}] {msg}\n"
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except OSError:
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except OSError:
                pass

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def set_enabled(enabled: bool) -> None:
    """Turn log output on or off."""
    get_logger().enabled = enabled


def increment_event() -> None:
    """Increment event counter."""
    get_logger().increment_event()


def get_event() -> int:
    """Get current event count."""
    return get_logger().event
