import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


class Log:
    """Process-wide logger for filekit operations."""

    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
    _logger: logging.Logger = logging.getLogger("filekit")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler (stdout unless ``stream`` is given)."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Detach all handlers so the next configure() starts fresh."""
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        cls._logger.setLevel(logging.NOTSET)

    @classmethod
    @contextmanager
    def timed(cls, operation: str) -> Iterator[None]:
        """Log how long ``operation`` took when it completes without raising."""
        started = time.perf_counter()
        yield
        cls._logger.info(f"{operation} finished in {time.perf_counter() - started:.2f}s")

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
