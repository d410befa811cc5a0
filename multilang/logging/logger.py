import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


class Log:
    """Process-wide logging facade for the multilang pipeline."""

    _logger: logging.Logger = logging.getLogger("multilang")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one handler; stdout unless *stream* is given."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    @contextmanager
    def timed(cls, operation: str) -> Iterator[None]:
        """Log start, finish and elapsed milliseconds of *operation*.

        Exceptions are logged with their class name and re-raised.
        """
        started = time.perf_counter()
        cls.info(f"{operation} started")
        try:
            yield
        except BaseException as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000
            cls.error(
                f"{operation} failed after {elapsed_ms:.0f} ms: "
                f"{type(exc).__name__}: {exc}"
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        cls.info(f"{operation} finished in {elapsed_ms:.0f} ms")
