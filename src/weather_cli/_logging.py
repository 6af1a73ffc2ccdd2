"""File log for weather client calls."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "weather_cli"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DEFAULT_LOG_FILE = Path.home() / ".weather-cli" / "logs" / "weather-cli.log"

_log_file: Path = DEFAULT_LOG_FILE
_handler_lock = threading.Lock()


def _writes_to(handler: logging.Handler, path: str) -> bool:
    return isinstance(handler, logging.FileHandler) and handler.baseFilename == path


def get_logger() -> logging.Logger:
    """Return the ``weather_cli`` logger, making sure it writes to the log file.

    Other handlers on the logger (test capture, user config) are left alone;
    only a file handler for the current log path counts.
    """
    logger = logging.getLogger(LOGGER_NAME)
    path = os.path.abspath(_log_file)
    if any(_writes_to(h, path) for h in logger.handlers):
        return logger

    with _handler_lock:
        if not any(_writes_to(h, path) for h in logger.handlers):
            os.makedirs(os.path.dirname(path), exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
    return logger


def setup_logging(log_file: str | os.PathLike[str] | None = None) -> logging.Logger:
    """Move the log to ``log_file`` (if given), closing handlers for any old path."""
    global _log_file
    if log_file is not None:
        _log_file = Path(log_file)
        path = os.path.abspath(_log_file)
        logger = logging.getLogger(LOGGER_NAME)
        with _handler_lock:
            for handler in logger.handlers[:]:
                if isinstance(handler, logging.FileHandler) and not _writes_to(handler, path):
                    logger.removeHandler(handler)
                    handler.close()
    return get_logger()


def _describe(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is the client instance
    parts = [repr(a) for a in args[1:]]
    parts.extend(f"{key}={value!r}" for key, value in kwargs.items())
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Log CALL / OK / FAIL lines with timings around a client method.

    Arguments go through ``repr``; ``Settings`` keeps the API key out of it.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        call = f"{fn.__qualname__}({_describe(args, kwargs)})"
        logger.info("CALL: %s", call)
        started = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                call, type(exc).__name__, exc, time.perf_counter() - started,
            )
            raise
        logger.info(
            "OK: %s -> %s (%.3fs)",
            call, type(result).__name__, time.perf_counter() - started,
        )
        return result

    return wrapper  # type: ignore[return-value]
