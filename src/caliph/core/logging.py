"""
Logging for caliph.

Log records go to stderr so they never interleave with the results the
command-line tools print on stdout. Records can be rendered as JSON, and a
log file (always JSON) can be added through settings.

Usage:
    from caliph.core.logging import get_logger

    logger = get_logger(__name__)
    logger.warning("Temperature outside buffer table", extra={"temperature": 120.0})
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

PACKAGE_LOGGER = "caliph"
PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

# Key-value pairs attached to every JSON record inside a LogContext
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    # Attributes every LogRecord carries; anything else came in through `extra`
    _STANDARD_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", None, None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        context = _log_context.get()
        if context:
            payload["context"] = context

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure the `caliph` logger, replacing any earlier configuration.

    Args:
        level: Log level name. Defaults to `Settings.log_level`.
        log_file: Extra JSON log file. Defaults to `Settings.log_file`.
        json_format: Render stderr output as JSON. Defaults to `Settings.log_json`.
    """
    global _logging_configured

    # Imported lazily: config is loaded after this module in the package init
    from caliph.config import get_settings

    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file
    if json_format is None:
        json_format = settings.log_json

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        stream_handler.setFormatter(JSONFormatter())
    else:
        stream_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(stream_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    _logging_configured = True
    package_logger.debug(f"Logging configured: level={level}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Logger under the `caliph` namespace, configuring logging on first use."""
    if not _logging_configured:
        setup_logging()

    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class LogContext:
    """Attach key-value pairs to JSON log records within a `with` block.

    Example:
        with LogContext(command="calibrate", temperature=22.3):
            logger.info("Calibrating")
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Iterator[None]:
    """Log start, completion and failure of a block with its duration."""
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        logger.error(
            f"Failed: {operation}",
            extra={
                "duration_seconds": round(time.perf_counter() - start, 6),
                "error_type": type(e).__name__,
            },
        )
        raise
    logger.log(
        level,
        f"Completed: {operation}",
        extra={"duration_seconds": round(time.perf_counter() - start, 6)},
    )


class LoggingMixin:
    """Gives a class a `logger` named after its module."""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(self.__class__.__module__)

    def log_method_call(self, method_name: str, **params: Any) -> None:
        """Log a method call with its arguments at DEBUG level."""
        params_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
        self.logger.debug(f"{self.__class__.__name__}.{method_name}({params_str})")
