"""
CLI helper utilities.

- setup_logging: console handler on stderr, optional log file, text or JSON records
- JSONFormatter: one JSON object per log record
- print_header / print_footer: framing of the verbose run summary
"""

import json
import logging
import os
import sys
import tempfile
from datetime import datetime, timezone
from logging import Handler
from typing import Any, Dict, List, Optional

from ontogen.constants import LoggingConfig

# Attributes present on every LogRecord; anything else came in through extra=
_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.strftime(LoggingConfig.JSON_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_FIELDS and not key.startswith("_")
        }
        for key, value in extras.items():
            payload.setdefault(key, value)

        return json.dumps(payload, ensure_ascii=False, default=str)


# Handlers installed by setup_logging, removed again on the next call
_MANAGED_HANDLERS: List[Handler] = []


def _clear_managed_handlers() -> None:
    root_logger = logging.getLogger()
    while _MANAGED_HANDLERS:
        handler = _MANAGED_HANDLERS.pop()
        root_logger.removeHandler(handler)
        handler.close()


def _file_handler(log_file: str) -> Optional[Handler]:
    """
    Create a file handler for ``log_file``.

    When the requested location is not writable the file is created under
    the system temp directory instead. Returns None if neither works.
    """
    candidates = [log_file, os.path.join(tempfile.gettempdir(), os.path.basename(log_file) or "ontogen.log")]
    for path in candidates:
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            print(f"Cannot open log file {path}: {exc}", file=sys.stderr)
            continue
        if path != log_file:
            print(f"Logging to {path} instead", file=sys.stderr)
        return handler
    return None


def setup_logging(
    level: str = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    structured: bool = False,
) -> Optional[str]:
    """
    Configure the root logger for a generator run.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file path in addition to the console.
        structured: Emit JSON records instead of text lines.

    Returns:
        Path of the log file in use, or None when logging to the console only.
    """
    if structured:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt=LoggingConfig.LOG_FORMAT, datefmt=LoggingConfig.DATE_FORMAT)

    handlers: List[Handler] = [logging.StreamHandler(sys.stderr)]
    file_handler = _file_handler(log_file) if log_file else None
    if file_handler is not None:
        handlers.append(file_handler)

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    if file_handler is None:
        return None
    logging.getLogger(__name__).info(f"Logging to: {file_handler.baseFilename}")
    return file_handler.baseFilename


def print_header(title: str, width: int = 60) -> None:
    rule = "=" * width
    print(f"\n{rule}\n{title}\n{rule}")


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")
