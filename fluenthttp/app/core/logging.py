"""Logging setup: loguru stdout sinks for CLI output and for verbose request diagnostics.

Records bound with ``verbose=True`` are diagnostics of a request built with
``Request.verbose()``; they always go to stdout through their own sink.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from loguru import logger

from fluenthttp.app.core import SERVICE_NAME

LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <8} | {extra[event]} | {message}"
VERBOSE_FORMAT = "{message}"

_verbose_handler_id: int | None = None


def _write_stdout(message: str) -> None:
    # Looked up per write so a replaced sys.stdout (e.g. pytest capture) is honoured.
    sys.stdout.write(message)


def _is_verbose_record(record: dict) -> bool:
    extra = record["extra"]
    return extra.get("service_name") == SERVICE_NAME and bool(extra.get("verbose"))


def _is_not_verbose_record(record: dict) -> bool:
    return not _is_verbose_record(record)


def configure_logging(level: str = "INFO", *, sink: TextIO | Callable[[str], Any] | None = None) -> int:
    """Replace loguru's default handler with one writing to stdout. Returns the handler id.

    Verbose request diagnostics are left to the sink installed by ``enable_verbose_output``.
    """
    logger.remove()
    logger.configure(extra={"service_name": SERVICE_NAME, "event": "-"})
    return logger.add(sink or _write_stdout, level=level.upper(), format=LOG_FORMAT, filter=_is_not_verbose_record)


def enable_verbose_output() -> int:
    """(Re)install the stdout sink for verbose records and return its handler id."""
    global _verbose_handler_id
    if _verbose_handler_id is not None:
        try:
            logger.remove(_verbose_handler_id)
        except ValueError:
            # Already removed, e.g. by configure_logging's logger.remove().
            pass
    _verbose_handler_id = logger.add(_write_stdout, level="DEBUG", format=VERBOSE_FORMAT, filter=_is_verbose_record)
    return _verbose_handler_id


def log_verbose(event: str, message: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, verbose=True, **kwargs).info(message)


def log_event(event: str, message: str = "", **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug(message)
