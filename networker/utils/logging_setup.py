"""
Console logging for a networker run.

Every line carries the structured extras the pipeline emits (step, status,
duration, provider, error) plus the run id and the event being processed, so
interleaved runs over different attendee files can be told apart.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

from networker.config.settings import get_settings


_INITIALIZED: bool = False

# HTTP client libraries log every request at INFO/DEBUG
_CHATTY_LOGGERS = ("urllib3", "httpx", "httpcore", "openai")

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "event=%(event)s step=%(step)s status=%(status)s duration_ms=%(duration_ms)s "
    "provider=%(provider)s error=%(error)s run_id=%(run_id)s"
)


class RunContextFilter(logging.Filter):
    """Stamps records with the current event and the process-wide RUN_ID."""

    def __init__(self) -> None:
        super().__init__()
        self.event = "-"

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "event"):
            record.event = self.event
        if not hasattr(record, "run_id"):
            record.run_id = os.getenv("RUN_ID") or "-"
        return True


_RUN_CONTEXT = RunContextFilter()


def set_log_event(event_name: str | None) -> None:
    _RUN_CONTEXT.event = event_name or "-"


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "event": "-",
        "step": "-",
        "status": "-",
        "duration_ms": "-",
        "provider": "-",
        "error": "-",
        "run_id": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return super().format(record)


def init_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure the root logger once.

    Log lines go to stderr by default; stdout carries the lookup results.
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    if not root_logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(log_level)
        handler.addFilter(_RUN_CONTEXT)
        handler.setFormatter(SafeExtraFormatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
        root_logger.addHandler(handler)

    _INITIALIZED = True
