"""Centralized logging setup and structured-logging helpers.

Log records carry structured fields through ``extra=extra_context(...)``.
The level comes from the ``MVNFETCH_LOG_LEVEL`` environment variable
(default INFO) and can be overridden by the CLI.
"""
from __future__ import annotations

import logging
import os
import re
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from constants import Constants

LOG_LEVEL_ENV = "MVNFETCH_LOG_LEVEL"

_SENSITIVE_KEYS = re.compile(r"(authorization|token|password|secret)", re.IGNORECASE)


class _ContextFormatter(logging.Formatter):
    """Formatter that appends structured context fields, when present."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return base
        fields = " ".join(f"{k}={v}" for k, v in context.items() if v is not None)
        return f"{base} [{fields}]" if fields else base


def configure_logging(log_file: Optional[str] = None) -> None:
    """Configure the root logger once for CLI use."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(_ContextFormatter(Constants.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def is_debug_enabled(logger: logging.Logger) -> bool:
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log call.

    Values under sensitive-looking keys are redacted.
    """
    context = {k: (redact(v) if _SENSITIVE_KEYS.search(k) else v) for k, v in fields.items()}
    return {"context": context}


def redact(value: Any) -> str:
    if value is None:
        return "None"
    text = str(value)
    if len(text) <= 4:
        return "***"
    return text[:2] + "***"


def safe_url(url: Optional[str]) -> str:
    """Strip userinfo and query string from a URL for logging."""
    if not url:
        return ""
    try:
        parts = urlsplit(url)
        netloc = parts.hostname or ""
        if parts.port:
            netloc = f"{netloc}:{parts.port}"
    except ValueError:
        return "<invalid url>"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring elapsed wall time."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 2)
