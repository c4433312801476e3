from __future__ import annotations

"""Logging for launchopts: one base logger, plain or JSON records, option tracing.

Records written by `trace_option` carry the option name and its argument as
record attributes; the JSON formatter copies them into the payload.
"""

import json
import logging
import os
import sys
import time
from typing import Optional, TextIO

BASE_LOGGER = "launchopts"
TRACE_ENV = "LAUNCHOPTS_TRACE"
JSON_ENV = "LAUNCHOPTS_JSON_LOGS"
_HANDLER_NAME = "launchopts.stderr"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``ts`` (UTC), ``level``, ``logger`` and ``msg``. Option trace
    records add ``option`` and ``argument``.
    """

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("option", "argument"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, ensure_ascii=False)


def is_trace_enabled() -> bool:
    return os.getenv(TRACE_ENV) == "1"


def configure_logging(*, json_logs: Optional[bool] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install the launchopts handler on the base logger and return it.

    A second call replaces the handler installed by the first, so the format
    or stream may change between calls. *json_logs* defaults to
    ``LAUNCHOPTS_JSON_LOGS=1``; the level is DEBUG under ``LAUNCHOPTS_TRACE=1``
    and INFO otherwise.
    """
    if json_logs is None:
        json_logs = os.getenv(JSON_ENV) == "1"

    base = logging.getLogger(BASE_LOGGER)
    for old in [h for h in base.handlers if h.get_name() == _HANDLER_NAME]:
        base.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    base.setLevel(logging.DEBUG if is_trace_enabled() else logging.INFO)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return *name* under the 'launchopts' namespace."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def trace_option(logger: logging.Logger, option: str, argument: str) -> None:
    """Log one applied option at DEBUG, only under ``LAUNCHOPTS_TRACE=1``."""
    if not is_trace_enabled():
        return
    logger.debug("applying --%s %r", option, argument, extra={"option": option, "argument": argument})
