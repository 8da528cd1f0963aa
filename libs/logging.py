"""Application-wide logging configuration.

Every record is written as one JSON object per line with the keys
``timestamp`` (UTC ISO8601), ``level``, ``logger``, ``service``,
``environment`` and ``message``. Fields passed through
``logger.info(msg, extra={...})`` are merged into the object.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from libs.core.settings import Settings, get_settings

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """One-line JSON log formatter with stable keys and UTC timestamps."""

    def __init__(self, service: str, environment: str) -> None:
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        base: Dict[str, Any] = {
            "timestamp": dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "environment": self.environment,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED or key in base:
                continue
            base[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            base["error"] = {
                "class": record.exc_info[0].__name__,
                "message": str(record.exc_info[1])[:500],
            }
        return json.dumps(base, ensure_ascii=False, default=repr)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logger to output one-line JSON logs."""

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(settings.service_name, settings.environment))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["JsonFormatter", "setup_logging"]
