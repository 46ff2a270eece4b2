from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Dict, Optional

from config.settings import settings
from utils.redact import redact_url

# Loggers of the HTTP libraries behind the transports; at INFO they print the
# request URL, which carries the API key.
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore", "urllib3")


class JsonFormatter(logging.Formatter):
    def __init__(self, service: Optional[str] = None):
        super().__init__()
        self.service = service if service is not None else settings.SERVICE_NAME

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time_unix": time.time(),
            "service": self.service,
        }
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)
        if isinstance(payload.get("url"), str):
            payload["url"] = redact_url(payload["url"])
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: Optional[str] = None, service: Optional[str] = None) -> None:
    """
    Logging entry point for applications using the gateway client.

    The client only emits records on the "seeme.*" loggers; call this once at
    startup to get them as one JSON object per line on stdout. level defaults
    to LOG_LEVEL from the environment.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(service))

    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    root.handlers[:] = [handler]
