"""Logging adapter for MetricsRepository."""

import json
import logging
from typing import Any, Dict, Optional

from app.ports.metrics_repository import MetricsRepository

logger = logging.getLogger("metrics")


class LoggingMetricsRepository(MetricsRepository):
    """Writes each event as one structured log line; failures at WARNING."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    async def record_event(
        self,
        event: str,
        chat_id: Optional[int] = None,
        username: Optional[str] = None,
        status: str = "ok",
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        line = f"[METRICS] {event} | status:{status} | chat:{chat_id} | user:@{username or '-'}"
        if payload:
            line += f" | {json.dumps(payload, ensure_ascii=False, default=str)}"
        level = logging.INFO if status == "ok" else logging.WARNING
        self.log.log(level, line)

    async def close(self) -> None:
        return None
