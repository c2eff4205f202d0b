"""Audit logging for administrative actions."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger("audit")


def audit_log(
    action: str,
    username: Optional[str],
    chat_id: Optional[int],
    topic_id: Optional[int] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Log administrative action.

    Args:
        action: Action name (e.g., 'bind_chat', 'manual_round')
        username: Telegram username of whoever triggered it, None for the scheduler
        chat_id: Chat ID
        topic_id: Topic ID (if in topic)
        extra: Additional data (e.g., candidate, trigger)
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    log_line = f"[AUDIT] {timestamp} | {action} | user:@{username or '-'} | chat:{chat_id}"
    if topic_id:
        log_line += f" | topic:{topic_id}"

    if extra:
        extra_str = json.dumps(extra, ensure_ascii=False)
        log_line += f" | {extra_str}"

    logger.info(log_line)
