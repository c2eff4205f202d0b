"""Telegram API utilities."""

import asyncio
import logging
from typing import Any, Callable

from aiogram.exceptions import TelegramRetryAfter

logger = logging.getLogger(__name__)


async def safe_call(func: Callable, *args: Any, **kwargs: Any) -> Any:
    """Safely call Telegram API function with retry on rate limit."""
    try:
        return await func(*args, **kwargs)
    except TelegramRetryAfter as exc:
        logger.info("Rate limited, retrying in %s s", exc.retry_after)
        await asyncio.sleep(exc.retry_after)
        return await func(*args, **kwargs)
