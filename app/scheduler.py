"""Weekly tick that starts a hosting round."""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.base import BaseTrigger
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

from app.providers import DIContainer
from config import DEBUG_INTERVAL_SECONDS, ROTATION_CRON, ROTATION_TIMEZONE
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

JOB_ID = "hosting_round"


def build_trigger(
    cron: str = ROTATION_CRON,
    timezone: str = ROTATION_TIMEZONE,
    debug: bool = False,
) -> BaseTrigger:
    """Cron trigger for the weekly round, or a short interval in debug mode.

    Use day names in the cron expression ("mon"), APScheduler numbers
    weekdays from monday = 0.
    """
    if debug:
        return IntervalTrigger(seconds=DEBUG_INTERVAL_SECONDS, timezone=timezone)
    try:
        return CronTrigger.from_crontab(cron, timezone=timezone)
    except (ValueError, LookupError) as exc:
        raise ConfigurationError(f'Invalid schedule "{cron}" ({timezone}): {exc}')


async def run_scheduled_round(container: DIContainer) -> bool:
    """Tick handler: start a round in the bound chat."""
    if container.chat_id is None:
        logger.warning("SCHEDULER: no chat bound yet, send /start in the group")
        return False
    return await container.start_round.execute(trigger="schedule", chat_id=container.chat_id)


def start_scheduler(
    container: DIContainer,
    debug: bool = False,
    scheduler: Optional[AsyncIOScheduler] = None,
) -> AsyncIOScheduler:
    """Register the round job and start the scheduler.

    Must be called from inside the running event loop.
    """
    scheduler = scheduler or AsyncIOScheduler()
    trigger = build_trigger(debug=debug)
    scheduler.add_job(
        run_scheduled_round,
        trigger=trigger,
        args=[container],
        id=JOB_ID,
        name="Ask next host",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    logger.info("SCHEDULER: started with %s", trigger)
    return scheduler


def stop_scheduler(scheduler: AsyncIOScheduler) -> None:
    logger.info("SCHEDULER: stopping")
    scheduler.shutdown(wait=False)
