#!/usr/bin/env python3
"""Main application entry point."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramConflictError

from app.providers import DIContainer
from app.scheduler import start_scheduler, stop_scheduler
from app.transport.telegram import setup_routers
from config import LOG_LEVEL, load_rotation_config

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


async def main(
    config_location: Optional[str] = None,
    debug: bool = False,
    use_polling: bool = True,
) -> None:
    """Main application function."""
    rotation_config = load_rotation_config(config_location)
    logger.info(
        "Loaded %d members from %s", len(rotation_config.members), rotation_config.source
    )

    bot = Bot(token=rotation_config.bot_token)
    dp = Dispatcher()
    container = DIContainer(bot=bot, rotation_config=rotation_config)
    setup_routers(dp, container)

    scheduler = start_scheduler(container, debug=debug)
    try:
        if use_polling:
            logger.info("Bot is polling. Send /start in the group chat to begin.")
            try:
                await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
            except TelegramConflictError as e:
                logger.error("Another bot instance is already polling: %s", e)
                raise
        else:
            logger.info("Bot launched without polling (assumed secondary instance). Staying idle...")
            await asyncio.Future()
    finally:
        stop_scheduler(scheduler)
        await container.cleanup()
        await bot.session.close()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Group hosting rotation bot")
    parser.add_argument(
        "--config",
        dest="config",
        default=None,
        help="Path to the JSON roster file (or set ROTATION_CONFIG)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Start a round every few seconds instead of weekly",
    )
    parser.add_argument(
        "--no-poll",
        action="store_true",
        help="Do not poll (useful for a duplicate instance under supervisord/systemd)",
    )
    return parser.parse_args(argv)


def run(argv=None) -> None:
    args = parse_args(argv)
    setup_logging()
    asyncio.run(main(config_location=args.config, debug=args.debug, use_polling=not args.no_poll))


if __name__ == "__main__":
    run()
