# Configuration for the hosting rotation bot. Values come from environment
# variables (a local .env is loaded by app.main) and from the JSON roster file.

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from core.exceptions import ConfigurationError
from core.validators import RotationConfigValidator

# Telegram credentials (overrides "botToken" from the roster file)
BOT_TOKEN = os.getenv("BOT_TOKEN")

# Roster file location
ROTATION_CONFIG = os.getenv("ROTATION_CONFIG")


def _optional_int(raw_value: Optional[str]) -> Optional[int]:
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return int(raw_value)
    except ValueError:
        raise ConfigurationError(f'Expected an integer, got "{raw_value}"')


# Chat the weekly prompt is posted to; /start binds it at runtime otherwise
ROTATION_CHAT_ID = _optional_int(os.getenv("ROTATION_CHAT_ID"))
ROTATION_TOPIC_ID = _optional_int(os.getenv("ROTATION_TOPIC_ID"))

# Every monday at 17:00
ROTATION_CRON = os.getenv("ROTATION_CRON", "0 17 * * mon")
ROTATION_TIMEZONE = os.getenv("ROTATION_TIMEZONE", "Europe/Amsterdam")
DEBUG_INTERVAL_SECONDS = 10

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass
class MemberConfig:
    username: str
    weeks_since_hosted: int = 0


@dataclass
class RotationConfig:
    """Validated roster file."""

    bot_token: str
    members: List[MemberConfig]
    source: Path


def load_rotation_config(
    location: Optional[Union[str, Path]] = None,
    bot_token: Optional[str] = None,
) -> RotationConfig:
    """Load and validate the roster file.

    Raises ConfigurationError for anything that would keep the bot from
    starting: no path, unreadable file, bad JSON, missing token, empty or
    duplicated roster.
    """
    location = location or ROTATION_CONFIG
    if not location:
        raise ConfigurationError(
            'Run the bot with "--config=<location to config file>" or set ROTATION_CONFIG'
        )

    path = Path(location).expanduser().resolve()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f'Config file "{path}" does not exist')
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f'Config file "{path}" cannot be read: {exc}')

    if not isinstance(raw, dict):
        raise ConfigurationError(f'Config "{path}" must be a JSON object')

    try:
        parsed = RotationConfigValidator.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f'Invalid config "{path}": {exc}')

    token = bot_token or BOT_TOKEN or parsed.bot_token
    if not token:
        raise ConfigurationError(f'Field "botToken" does not exist in config "{path}"')

    members = [
        MemberConfig(username=m.username, weeks_since_hosted=m.weeks_since_hosted)
        for m in parsed.members
    ]
    return RotationConfig(bot_token=token, members=members, source=path)
