"""
Configuration validators using Pydantic
"""
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Telegram usernames: 5-32 letters, digits or underscores
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{5,32}$")


def normalize_username(value: str) -> str:
    """Strip whitespace and a leading '@' from a Telegram handle."""
    return value.strip().lstrip("@")


class MemberValidator(BaseModel):
    """Roster member validator"""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, description="Telegram username")
    weeks_since_hosted: int = Field(0, ge=0, alias="weeksSince")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        v = normalize_username(v)
        if not v:
            raise ValueError('Username cannot be empty')
        if not USERNAME_PATTERN.match(v):
            raise ValueError(f'"{v}" is not a valid Telegram username')
        return v


class RotationConfigValidator(BaseModel):
    """Rotation config file validator"""
    model_config = ConfigDict(populate_by_name=True)

    bot_token: Optional[str] = Field(None, alias="botToken")
    members: List[MemberValidator] = Field(..., description="Roster in rotation order")

    @field_validator('members')
    @classmethod
    def validate_members(cls, v):
        if not v:
            raise ValueError('Roster cannot be empty')
        seen = set()
        for member in v:
            key = member.username.lower()
            if key in seen:
                raise ValueError(f'Duplicate member @{member.username}')
            seen.add(key)
        return v
