"""Session management models."""

import secrets
from datetime import UTC, datetime
from typing import NewType

from pydantic import Field, field_validator

from gatekeeper.core.db import MongoModel
from gatekeeper.utils import now

AuthToken = NewType("AuthToken", str)


def generate_token() -> AuthToken:
    return AuthToken(secrets.token_urlsafe(32))


class Session(MongoModel):
    """Cookie session issued at login.

    Keyed by token. Indexed on user_id, and optionally on expires_at (TTL,
    drops the document once expires_at has passed).
    """

    token: AuthToken = Field(alias="_id", default_factory=generate_token)
    user_id: str
    role: str
    created_at: datetime = Field(default_factory=now)
    expires_at: datetime

    @field_validator("created_at", "expires_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # MongoDB clients without tz_aware return naive UTC datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def is_expired(self, at: datetime | None = None) -> bool:
        return (at or now()) >= self.expires_at
