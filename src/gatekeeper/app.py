from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from gatekeeper.config import Config
from gatekeeper.core.core import Core
from gatekeeper.core.modules.session.models import AuthToken, Session
from gatekeeper.errors import InvalidCredentialsError

logger = structlog.get_logger(__name__)


class App:
    """Facade for the session-auth operations, delegates storage to Core."""

    def __init__(self, config: Config, database: AsyncDatabase[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, database)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def login(self, username: str, password: str) -> Session:
        """Check credentials and open a new session."""
        principal = self._core.credentials.authenticate(username, password)
        if principal is None:
            logger.info("login_failed", username=username)
            raise InvalidCredentialsError
        return await self._core.services.session.create_session(principal.user_id, principal.role)

    async def get_session(self, auth_token: AuthToken) -> Session:
        """Resolve a token to its live session (raises if unknown or expired)."""
        return await self._core.services.session.get_active_session(auth_token)

    async def logout(self, auth_token: AuthToken | None) -> None:
        """Invalidate the session, if any. Never fails for a missing or unknown token."""
        if auth_token:
            await self._core.services.session.delete_session(auth_token)
