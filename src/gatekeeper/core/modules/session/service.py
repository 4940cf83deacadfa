import asyncio
import contextlib
from datetime import datetime, timedelta
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from gatekeeper.core.core import Service
from gatekeeper.core.modules.session.models import AuthToken, Session
from gatekeeper.errors import InvalidOrExpiredSessionError
from gatekeeper.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Stores cookie sessions and enforces their expiry."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("sessions")
        self._purge_task: asyncio.Task[None] | None = None

    async def on_start(self) -> None:
        """Create indexes and start the purge task if configured."""
        # Lookup by user (sessions are keyed by token in _id)
        await self._collection.create_index([("user_id", 1)])
        config = self.core.config
        if config.session_ttl_index:
            # MongoDB drops the document once expires_at is in the past
            await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)

        interval = config.session_purge_interval
        if interval > 0:
            self._purge_task = asyncio.create_task(self._purge_loop(interval))
        logger.debug("session_service_started", ttl_index=config.session_ttl_index, purge_interval=interval)

    async def on_stop(self) -> None:
        if self._purge_task is not None:
            self._purge_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._purge_task
            self._purge_task = None

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.core.config.session_ttl_seconds)

    async def create_session(self, user_id: str, role: str) -> Session:
        """Persist a new session valid for the configured ttl."""
        created_at = now()
        session = Session(user_id=user_id, role=role, created_at=created_at, expires_at=created_at + self.ttl)
        await self._collection.insert_one(session.to_mongo())
        logger.info("session_created", user_id=user_id, token=session.token, expires_at=session.expires_at)
        return session

    async def find_session(self, token: AuthToken) -> Session | None:
        """Look up a session by token. Expiry is not checked."""
        doc = await self._collection.find_one({"_id": token})
        if doc is None:
            return None
        return Session.model_validate(doc)

    async def get_active_session(self, token: AuthToken) -> Session:
        """Return the session if it exists and has not expired."""
        session = await self.find_session(token)
        if session is None:
            raise InvalidOrExpiredSessionError
        if session.is_expired():
            logger.debug("session_expired", user_id=session.user_id, token=token)
            raise InvalidOrExpiredSessionError
        return session

    async def delete_session(self, token: AuthToken) -> None:
        """Remove a session. Unknown tokens are ignored."""
        result = await self._collection.delete_one({"_id": token})
        logger.info("session_deleted", token=token, deleted=result.deleted_count)

    async def purge_expired_sessions(self, at: datetime | None = None) -> int:
        """Delete every session whose expiry is before ``at`` (default: now)."""
        result = await self._collection.delete_many({"expires_at": {"$lt": at or now()}})
        if result.deleted_count:
            logger.info("sessions_purged", count=result.deleted_count)
        return result.deleted_count

    async def _purge_loop(self, interval: int) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                await self.purge_expired_sessions()
            except Exception:
                logger.exception("session_purge_failed")
