"""Session storage and validation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from event_access.domain.sessions import SessionRecord
from event_access.errors import ExpiredTokenError, InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(tz=UTC)


class SessionStore(Protocol):
    """Storage interface for live guest sessions."""

    def insert(self, session: SessionRecord) -> None:
        """Store a session keyed by its token."""

    def get(self, token: str) -> SessionRecord | None:
        """Return the session for a token, if present."""

    def delete(self, token: str) -> SessionRecord | None:
        """Remove a session and return it; no-op when absent."""

    def sweep(self, now: datetime) -> int:
        """Remove every session that expired before ``now``."""

    def __contains__(self, token: object) -> bool: ...

    def __len__(self) -> int: ...


class InMemorySessionStore(SessionStore):
    """Process-local session store.

    Operations never await, so each one runs to completion on the event loop.
    Guard with a lock before sharing across threads.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SessionRecord] = {}

    def insert(self, session: SessionRecord) -> None:
        self._sessions[session.token] = session

    def get(self, token: str) -> SessionRecord | None:
        return self._sessions.get(token)

    def delete(self, token: str) -> SessionRecord | None:
        return self._sessions.pop(token, None)

    def sweep(self, now: datetime) -> int:
        expired = [
            token
            for token, session in self._sessions.items()
            if session.is_expired(now)
        ]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def __contains__(self, token: object) -> bool:
        return token in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


@dataclass
class SessionService:
    """Validates tokens presented by guests and ends sessions."""

    store: SessionStore
    clock: Clock = field(default=utc_now)

    def validate(self, token: str | None) -> SessionRecord:
        """Return the live session for a token.

        Expired sessions are evicted on the spot so the reaper only has to
        clean up tokens that are never presented again.
        """
        if not token:
            raise MissingTokenError
        session = self.store.get(token)
        if session is None:
            raise InvalidTokenError
        if session.is_expired(self.clock()):
            self.store.delete(token)
            logger.info(
                "Session expired: %s (%s)", session.guest_name, session.role.value
            )
            raise ExpiredTokenError
        return session

    def logout(self, token: str | None) -> SessionRecord | None:
        """End a session if it exists."""
        if not token:
            return None
        session = self.store.delete(token)
        if session is not None:
            logger.info(
                "Session ended: %s (%s)", session.guest_name, session.role.value
            )
        return session

    def active_sessions(self) -> int:
        return len(self.store)
