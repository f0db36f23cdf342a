"""Access code verification and session issuance."""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from event_access.domain.sessions import AuthResult, SessionRecord
from event_access.errors import InvalidCodeError, MissingCodeError
from event_access.services.registry import CodeRegistry, normalize_code
from event_access.services.sessions import Clock, SessionStore, utc_now

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(hours=24)
TOKEN_BYTES = 32


def generate_token() -> str:
    """Generate a 256-bit random hex token."""
    return secrets.token_hex(TOKEN_BYTES)


@dataclass
class Authenticator:
    """Exchanges access codes for session tokens."""

    registry: CodeRegistry
    store: SessionStore
    ttl: timedelta = DEFAULT_SESSION_TTL
    clock: Clock = field(default=utc_now)
    token_factory: Callable[[], str] = field(default=generate_token)

    def authenticate(self, code: str | None) -> AuthResult:
        """Verify a code and open a session for its guest."""
        if not code:
            raise MissingCodeError
        guest = self.registry.lookup(code)
        if guest is None:
            raise InvalidCodeError

        token = self._new_token()
        created_at = self.clock()
        self.store.insert(
            SessionRecord(
                token=token,
                guest_name=guest.guest_name,
                role=guest.role,
                code=normalize_code(code),
                created_at=created_at,
                expires_at=created_at + self.ttl,
            )
        )
        logger.info(
            "New session: %s (%s) - token %s...",
            guest.guest_name,
            guest.role.value,
            token[:8],
        )
        return AuthResult(guest_name=guest.guest_name, token=token)

    def _new_token(self) -> str:
        token = self.token_factory()
        while token in self.store:
            token = self.token_factory()
        return token
