"""Domain models for guest sessions."""

from dataclasses import dataclass
from datetime import datetime

from event_access.domain.guests import Role


@dataclass(frozen=True)
class SessionRecord:
    """Represents an authenticated guest session."""

    token: str
    guest_name: str
    role: Role
    code: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful code verification."""

    guest_name: str
    token: str
