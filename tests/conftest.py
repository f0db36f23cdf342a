"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from event_access.config import Settings
from event_access.containers import AppContainer, build_container
from event_access.domain.guests import AccessLevel, GuestRecord, Role, ScheduleEntry
from event_access.domain.sessions import SessionRecord
from event_access.services.auth import Authenticator
from event_access.services.registry import CodeRegistry
from event_access.services.sessions import InMemorySessionStore, SessionService


@dataclass
class FakeClock:
    """Manually advanced clock for TTL tests."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 12, 14, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


TEST_CODES: dict[str, GuestRecord] = {
    "011387": GuestRecord("Prathamesh Pawar", Role.VIP),
    "122092": GuestRecord("Manpreet and Niranjan", Role.FRIEND),
    "psdvin": GuestRecord("Vinay Polisetty", Role.FRIEND),
}

TEST_SCHEDULE: tuple[ScheduleEntry, ...] = (
    ScheduleEntry("6:30 AM", "Puja Begins", AccessLevel.VIP),
    ScheduleEntry("11:15 AM", "Light Refreshments", AccessLevel.PUBLIC),
    ScheduleEntry("12:30 PM", "Lunch", AccessLevel.PUBLIC),
)


def make_session(
    token: str,
    created_at: datetime,
    ttl: timedelta = timedelta(hours=24),
    role: Role = Role.FRIEND,
) -> SessionRecord:
    return SessionRecord(
        token=token,
        guest_name=f"Guest {token}",
        role=role,
        code="TEST",
        created_at=created_at,
        expires_at=created_at + ttl,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", cors_allow_origins="*")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry() -> CodeRegistry:
    return CodeRegistry(TEST_CODES)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def authenticator(
    registry: CodeRegistry, store: InMemorySessionStore, clock: FakeClock
) -> Authenticator:
    return Authenticator(registry=registry, store=store, clock=clock)


@pytest.fixture
def session_service(store: InMemorySessionStore, clock: FakeClock) -> SessionService:
    return SessionService(store=store, clock=clock)


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> AppContainer:
    return build_container(settings, clock=clock)
