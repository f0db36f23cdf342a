"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from event_access.config import Settings
from event_access.event_content import EVENT
from event_access.guest_list import GUEST_CODES, PROGRAM_SCHEDULE
from event_access.services.auth import Authenticator
from event_access.services.details import DetailsRenderer
from event_access.services.reaper import SessionReaper
from event_access.services.registry import CodeRegistry
from event_access.services.sessions import (
    Clock,
    InMemorySessionStore,
    SessionService,
    SessionStore,
    utc_now,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    registry: CodeRegistry
    session_store: SessionStore
    authenticator: Authenticator
    session_service: SessionService
    details_renderer: DetailsRenderer
    reaper: SessionReaper
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, clock: Clock = utc_now
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    registry = CodeRegistry(GUEST_CODES)
    session_store = InMemorySessionStore()
    authenticator = Authenticator(
        registry=registry,
        store=session_store,
        ttl=timedelta(hours=resolved_settings.session_ttl_hours),
        clock=clock,
    )
    session_service = SessionService(store=session_store, clock=clock)
    details_renderer = DetailsRenderer(event=EVENT, schedule=PROGRAM_SCHEDULE)
    reaper = SessionReaper(
        store=session_store,
        interval_seconds=resolved_settings.sweep_interval_seconds,
        clock=clock,
    )

    async def close_resources() -> None:
        await reaper.stop()

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        registry=registry,
        session_store=session_store,
        authenticator=authenticator,
        session_service=session_service,
        details_renderer=details_renderer,
        reaper=reaper,
        close_resources=close_resources,
    )
