"""Role-based schedule filtering."""

from collections.abc import Iterable
from typing import assert_never

from event_access.domain.guests import AccessLevel, Role, ScheduleEntry


def can_view(role: Role, entry: ScheduleEntry) -> bool:
    """Return true when a guest with ``role`` may see ``entry``."""
    if entry.access_level is AccessLevel.PUBLIC:
        return True
    if role is Role.VIP:
        return True
    if role is Role.FRIEND:
        return False
    assert_never(role)


def filter_schedule(
    role: Role, schedule: Iterable[ScheduleEntry]
) -> list[ScheduleEntry]:
    """Return the entries visible to ``role`` in their original order."""
    return [entry for entry in schedule if can_view(role, entry)]
