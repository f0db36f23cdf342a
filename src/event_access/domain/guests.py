"""Domain models for guests and the event schedule."""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Guest role, determines schedule visibility."""

    VIP = "vip"
    FRIEND = "friend"


class AccessLevel(Enum):
    """Visibility level of a schedule entry."""

    PUBLIC = "public"
    VIP = "vip"


@dataclass(frozen=True)
class GuestRecord:
    """Identity bound to an access code."""

    guest_name: str
    role: Role


@dataclass(frozen=True)
class ScheduleEntry:
    """Single item of the event program."""

    time: str
    activity: str
    access_level: AccessLevel
