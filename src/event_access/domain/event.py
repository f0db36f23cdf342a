"""Domain models for the event presentation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Venue:
    """Where the event takes place."""

    address_lines: tuple[str, ...]
    parking: str
    google_maps_url: str
    apple_maps_url: str
    map_embed_url: str


@dataclass(frozen=True)
class EventDetails:
    """Static content shown to every authenticated guest."""

    title: str
    subtitle: str
    tagline: str
    date: str
    timezone_note: str
    venue: Venue
    blessing: str
    host_message: str
    hosts: str
    closing_line: str
    closing_translation: str
