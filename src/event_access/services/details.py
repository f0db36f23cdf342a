"""Guest-facing details page rendering."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from html import escape

from event_access.domain.event import EventDetails
from event_access.domain.guests import Role, ScheduleEntry
from event_access.domain.sessions import SessionRecord
from event_access.services.access import filter_schedule

logger = logging.getLogger(__name__)


@dataclass
class DetailsRenderer:
    """Builds the HTML fragment returned by the details endpoint."""

    event: EventDetails
    schedule: Sequence[ScheduleEntry]

    def visible_schedule(self, role: Role) -> list[ScheduleEntry]:
        return filter_schedule(role, self.schedule)

    def render(self, session: SessionRecord) -> str:
        """Render the details page for a validated session."""
        entries = self.visible_schedule(session.role)
        logger.info(
            "Valid access: %s (%s) - showing %d/%d events",
            session.guest_name,
            session.role.value,
            len(entries),
            len(self.schedule),
        )
        event = self.event
        venue = event.venue
        address = "<br>".join(escape(line) for line in venue.address_lines)
        return _DETAILS_TEMPLATE.format(
            title=escape(event.title),
            subtitle=escape(event.subtitle),
            guest_name=escape(session.guest_name),
            tagline=escape(event.tagline),
            date=escape(event.date),
            address=address,
            parking=escape(venue.parking),
            blessing=escape(event.blessing),
            role_banner=_role_banner(session.role, event.timezone_note),
            schedule=_schedule_html(entries),
            google_maps_url=escape(venue.google_maps_url, quote=True),
            apple_maps_url=escape(venue.apple_maps_url, quote=True),
            map_embed_url=escape(venue.map_embed_url, quote=True),
            host_message=escape(event.host_message),
            hosts=escape(event.hosts),
            closing_line=escape(event.closing_line),
            closing_translation=escape(event.closing_translation),
        )


def _role_banner(role: Role, timezone_note: str) -> str:
    banner = ""
    if role is Role.VIP:
        banner = '<p class="role-banner">🌟 VIP Access - Full Schedule</p>'
    return banner + f'<span class="timezone-note">{escape(timezone_note)}</span>'


def _schedule_html(entries: Sequence[ScheduleEntry]) -> str:
    return "".join(
        '<div class="schedule-item">'
        f'<div class="time">{escape(entry.time)}</div>'
        f'<div class="activity">{escape(entry.activity)}</div>'
        "</div>"
        for entry in entries
    )


_DETAILS_TEMPLATE = """
<style>
  .header {{ background: linear-gradient(135deg, #fff9e6 0%, #ffffff 100%);
    border: 3px solid #ff6b35; border-radius: 25px; padding: 60px 50px;
    text-align: center; margin-bottom: 30px; }}
  .header h1 {{ color: #d84315; font-family: 'Playfair Display', serif; }}
  .header .welcome {{ color: #ff6b35; font-size: 1.4em; font-weight: 600; }}
  .content-grid {{ display: grid; grid-template-columns: 1fr 1fr; gap: 30px; }}
  .card {{ background: linear-gradient(135deg, #fff9e6 0%, #ffffff 100%);
    border: 2px solid #ffd700; border-radius: 20px; padding: 40px; }}
  .card h2 {{ color: #d84315; font-family: 'Playfair Display', serif; }}
  .full-width-card {{ grid-column: 1 / -1; }}
  .schedule-item {{ padding: 20px; margin: 18px 0; border-left: 5px solid #ff6b35;
    background: linear-gradient(135deg, #fff3e0 0%, #ffe0b2 100%);
    border-radius: 10px; }}
  .schedule-item .time {{ font-weight: 700; color: #d84315; }}
  .role-banner {{ color: #d84315; font-weight: 600; margin-bottom: 15px; }}
  .timezone-note {{ color: #d84315; font-weight: 200; }}
  .map-container {{ height: 450px; border-radius: 15px; overflow: hidden;
    margin-top: 25px; border: 3px solid #ff6b35; }}
  .direction-btn {{ display: inline-flex; padding: 12px 24px; border-radius: 10px;
    text-decoration: none; font-weight: 600; color: white; }}
  .google-btn {{ background: linear-gradient(135deg, #4285f4 0%, #34a853 100%); }}
  .apple-btn {{ background: linear-gradient(135deg, #000000 0%, #333333 100%); }}
  .logout-btn {{ position: fixed; bottom: 25px; right: 25px; color: #d84315;
    border: 3px solid #ff6b35; border-radius: 50px; padding: 12px 30px; }}
  @media (max-width: 768px) {{
    .content-grid {{ grid-template-columns: 1fr; }}
  }}
</style>

<button class="logout-btn" onclick="logout()">← Logout</button>

<div class="header">
  <h1>{title}</h1>
  <p class="sanskrit">{subtitle}</p>
  <p class="welcome">Namaste, <span id="guestName">{guest_name}</span>!</p>
  <p class="date-time">{tagline}</p>
  <p class="date-time"><strong>{date}</strong></p>
</div>

<div class="content-grid">
  <div class="card">
    <h2>📍 Venue Details</h2>
    <p><strong>Address:</strong><br>{address}</p>
    <p><strong>🚗 Parking:</strong> {parking}</p>
    <div class="blessing-box"><p>{blessing}</p></div>
  </div>

  <div class="card">
    <h2>⏰ Program Schedule</h2>
    {role_banner}
    {schedule}
  </div>

  <div class="card full-width-card">
    <h2>🗺️ Location & Directions</h2>
    <p>Find your way to our new abode:</p>
    <a href="{google_maps_url}" target="_blank" class="direction-btn google-btn">
      🗺️ Open in Google Maps</a>
    <a href="{apple_maps_url}" target="_blank" class="direction-btn apple-btn">
      🍎 Open in Apple Maps</a>
    <div class="map-container">
      <iframe src="{map_embed_url}" width="100%" height="100%" style="border:0;"
        allowfullscreen="" loading="lazy"
        referrerpolicy="no-referrer-when-downgrade"></iframe>
    </div>
  </div>

  <div class="card full-width-card">
    <h2>💝 Message from the Hosts</h2>
    <p>{host_message}</p>
    <p class="signature">- {hosts}</p>
    <p class="closing">{closing_line}<br><span>{closing_translation}</span></p>
  </div>
</div>
"""
