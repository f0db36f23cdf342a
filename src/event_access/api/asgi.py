"""ASGI entrypoint for the event access API."""

from event_access.api.app import create_app
from event_access.containers import build_container

app = create_app(build_container())
