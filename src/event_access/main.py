"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from event_access.api.app import create_app
from event_access.config import Settings
from event_access.containers import build_container


def main() -> None:
    """Run the event access API on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
