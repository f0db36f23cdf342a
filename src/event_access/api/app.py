"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_access.api.guests import VERIFY_PATH, verify_failure
from event_access.api.guests import router as guests_router
from event_access.app_logging import configure_logging
from event_access.config import parse_cors_origins
from event_access.containers import AppContainer
from event_access.errors import AuthenticationError, MissingCodeError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.reaper.start()
        logger.info(
            "Event access service started with %d guest codes",
            len(app.state.container.registry),
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Event Access API", lifespan=lifespan)
    app.state.container = container

    origins = parse_cors_origins(container.settings.cors_allow_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": exc.error, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        if request.url.path == VERIFY_PATH:
            logger.info("Rejected malformed verify body: %s", exc.errors())
            return verify_failure(
                status.HTTP_400_BAD_REQUEST, MissingCodeError.message
            )
        return await request_validation_exception_handler(request, exc)

    app.include_router(guests_router)

    return app
