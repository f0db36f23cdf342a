"""Guest-facing API endpoints with access-code sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse

from event_access.api.models import (
    DetailsResponse,
    ErrorResponse,
    HealthResponse,
    LogoutResponse,
    VerifyRequest,
    VerifyResponse,
)
from event_access.domain.sessions import SessionRecord  # noqa: TC001
from event_access.errors import InvalidCodeError, MissingCodeError

if TYPE_CHECKING:
    from event_access.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["guests"])

_BEARER_SCHEME = "bearer"
VERIFY_PATH = "/api/verify"


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def extract_token(authorization: str | None) -> str | None:
    """Read the token from a raw or ``Bearer``-prefixed Authorization header."""
    if authorization is None:
        return None
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() == _BEARER_SCHEME:
        value = credentials.strip()
    return value or None


async def require_session(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SessionRecord:
    """Resolve the caller's live session or fail with 401."""
    container = _get_container(request)
    return container.session_service.validate(extract_token(authorization))


@router.post(
    "/verify",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    responses={400: {"model": VerifyResponse}, 500: {"model": VerifyResponse}},
)
async def verify(
    request: Request, payload: VerifyRequest | None = None
) -> VerifyResponse | JSONResponse:
    """Exchange an access code for a session token."""
    container = _get_container(request)
    code = payload.code if payload else None
    try:
        result = container.authenticator.authenticate(code)
    except MissingCodeError as exc:
        return verify_failure(status.HTTP_400_BAD_REQUEST, exc.message)
    except InvalidCodeError as exc:
        return VerifyResponse(valid=False, message=exc.message)
    except Exception:
        logger.exception("Error verifying code")
        return verify_failure(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server error during verification",
        )
    return VerifyResponse(valid=True, guest_name=result.guest_name, token=result.token)


@router.get(
    "/details",
    response_model=DetailsResponse,
    responses={401: {"model": ErrorResponse}},
)
async def details(
    request: Request, session: SessionRecord = Depends(require_session)
) -> DetailsResponse:
    """Return the event details page filtered for the caller's role."""
    container = _get_container(request)
    return DetailsResponse(html=container.details_renderer.render(session))


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request, authorization: str | None = Header(default=None)
) -> LogoutResponse:
    """End the caller's session; succeeds whether or not it existed."""
    container = _get_container(request)
    container.session_service.logout(extract_token(authorization))
    return LogoutResponse()


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check with the live session count."""
    container = _get_container(request)
    return HealthResponse(
        status="Server is running",
        timestamp=container.clock(),
        active_sessions=container.session_service.active_sessions(),
    )


def verify_failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"valid": False, "message": message},
    )
