"""
Access gate: request authentication and per-route authorization.

Authentication runs as middleware for every request except the exempt
liveness path; authorization is a route dependency that compares the
subject named by the request with the authenticated principal.
"""

import json
import logging
from typing import Iterable, Optional

import anyio
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from adapters.auth_adapter import Principal
from api.responses import error_response
from app.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger("pantrykeeper.security")

BEARER_PREFIX = "Bearer "
SUBJECT_PATH_PARAM = "user_id"
SUBJECT_BODY_FIELDS = ("userId", "user_id")


def extract_bearer_token(header_value: Optional[str]) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        raise UnauthorizedError("No authentication token provided")
    token = header_value[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("No authentication token provided")
    return token


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Verify the bearer credential and attach the Principal to request state"""

    def __init__(self, app, exempt_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path in self.exempt_paths:
            return await call_next(request)

        try:
            token = extract_bearer_token(request.headers.get("Authorization"))
            verifier = request.app.state.token_verifier
            # key fetches may block
            principal = await anyio.to_thread.run_sync(verifier.verify, token)
        except UnauthorizedError as exc:
            logger.warning(
                "Authentication failed",
                extra={
                    "request_id": getattr(request.state, "request_id", None),
                    "method": request.method,
                    "url": str(request.url),
                    "reason": exc.message,
                },
            )
            return JSONResponse(
                status_code=exc.http_status,
                content=error_response(exc.code, exc.message),
            )

        request.state.principal = principal
        return await call_next(request)


def get_principal(request: Request) -> Principal:
    """
    Principal attached by the authentication middleware.

    Raises RuntimeError when called on a request that never went through
    authentication; that is a wiring bug, not a client error.
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise RuntimeError(
            f"No authenticated principal in request context for {request.url.path}"
        )
    return principal


def check_subject(principal: Principal, subject_id: Optional[str]) -> None:
    """Raise ForbiddenError when a named subject is not the principal."""
    if not subject_id:
        return
    if str(subject_id) != principal.subject_id:
        logger.warning(
            "Subject mismatch: principal %s requested %s",
            principal.subject_id,
            subject_id,
        )
        raise ForbiddenError("Unauthorized access")


async def _body_subject(request: Request) -> Optional[str]:
    if request.method in ("GET", "HEAD", "DELETE"):
        return None
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for name in SUBJECT_BODY_FIELDS:
        if payload.get(name):
            return str(payload[name])
    return None


async def authorize_user(request: Request) -> None:
    """
    Route dependency: the subject named in the path (``user_id``) or, failing
    that, in the JSON body (``userId``) must be the authenticated principal.
    Requests that name no subject pass through.
    """
    principal = get_principal(request)
    subject = request.path_params.get(SUBJECT_PATH_PARAM)
    if not subject:
        subject = await _body_subject(request)
    check_subject(principal, subject)
