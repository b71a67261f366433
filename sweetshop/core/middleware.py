"""Auth gate: resolve the caller identity from the bearer token once per request.

The gate never rejects a request. A missing, malformed, forged or expired token
all leave ``request.state.identity`` as None; the access policy decides later
whether the operation needs an identity.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param

from sweetshop.core.errors import InvalidToken
from sweetshop.core.security import TokenService, get_token_service
from sweetshop.schemas.auth import Identity

logger = logging.getLogger(__name__)


def resolve_identity(authorization: str | None, token_service: TokenService) -> Identity | None:
    """Return the identity carried by an Authorization header value, or None."""
    scheme, token = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not token:
        return None
    try:
        return token_service.validate(token)
    except InvalidToken as e:
        logger.debug("Bearer token rejected; continuing as anonymous: %s", e)
        return None


async def auth_gate(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware that attaches the resolved identity to request.state."""
    request.state.identity = resolve_identity(
        request.headers.get("Authorization"),
        get_token_service(),
    )
    return await call_next(request)
