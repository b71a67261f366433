"""Route class that applies the access policy before FastAPI reads the request.

Each route's ``name`` is its operation key in ``ACCESS_POLICY``. The check runs
ahead of path, query and body parsing, so an anonymous caller sending a
malformed body to a protected route still gets 401, and a USER gets 403.
"""

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request, Response
from fastapi.routing import APIRoute

from sweetshop.core.access import authorize
from sweetshop.schemas.auth import Identity


def get_identity(request: Request) -> Identity | None:
    """Identity attached by the auth gate middleware, or None for anonymous callers."""
    return getattr(request.state, "identity", None)


class PolicyRoute(APIRoute):
    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()
        operation = self.name

        async def policy_handler(request: Request) -> Response:
            authorize(get_identity(request), operation)
            return await handler(request)

        return policy_handler
