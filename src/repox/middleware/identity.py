"""Identity middleware for FastAPI.

Authentication is owned by the platform in front of RepoX. When RepoX runs
behind a proxy that authenticates users, this middleware turns the identity
headers set by that proxy into the request actor.

Usage:
    app.add_middleware(TrustedHeaderIdentityMiddleware)
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from repox.models.context import Actor

logger = logging.getLogger(__name__)

USER_HEADER = "X-Repox-User"
CAPABILITIES_HEADER = "X-Repox-Capabilities"


def parse_capabilities(header_value: str) -> frozenset[str]:
    """Parse a comma-separated capability list, ignoring blanks."""
    return frozenset(cap.strip() for cap in header_value.split(",") if cap.strip())


class TrustedHeaderIdentityMiddleware(BaseHTTPMiddleware):
    """Middleware that sets ``request.state.actor`` from trusted identity headers.

    Requests without a user header keep the anonymous actor, which holds no
    capabilities.

    Args:
        app: The ASGI application
        user_header: Header carrying the user id
        capabilities_header: Header carrying comma-separated capabilities
    """

    def __init__(
        self,
        app: ASGIApp,
        user_header: str = USER_HEADER,
        capabilities_header: str = CAPABILITIES_HEADER,
    ) -> None:
        super().__init__(app)
        self.user_header = user_header
        self.capabilities_header = capabilities_header
        logger.info(f"Trusted identity headers enabled: {user_header}, {capabilities_header}")

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the actor to the request state and continue.

        Args:
            request: The incoming request
            call_next: The next middleware/handler in the chain

        Returns:
            Response from the handler
        """
        user_id = request.headers.get(self.user_header, "").strip()
        if user_id:
            capabilities = parse_capabilities(request.headers.get(self.capabilities_header, ""))
            request.state.actor = Actor(id=user_id, capabilities=capabilities)
            logger.debug(f"Request actor: {user_id} ({len(capabilities)} capabilities)")

        return await call_next(request)
