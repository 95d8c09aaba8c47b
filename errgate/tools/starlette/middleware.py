""" ASGI middleware: the response gate for Starlette and FastAPI applications

Example:
    app = FastAPI(debug=True)
    app.add_middleware(ResponseGateMiddleware, sensitive_range_low=400, sensitive_range_high=599)
    app.add_middleware(SessionMiddleware, secret_key=...)  # added last: wraps the gate and provides `request.session`
"""

from __future__ import annotations

import logging
from collections import abc
from typing import Any, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from errgate.exc import ConfigurationError
from errgate.gate import ResponseGate


logger = logging.getLogger(__name__)


# Identity getter: gets the identity marker from the request
IdentityGetter = abc.Callable[[Request], Any]


def identity_from_session(key: str = 'user_id') -> IdentityGetter:
    """ Identity getter: read the identity marker from the session

    Requires `SessionMiddleware` (or any other middleware that provides `scope['session']`).
    Without a session, every caller is anonymous.

    Args:
        key: The session key that holds the user identity
    """
    def get_identity(request: Request) -> Any:
        if 'session' not in request.scope:
            return None
        return request.session.get(key)
    return get_identity


class ResponseGateMiddleware(BaseHTTPMiddleware):
    """ Hide error responses from anonymous callers

    The downstream response body is never read: when the gate triggers, the response is replaced as a whole.
    Exceptions raised by the downstream application propagate.
    """

    def __init__(self, app: ASGIApp, gate: Optional[ResponseGate] = None, *, get_identity: Optional[IdentityGetter] = None, **options: Any):
        """
        Args:
            gate: A configured gate. If not provided, one is created from `**options`
            get_identity: Function to get the identity marker from the request. Default: read `user_id` from the session.
            **options: Gate configuration options. See `GateConfig`.
        Raises:
            ConfigurationError: invalid options, or both `gate` and `**options` given
        """
        super().__init__(app)
        if gate is not None and options:
            raise ConfigurationError(f'Provide either `gate` or options, not both. Got options: {sorted(options)}')

        self.gate = gate if gate is not None else ResponseGate(**options)
        self.get_identity = get_identity or identity_from_session()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        identity = self.get_identity(request)
        response = await call_next(request)

        if not self.gate.triggers(identity, response.status_code):
            return response

        logger.debug('Hiding %s %s response from an anonymous caller: %d', request.method, request.url.path, response.status_code)
        substitute = self.gate.substitute(response.status_code)
        return Response(
            content=substitute.body,
            status_code=substitute.status,
            headers=dict(substitute.headers),
        )
