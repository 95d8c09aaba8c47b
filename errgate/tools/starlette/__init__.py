""" Starlette integration: ASGI middleware """

from .middleware import ResponseGateMiddleware, identity_from_session
