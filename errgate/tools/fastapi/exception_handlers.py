import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler as fastapi_http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette import status
from starlette.exceptions import HTTPException
from starlette.middleware.exceptions import ExceptionMiddleware

from errgate.gate import ResponseGate
from errgate.tools.settings import GateSettings
from errgate.tools.starlette.middleware import ResponseGateMiddleware, IdentityGetter, identity_from_session

from .route_suggestions import suggest_routes

logger = logging.getLogger(__name__)


def install_response_gate(app: FastAPI, settings: Optional[GateSettings] = None, *,
                          get_identity: Optional[IdentityGetter] = None,
                          passthru: bool = False):
    """ Install the response gate into a FastAPI application

    What it does:

    * In debug mode, 404 pages get route suggestions: a verbose debug page that only developers should see
    * Unexpected exceptions are converted into 500 responses *inside* the gate, so that the gate can hide them.
      Otherwise they would reach Starlette's ServerErrorMiddleware and, in debug mode, render a traceback for everyone.
    * The gate itself hides 4xx and 5xx responses from anonymous callers.

    Call it before adding your session middleware: middleware added later wraps the gate.

    Args:
        settings: Gate settings. Default: load from the environment.
        get_identity: Function to get the identity marker from the request. Default: read it from the session.
        passthru: Let unexpected errors pass through. Used in testing.
    Raises:
        ConfigurationError: invalid settings
    """
    if settings is None:
        settings = GateSettings.load()

    # Fail early: before the app is modified
    gate_config = settings.gate_config() if settings.gate_enabled else None

    if app.debug:
        app.add_exception_handler(HTTPException, http_404_handler_with_route_suggestions)

    # Handler for `Exception` has to be installed as middleware.
    # Otherwise `add_exception_handler()` gives it to ServerErrorMiddleware, which is outside of the gate.
    if not passthru:
        app.add_middleware(ExceptionMiddleware, handlers={Exception: unexpected_exception_handler}, debug=app.debug)

    if gate_config is None:
        logger.info('Response gate is disabled in %s environment', settings.ENV.value)
        return

    # Added last: wraps the exception middleware
    app.add_middleware(
        ResponseGateMiddleware,
        get_identity=get_identity or identity_from_session(settings.SESSION_IDENTITY_KEY),
        gate=ResponseGate(config=gate_config),
    )


async def unexpected_exception_handler(request: Request, e: Exception) -> Response:
    """ Exception handler: unexpected exceptions; generic server error

    In debug mode, the response includes the traceback.
    """
    # Record the exception before passing it on
    logger.exception('Unexpected exception')

    if request.app.debug:
        content = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    else:
        content = 'Internal Server Error'

    return PlainTextResponse(content, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_404_handler_with_route_suggestions(request: Request, e: HTTPException) -> Response:
    """ Exception handler for 404 errors that shows route suggestions. Only use in debug mode.

    When the URL is invalid, this handler offers a list of routes that the user may have meant.
    """
    if not request.app.debug:
        return await fastapi_http_exception_handler(request, e)

    # Only "not found" coming from the router: views may raise 404 with their own details
    if e.status_code == status.HTTP_404_NOT_FOUND and e.detail == 'Not Found':
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=jsonable_encoder({
                'detail': 'Route not found',
                'suggestions': suggest_routes(request.app, request.method, request.url.path),
            }),
        )

    return await fastapi_http_exception_handler(request, e)
