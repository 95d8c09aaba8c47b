""" Route suggestions: suggest valid routes when the user has requested a wrong one

This is exactly the kind of information that should only be shown to developers.
"""

from collections import abc
from difflib import get_close_matches
from functools import lru_cache
from typing import Optional

from fastapi import FastAPI
from fastapi.routing import APIRoute
from starlette.routing import Route


def suggest_routes(app: FastAPI, method: Optional[str], path: str, *, n: int = 9) -> abc.Collection[str]:
    """ Suggest routes that the user may have meant when they got a 404 error

    Example:
        Input:
        "GET /doc"

        Suggestions:
        "GET /docs",
        "GET /redoc",
    """
    wanted = f'{method or "-"} {path}'
    return get_close_matches(wanted, _app_routes(app), n=n)


@lru_cache(maxsize=16)
def _app_routes(app: FastAPI) -> tuple[str, ...]:
    """ List all routes of an app as "METHOD /path" strings """
    return tuple(
        f'{method} {route.path}'
        for route in app.routes
        if isinstance(route, (Route, APIRoute))
        for method in sorted(route.methods or ())
    )
