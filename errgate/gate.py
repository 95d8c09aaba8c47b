""" Response Gate: hide error responses from anonymous callers

When a staging server runs in debug mode, every error is rendered as a verbose debug page:
tracebacks, route tables, suggestions. Developers need them. Anonymous visitors should not see them.

The gate sits in front of a downstream handler, lets it produce a response, and then decides:

* The caller is anonymous, and the status code is in the sensitive range (400-599 by default)?
    Replace the whole response with a fixed, non-informative substitute (401 by default).
* Anything else: return the downstream response as is.

The decision depends on two things only: whether the caller has an identity marker, and the status code.
The response body and headers are never inspected, and never modified: it's all or nothing.

Example:
    def app(request: RequestContext) -> Response:
        return Response(404, {'X-Cascade': 'pass'}, 'Not Found')

    gate = ResponseGate(app)
    gate(RequestContext(identity=None))       # -> Response(401, {'Content-Type': 'text/html'}, '...404...')
    gate(RequestContext(identity='user123'))  # -> Response(404, {'X-Cascade': 'pass'}, 'Not Found')
"""

from __future__ import annotations

import logging
from collections import abc
from typing import Any, Optional

from .config import GateConfig, load_config
from .exc import ConfigurationError
from .response import RequestContext, Response, has_identity
from .status_range import StatusRange
from .substitute import render_substitute


logger = logging.getLogger(__name__)


# A downstream handler: produces a response for a request
DownstreamHandler = abc.Callable[[RequestContext], Response]
AsyncDownstreamHandler = abc.Callable[[RequestContext], abc.Awaitable[Response]]


class ResponseGate:
    """ Hide error responses from anonymous callers

    The gate is stateless: a single instance can serve concurrent requests.
    """

    # The configuration
    config: GateConfig

    # The sensitive status range
    sensitive_range: StatusRange

    def __init__(self, downstream: Optional[DownstreamHandler] = None, *, config: Optional[GateConfig] = None, **options: Any):
        """ Create a gate

        Args:
            downstream: The handler to wrap. Optional: without it, use `handle()` and provide the handler explicitly.
            config: Ready configuration object
            **options: Configuration options: see `GateConfig` fields.
        Raises:
            ConfigurationError: invalid configuration
        """
        if config is not None and options:
            raise ConfigurationError(f'Provide either `config` or options, not both. Got options: {sorted(options)}')

        self.downstream = downstream
        self.config = config if config is not None else load_config(**options)
        self.sensitive_range = self.config.sensitive_range

    def __call__(self, request: RequestContext) -> Response:
        """ Handle a request with the bound downstream handler """
        if self.downstream is None:
            raise TypeError('This gate has no downstream handler. Use handle() and provide one')
        return self.handle(request, self.downstream)

    def handle(self, request: RequestContext, downstream: DownstreamHandler) -> Response:
        """ Invoke the downstream handler, and hide its response if the caller is not supposed to see it

        Exceptions raised by `downstream` are propagated as is.
        """
        response = downstream(request)
        return self._decide(request, response)

    async def handle_async(self, request: RequestContext, downstream: AsyncDownstreamHandler) -> Response:
        """ Same as handle(), but with an async downstream handler """
        response = await downstream(request)
        return self._decide(request, response)

    def triggers(self, identity: Any, status: int) -> bool:
        """ Should a response with `status` be hidden from a caller with this `identity`?

        A pure function of: (identity present?, status code)
        """
        return not has_identity(identity) and status in self.sensitive_range

    def substitute(self, status: int) -> Response:
        """ Make a substitute for a hidden response with the given `status` """
        return render_substitute(
            status,
            substitute_status=self.config.substitute_status,
            content_type=self.config.substitute_content_type,
            body_template=self.config.substitute_body_template,
        )

    def _decide(self, request: RequestContext, response: Response) -> Response:
        if self.triggers(request.identity, response.status):
            logger.debug('Hiding a %d response from an anonymous caller', response.status)
            return self.substitute(response.status)
        else:
            return response

    def __repr__(self):
        return f'{self.__class__.__name__}(sensitive_range={self.sensitive_range}, substitute_status={self.config.substitute_status})'
