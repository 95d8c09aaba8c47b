""" Errors raised by the response gate

The gate has a very small error taxonomy:

* `ConfigurationError`: the gate was configured with invalid options. Raised at construction time,
    before any request is processed.
* Downstream failures are not wrapped at all: whatever the downstream handler raises propagates to the caller
    unchanged, so that the hosting framework's own error-reporting path deals with it.
"""

from typing import Optional


class ResponseGateError(Exception):
    """ Base class for the errors of this library """


class ConfigurationError(ResponseGateError, ValueError):
    """ Invalid gate configuration

    Example:
        try:
            ResponseGate(sensitive_range_low=600, sensitive_range_high=500)
        except ConfigurationError as e:
            e.errors  # [ {loc: ('sensitive_range_low',), msg: '...', type: '...'} ]
    """

    # The list of validation errors: [ {loc: tuple, msg: str, type: str} ]
    errors: list[dict]

    def __init__(self, error: str, *, errors: Optional[list[dict]] = None):
        super().__init__(error)
        self.errors = errors or []
