""" Status ranges: inclusive intervals of HTTP status codes """

from __future__ import annotations

from dataclasses import dataclass

from .exc import ConfigurationError


@dataclass(frozen=True)
class StatusRange:
    """ A closed interval of HTTP status codes: [low, high]

    Example:
        client_errors = StatusRange(400, 499)
        404 in client_errors  # -> True
        500 in client_errors  # -> False
    """
    low: int = 400
    high: int = 599

    def __post_init__(self):
        for name, value in (('low', self.low), ('high', self.high)):
            # bool is an int subclass, but `True` is hardly a status code
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f'Status range bound `{name}` must be an integer, got {value!r}')

        if self.low > self.high:
            raise ConfigurationError(f'Status range is empty: low={self.low} > high={self.high}')

    def __contains__(self, status: int) -> bool:
        return self.low <= status <= self.high

    def __str__(self):
        return f'{self.low}-{self.high}'
