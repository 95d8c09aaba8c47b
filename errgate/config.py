""" Gate configuration """

from __future__ import annotations

import string
from typing import Any

import pydantic as pd

from .exc import ConfigurationError
from .status_range import StatusRange


# The default substitute body. `{status}` is the status code of the hidden response.
DEFAULT_BODY_TEMPLATE = (
    '<!DOCTYPE html>\n'
    '<html><head><title>Unauthorized</title></head>'
    '<body><h1>Unauthorized</h1><p>Error {status}. Please sign in to see the details.</p></body></html>'
)

# HTTP status codes: 1xx .. 5xx
HttpStatus = pd.conint(ge=100, le=599)


class GateConfig(pd.BaseModel):
    """ Gate configuration

    Validated at construction. Immutable, so that a single gate can be shared between concurrent requests.
    """
    model_config = pd.ConfigDict(frozen=True, extra='forbid')

    # The range of status codes to hide from anonymous callers. Inclusive.
    sensitive_range_low: HttpStatus = 400  # type: ignore[valid-type]
    sensitive_range_high: HttpStatus = 599  # type: ignore[valid-type]

    # The response to return instead
    substitute_status: HttpStatus = 401  # type: ignore[valid-type]
    substitute_content_type: str = 'text/html'
    substitute_body_template: str = DEFAULT_BODY_TEMPLATE

    @pd.field_validator('substitute_body_template')
    @classmethod
    def validate_body_template(cls, v: str) -> str:
        # Only `{status}` is available to the template: nothing else from the original response may leak
        fields = {name for _, name, _, _ in string.Formatter().parse(v) if name is not None}
        unknown = fields - {'status'}
        if unknown:
            raise ValueError(f'Unknown template fields: {sorted(unknown)!r}. Only {{status}} is available')

        # Format specs and nested fields only fail when rendered: try it now rather than on every request
        try:
            v.format(status=599)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f'Template cannot be rendered: {e!r}') from e
        return v

    @pd.model_validator(mode='after')
    def validate_range(self):
        if self.sensitive_range_low > self.sensitive_range_high:
            raise ValueError(
                f'sensitive_range_low={self.sensitive_range_low} is greater than '
                f'sensitive_range_high={self.sensitive_range_high}'
            )
        return self

    @property
    def sensitive_range(self) -> StatusRange:
        """ The sensitive range, as a StatusRange """
        return StatusRange(self.sensitive_range_low, self.sensitive_range_high)


def load_config(**options: Any) -> GateConfig:
    """ Create a GateConfig; report invalid options as ConfigurationError

    Raises:
        ConfigurationError
    """
    try:
        return GateConfig(**options)
    except pd.ValidationError as e:
        raise ConfigurationError(
            f'Invalid response gate configuration: {e}',
            errors=e.errors(include_url=False),
        ) from e
