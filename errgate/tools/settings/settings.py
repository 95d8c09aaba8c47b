""" Gate settings: loaded from environment variables """

from typing import Optional

import pydantic as pd
import pydantic_settings as pds

from errgate.config import GateConfig, load_config, DEFAULT_BODY_TEMPLATE
from errgate.exc import ConfigurationError

from .defs import Env


class GateSettings(pds.BaseSettings):
    """ Settings: the response gate

    Every field is read from an environment variable with the `ERRGATE_` prefix:
    e.g. `ERRGATE_SENSITIVE_RANGE_LOW=500`.

    Use `GateSettings(_env_file='.env')` to load them from a file.
    """
    model_config = pds.SettingsConfigDict(env_prefix='ERRGATE_', extra='ignore')

    # Environment
    ENV: Env = Env.PROD

    # Is the gate enabled?
    # Automatic (None): enabled everywhere except in development, where developers want to see their tracebacks
    ENABLED: Optional[bool] = None

    # The range of status codes to hide from anonymous callers. Inclusive.
    SENSITIVE_RANGE_LOW: int = 400
    SENSITIVE_RANGE_HIGH: int = 599

    # The substitute response
    SUBSTITUTE_STATUS: int = 401
    SUBSTITUTE_CONTENT_TYPE: str = 'text/html'
    SUBSTITUTE_BODY_TEMPLATE: str = DEFAULT_BODY_TEMPLATE

    # Session key with the user identity. Used by the default identity getter.
    SESSION_IDENTITY_KEY: str = pd.Field('user_id', min_length=1)

    @classmethod
    def load(cls, **values) -> 'GateSettings':
        """ Load the settings; report invalid values as ConfigurationError

        Raises:
            ConfigurationError: e.g. ERRGATE_SENSITIVE_RANGE_LOW=abc
        """
        try:
            return cls(**values)
        except pd.ValidationError as e:
            raise ConfigurationError(
                f'Invalid response gate settings: {e}',
                errors=e.errors(include_url=False),
            ) from e

    @property
    def is_production(self) -> bool:
        """ Is running in a production environment? """
        return self.ENV == Env.PROD

    @property
    def is_staging(self) -> bool:
        """ Is running on a staging server?

        This normally means production-like setup with debug pages turned on
        """
        return self.ENV == Env.STAGING

    @property
    def is_development(self) -> bool:
        """ Is running in a development environment? """
        return self.ENV == Env.DEV

    @property
    def is_testing(self) -> bool:
        """ Is running in testing environment? """
        return self.ENV == Env.TEST

    @property
    def gate_enabled(self) -> bool:
        """ Should the gate be installed? """
        if self.ENABLED is None:
            return not self.is_development
        return self.ENABLED

    def gate_config(self) -> GateConfig:
        """ Get the gate configuration

        Raises:
            ConfigurationError
        """
        return load_config(
            sensitive_range_low=self.SENSITIVE_RANGE_LOW,
            sensitive_range_high=self.SENSITIVE_RANGE_HIGH,
            substitute_status=self.SUBSTITUTE_STATUS,
            substitute_content_type=self.SUBSTITUTE_CONTENT_TYPE,
            substitute_body_template=self.SUBSTITUTE_BODY_TEMPLATE,
        )
