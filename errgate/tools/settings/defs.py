from enum import Enum


class Env(Enum):
    """ The environment name the application is running in """
    PROD = 'prod'
    STAGING = 'staging'
    DEV = 'dev'
    TEST = 'test'

    @classmethod
    def _missing_(cls, value):
        return _ALIASES.get(value)


# Alternative names
_ALIASES = {
    'production': Env.PROD,
    'stage': Env.STAGING,
    'development': Env.DEV,
    'devel': Env.DEV,
}
