import logging.config


LOGGING_CONFIG_DICT = {
    'version': 1,
    'disable_existing_loggers': False,

    # Config for logging.root: collects messages from all child loggers (unless propagate=False is set).
    'root': {
        'level': logging.INFO,
        'handlers': [
            'console',
        ],
    },
    # Our own logger: its level is set by basicConfig()
    'loggers': {
        'errgate': {
            'level': logging.INFO,
        },
    },
    'formatters': {
        'standard': {
            'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': logging.DEBUG,
            'stream': 'ext://sys.stdout',
        },
    },
}


def basicConfig(level: int = logging.INFO):
    """ Do basic logging configuration that most apps will be happy with

    Args:
        level: Log level for the `errgate` logger. Use DEBUG to see every hidden response.
    """
    logging.config.dictConfig(LOGGING_CONFIG_DICT)
    logging.getLogger('errgate').setLevel(level)
