""" Configure the gate from the environment

Example:
    # ERRGATE_ENV=staging
    # ERRGATE_SENSITIVE_RANGE_LOW=400
    settings = GateSettings()
    logging.basicConfig()

    install_response_gate(app, settings)
"""

from .defs import Env
from .settings import GateSettings
from . import logging
