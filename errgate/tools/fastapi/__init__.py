""" FastAPI integration """

from .exception_handlers import install_response_gate
