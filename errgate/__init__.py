""" Response Gate: hide error responses (debug pages, tracebacks) from anonymous callers

Core objects:

* `ResponseGate`: the filter itself. Framework-agnostic.
* `RequestContext`, `Response`: the data it works with
* `GateConfig`: configuration
* `ConfigurationError`: invalid configuration

Framework integrations live in `errgate.tools`:

* `errgate.tools.starlette`: ASGI middleware
* `errgate.tools.fastapi`: install the gate into a FastAPI application
* `errgate.tools.settings`: load the configuration from environment variables
"""

from .gate import ResponseGate
from .response import Response, RequestContext, has_identity
from .status_range import StatusRange
from .config import GateConfig, load_config
from .exc import ResponseGateError, ConfigurationError
