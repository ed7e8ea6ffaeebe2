"""
Shared infrastructure for the discovery client.

Modules:
- config: Service base URL, timeout and result limits
- errors: Failure taxonomy for service calls
- http: httpx client with envelope unwrapping
- logging: Structured JSON logging
- contracts: Server record models
"""

from tripfinder.shared.config import ClientConfig, get_config, load_config
from tripfinder.shared.errors import (
    TripServiceError,
    TransportError,
    ApplicationError,
    ParseError,
)
from tripfinder.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "ClientConfig",
    "get_config",
    "load_config",
    "TripServiceError",
    "TransportError",
    "ApplicationError",
    "ParseError",
    "setup_logging",
    "log_state_transition",
]
