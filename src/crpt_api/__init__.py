"""crpt_api package: app/core/infra.

Expose library-friendly API client at the package level.
"""

from .app.api import AppConfig, CrptApiClient
from .core.errors import AcquireCancelled, AcquireTimeout, CrptApiError, InvalidConfiguration
from .infra.rate_limiter import Throttle
from .infra.schemas import Description, Document, Product

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CrptApiClient",
    "AppConfig",
    "Throttle",
    "Document",
    "Description",
    "Product",
    "CrptApiError",
    "InvalidConfiguration",
    "AcquireCancelled",
    "AcquireTimeout",
]
