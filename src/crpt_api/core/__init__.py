"""Domain types, ports and use cases."""

from .errors import AcquireCancelled, AcquireTimeout, CrptApiError, InvalidConfiguration

__all__ = ["CrptApiError", "InvalidConfiguration", "AcquireCancelled", "AcquireTimeout"]
