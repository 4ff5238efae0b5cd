from __future__ import annotations


class CrptApiError(Exception):
    """Base class for errors raised by crpt_api."""


class InvalidConfiguration(CrptApiError, ValueError):
    """Raised when a component is constructed with unusable parameters."""


class AcquireCancelled(CrptApiError):
    """Raised when a caller stops waiting for a permit before being admitted.

    No permit is consumed when this is raised.
    """


class AcquireTimeout(AcquireCancelled):
    """Raised when acquire() gives up after its timeout."""
