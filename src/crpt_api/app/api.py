from __future__ import annotations

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import DocumentFormat, DocumentType
from ..infra.rate_limiter import Throttle
from ..infra.schemas import Document


class CrptApiClient:
    """Client for the document registration API.

    All calls made through one client share a single Throttle, so the configured
    request limit holds across every thread that uses the client.

    Example:
        # Using default configuration (from environment variables)
        client = CrptApiClient()
        body = client.create_document(document, signature)
        client.close()

        # Using context manager (recommended)
        with CrptApiClient(token="...", request_limit=5, window_seconds=60.0) as client:
            body = client.create_document(document, signature)
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        base_url: str | None = None,
        request_limit: int | None = None,
        window_seconds: float | None = None,
        timeout_seconds: float | None = None,
        product_group: str | None = None,
    ):
        """Initialize the client.

        Args:
            token: Optional bearer token. If None, uses CRPT_API_TOKEN.
            base_url: Optional API base URL. If None, uses CRPT_API_BASE_URL or the production host.
            request_limit: Optional maximum requests per window. If None, uses CRPT_API_REQUEST_LIMIT or default (10).
            window_seconds: Optional window length in seconds. If None, uses CRPT_API_WINDOW_SECONDS or default (1.0).
            timeout_seconds: Optional HTTP timeout. If None, uses CRPT_API_TIMEOUT_SECONDS or default (20.0).
            product_group: Optional product group attached to every document.

        Raises:
            pydantic.ValidationError: If an override is out of range (e.g., request_limit=0).
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict = {}
        if token is not None:
            config_dict["token"] = token
        if base_url is not None:
            config_dict["base_url"] = base_url
        if request_limit is not None:
            config_dict["request_limit"] = request_limit
        if window_seconds is not None:
            config_dict["window_seconds"] = window_seconds
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds
        if product_group is not None:
            config_dict["product_group"] = product_group

        # Environment is read here, not at import time; explicit values win over it
        self._container.config.from_pydantic(AppConfig(**config_dict))

        self._container.init_resources()

    @property
    def throttle(self) -> Throttle:
        """The throttle shared by all requests of this client."""
        return self._container.throttle()

    def create_document(
        self,
        document: Document,
        signature: str,
        *,
        document_type: DocumentType = DocumentType.LP_INTRODUCE_GOODS,
        document_format: DocumentFormat = DocumentFormat.MANUAL,
    ) -> str:
        """Register a goods introduction document.

        Blocks while the request budget for the current window is exhausted.

        Args:
            document: The document to register.
            signature: Detached signature of the document.
            document_type: Document type sent in the envelope.
            document_format: Document format sent in the envelope.

        Returns:
            Raw response body.

        Raises:
            ValueError: If signature is empty.
            httpx.HTTPStatusError: If the API answers with an error status.
        """
        uc = self._container.create_document_uc()
        return uc.execute(document, signature, document_type=document_type, document_format=document_format)

    def close(self) -> None:
        """Close the client and release resources."""
        self._container.shutdown_resources()

    def __enter__(self) -> CrptApiClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "CrptApiClient",
    "AppConfig",
]
