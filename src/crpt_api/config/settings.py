from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Client configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CRPT_API_ prefix.
    For example:
        - CRPT_API_TOKEN=eyJhbGciOi...
        - CRPT_API_BASE_URL=https://markirovka.sandbox.crptech.ru
        - CRPT_API_REQUEST_LIMIT=5
        - CRPT_API_WINDOW_SECONDS=60

    Alternatively, settings can be provided programmatically:
        client = CrptApiClient(request_limit=5, window_seconds=60.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_API_",
        case_sensitive=False,
        extra="forbid",
    )

    token: Optional[str] = Field(
        default=None,
        description="Bearer token sent in the Authorization header",
    )

    base_url: str = Field(
        default="https://ismp.crpt.ru",
        description="Scheme and host of the document registration API",
    )

    request_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of outbound requests per window",
    )

    window_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Length of the rate limiting window in seconds",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="HTTP timeout for a single request in seconds",
    )

    product_group: Optional[str] = Field(
        default=None,
        description="Product group sent with every document (e.g., 'clothes'); omitted if None",
    )
