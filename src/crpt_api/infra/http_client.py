from __future__ import annotations

from typing import Mapping, Optional, TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from ..core.ports.rate_limiter_port import RateLimiterPort


class HttpClient:
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
        rate_limiter: Optional["RateLimiterPort"] = None
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10
        )
        self._rate_limiter = rate_limiter

    def post_json(self, url: str, payload: dict) -> str:
        """POST payload as JSON and return the response body as text.

        Blocks on the rate limiter first; no request is sent until a permit is held.
        """
        if self._rate_limiter:
            self._rate_limiter.acquire()
        resp = self._client.post(url, json=payload)
        resp.raise_for_status()
        return resp.text

    def close(self) -> None:
        self._client.close()
