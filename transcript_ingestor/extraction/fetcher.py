# transcript_ingestor/extraction/fetcher.py
"""
Outbound GET with an explicit result instead of exceptions.

Any response that carries a body is a success, whatever its status code.
Only transport-level failures (connection, timeout, bad URL) are failures;
their detail travels in FetchResult.cause for the caller to log.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from transcript_ingestor.extraction.schema import FetchResult, IngestorConfig


class Fetcher:
    """Blocking HTTP fetcher bound to one IngestorConfig."""

    def __init__(self, config: Optional[IngestorConfig] = None, transport: Optional[httpx.BaseTransport] = None):
        self.config = config or IngestorConfig()
        self._transport = transport

    def _client(self) -> httpx.Client:
        options: Dict[str, Any] = {
            "verify": self.config.verify_tls,
            "follow_redirects": False,
            "transport": self._transport,
        }
        if self.config.timeout is not None:
            options["timeout"] = self.config.timeout
        return httpx.Client(**options)

    def fetch(self, url: str) -> FetchResult:
        try:
            with self._client() as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return FetchResult(
                success=False,
                error=f"Failed to fetch data from URL: {url}",
                cause=f"{exc.__class__.__name__}: {exc}" if str(exc) else exc.__class__.__name__,
            )

        return FetchResult(success=True, body=response.text, status_code=response.status_code)
