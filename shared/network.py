"""
PassForge Async Network Client
===============================

Thin async HTTP client built on **httpx** for the few PassForge features
that talk to remote services. Requests are single-shot: one attempt, a
fixed short timeout, no retry. Every transport, timeout or HTTP status
failure surfaces as :class:`ForgeHTTPError` so callers deal with exactly
one exception type.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger("passforge.network")


class ForgeHTTPError(Exception):
    """Wraps transport, timeout and HTTP status failures."""


class ForgeHTTP:
    """Single-attempt async HTTP client.

    Usage::

        async with ForgeHTTP(base_url="https://api.example.com", timeout=5.0) as http:
            body = await http.fetch_text("/range/ABCDE")

    Args:
        base_url:    Base URL prepended to relative paths.
        timeout:     Request timeout in seconds (connect, read and write).
        headers:     Default HTTP headers merged into every request.
        user_agent:  User-Agent header value.
        transport:   Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout: float = 5.0,
        headers: dict[str, str] | None = None,
        user_agent: str = "PassForge-Python",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        default_headers = {"User-Agent": user_agent}
        if headers:
            default_headers.update(headers)

        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers=default_headers,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> ForgeHTTP:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute one HTTP request.

        Raises:
            ForgeHTTPError: On any httpx failure: transport, timeout, redirect
                loop, body decoding or non-2xx status.
        """
        try:
            response = await self._client.request(
                method=method.upper(),
                url=url,
                params=params,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("HTTP %d on %s %s", exc.response.status_code, method, url)
            raise ForgeHTTPError(
                f"HTTP {exc.response.status_code} from {url}"
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("Timeout on %s %s", method, url)
            raise ForgeHTTPError(f"Timed out requesting {url}") from exc
        except httpx.HTTPError as exc:
            # transport faults, redirect loops and undecodable bodies
            logger.warning("Request failed on %s %s: %s", method, url, exc)
            raise ForgeHTTPError(f"Could not read {url}: {exc}") from exc
        return response

    async def fetch_text(self, url: str, **kwargs: Any) -> str:
        """Convenience wrapper returning the decoded response body."""
        response = await self.fetch(url, **kwargs)
        return response.text
