"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ...core.exceptions import RateLimitError, RemoteRequestFailed

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Owns the aiohttp session and authorization header, maps error responses
    to RemoteRequestFailed and returns decoded JSON bodies. Requests are not
    retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers: dict[str, str] = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def set_header(self, name: str, value: str | None) -> None:
        """Set (or remove, with None) a header sent with every request."""
        if value is None:
            self._headers.pop(name, None)
        else:
            self._headers[name] = value

    def resolve_url(self, url: str) -> str:
        # Absolute URLs (next/previous links) are used verbatim
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body (None if empty).

        Raises:
            RateLimitError: On HTTP 429
            RemoteRequestFailed: On any other error status, a connection failure
                or a body that is not JSON
        """
        url = self.resolve_url(url)
        query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
        merged_headers = {**self._headers, **(headers or {})}

        try:
            async with self.session.request(
                method,
                url,
                params=query or None,
                json=json_body,
                headers=merged_headers,
            ) as response:
                logger.debug(
                    "http_response",
                    extra={"method": method, "url": url, "status": response.status},
                )
                await _raise_for_status(response)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise RemoteRequestFailed(
                        f"{method} {url} returned a body that is not JSON: {e}",
                        status_code=response.status,
                    ) from e
        except aiohttp.ClientError as e:
            raise RemoteRequestFailed(f"{method} {url} failed: {e}") from e

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def put(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """PUT request."""
        return await self.request("PUT", url, params=params, json_body=json_body, headers=headers)

    async def post(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request."""
        return await self.request("POST", url, params=params, json_body=json_body, headers=headers)

    async def delete(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """DELETE request."""
        return await self.request(
            "DELETE", url, params=params, json_body=json_body, headers=headers
        )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(getattr(value, "value", value))


async def _raise_for_status(response: aiohttp.ClientResponse) -> None:
    if response.status < 400:
        return

    message = response.reason or "Request failed"
    try:
        payload = await response.json(content_type=None)
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message") or message
        elif isinstance(error, str):
            # Authentication errors use the OAuth layout
            message = payload.get("error_description") or error

    if response.status == 429:
        retry_after = response.headers.get("Retry-After", "")
        raise RateLimitError(
            f"Rate limit exceeded: {message}",
            retry_after=int(retry_after) if retry_after.isdigit() else 60,
        )
    raise RemoteRequestFailed(
        f"Received status code {response.status}. Error cause: {message}",
        status_code=response.status,
    )
