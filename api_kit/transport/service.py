"""Thin HTTP verb wrapper around ``httpx.AsyncClient``.

ApiService does not contain any business logic. It only makes raw HTTP
requests; response parsing and success handling live in the envelope and the
wrapper. Base URL, interceptors, headers and timeouts are configured on the
injected client.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

logger = logging.getLogger(__name__)


def join_url(base_url: str, path: str) -> str:
    """Join *base_url* and *path* with exactly one ``/`` between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class ApiService:
    """HTTP verbs over a configured ``httpx.AsyncClient``.

    Parameters
    ----------
    client:
        Client already configured with base URL, event hooks (interceptors),
        default headers and timeouts. Injected for testability.

    Every verb accepts the same keyword arguments:

    query:
        Query parameters.
    data:
        Request body, sent as JSON.
    content:
        Raw request body (bytes or str). Mutually exclusive with *data*.
    headers:
        Per-call headers, merged over the client defaults.
    timeout:
        Per-call timeout override; the client default applies when omitted.
    base_url:
        Forces the request to ``join_url(base_url, path)`` instead of the
        client's base URL.

    Example::

        api = ApiService(httpx.AsyncClient(base_url="https://api.example.com"))
        response = await api.get("/users", query={"page": 1})
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a GET request to *path*."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a POST request to *path*. Typically creates a resource."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a PUT request to *path*. Typically replaces a resource."""
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a PATCH request to *path*. Typically updates part of a resource."""
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a DELETE request to *path*.

        A body may be given via *data*; some backends expect one.
        """
        return await self.request("DELETE", path, **kwargs)

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        data: Any = None,
        content: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | httpx.Timeout | None = None,
        base_url: str | None = None,
    ) -> httpx.Response:
        """Send a request with an arbitrary HTTP *method*."""
        if data is not None and content is not None:
            raise ValueError("Pass either 'data' or 'content', not both")

        url = join_url(base_url, path) if base_url is not None else path

        kwargs: dict[str, Any] = {}
        if query is not None:
            kwargs["params"] = dict(query)
        if data is not None:
            kwargs["json"] = data
        if content is not None:
            kwargs["content"] = content
        if headers is not None:
            kwargs["headers"] = dict(headers)
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug("Sending %s %s", method, url)
        return await self._client.request(method, url, **kwargs)

    async def aclose(self) -> None:
        """Close the underlying client and its connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
