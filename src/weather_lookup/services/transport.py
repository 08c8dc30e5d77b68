"""Async HTTP transport consumed by the geocoder and forecast clients.

The clients only need a callable ``await fetch(url)`` returning an object
with an ``ok`` flag and an awaitable ``json()``. ``HttpxFetch`` is the
default implementation on top of ``httpx.AsyncClient``.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class FetchResponse(Protocol):
    ok: bool

    async def json(self) -> Any: ...


Fetch = Callable[[str], Awaitable[FetchResponse]]


def build_url(base_url: str, params: Dict[str, Any]) -> str:
    """Append percent-encoded query parameters to ``base_url``."""
    return str(httpx.URL(base_url, params=params))


class HttpxResponse:
    """Adapter exposing ``ok`` and an async ``json()`` over an httpx response."""

    def __init__(self, response: Optional[httpx.Response]):
        self._response = response
        self.status_code = response.status_code if response is not None else None

    @property
    def ok(self) -> bool:
        return self._response is not None and self._response.is_success

    async def json(self) -> Any:
        if self._response is None:
            return None
        return self._response.json()


class HttpxFetch:
    """
    Callable transport backed by a shared ``httpx.AsyncClient``.

    Parameters
    ----------
    timeout : float
        Request timeout in seconds.
    client : httpx.AsyncClient | None, optional
        Pre-built client, mainly for tests. Created lazily when omitted.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.AsyncClient | None = None):
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def __call__(self, url: str) -> HttpxResponse:
        try:
            response = await self._get_client().get(url)
        except httpx.HTTPError as exc:
            # Connection errors and timeouts surface as a failed response
            logger.warning("HTTP request failed: %s (%s)", exc.__class__.__name__, exc)
            return HttpxResponse(None)
        logger.debug("GET %s -> %s", response.request.url, response.status_code)
        return HttpxResponse(response)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
