"""
Pytest fixtures for weather_lookup tests.

No test touches the network: the clients receive a recording fake
transport that replays queued responses.
"""

import os
from typing import Any, List

import pytest
import httpx


class FakeResponse:
    """Minimal response with the ``ok`` flag and async ``json()`` the clients use."""

    def __init__(self, payload: Any = None, ok: bool = True, status: int = 200):
        self.payload = payload
        self.ok = ok
        self.status = status

    async def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeFetch:
    """Async transport replaying queued responses and recording requested URLs."""

    def __init__(self, *responses: FakeResponse):
        self.responses: List[FakeResponse] = list(responses)
        self.urls: List[str] = []

    async def __call__(self, url: str) -> FakeResponse:
        self.urls.append(url)
        if not self.responses:
            raise AssertionError(f"unexpected request: {url}")
        return self.responses.pop(0)

    def params(self, index: int) -> httpx.QueryParams:
        return httpx.URL(self.urls[index]).params


SAO_PAULO_GEO = {
    "results": [
        {"latitude": -23.55, "longitude": -46.63, "name": "São Paulo", "country": "Brasil"},
    ]
}

SAO_PAULO_WEATHER = {
    "current_weather": {"temperature": 25, "weathercode": 2, "time": "2025-11-03T02:00"},
    "daily": {
        "time": ["2025-11-02", "2025-11-03", "2025-11-04", "2025-11-05", "2025-11-06", "2025-11-07"],
        "temperature_2m_max": [26, 27, 28.4, 29.5, 30, 31],
        "temperature_2m_min": [18, 17, 19, 20, 18, 17],
        "weathercode": [2, 3, 45, 61, 95, 1],
    },
}


@pytest.fixture(autouse=True)
def _clean_env():
    """Keep WEATHER_*/NVM_* variables from leaking between tests."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith(("WEATHER_", "NVM_")):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sao_paulo_fetch():
    """Transport answering one geocoding and one forecast request for São Paulo."""
    return FakeFetch(FakeResponse(SAO_PAULO_GEO), FakeResponse(SAO_PAULO_WEATHER))
