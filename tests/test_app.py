"""Tests for the FastAPI app: REST routes and paywall wiring."""

import pytest
from fastapi.testclient import TestClient

import weather_lookup.app as app_module
from conftest import SAO_PAULO_GEO, SAO_PAULO_WEATHER, FakeFetch, FakeResponse
from weather_lookup.app import create_app
from weather_lookup.config import Settings


def _client(*responses, settings=None):
    fetch = FakeFetch(*responses)
    return TestClient(create_app(settings=settings or Settings(), fetch=fetch)), fetch


def test_health():
    client, _ = _client()
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "weather-lookup is running"


def test_weather_success():
    client, fetch = _client(FakeResponse(SAO_PAULO_GEO), FakeResponse(SAO_PAULO_WEATHER))
    resp = client.get("/weather", params={"city": "São Paulo"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["location"]["name"] == "São Paulo"
    assert data["current"]["condition_code"] == 2
    assert len(data["upcoming"]) == 4
    assert len(fetch.urls) == 2


def test_weather_uses_configured_window():
    client, _ = _client(
        FakeResponse(SAO_PAULO_GEO), FakeResponse(SAO_PAULO_WEATHER), settings=Settings(forecast_days=3)
    )
    assert len(client.get("/weather", params={"city": "São Paulo"}).json()["upcoming"]) == 3


@pytest.mark.parametrize("responses,status,kind", [
    ((), 400, "EmptyInput"),
    ((FakeResponse({"results": []}),), 404, "CityNotFound"),
    ((FakeResponse(None, ok=False, status=429),), 502, "GeocodingUnavailable"),
    ((FakeResponse(SAO_PAULO_GEO), FakeResponse(None, ok=False, status=500)), 502, "WeatherUnavailable"),
    ((FakeResponse(SAO_PAULO_GEO), FakeResponse({})), 502, "WeatherDataMissing"),
])
def test_weather_errors(responses, status, kind):
    client, _ = _client(*responses)
    city = "Paris" if responses else "  "
    resp = client.get("/weather", params={"city": city})
    assert resp.status_code == status
    assert resp.json()["error"] == kind


def test_no_paywall_without_key(monkeypatch):
    def _unexpected(*args, **kwargs):
        raise AssertionError("Payments must not be created without a server key")

    monkeypatch.setattr(app_module, "Payments", _unexpected)
    create_app(settings=Settings(), fetch=FakeFetch())


def test_paywall_wraps_handlers(monkeypatch):
    wrapped = []
    configured = []

    class FakeMcp:
        def configure(self, config):
            configured.append(config)

        def with_paywall(self, handler, options):
            wrapped.append((options["kind"], options["name"], options["credits"]))
            return handler

    class FakePayments:
        def __init__(self, options):
            assert options == {"nvm_api_key": "key", "environment": "sandbox"}
            self.mcp = FakeMcp()

    monkeypatch.setattr(app_module, "Payments", FakePayments)
    settings = Settings(nvm_api_key="key", nvm_environment="sandbox", agent_id="agent-1", tool_credits=4)
    create_app(settings=settings, fetch=FakeFetch())

    assert configured[0]["agentId"] == "agent-1"
    assert configured[0]["serverName"] == "weather-lookup"
    kinds = {(kind, name) for kind, name, _ in wrapped}
    assert kinds == {("tool", "weather.lookup"), ("resource", "weather.lookup"), ("prompt", "weather.ensureCity")}
    tool_credits = next(c for kind, _, c in wrapped if kind == "tool")
    assert tool_credits({}) == 4
