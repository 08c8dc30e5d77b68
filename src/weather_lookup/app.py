from contextlib import asynccontextmanager
from functools import partial
from typing import Any, Dict
from urllib.parse import urlparse
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from mcp.server.fastmcp import FastMCP
from payments_py.payments import Payments

from weather_lookup.config import Settings
from weather_lookup.logging_config import setup_logging
from weather_lookup.local_mcp.handlers.weather_prompt import weather_prompt_handler
from weather_lookup.local_mcp.handlers.weather_resource import weather_resource_handler
from weather_lookup.local_mcp.handlers.weather_tool import (
    weather_tool_credits_calculator,
    weather_tool_handler,
)
from weather_lookup.services.errors import WeatherLookupError
from weather_lookup.services.transport import Fetch, HttpxFetch
from weather_lookup.services.weather_service import lookup

logger = logging.getLogger(__name__)

SERVER_NAME = "weather-lookup"

ERROR_STATUS: Dict[str, int] = {
    "EmptyInput": 400,
    "InvalidInput": 400,
    "CityNotFound": 404,
    "GeocodingUnavailable": 502,
    "WeatherUnavailable": 502,
    "WeatherDataMissing": 502,
}


async def _resolve(result: Any) -> Any:
    if hasattr(result, "__await__"):
        result = await result
    return result


def _first_text(res: Any) -> str | None:
    if isinstance(res, dict):
        for c in res.get("content") or []:
            if isinstance(c, dict) and c.get("type") == "text" and isinstance(c.get("text"), str):
                return c["text"]
    return None


def create_app(settings: Settings | None = None, fetch: Fetch | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application exposing the weather lookup.

    Parameters
    ----------
    settings : Settings | None, optional
        Runtime configuration. Read from the environment (and ``.env``) if omitted.
    fetch : Fetch | None, optional
        Async transport for the upstream APIs. An ``HttpxFetch`` owned by the
        app is created when omitted and closed on shutdown.

    Returns
    -------
    FastAPI
        App with ``/health``, ``/weather`` and the MCP endpoint mounted at ``/``.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    owned_transport = fetch is None
    transport: Fetch = fetch if fetch is not None else HttpxFetch(timeout=settings.http_timeout)

    fastmcp = FastMCP(name=SERVER_NAME, json_response=True)

    tool_handler = partial(weather_tool_handler, fetch=transport, settings=settings)
    resource_handler = partial(weather_resource_handler, fetch=transport, settings=settings)
    prompt_handler = weather_prompt_handler

    if settings.paywall_enabled:
        payments = Payments({"nvm_api_key": settings.nvm_api_key, "environment": settings.nvm_environment})
        payments.mcp.configure(
            {"agentId": settings.agent_id, "serverName": SERVER_NAME, "getContext": fastmcp.get_context}
        )
        credits = partial(weather_tool_credits_calculator, settings=settings)
        tool_handler = payments.mcp.with_paywall(
            tool_handler, {"kind": "tool", "name": "weather.lookup", "credits": credits}
        )
        resource_handler = payments.mcp.with_paywall(
            resource_handler, {"kind": "resource", "name": "weather.lookup", "credits": credits}
        )
        prompt_handler = payments.mcp.with_paywall(
            prompt_handler, {"kind": "prompt", "name": "weather.ensureCity", "credits": 0}
        )
        logger.info("Paywall enabled for agent %s on %s", settings.agent_id, settings.nvm_environment)
    else:
        logger.info("NVM_SERVER_API_KEY not set; serving MCP handlers without paywall")

    @fastmcp.tool(name="weather.lookup", title="City Weather Lookup")
    async def _tool(city: str | None = None) -> str:
        # Paywall builds extra via configured getContext
        res = await _resolve(tool_handler({"city": city or ""}))
        text = _first_text(res)
        return text if text is not None else str(res)

    @fastmcp.resource("weather://{city}", title="City Weather Resource", mime_type="application/json")
    async def _resource(city: str) -> str:
        uri = urlparse(f"weather://{city}")
        result = await _resolve(resource_handler(uri, {"city": [city]}, None))
        for item in (result or {}).get("contents", []):
            text = item.get("text")
            if isinstance(text, str):
                return text
        return "{}"

    @fastmcp.prompt(name="weather.ensureCity", title="Ensure city")
    async def _prompt(city: str | None = None) -> str:
        res = await _resolve(prompt_handler({"city": city or ""}))
        messages = (res or {}).get("messages", [])
        if messages:
            content = messages[0].get("content", {})
            if isinstance(content, dict) and content.get("type") == "text":
                return str(content.get("text", ""))
        return ""

    sub_app = fastmcp.streamable_http_app()

    @asynccontextmanager
    async def _lifespan(_app: FastAPI):  # noqa: D401
        async with fastmcp.session_manager.run():
            yield
        if owned_transport:
            await transport.aclose()  # type: ignore[attr-defined]

    app = FastAPI(lifespan=_lifespan)

    @app.get("/health")
    async def health():
        """Simple health endpoint indicating the service is running."""
        return PlainTextResponse("weather-lookup is running")

    @app.get("/weather")
    async def weather(city: str = ""):
        """Run one lookup and return the result as JSON."""
        try:
            result = await lookup(
                city,
                transport,
                window_size=settings.forecast_days,
                geocoding_url=settings.geocoding_url,
                forecast_url=settings.forecast_url,
            )
        except WeatherLookupError as exc:
            return JSONResponse(
                status_code=ERROR_STATUS.get(exc.kind, 502),
                content={"error": exc.kind, "message": str(exc)},
            )
        return result.to_dict()

    # Mounted last so the routes above take precedence
    app.mount("/", sub_app)
    return app
