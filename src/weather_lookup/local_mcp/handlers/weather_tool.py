from typing import Any, Dict

from weather_lookup.config import Settings
from weather_lookup.services.errors import WeatherLookupError
from weather_lookup.services.presentation import format_summary
from weather_lookup.services.transport import Fetch
from weather_lookup.services.weather_service import lookup, sanitize_city


def error_content(exc: WeatherLookupError) -> Dict[str, Any]:
    """MCP error payload naming the lookup failure kind."""
    return {
        "content": [{"type": "text", "text": f"Error ({exc.kind}): {exc}"}],
        "isError": True,
    }


async def weather_tool_handler(
    args: Dict[str, Any],
    _extra: Any | None = None,
    *,
    fetch: Fetch,
    settings: Settings,
) -> Dict[str, Any]:
    """
    Handle the MCP tool call for a city weather lookup.

    Parameters
    ----------
    args : Dict[str, Any]
        Tool arguments. Must include the "city" string parameter.
    _extra : Any | None, optional
        Extra authentication and request metadata, provided by the payments integration.
    fetch : Fetch
        Async transport shared by the app.
    settings : Settings
        Endpoints and forecast window.

    Returns
    -------
    Dict[str, Any]
        MCP tool response with a text summary and a resource link, or an
        error response when the lookup fails.
    """
    try:
        result = await lookup(
            args.get("city", ""),
            fetch,
            window_size=settings.forecast_days,
            geocoding_url=settings.geocoding_url,
            forecast_url=settings.forecast_url,
        )
    except WeatherLookupError as exc:
        return error_content(exc)

    city = sanitize_city(args.get("city", ""))
    return {
        "content": [
            {"type": "text", "text": format_summary(result)},
            {
                "type": "resource_link",
                "uri": f"weather://{city}",
                "name": f"weather {city}",
                "mimeType": "application/json",
                "description": "Raw JSON for the lookup result",
            },
        ]
    }


def weather_tool_credits_calculator(_ctx: Dict[str, Any], *, settings: Settings | None = None) -> int:
    """
    Compute the number of credits required for the weather tool.

    Parameters
    ----------
    _ctx : Dict[str, Any]
        Execution context for the call. Unused; the price is flat.
    settings : Settings | None, optional
        Source of the configured price; read from the environment when omitted.

    Returns
    -------
    int
        Configured credit price.
    """
    return (settings or Settings.from_env()).tool_credits
