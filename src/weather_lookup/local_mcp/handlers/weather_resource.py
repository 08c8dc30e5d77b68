from typing import Any, Dict
import json

from weather_lookup.config import Settings
from weather_lookup.services.errors import WeatherLookupError
from weather_lookup.services.transport import Fetch
from weather_lookup.services.weather_service import lookup, sanitize_city


async def weather_resource_handler(
    _uri: Any,
    variables: Dict[str, Any],
    _extra: Any | None = None,
    *,
    fetch: Fetch,
    settings: Settings,
) -> Dict[str, Any]:
    """
    Build the resource contents for a city lookup.

    Parameters
    ----------
    _uri : Any
        Parsed URI of the requested resource. Unused.
    variables : Dict[str, Any]
        Variables extracted from the resource template, expected to contain a "city" entry.
    _extra : Any | None, optional
        Extra authentication and request metadata, provided by the payments integration.
    fetch : Fetch
        Async transport shared by the app.
    settings : Settings
        Endpoints and forecast window.

    Returns
    -------
    Dict[str, Any]
        MCP resource response with the JSON lookup result, or a JSON error
        object carrying the failure kind.
    """
    raw = variables.get("city")
    city_param = raw[0] if isinstance(raw, list) and raw else raw
    city = sanitize_city(city_param)
    try:
        result = await lookup(
            city,
            fetch,
            window_size=settings.forecast_days,
            geocoding_url=settings.geocoding_url,
            forecast_url=settings.forecast_url,
        )
        payload: Dict[str, Any] = result.to_dict()
    except WeatherLookupError as exc:
        payload = {"error": exc.kind, "message": str(exc)}
    return {
        "contents": [
            {
                "uri": f"weather://{city}",
                "text": json.dumps(payload, ensure_ascii=False),
                "mimeType": "application/json",
            }
        ]
    }
