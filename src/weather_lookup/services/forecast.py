import logging
from typing import Any, Dict

from weather_lookup.services.errors import WeatherDataMissingError, WeatherUnavailableError
from weather_lookup.services.models import CurrentConditions, DailySeries, WeatherSnapshot
from weather_lookup.services.transport import Fetch, build_url

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode"


def _forecast_params(lat: float, lon: float, include_forecast: bool) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
    }
    if include_forecast:
        params["daily"] = DAILY_FIELDS
        params["timezone"] = "auto"
    return params


def _parse_current(payload: Any) -> CurrentConditions:
    if not isinstance(payload, dict):
        raise WeatherDataMissingError()
    try:
        return CurrentConditions(
            temperature=float(payload["temperature"]),
            condition_code=int(payload["weathercode"]),
            timestamp=str(payload.get("time") or ""),
        )
    except (KeyError, TypeError, ValueError):
        raise WeatherDataMissingError()


async def fetch_weather(
    lat: float,
    lon: float,
    fetch: Fetch,
    include_forecast: bool = True,
    *,
    base_url: str = FORECAST_URL,
) -> WeatherSnapshot:
    """
    Fetch current conditions and, optionally, the daily series for a point.

    Parameters
    ----------
    lat : float
        Latitude in decimal degrees.
    lon : float
        Longitude in decimal degrees.
    fetch : Fetch
        Async transport used for the single GET request.
    include_forecast : bool, optional
        Request the daily max/min/condition series as well.
    base_url : str, optional
        Forecast endpoint.

    Returns
    -------
    WeatherSnapshot
        ``daily`` is None when not requested, absent or malformed.

    Raises
    ------
    WeatherUnavailableError
        If the transport reports a non-success status.
    WeatherDataMissingError
        If the response lacks usable ``current_weather`` data.
    """
    url = build_url(base_url, _forecast_params(lat, lon, include_forecast))
    logger.debug("Forecast request: %s", url)
    response = await fetch(url)
    if not response.ok:
        logger.warning("Forecast request failed for (%s, %s)", lat, lon)
        raise WeatherUnavailableError()

    try:
        data = await response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        logger.warning("Forecast response for (%s, %s) is not a JSON object", lat, lon)
        raise WeatherDataMissingError()

    try:
        current = _parse_current(data.get("current_weather"))
    except WeatherDataMissingError:
        logger.warning("Forecast response for (%s, %s) lacks current conditions", lat, lon)
        raise

    daily = DailySeries.from_payload(data.get("daily")) if include_forecast else None
    if include_forecast and daily is None:
        logger.info("No usable daily series for (%s, %s); skipping forecast", lat, lon)
    return WeatherSnapshot(current=current, daily=daily)
