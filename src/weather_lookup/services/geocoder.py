import logging
from typing import Any, Dict

from weather_lookup.services.errors import CityNotFoundError, GeocodingUnavailableError, InvalidInputError
from weather_lookup.services.models import Location
from weather_lookup.services.transport import Fetch, build_url

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


def _geocoding_params(city: str) -> Dict[str, Any]:
    return {"name": city, "count": 1, "language": "pt", "format": "json"}


async def resolve(city: str, fetch: Fetch, *, base_url: str = GEOCODING_URL) -> Location:
    """
    Resolve a sanitized city name to its first geocoding match.

    Parameters
    ----------
    city : str
        City name, already sanitized and non-empty.
    fetch : Fetch
        Async transport used for the single GET request.
    base_url : str, optional
        Geocoding endpoint.

    Returns
    -------
    Location
        Name, country and coordinates of the first result.

    Raises
    ------
    InvalidInputError
        If ``city`` is empty or blank.
    GeocodingUnavailableError
        If the transport reports a non-success status (rate limits included).
    CityNotFoundError
        If the response has no results or no ``results`` field at all.
    """
    if not isinstance(city, str) or not city.strip():
        raise InvalidInputError()

    url = build_url(base_url, _geocoding_params(city))
    logger.debug("Geocoding request: %s", url)
    response = await fetch(url)
    if not response.ok:
        logger.warning("Geocoding request failed for %r", city)
        raise GeocodingUnavailableError()

    try:
        data = await response.json()
    except ValueError:
        data = None

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        logger.warning("No geocoding results for %r", city)
        raise CityNotFoundError()

    first = results[0]
    try:
        latitude = float(first["latitude"])
        longitude = float(first["longitude"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Geocoding result for %r has no usable coordinates", city)
        raise CityNotFoundError()

    return Location(
        name=str(first.get("name") or city),
        country=str(first.get("country") or ""),
        latitude=latitude,
        longitude=longitude,
    )
