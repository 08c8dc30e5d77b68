import asyncio
import logging
import re
from typing import Any

from weather_lookup.services.aligner import DEFAULT_WINDOW, align_and_trim
from weather_lookup.services.errors import EmptyInputError, LookupCancelledError
from weather_lookup.services.forecast import FORECAST_URL, fetch_weather
from weather_lookup.services.geocoder import GEOCODING_URL, resolve
from weather_lookup.services.models import LookupResult
from weather_lookup.services.transport import Fetch, HttpxFetch

logger = logging.getLogger(__name__)

# Markup and injection-relevant characters: < > " ' ` { } ( ) [ ] \ ;
_UNSAFE_CHARS = re.compile(r"[<>\"'`{}()\[\]\\;]")


def sanitize_city(city: Any) -> str:
    """
    Strip unsafe characters from a user-provided city string.

    Parameters
    ----------
    city : Any
        Raw city input. Anything that is not a string yields an empty string.

    Returns
    -------
    str
        Input without denylisted characters and surrounding whitespace.
        Does not check that the result is a plausible place name.
    """
    if not isinstance(city, str):
        return ""
    return _UNSAFE_CHARS.sub("", city).strip()


async def lookup(
    raw_city: Any,
    fetch: Fetch | None = None,
    *,
    window_size: int = DEFAULT_WINDOW,
    geocoding_url: str = GEOCODING_URL,
    forecast_url: str = FORECAST_URL,
) -> LookupResult:
    """
    Run one full lookup: sanitize, geocode, fetch weather, align the forecast.

    Parameters
    ----------
    raw_city : Any
        City name as typed by the user.
    fetch : Fetch | None, optional
        Async transport. A temporary ``HttpxFetch`` is used when omitted.
    window_size : int, optional
        Maximum number of upcoming days.
    geocoding_url : str, optional
        Geocoding endpoint.
    forecast_url : str, optional
        Forecast endpoint.

    Returns
    -------
    LookupResult
        Location, current conditions and upcoming days (empty when the
        provider returned no usable daily series).

    Raises
    ------
    WeatherLookupError
        Any classified failure from the geocoder or forecast client, unchanged.
        No step is retried.
    LookupCancelledError
        If the lookup is cancelled while awaiting the network.
    """
    city = sanitize_city(raw_city)
    if not city:
        raise EmptyInputError()

    if fetch is None:
        transport = HttpxFetch()
        try:
            return await _run(city, transport, window_size, geocoding_url, forecast_url)
        finally:
            await transport.aclose()
    return await _run(city, fetch, window_size, geocoding_url, forecast_url)


async def _run(city: str, fetch: Fetch, window_size: int, geocoding_url: str, forecast_url: str) -> LookupResult:
    logger.info("Looking up weather for %r", city)
    try:
        location = await resolve(city, fetch, base_url=geocoding_url)
        snapshot = await fetch_weather(
            location.latitude, location.longitude, fetch, include_forecast=True, base_url=forecast_url
        )
    except LookupCancelledError:
        raise
    except asyncio.CancelledError as exc:
        logger.info("Lookup for %r cancelled", city)
        raise LookupCancelledError() from exc

    if snapshot.daily is not None:
        upcoming = align_and_trim(snapshot.daily, snapshot.current.timestamp, window_size)
    else:
        upcoming = []

    logger.info(
        "Lookup for %r resolved to %s, %s with %d upcoming days",
        city,
        location.name,
        location.country,
        len(upcoming),
    )
    return LookupResult(location=location, current=snapshot.current, upcoming=upcoming)
