"""Command-line weather lookup.

Reads the city from the first argument or the WEATHER_CITY environment
variable, runs one lookup against Open-Meteo and prints a text summary.
"""

from typing import List, Optional
import asyncio
import datetime
import sys

from weather_lookup.config import Settings, get_env
from weather_lookup.logging_config import setup_logging
from weather_lookup.services.errors import WeatherLookupError
from weather_lookup.services.models import LookupResult
from weather_lookup.services.presentation import format_summary, theme_for
from weather_lookup.services.transport import Fetch, HttpxFetch
from weather_lookup.services.weather_service import lookup


async def _run(city: str, settings: Settings, fetch: Optional[Fetch]) -> LookupResult:
    transport = fetch or HttpxFetch(timeout=settings.http_timeout)
    try:
        return await lookup(
            city,
            transport,
            window_size=settings.forecast_days,
            geocoding_url=settings.geocoding_url,
            forecast_url=settings.forecast_url,
        )
    finally:
        if fetch is None:
            await transport.aclose()  # type: ignore[attr-defined]


def main(argv: Optional[List[str]] = None, fetch: Optional[Fetch] = None) -> int:
    """Entrypoint for the lookup CLI; returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    city = " ".join(args) if args else get_env("WEATHER_CITY")
    if not city:
        print("Usage: weather-lookup CITY (or set WEATHER_CITY)", file=sys.stderr)
        return 2

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    try:
        result = asyncio.run(_run(city, settings, fetch))
    except WeatherLookupError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    print(format_summary(result))
    theme = theme_for(result.current.condition_code, datetime.datetime.now().hour)
    if theme:
        print(f"Theme: {theme}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
