import datetime
from typing import List

from weather_lookup.services.aligner import round_half_up
from weather_lookup.services.conditions import describe
from weather_lookup.services.models import LookupResult

RAINY_CODES = frozenset({61, 63, 65, 80})
CLOUDY_CODES = frozenset({2, 3})
SUNNY_CODES = frozenset({0, 1})


def is_night(hour: int) -> bool:
    return hour >= 18 or hour < 6


def theme_for(code: int, hour: int) -> str:
    """
    Theme class for the current conditions.

    Parameters
    ----------
    code : int
        Current condition code.
    hour : int
        Local hour of day (0-23), supplied by the caller's clock.

    Returns
    -------
    str
        One of ``night``, ``rainy``, ``cloudy``, ``sunny``; empty string when
        no theme applies.
    """
    if is_night(hour):
        return "night"
    if code in RAINY_CODES:
        return "rainy"
    if code in CLOUDY_CODES:
        return "cloudy"
    if code in SUNNY_CODES:
        return "sunny"
    return ""


def _weekday(date_text: str) -> str:
    try:
        day = datetime.date.fromisoformat(date_text)
    except ValueError:
        return date_text
    return f"{day:%A} {day.day} {day:%B}"


def format_summary(result: LookupResult) -> str:
    """Render a lookup result as plain text, one upcoming day per line."""
    loc = result.location
    current = result.current
    place = f"{loc.name}, {loc.country}" if loc.country else loc.name
    lines: List[str] = [
        place,
        f"Now: {round_half_up(current.temperature)}°C, {describe(current.condition_code)}",
    ]
    if result.upcoming:
        lines.append("Next days:")
        for day in result.upcoming:
            lines.append(f"  {_weekday(day.date)}: max {day.max_temp}°C, min {day.min_temp}°C, {day.description}")
    return "\n".join(lines)
