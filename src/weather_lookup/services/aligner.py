import logging
import math
from typing import List

from weather_lookup.services.conditions import describe, icon_for
from weather_lookup.services.models import DailySeries, ForecastDay

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 5


def round_half_up(value: float) -> int:
    # Half-up: 2.5 -> 3, -2.5 -> -2
    return int(math.floor(float(value) + 0.5))


def calendar_date(timestamp: str) -> str:
    """Date-only prefix of an ISO-8601 timestamp (``2025-11-03T02:00`` -> ``2025-11-03``)."""
    return (timestamp or "").split("T", 1)[0]


def today_index(daily: DailySeries, current_timestamp: str) -> int:
    """
    Index of the current calendar date within ``daily.dates``.

    Falls back to 0 when the date is not in the series. That fallback
    treats the first entry as today even if the real date is simply missing
    (clock skew, partial provider response); kept as-is until the product
    decides otherwise.
    """
    current_date = calendar_date(current_timestamp)
    try:
        return daily.dates.index(current_date)
    except ValueError:
        logger.warning(
            "Current date %r not found in daily series starting %r; assuming index 0",
            current_date,
            daily.dates[0] if daily.dates else None,
        )
        return 0


def align_and_trim(daily: DailySeries, current_timestamp: str, window_size: int = DEFAULT_WINDOW) -> List[ForecastDay]:
    """
    Select the days following "today" from a daily series.

    Parameters
    ----------
    daily : DailySeries
        Index-aligned daily forecast.
    current_timestamp : str
        Provider's current-conditions timestamp; anchors "today" to the
        provider's clock instead of the local one.
    window_size : int, optional
        Maximum number of days to return.

    Returns
    -------
    List[ForecastDay]
        Up to ``window_size`` entries starting right after today, in series
        order. Shorter when the series runs out; never padded.
    """
    if window_size <= 0:
        return []

    start = today_index(daily, current_timestamp) + 1
    stop = min(start + window_size, len(daily))

    days: List[ForecastDay] = []
    for i in range(start, stop):
        code = daily.condition_codes[i]
        days.append(
            ForecastDay(
                date=daily.dates[i],
                max_temp=round_half_up(daily.max_temps[i]),
                min_temp=round_half_up(daily.min_temps[i]),
                condition_code=code,
                description=describe(code),
                icon_id=icon_for(code),
            )
        )
    return days
