from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Location:
    """
    First geocoding match for a city query.

    Attributes
    ----------
    name : str
        Display name returned by the geocoder.
    country : str
        Country name, empty when the geocoder does not report one.
    latitude : float
        Latitude in decimal degrees.
    longitude : float
        Longitude in decimal degrees.
    """

    name: str
    country: str
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CurrentConditions:
    """
    Current weather reported by the forecast provider.

    Attributes
    ----------
    temperature : float
        Air temperature in Celsius degrees.
    condition_code : int
        WMO weather condition code.
    timestamp : str
        Provider-local ISO-8601 date-time, e.g. ``2025-11-03T02:00``.
    """

    temperature: float
    condition_code: int
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DailySeries:
    """
    Multi-day forecast as parallel, index-aligned sequences.

    Index ``i`` across ``dates``, ``max_temps``, ``min_temps`` and
    ``condition_codes`` describes the same calendar day.
    """

    dates: Tuple[str, ...]
    max_temps: Tuple[float, ...]
    min_temps: Tuple[float, ...]
    condition_codes: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.dates)

    @classmethod
    def from_payload(cls, daily: Any) -> Optional["DailySeries"]:
        """
        Build a series from the provider's ``daily`` JSON block.

        Parameters
        ----------
        daily : Any
            Decoded ``daily`` object, or None when the response had none.

        Returns
        -------
        DailySeries | None
            None when the block is absent, lacks one of the four arrays, the
            arrays differ in length or a value is not numeric (provider nulls).
        """
        if not isinstance(daily, dict):
            return None
        columns = [
            daily.get("time"),
            daily.get("temperature_2m_max"),
            daily.get("temperature_2m_min"),
            daily.get("weathercode"),
        ]
        if not all(isinstance(col, list) for col in columns):
            return None
        if len({len(col) for col in columns}) != 1:
            return None
        dates, max_temps, min_temps, codes = columns
        if not all(_is_number(v) for v in (*max_temps, *min_temps, *codes)):
            return None
        return cls(
            dates=tuple(str(d) for d in dates),
            max_temps=tuple(max_temps),
            min_temps=tuple(min_temps),
            condition_codes=tuple(int(c) for c in codes),
        )


@dataclass(frozen=True)
class ForecastDay:
    """One upcoming day, with rounded temperatures and mapped condition."""

    date: str
    max_temp: int
    min_temp: int
    condition_code: int
    description: str
    icon_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions plus the daily series when one was requested and returned."""

    current: CurrentConditions
    daily: Optional[DailySeries] = None


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of one city lookup.

    Attributes
    ----------
    location : Location
        Resolved place.
    current : CurrentConditions
        Conditions at the provider's current timestamp.
    upcoming : List[ForecastDay]
        Days after today in chronological order, at most the window size.
    """

    location: Location
    current: CurrentConditions
    upcoming: List[ForecastDay]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "current": self.current.to_dict(),
            "upcoming": [day.to_dict() for day in self.upcoming],
        }
