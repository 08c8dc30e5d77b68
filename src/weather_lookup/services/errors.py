"""Error taxonomy for the lookup pipeline.

Every class carries a ``kind`` string so outer surfaces can report the
classification without matching on types.
"""

import asyncio


class WeatherLookupError(Exception):
    """Base class for classified lookup failures."""

    kind = "LookupError"
    default_message = "Weather lookup failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyInputError(WeatherLookupError):
    kind = "EmptyInput"
    default_message = "Please enter a city name."


class InvalidInputError(WeatherLookupError):
    kind = "InvalidInput"
    default_message = "City name is empty after sanitization."


class GeocodingUnavailableError(WeatherLookupError):
    kind = "GeocodingUnavailable"
    default_message = "Geocoding service is unavailable."


class CityNotFoundError(WeatherLookupError):
    kind = "CityNotFound"
    default_message = "City not found. Try again."


class WeatherUnavailableError(WeatherLookupError):
    kind = "WeatherUnavailable"
    default_message = "Weather service is unavailable."


class WeatherDataMissingError(WeatherLookupError):
    kind = "WeatherDataMissing"
    default_message = "Weather data is unavailable."


class LookupCancelledError(asyncio.CancelledError):
    """Raised when an in-flight lookup is cancelled; still a CancelledError."""

    kind = "Cancelled"
