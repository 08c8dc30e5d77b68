from types import MappingProxyType
from typing import Mapping

UNKNOWN_DESCRIPTION = "unknown weather"
UNKNOWN_ICON = "wi-na"

# WMO weather interpretation codes as used by Open-Meteo
DESCRIPTIONS: Mapping[int, str] = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Light freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Light freezing rain",
        67: "Heavy freezing rain",
        71: "Slight snowfall",
        73: "Moderate snowfall",
        75: "Heavy snowfall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)

# Weather Icons (wi-*) class names
ICONS: Mapping[int, str] = MappingProxyType(
    {
        0: "wi-day-sunny",
        1: "wi-day-sunny-overcast",
        2: "wi-day-cloudy",
        3: "wi-cloudy",
        45: "wi-fog",
        48: "wi-fog",
        51: "wi-sprinkle",
        53: "wi-sprinkle",
        55: "wi-showers",
        56: "wi-rain-mix",
        57: "wi-rain-mix",
        61: "wi-rain",
        63: "wi-rain-mix",
        65: "wi-rain-wind",
        66: "wi-rain-mix",
        67: "wi-rain-mix",
        71: "wi-snow",
        73: "wi-snow",
        75: "wi-snow-wind",
        77: "wi-snow",
        80: "wi-showers",
        81: "wi-showers",
        82: "wi-rain-wind",
        85: "wi-snow",
        86: "wi-snow-wind",
        95: "wi-thunderstorm",
        96: "wi-storm-showers",
        99: "wi-hail",
    }
)


def describe(code: int) -> str:
    """Human-readable description for a condition code, or ``UNKNOWN_DESCRIPTION``."""
    return DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def icon_for(code: int) -> str:
    """Icon identifier for a condition code, or ``UNKNOWN_ICON``."""
    return ICONS.get(code, UNKNOWN_ICON)
