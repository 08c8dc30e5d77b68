"""Tests for theme selection and text summaries."""

import pytest

from weather_lookup.services.models import CurrentConditions, ForecastDay, Location, LookupResult
from weather_lookup.services.presentation import format_summary, is_night, theme_for


@pytest.mark.parametrize("hour,expected", [(0, True), (5, True), (6, False), (17, False), (18, True), (23, True)])
def test_is_night(hour, expected):
    assert is_night(hour) is expected


@pytest.mark.parametrize("code,hour,expected", [
    (0, 12, "sunny"),
    (1, 9, "sunny"),
    (2, 12, "cloudy"),
    (3, 12, "cloudy"),
    (61, 12, "rainy"),
    (80, 12, "rainy"),
    (0, 20, "night"),
    (61, 3, "night"),
    (45, 12, ""),
    (95, 12, ""),
])
def test_theme_for(code, hour, expected):
    assert theme_for(code, hour) == expected


def _result(upcoming, country="Brasil"):
    return LookupResult(
        location=Location(name="São Paulo", country=country, latitude=-23.55, longitude=-46.63),
        current=CurrentConditions(temperature=24.5, condition_code=2, timestamp="2025-11-03T02:00"),
        upcoming=upcoming,
    )


def test_format_summary_with_forecast():
    text = format_summary(_result([
        ForecastDay("2025-11-04", 28, 19, 45, "Fog", "wi-fog"),
        ForecastDay("2025-11-05", 30, 20, 61, "Slight rain", "wi-rain"),
    ]))
    lines = text.splitlines()
    assert lines[0] == "São Paulo, Brasil"
    assert lines[1] == "Now: 25°C, Partly cloudy"
    assert lines[2] == "Next days:"
    assert lines[3] == "  Tuesday 4 November: max 28°C, min 19°C, Fog"
    assert lines[4].startswith("  Wednesday 5 November:")


def test_format_summary_without_forecast_or_country():
    text = format_summary(_result([], country=""))
    assert text.splitlines() == ["São Paulo", "Now: 25°C, Partly cloudy"]
