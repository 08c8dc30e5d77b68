"""Tests for the condition code lookup tables."""

import pytest

from weather_lookup.services.conditions import (
    DESCRIPTIONS,
    ICONS,
    UNKNOWN_DESCRIPTION,
    UNKNOWN_ICON,
    describe,
    icon_for,
)

REQUIRED_CODES = [0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
                  71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99]


@pytest.mark.parametrize("code", REQUIRED_CODES)
def test_every_standard_code_is_covered(code):
    assert describe(code) == DESCRIPTIONS[code]
    assert icon_for(code) == ICONS[code]
    assert describe(code) != UNKNOWN_DESCRIPTION
    assert icon_for(code) != UNKNOWN_ICON


def test_known_values():
    assert describe(0) == "Clear sky"
    assert icon_for(0) == "wi-day-sunny"
    assert describe(95) == "Thunderstorm"
    assert icon_for(99) == "wi-hail"
    assert icon_for(45) == icon_for(48) == "wi-fog"


@pytest.mark.parametrize("code", [-1, 4, 50, 100, 1000])
def test_unknown_codes_fall_back(code):
    assert describe(code) == "unknown weather"
    assert icon_for(code) == "wi-na"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DESCRIPTIONS[0] = "Sunny"  # type: ignore[index]
