from __future__ import annotations

from playslike import units


def test_conversions_round_to_whole_units() -> None:
    assert units.yards_to_meters(100) == 91
    assert units.meters_to_yards(91) == 100
    assert units.fahrenheit_to_celsius(212) == 100
    assert units.celsius_to_fahrenheit(100) == 212
    assert units.mph_to_kmh(10) == 16
    assert units.kmh_to_mph(16) == 10
    assert units.feet_to_meters(1000) == 305
    assert units.meters_to_feet(305) == 1001


def test_formatting_follows_preferences() -> None:
    assert units.format_distance(150) == (150, "yards", "yds")
    assert units.format_distance(150, "meters") == (137, "meters", "m")
    assert units.format_temperature(70, "celsius") == (21, "degrees Celsius", "°C")
    assert units.format_wind_speed(12, "kmh") == (19, "kilometers per hour", "km/h")
    assert units.format_altitude(1000, "meters").short_label == "m"
    assert units.format_altitude(1000).label == "feet"
