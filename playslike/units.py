"""Unit conversions and display formatting for imperial/metric preferences."""

from __future__ import annotations

from typing import Literal, NamedTuple

DistanceUnit = Literal["yards", "meters"]
TemperatureUnit = Literal["fahrenheit", "celsius"]
WindSpeedUnit = Literal["mph", "kmh"]

YARD_IN_METERS = 0.9144
FOOT_IN_METERS = 0.3048
MILE_IN_KM = 1.60934


class FormattedValue(NamedTuple):
    value: float
    label: str
    short_label: str


def yards_to_meters(yards: float) -> int:
    return round(yards * YARD_IN_METERS)


def meters_to_yards(meters: float) -> int:
    return round(meters / YARD_IN_METERS)


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return round((fahrenheit - 32) * 5 / 9)


def celsius_to_fahrenheit(celsius: float) -> int:
    return round(celsius * 9 / 5 + 32)


def mph_to_kmh(mph: float) -> int:
    return round(mph * MILE_IN_KM)


def kmh_to_mph(kmh: float) -> int:
    return round(kmh / MILE_IN_KM)


def feet_to_meters(feet: float) -> int:
    return round(feet * FOOT_IN_METERS)


def meters_to_feet(meters: float) -> int:
    return round(meters / FOOT_IN_METERS)


def format_distance(yards: float, unit: DistanceUnit = "yards") -> FormattedValue:
    if unit == "meters":
        return FormattedValue(yards_to_meters(yards), "meters", "m")
    return FormattedValue(yards, "yards", "yds")


def format_temperature(
    fahrenheit: float, unit: TemperatureUnit = "fahrenheit"
) -> FormattedValue:
    if unit == "celsius":
        return FormattedValue(fahrenheit_to_celsius(fahrenheit), "degrees Celsius", "°C")
    return FormattedValue(fahrenheit, "degrees Fahrenheit", "°F")


def format_wind_speed(mph: float, unit: WindSpeedUnit = "mph") -> FormattedValue:
    if unit == "kmh":
        return FormattedValue(mph_to_kmh(mph), "kilometers per hour", "km/h")
    return FormattedValue(mph, "miles per hour", "mph")


def format_altitude(feet: float, distance_unit: DistanceUnit = "yards") -> FormattedValue:
    # altitude follows the distance preference
    if distance_unit == "meters":
        return FormattedValue(feet_to_meters(feet), "meters", "m")
    return FormattedValue(feet, "feet", "ft")


__all__ = [
    "DistanceUnit",
    "FormattedValue",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "feet_to_meters",
    "format_altitude",
    "format_distance",
    "format_temperature",
    "format_wind_speed",
    "kmh_to_mph",
    "meters_to_feet",
    "meters_to_yards",
    "mph_to_kmh",
    "yards_to_meters",
]
