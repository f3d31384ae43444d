"""
Weather Agent
=============

Supplies the weather snapshot for a location and builds the localized
weather view.

Features:
- Static sample snapshot with a three-day forecast (no weather API)
- Forecast dates formatted per display language
- Humidity, temperature and wind insights
"""

from datetime import date
from typing import Any, Dict
from ..utils.logger import logger
from ..utils.translations import (
    translate,
    translate_optional,
    resolve_language,
    data_key,
    format_number,
)
from .models import ForecastDay, GeoLocation, WeatherSnapshot, validate_weather


SAMPLE_WEATHER = WeatherSnapshot(
    temperature=28,
    humidity=65,
    wind_speed=12,
    wind_direction="NE",
    forecast=(
        ForecastDay(date="2025-09-18", temperature=29, condition="Sunny"),
        ForecastDay(date="2025-09-19", temperature=31, condition="Partly Cloudy"),
        ForecastDay(date="2025-09-20", temperature=27, condition="Rainy"),
    ),
)

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def fetch_weather(location: GeoLocation) -> WeatherSnapshot:
    """
    Return the weather snapshot for a location.

    The sample snapshot is used for every location.
    """
    logger.info(f"Weather Agent loading sample snapshot for {location.address!r}")
    return validate_weather(SAMPLE_WEATHER)


def format_forecast_date(iso_date: str, language: str) -> str:
    """
    Format a forecast date for display.

    Hindi shows day/month/year ("18/9/2025"), English shows "Sep 18".
    """
    day = date.fromisoformat(iso_date)
    if resolve_language(language) == "hi":
        return f"{day.day}/{day.month}/{day.year}"
    return f"{_MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def localized_condition(condition: str, language: str) -> str:
    return translate_optional(data_key("condition", condition), language, condition)


def weather_narration_values(weather: WeatherSnapshot) -> Dict[str, str]:
    return {
        "temperature": format_number(weather.temperature),
        "humidity": format_number(weather.humidity),
        "wind_speed": format_number(weather.wind_speed),
    }


def build_weather_view(weather: WeatherSnapshot, language: str) -> Dict[str, Any]:
    """
    Localized view model for the weather tab.

    Args:
        weather: Current weather snapshot
        language: Selector language code

    Returns:
        Current conditions, forecast cards and insights
    """
    values = weather_narration_values(weather)

    return {
        "title": translate("current_weather", language),
        "listen": translate("listen", language),
        "current": [
            {
                "label": translate("temperature", language),
                "value": values["temperature"],
                "unit": translate("celsius", language),
            },
            {
                "label": translate("humidity", language),
                "value": values["humidity"],
                "unit": translate("percent", language),
            },
            {
                "label": translate("wind_speed", language),
                "value": values["wind_speed"],
                "unit": translate("kmh", language),
            },
            {
                "label": translate("wind_direction", language),
                "value": weather.wind_direction,
                "unit": None,
            },
        ],
        "forecast": {
            "title": translate("forecast", language),
            "days": [
                {
                    "date": format_forecast_date(day.date, language),
                    "condition": localized_condition(day.condition, language),
                    "temperature": format_number(day.temperature),
                    "unit": translate("celsius", language),
                }
                for day in weather.forecast
            ],
        },
        "insights": {
            "title": translate("weather_insights", language),
            "items": [
                translate("insight_humidity", language, humidity=values["humidity"]),
                translate("insight_temperature", language, temperature=values["temperature"]),
                translate("insight_wind", language, wind_speed=values["wind_speed"]),
            ],
        },
    }
