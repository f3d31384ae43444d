"""
Unit tests for Weather Agent
"""

import pytest
from unittest.mock import patch
from src.agents.models import DataValidationError, GeoLocation, WeatherSnapshot
from src.agents.weather_agent import (
    SAMPLE_WEATHER,
    build_weather_view,
    fetch_weather,
    format_forecast_date,
    localized_condition,
)


PUNE = GeoLocation(latitude=18.5204, longitude=73.8567, address="18.5204, 73.8567")


class TestWeatherAgent:
    """Test cases for the weather agent."""

    @patch('src.agents.weather_agent.logger')
    def test_fetch_weather_returns_sample(self, mock_logger):
        weather = fetch_weather(PUNE)

        assert weather.temperature == 28
        assert weather.humidity == 65
        assert weather.wind_speed == 12
        assert weather.wind_direction == "NE"
        assert [day.date for day in weather.forecast] == ["2025-09-18", "2025-09-19", "2025-09-20"]

    @patch('src.agents.weather_agent.SAMPLE_WEATHER', WeatherSnapshot(28, 120, 12, "NE"))
    @patch('src.agents.weather_agent.logger')
    def test_fetch_weather_rejects_humidity_over_100(self, mock_logger):
        with pytest.raises(DataValidationError) as exc_info:
            fetch_weather(PUNE)
        assert exc_info.value.field_name == "humidity"

    def test_format_forecast_date_per_language(self):
        assert format_forecast_date("2025-09-18", "hi") == "18/9/2025"
        assert format_forecast_date("2025-09-18", "en") == "Sep 18"
        # Languages without a table follow the fallback format
        assert format_forecast_date("2025-01-05", "ta") == "Jan 5"

    def test_localized_condition(self):
        assert localized_condition("Partly Cloudy", "en") == "Partly Cloudy"
        assert localized_condition("Rainy", "hi") == "बारिश"
        # Unknown conditions pass through unchanged
        assert localized_condition("Hail", "hi") == "Hail"

    def test_weather_view_english(self):
        view = build_weather_view(SAMPLE_WEATHER, "en")

        assert view["title"] == "Current Weather"
        current = {item["label"]: item for item in view["current"]}
        assert current["Temperature"]["value"] == "28"
        assert current["Temperature"]["unit"] == "°C"
        assert current["Wind Speed"]["unit"] == "km/h"

        days = view["forecast"]["days"]
        assert [day["date"] for day in days] == ["Sep 18", "Sep 19", "Sep 20"]
        assert days[0]["condition"] == "Sunny"
        assert view["insights"]["items"][0].startswith("High humidity (65%)")

    def test_weather_view_hindi(self):
        view = build_weather_view(SAMPLE_WEATHER, "hi")

        assert view["title"] == "वर्तमान मौसम"
        assert view["forecast"]["days"][0]["date"] == "18/9/2025"
        assert view["forecast"]["days"][0]["condition"] == "धूप"
        assert view["current"][2]["unit"] == "किमी/घंटा"
