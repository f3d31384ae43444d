"""
Unit tests for Dashboard Agent
"""

import re
from src.agents.crop_planning_agent import CROP_TABLE
from src.agents.dashboard_agent import (
    build_dashboard_view,
    crop_suitability_series,
    dashboard_narration_values,
    soil_nutrient_series,
    weather_trend_series,
)
from src.agents.models import GeoLocation
from src.agents.soil_agent import SAMPLE_SOIL
from src.agents.weather_agent import SAMPLE_WEATHER

DEVANAGARI = re.compile(r"[ऀ-ॿ]")
DELHI = GeoLocation(latitude=28.6139, longitude=77.2090, address="Delhi")


class TestChartSeries:

    def test_crop_suitability_series(self):
        series = crop_suitability_series(list(CROP_TABLE), "hi")
        assert series == [
            {"name": "चावल", "suitability": 95},
            {"name": "गेहूं", "suitability": 88},
            {"name": "गन्ना", "suitability": 82},
        ]

    def test_soil_nutrient_series_scales_ph_and_organic(self):
        series = {item["name"]: item["value"] for item in soil_nutrient_series(SAMPLE_SOIL, "en")}
        assert series == {"N": 45, "P": 22, "K": 180, "pH": 68.0, "Organic": 64.0}

    def test_weather_trend_series(self):
        series = weather_trend_series(SAMPLE_WEATHER, "en")
        assert [point["temperature"] for point in series] == [29, 31, 27]
        assert series[1]["date"] == "Sep 19"


class TestDashboardAgent:

    def test_narration_values_use_top_crop(self):
        values = dashboard_narration_values(list(CROP_TABLE), SAMPLE_WEATHER, SAMPLE_SOIL, "en")
        assert values == {"name": "Rice", "suitability": 95, "temperature": "28", "ph": "6.8"}

    def test_dashboard_view_english(self):
        view = build_dashboard_view(list(CROP_TABLE), SAMPLE_WEATHER, SAMPLE_SOIL, DELHI, "en")

        metrics = view["overview"]["metrics"]
        assert metrics[0]["value"] == "Rice"
        assert metrics[0]["note"].startswith("95%")
        assert metrics[1]["value"] == "28°C"
        assert metrics[3]["value"] == "65%"
        assert [item["priority"] for item in view["overview"]["alerts"]["items"]] == ["high", "medium"]

        planting = view["schedule"]["planting"]["items"]
        assert [item["window"] for item in planting] == ["June-July", "November-December", "February-March"]

        report = view["report"]
        assert report["location"]["address"] == "Delhi"
        assert "Humidity: 65%" in report["weather"]["text"]
        assert "pH: 6.8" in report["soil"]["text"]

        assert not DEVANAGARI.search(str(view))

    def test_dashboard_view_without_location(self):
        view = build_dashboard_view(list(CROP_TABLE), SAMPLE_WEATHER, SAMPLE_SOIL, None, "hi")

        assert view["report"]["location"] is None
        assert view["overview"]["metrics"][0]["value"] == "चावल"
