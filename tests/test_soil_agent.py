"""
Unit tests for Soil Agent
"""

import math
import pytest
from unittest.mock import patch
from src.agents.models import GeoLocation, SoilBand, SoilSample, DataValidationError
from src.agents.soil_agent import (
    SAMPLE_SOIL,
    bar_width,
    build_soil_view,
    classify_sample,
    classify_soil_parameter,
    fetch_soil,
    generate_soil_tips,
)


DELHI = GeoLocation(latitude=28.6139, longitude=77.2090, address="Delhi")


class TestClassifySoilParameter:
    """Band classification per parameter."""

    @pytest.mark.parametrize("value,band", [
        (7.0, SoilBand.EXCELLENT),
        (6.5, SoilBand.EXCELLENT),
        (7.5, SoilBand.EXCELLENT),
        (6.2, SoilBand.GOOD),
        (8.0, SoilBand.GOOD),
        (5.7, SoilBand.MODERATE),
        (8.5, SoilBand.MODERATE),
        (2.0, SoilBand.POOR),
        (9.0, SoilBand.POOR),
    ])
    def test_ph_bands(self, value, band):
        assert classify_soil_parameter("ph", value) == band

    def test_nutrient_bands(self):
        assert classify_soil_parameter("nitrogen", 45) == SoilBand.EXCELLENT
        assert classify_soil_parameter("nitrogen", 65) == SoilBand.GOOD
        assert classify_soil_parameter("phosphorus", 12) == SoilBand.MODERATE
        assert classify_soil_parameter("potassium", 400) == SoilBand.POOR
        assert classify_soil_parameter("organic", 3.2) == SoilBand.EXCELLENT

    def test_negative_and_nan_are_poor(self):
        assert classify_soil_parameter("potassium", -5) == SoilBand.POOR
        assert classify_soil_parameter("ph", math.nan) == SoilBand.POOR

    def test_unknown_parameter_raises(self):
        with pytest.raises(ValueError):
            classify_soil_parameter("calcium", 10)

    def test_sample_profile_bands(self):
        bands = classify_sample(SAMPLE_SOIL)
        assert bands == {
            "ph": SoilBand.EXCELLENT,
            "organic": SoilBand.EXCELLENT,
            "nitrogen": SoilBand.EXCELLENT,
            "phosphorus": SoilBand.EXCELLENT,
            "potassium": SoilBand.EXCELLENT,
        }


class TestBarWidth:

    def test_scaled_to_parameter_full_scale(self):
        assert bar_width("ph", 7) == 50.0
        assert bar_width("organic", 3.2) == 32.0
        assert bar_width("nitrogen", 45) == 45.0
        assert bar_width("phosphorus", 22) == 44.0
        assert bar_width("potassium", 180) == 60.0

    def test_clamped(self):
        assert bar_width("potassium", 600) == 100.0
        assert bar_width("nitrogen", -10) == 0.0


class TestSoilAgent:
    """Soil sample lookup and soil view."""

    @patch('src.agents.soil_agent.logger')
    def test_fetch_soil_returns_sample(self, mock_logger):
        soil = fetch_soil(DELHI)

        assert soil == SAMPLE_SOIL
        assert soil.soil_type == "Loamy"
        assert soil.ph == 6.8
        mock_logger.info.assert_called_once()

    @patch('src.agents.soil_agent.SAMPLE_SOIL', SoilSample("Loamy", 15.2, 3.2, 45, 22, 180))
    @patch('src.agents.soil_agent.logger')
    def test_fetch_soil_rejects_out_of_range_ph(self, mock_logger):
        with pytest.raises(DataValidationError) as exc_info:
            fetch_soil(DELHI)
        assert exc_info.value.field_name == "ph"

    def test_tips_for_excellent_sample(self):
        tips = generate_soil_tips(SAMPLE_SOIL, "en")
        assert tips == ["Loamy soil is excellent for rice, wheat, and sugarcane cultivation."]

    def test_tips_for_acidic_low_organic_soil(self):
        soil = SoilSample("Clay", 5.6, 1.5, 45, 22, 180)
        tips = generate_soil_tips(soil, "en")

        assert len(tips) == 3
        assert tips[0].startswith("Clay soil")

    def test_soil_view_english(self):
        view = build_soil_view(SAMPLE_SOIL, DELHI, "en")

        assert view["title"] == "Soil Analysis"
        assert view["soil_type"]["value"] == "Loamy"
        assert view["location"]["coordinates"] == "28.6139, 77.2090"

        rows = {row["parameter"]: row for row in view["health"]["parameters"]}
        assert list(rows) == ["ph", "organic", "nitrogen", "phosphorus", "potassium"]
        assert rows["ph"]["display_value"] == "6.8"
        assert rows["ph"]["unit"] is None
        assert rows["ph"]["band"] == "excellent"
        assert rows["ph"]["band_label"] == "Excellent"
        assert rows["ph"]["color"] == "green"
        assert rows["potassium"]["unit"] == "ppm"
        assert rows["potassium"]["bar_width"] == 60.0

    def test_soil_view_hindi(self):
        view = build_soil_view(SAMPLE_SOIL, None, "hi")

        assert view["soil_type"]["value"] == "दोमट"
        assert view["location"] is None
        assert view["health"]["parameters"][0]["band_label"] == "उत्कृष्ट"
