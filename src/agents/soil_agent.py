"""
Soil Agent
==========

Supplies the soil sample for a location and classifies each soil parameter
into a qualitative health band.

Features:
- Static sample soil profile (no sensor or survey lookup)
- Per-parameter band classification with nested ranges, narrowest first
- Band colors and percentage bar widths for the soil health view
- Soil improvement tips driven by the pH and organic content bands
"""

from typing import Any, Dict, List, Optional, Tuple
from ..utils.logger import logger
from ..utils.translations import translate, translate_optional, data_key, format_number
from .models import GeoLocation, SoilBand, SoilSample, validate_soil


SAMPLE_SOIL = SoilSample(
    soil_type="Loamy",
    ph=6.8,
    organic_content=3.2,
    nitrogen=45,
    phosphorus=22,
    potassium=180,
)

# Inclusive (low, high) ranges per band; wider bands contain narrower ones
SOIL_HEALTH_RANGES = {
    "ph": {
        SoilBand.EXCELLENT: (6.5, 7.5),
        SoilBand.GOOD: (6.0, 8.0),
        SoilBand.MODERATE: (5.5, 8.5),
    },
    "organic": {
        SoilBand.EXCELLENT: (3, 5),
        SoilBand.GOOD: (2, 6),
        SoilBand.MODERATE: (1, 7),
    },
    "nitrogen": {
        SoilBand.EXCELLENT: (40, 60),
        SoilBand.GOOD: (30, 70),
        SoilBand.MODERATE: (20, 80),
    },
    "phosphorus": {
        SoilBand.EXCELLENT: (20, 30),
        SoilBand.GOOD: (15, 35),
        SoilBand.MODERATE: (10, 40),
    },
    "potassium": {
        SoilBand.EXCELLENT: (150, 200),
        SoilBand.GOOD: (120, 220),
        SoilBand.MODERATE: (100, 250),
    },
}

# Full-scale value of each parameter's progress bar
BAR_SCALE = {
    "ph": 14,
    "organic": 10,
    "nitrogen": 100,
    "phosphorus": 50,
    "potassium": 300,
}

BAND_COLORS = {
    SoilBand.EXCELLENT: "green",
    SoilBand.GOOD: "blue",
    SoilBand.MODERATE: "yellow",
    SoilBand.POOR: "red",
}

# (parameter, sample attribute, label key, unit key or None)
SOIL_PARAMETERS: Tuple[Tuple[str, str, str, Optional[str]], ...] = (
    ("ph", "ph", "ph_level", None),
    ("organic", "organic_content", "organic_content", "percent"),
    ("nitrogen", "nitrogen", "nitrogen", "ppm"),
    ("phosphorus", "phosphorus", "phosphorus", "ppm"),
    ("potassium", "potassium", "potassium", "ppm"),
)

_BAND_ORDER = (SoilBand.EXCELLENT, SoilBand.GOOD, SoilBand.MODERATE)


def classify_soil_parameter(parameter: str, value: float) -> SoilBand:
    """
    Classify a soil reading into a health band.

    Bands are checked narrowest first; anything outside every range,
    including negative or NaN readings, is POOR.

    Args:
        parameter: One of ph, organic, nitrogen, phosphorus, potassium
        value: Measured value (pH units, percent or ppm)

    Raises:
        ValueError: If the parameter name is unknown
    """
    if parameter not in SOIL_HEALTH_RANGES:
        raise ValueError(f"Unknown soil parameter: {parameter}")

    ranges = SOIL_HEALTH_RANGES[parameter]
    for band in _BAND_ORDER:
        low, high = ranges[band]
        if low <= value <= high:
            return band
    return SoilBand.POOR


def bar_width(parameter: str, value: float) -> float:
    """Map a reading to a progress bar width in percent, clamped to 0-100."""
    width = value / BAR_SCALE[parameter] * 100
    return round(min(max(width, 0.0), 100.0), 2)


def fetch_soil(location: GeoLocation) -> SoilSample:
    """
    Return the soil sample for a location.

    The sample profile is used for every location.
    """
    logger.info(f"Soil Agent loading sample profile for {location.address!r}")
    return validate_soil(SAMPLE_SOIL)


def classify_sample(soil: SoilSample) -> Dict[str, SoilBand]:
    """Band for every parameter of a soil sample."""
    return {
        parameter: classify_soil_parameter(parameter, getattr(soil, attribute))
        for parameter, attribute, _, _ in SOIL_PARAMETERS
    }


def localized_soil_type(soil_type: str, language: str) -> str:
    return translate_optional(data_key("soil_type", soil_type), language, soil_type)


def generate_soil_tips(soil: SoilSample, language: str) -> List[str]:
    """Soil improvement tips for the current sample."""
    bands = classify_sample(soil)
    tips = [
        translate("tip_soil_type", language, soil_type=localized_soil_type(soil.soil_type, language))
    ]
    if bands["ph"] != SoilBand.EXCELLENT:
        tips.append(translate("tip_ph", language))
    if bands["organic"] != SoilBand.EXCELLENT:
        tips.append(translate("tip_organic", language))
    return tips


def soil_narration_values(soil: SoilSample, language: str) -> Dict[str, str]:
    return {
        "soil_type": localized_soil_type(soil.soil_type, language),
        "ph": format_number(soil.ph),
        "organic_content": format_number(soil.organic_content),
        "nitrogen": format_number(soil.nitrogen),
        "phosphorus": format_number(soil.phosphorus),
        "potassium": format_number(soil.potassium),
    }


def build_soil_view(
    soil: SoilSample,
    location: Optional[GeoLocation],
    language: str
) -> Dict[str, Any]:
    """
    Localized view model for the soil tab.

    Args:
        soil: Current soil sample
        location: Location the sample belongs to
        language: Selector language code

    Returns:
        Soil type card, per-parameter health rows and improvement tips
    """
    bands = classify_sample(soil)

    parameters = []
    for parameter, attribute, label_key, unit_key in SOIL_PARAMETERS:
        value = getattr(soil, attribute)
        band = bands[parameter]
        parameters.append({
            "parameter": parameter,
            "label": translate(label_key, language),
            "value": value,
            "display_value": format_number(value),
            "unit": translate(unit_key, language) if unit_key else None,
            "band": band.value,
            "band_label": translate(band.value, language),
            "color": BAND_COLORS[band],
            "bar_width": bar_width(parameter, value),
        })

    location_info = None
    if location is not None:
        location_info = {
            "label": translate("location_label", language),
            "address": location.address,
            "coordinates": f"{location.latitude:.4f}, {location.longitude:.4f}",
        }

    return {
        "title": translate("soil_analysis", language),
        "listen": translate("listen", language),
        "soil_type": {
            "label": translate("soil_type", language),
            "value": localized_soil_type(soil.soil_type, language),
        },
        "location": location_info,
        "health": {
            "title": translate("soil_health", language),
            "parameters": parameters,
        },
        "tips": {
            "title": translate("suggestions", language),
            "items": generate_soil_tips(soil, language),
        },
    }
