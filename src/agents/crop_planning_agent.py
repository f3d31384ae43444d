"""
Crop Planning Agent
===================

Supplies the crop suitability list and builds the localized
recommendations view.

Features:
- Static three-crop table, ordered by descending suitability
- Suitability bucketing into four recommendation levels
- Badge variant and bar color per level
- Per-crop narration values
"""

from typing import Any, Dict, List
from ..utils.logger import logger
from ..utils.translations import translate, resolve_language
from .models import (
    CropSuitability,
    GeoLocation,
    SoilSample,
    SuitabilityLevel,
    WeatherSnapshot,
    validate_crop,
)


CROP_TABLE = (
    CropSuitability(
        name="Rice",
        localized_name="चावल",
        suitability=95,
        planting_time="June-July",
        harvest_time="October-November",
        irrigation="Heavy irrigation needed",
        fertilizer="NPK 20:10:10",
        pest_control="Regular monitoring for stem borer",
    ),
    CropSuitability(
        name="Wheat",
        localized_name="गेहूं",
        suitability=88,
        planting_time="November-December",
        harvest_time="March-April",
        irrigation="Moderate irrigation",
        fertilizer="NPK 18:18:18",
        pest_control="Watch for aphids and rust",
    ),
    CropSuitability(
        name="Sugarcane",
        localized_name="गन्ना",
        suitability=82,
        planting_time="February-March",
        harvest_time="December-January",
        irrigation="Heavy irrigation in summer",
        fertilizer="High nitrogen content",
        pest_control="Monitor for red rot disease",
    ),
)

# (minimum score, level), highest threshold first
SUITABILITY_THRESHOLDS = (
    (90, SuitabilityLevel.HIGHLY_RECOMMENDED),
    (75, SuitabilityLevel.RECOMMENDED),
    (60, SuitabilityLevel.MODERATE),
)

LEVEL_STYLES = {
    SuitabilityLevel.HIGHLY_RECOMMENDED: {"color": "green", "badge": "default"},
    SuitabilityLevel.RECOMMENDED: {"color": "blue", "badge": "secondary"},
    SuitabilityLevel.MODERATE: {"color": "yellow", "badge": "outline"},
    SuitabilityLevel.LOW_RECOMMENDED: {"color": "red", "badge": "destructive"},
}


def bucket_suitability(score: float) -> SuitabilityLevel:
    """
    Map a suitability score to its recommendation level.

    >=90 highly recommended, >=75 recommended, >=60 moderate, else low.
    """
    for minimum, level in SUITABILITY_THRESHOLDS:
        if score >= minimum:
            return level
    return SuitabilityLevel.LOW_RECOMMENDED


def plan_crops(
    location: GeoLocation,
    weather: WeatherSnapshot,
    soil: SoilSample
) -> List[CropSuitability]:
    """
    Return the crop suitability list for the given conditions.

    The static table is returned for every input, in table order.
    """
    logger.info(f"Crop Planning Agent using static table for {location.address!r}")
    return [validate_crop(crop) for crop in CROP_TABLE]


def display_name(crop: CropSuitability, language: str) -> str:
    return crop.localized_name if resolve_language(language) == "hi" else crop.name


def crop_narration_values(crop: CropSuitability, language: str) -> Dict[str, Any]:
    return {
        "name": display_name(crop, language),
        "suitability": crop.suitability,
        "planting_time": crop.planting_time,
        "harvest_time": crop.harvest_time,
        "irrigation": crop.irrigation,
        "fertilizer": crop.fertilizer,
    }


def build_crop_card(crop: CropSuitability, language: str) -> Dict[str, Any]:
    level = bucket_suitability(crop.suitability)
    style = LEVEL_STYLES[level]
    is_hindi = resolve_language(language) == "hi"

    return {
        "name": display_name(crop, language),
        "subtitle": crop.name if is_hindi else None,
        "suitability": crop.suitability,
        "suitability_display": f"{crop.suitability}{translate('percent', language)}",
        "level": level.value,
        "level_label": translate(level.value, language),
        "badge_variant": style["badge"],
        "color": style["color"],
        "bar_width": min(max(crop.suitability, 0), 100),
        "details": [
            {"label": translate("planting_time", language), "value": crop.planting_time},
            {"label": translate("harvest_time", language), "value": crop.harvest_time},
            {"label": translate("irrigation", language), "value": crop.irrigation},
            {"label": translate("fertilizer", language), "value": crop.fertilizer},
            {"label": translate("pest_control", language), "value": crop.pest_control},
        ],
        "listen": translate("listen", language),
    }


def build_recommendations_view(
    recommendations: List[CropSuitability],
    language: str
) -> Dict[str, Any]:
    """Localized view model for the recommendations tab."""
    return {
        "title": translate("crop_recommendations", language),
        "crops": [build_crop_card(crop, language) for crop in recommendations],
        "insights": {
            "title": translate("additional_insights", language),
            "items": [
                translate("insight_top_crop", language),
                translate("insight_rotation", language),
                translate("insight_expert", language),
            ],
        },
    }
