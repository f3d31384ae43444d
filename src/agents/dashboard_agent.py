"""
Dashboard Agent
===============

Combines location, weather, soil and crop data into the dashboard tab:
overview metrics, alerts, chart series, planting/harvest schedules and the
detailed report.
"""

from typing import Any, Dict, List, Optional
from ..utils.translations import translate, format_number
from .models import CropSuitability, GeoLocation, SoilSample, WeatherSnapshot
from .crop_planning_agent import display_name
from .soil_agent import localized_soil_type
from .weather_agent import format_forecast_date, localized_condition

NUTRIENT_COLORS = {
    "N": "#8884d8",
    "P": "#82ca9d",
    "K": "#ffc658",
    "pH": "#ff7300",
    "organic": "#00ff00",
}

# Scale factors that bring pH and organic % onto the ppm chart scale
PH_CHART_FACTOR = 10
ORGANIC_CHART_FACTOR = 20


def crop_suitability_series(
    recommendations: List[CropSuitability],
    language: str
) -> List[Dict[str, Any]]:
    return [
        {"name": display_name(crop, language), "suitability": crop.suitability}
        for crop in recommendations
    ]


def soil_nutrient_series(soil: SoilSample, language: str) -> List[Dict[str, Any]]:
    return [
        {"name": "N", "value": soil.nitrogen, "color": NUTRIENT_COLORS["N"]},
        {"name": "P", "value": soil.phosphorus, "color": NUTRIENT_COLORS["P"]},
        {"name": "K", "value": soil.potassium, "color": NUTRIENT_COLORS["K"]},
        {"name": "pH", "value": round(soil.ph * PH_CHART_FACTOR, 2), "color": NUTRIENT_COLORS["pH"]},
        {
            "name": translate("organic_short", language),
            "value": round(soil.organic_content * ORGANIC_CHART_FACTOR, 2),
            "color": NUTRIENT_COLORS["organic"],
        },
    ]


def weather_trend_series(weather: WeatherSnapshot, language: str) -> List[Dict[str, Any]]:
    return [
        {
            "date": format_forecast_date(day.date, language),
            "temperature": day.temperature,
            "condition": localized_condition(day.condition, language),
        }
        for day in weather.forecast
    ]


def dashboard_narration_values(
    recommendations: List[CropSuitability],
    weather: WeatherSnapshot,
    soil: SoilSample,
    language: str
) -> Dict[str, Any]:
    top_crop = recommendations[0]
    return {
        "name": display_name(top_crop, language),
        "suitability": top_crop.suitability,
        "temperature": format_number(weather.temperature),
        "ph": format_number(soil.ph),
    }


def _overview(recommendations, weather, soil, language):
    top_crop = recommendations[0]
    return {
        "metrics": [
            {
                "label": translate("top_crop", language),
                "value": display_name(top_crop, language),
                "note": f"{top_crop.suitability}% {translate('suitability_score', language)}",
                "color": "green",
            },
            {
                "label": translate("temperature", language),
                "value": f"{format_number(weather.temperature)}{translate('celsius', language)}",
                "note": translate("within_ideal_range", language),
                "color": "blue",
            },
            {
                "label": translate("soil_ph", language),
                "value": format_number(soil.ph),
                "note": translate("balanced", language),
                "color": "yellow",
            },
            {
                "label": translate("humidity", language),
                "value": f"{format_number(weather.humidity)}{translate('percent', language)}",
                "note": translate("high", language),
                "color": "purple",
            },
        ],
        "alerts": {
            "title": translate("alerts", language),
            "items": [
                {
                    "priority": "high",
                    "badge": translate("high_priority", language),
                    "message": translate("alert_monsoon", language),
                },
                {
                    "priority": "medium",
                    "badge": translate("medium_priority", language),
                    "message": translate("alert_organic", language),
                },
            ],
        },
    }


def _schedule(recommendations, language):
    return {
        "planting": {
            "title": translate("planting_schedule", language),
            "items": [
                {
                    "crop": display_name(crop, language),
                    "window": crop.planting_time,
                    "badge": f"{crop.suitability}%",
                }
                for crop in recommendations
            ],
        },
        "harvest": {
            "title": translate("harvest_calendar", language),
            "items": [
                {
                    "crop": display_name(crop, language),
                    "window": crop.harvest_time,
                    "badge": translate("harvest", language),
                }
                for crop in recommendations
            ],
        },
    }


def _report(location, weather, soil, language):
    location_section = None
    if location is not None:
        location_section = {
            "title": translate("location_summary", language),
            "address": location.address,
            "coordinates": (
                f"{translate('coordinates', language)} "
                f"{format_number(location.latitude)}, {format_number(location.longitude)}"
            ),
        }

    return {
        "title": translate("detailed_report", language),
        "location": location_section,
        "weather": {
            "title": translate("weather_summary", language),
            "text": translate(
                "report_weather",
                language,
                temperature=format_number(weather.temperature),
                humidity=format_number(weather.humidity),
                wind_speed=format_number(weather.wind_speed),
            ),
        },
        "soil": {
            "title": translate("soil_summary", language),
            "text": translate(
                "report_soil",
                language,
                soil_type=localized_soil_type(soil.soil_type, language),
                ph=format_number(soil.ph),
                organic_content=format_number(soil.organic_content),
            ),
        },
    }


def build_dashboard_view(
    recommendations: List[CropSuitability],
    weather: WeatherSnapshot,
    soil: SoilSample,
    location: Optional[GeoLocation],
    language: str
) -> Dict[str, Any]:
    """
    Localized view model for the dashboard tab.

    Args:
        recommendations: Crop list, best crop first
        weather: Current weather snapshot
        soil: Current soil sample
        location: Selected location, if any
        language: Selector language code
    """
    return {
        "title": translate("dashboard", language),
        "actions": {
            "listen": translate("listen", language),
            "download": translate("download", language),
            "share": translate("share", language),
        },
        "sections": {
            "overview": translate("overview", language),
            "analytics": translate("analytics", language),
            "schedule": translate("schedule", language),
            "reports": translate("reports", language),
        },
        "overview": _overview(recommendations, weather, soil, language),
        "analytics": {
            "crop_suitability": {
                "title": translate("crop_suitability", language),
                "series": crop_suitability_series(recommendations, language),
            },
            "soil_nutrients": {
                "title": translate("soil_nutrients", language),
                "series": soil_nutrient_series(soil, language),
            },
            "weather_trend": {
                "title": translate("weather_trend", language),
                "series": weather_trend_series(weather, language),
            },
        },
        "schedule": _schedule(recommendations, language),
        "report": _report(location, weather, soil, language),
    }
