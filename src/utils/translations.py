"""
Localization Catalog
====================

Single process-wide mapping from (language, message key) to display text.
Every view and narration sentence requests its strings here by key; no view
embeds its own label table.

Language handling:
- Eight languages are offered by the selector (hi, en, te, ta, bn, gu, mr, pa)
- Only Hindi and English ship complete tables
- Selector languages without a table resolve to FALLBACK_LANGUAGE and the
  views report the resolved language next to the selected one
- Codes outside the selector are rejected
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping
from ..config import FALLBACK_LANGUAGE


class UnsupportedLanguageError(ValueError):
    """Raised for a language code the selector does not offer."""
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported language code: {code!r}")


# Selector order matches the dashboard header dropdown
LANGUAGES = (
    {"code": "hi", "name": "हिन्दी", "flag": "🇮🇳"},
    {"code": "en", "name": "English", "flag": "🇺🇸"},
    {"code": "te", "name": "తెలుగు", "flag": "🇮🇳"},
    {"code": "ta", "name": "தமிழ்", "flag": "🇮🇳"},
    {"code": "bn", "name": "বাংলা", "flag": "🇮🇳"},
    {"code": "gu", "name": "ગુજરાતી", "flag": "🇮🇳"},
    {"code": "mr", "name": "मराठी", "flag": "🇮🇳"},
    {"code": "pa", "name": "ਪੰਜਾਬੀ", "flag": "🇮🇳"},
)

SUPPORTED_LANGUAGE_CODES = tuple(lang["code"] for lang in LANGUAGES)


_HINDI = {
    # Header and tabs
    "title": "AI फसल सिफारिश प्रणाली",
    "location": "स्थान",
    "weather": "मौसम",
    "soil": "मिट्टी",
    "recommendations": "सिफारिशें",
    "dashboard": "डैशबोर्ड",
    "listen": "सुनें",
    "get_recommendations": "सिफारिशें प्राप्त करें",

    # Units
    "celsius": "°C",
    "percent": "%",
    "kmh": "किमी/घंटा",
    "ppm": "पीपीएम",

    # Location
    "enter_location": "अपना स्थान दर्ज करें",
    "manual_entry": "मैन्युअल स्थान प्रविष्टि",
    "enter_location_hint": "स्थान दर्ज करें (जैसे: दिल्ली, भारत)",
    "location_placeholder": "शहर, राज्य या पिन कोड दर्ज करें",
    "use_gps": "GPS का उपयोग करें",
    "submit": "सबमिट",
    "getting_location": "स्थान प्राप्त कर रहे हैं...",
    "gps_description": "अपने वर्तमान स्थान का उपयोग करके सटीक फसल सिफारिशें प्राप्त करें।",
    "interactive_map": "इंटरैक्टिव स्थान मानचित्र",
    "location_label": "स्थान:",
    "coordinates": "निर्देशांक:",

    # Weather
    "current_weather": "वर्तमान मौसम",
    "temperature": "तापमान",
    "humidity": "आर्द्रता",
    "wind_speed": "हवा की गति",
    "wind_direction": "हवा की दिशा",
    "forecast": "मौसम पूर्वानुमान",
    "forecast_days": "अगले दिनों का पूर्वानुमान",
    "weather_summary": "मौसम सारांश",
    "weather_insights": "मौसम अंतर्दृष्टि",
    "insight_humidity": "उच्च आर्द्रता ({humidity}%) के कारण चावल की खेती के लिए उपयुक्त मौसम है।",
    "insight_temperature": "वर्तमान तापमान ({temperature}°C) अधिकांश फसलों के लिए आदर्श है।",
    "insight_wind": "मध्यम हवा की गति ({wind_speed} किमी/घंटा) रोग प्रसार को कम करने में मदद करती है।",
    "condition_sunny": "धूप",
    "condition_partly_cloudy": "आंशिक रूप से बादल",
    "condition_rainy": "बारिश",

    # Soil
    "soil_analysis": "मिट्टी का विश्लेषण",
    "soil_type": "मिट्टी का प्रकार",
    "ph_level": "पीएच स्तर",
    "organic_content": "जैविक सामग्री",
    "nitrogen": "नाइट्रोजन",
    "phosphorus": "फास्फोरस",
    "potassium": "पोटेशियम",
    "soil_health": "मिट्टी का स्वास्थ्य",
    "suggestions": "सुझाव",
    "soil_map": "मिट्टी का नक्शा",
    "excellent": "उत्कृष्ट",
    "good": "अच्छा",
    "moderate": "मध्यम",
    "poor": "खराब",
    "soil_type_loamy": "दोमट",
    "soil_type_clay": "चिकनी",
    "soil_type_sandy": "रेतीली",
    "tip_soil_type": "{soil_type} मिट्टी धान, गेहूं और गन्ने की खेती के लिए उत्कृष्ट है।",
    "tip_ph": "पीएच स्तर को सुधारने के लिए चूना या जैविक खाद का उपयोग करें।",
    "tip_organic": "जैविक सामग्री बढ़ाने के लिए गोबर की खाद और कंपोस्ट का उपयोग करें।",

    # Crops
    "crop_recommendations": "फसल की सिफारिशें",
    "suitability": "उपयुक्तता",
    "planting_time": "बुआई का समय",
    "harvest_time": "कटाई का समय",
    "irrigation": "सिंचाई",
    "fertilizer": "उर्वरक",
    "pest_control": "कीट नियंत्रण",
    "highly_recommended": "अत्यधिक अनुशंसित",
    "recommended": "अनुशंसित",
    "low_recommended": "कम अनुशंसित",
    "details": "विवरण",
    "additional_insights": "अतिरिक्त सुझाव",
    "insight_top_crop": "वर्तमान मौसम और मिट्टी की स्थिति के आधार पर, धान सबसे उपयुक्त फसल है।",
    "insight_rotation": "फसल चक्रण के लिए धान के बाद गेहूं की खेती करने पर विचार करें।",
    "insight_expert": "स्थानीय कृषि विशेषज्ञ से सलाह लेने की सिफारिश की जाती है।",

    # Dashboard
    "overview": "अवलोकन",
    "analytics": "विश्लेषण",
    "schedule": "कार्यक्रम",
    "reports": "रिपोर्टें",
    "crop_suitability": "फसल उपयुक्तता",
    "soil_nutrients": "मिट्टी के पोषक तत्व",
    "weather_trend": "मौसम रुझान",
    "planting_schedule": "बुआई कार्यक्रम",
    "harvest_calendar": "कटाई कैलेंडर",
    "irrigation_schedule": "सिंचाई कार्यक्रम",
    "fertilization_plan": "उर्वरक योजना",
    "pest_control_schedule": "कीट नियंत्रण कार्यक्रम",
    "alerts": "चेतावनी",
    "download": "डाउनलोड",
    "share": "साझा करें",
    "high_priority": "उच्च प्राथमिकता",
    "medium_priority": "मध्यम प्राथमिकता",
    "suitability_score": "उपयुक्तता स्कोर",
    "top_crop": "सर्वोत्तम फसल",
    "soil_ph": "मिट्टी पीएच",
    "within_ideal_range": "आदर्श सीमा में",
    "balanced": "संतुलित",
    "high": "उच्च",
    "harvest": "कटाई",
    "organic_short": "जैविक",
    "alert_monsoon": "मानसून का मौसम आ रहा है - धान की बुआई के लिए तैयारी करें",
    "alert_organic": "मिट्टी में जैविक सामग्री बढ़ाने की आवश्यकता है",
    "detailed_report": "विस्तृत रिपोर्ट",
    "location_summary": "स्थान सारांश",
    "soil_summary": "मिट्टी सारांश",
    "report_weather": "तापमान: {temperature}°C, आर्द्रता: {humidity}%, हवा: {wind_speed} किमी/घंटा",
    "report_soil": "प्रकार: {soil_type}, पीएच: {ph}, जैविक: {organic_content}%",

    # Narration
    "narration_weather": (
        "वर्तमान तापमान {temperature} डिग्री सेल्सियस है। आर्द्रता {humidity} प्रतिशत है। "
        "हवा की गति {wind_speed} किलोमीटर प्रति घंटा है।"
    ),
    "narration_soil": (
        "आपकी मिट्टी {soil_type} प्रकार की है। पीएच स्तर {ph} है, जैविक सामग्री {organic_content} प्रतिशत है। "
        "नाइट्रोजन {nitrogen} पीपीएम, फास्फोरस {phosphorus} पीपीएम, और पोटेशियम {potassium} पीपीएम है।"
    ),
    "narration_crop": (
        "{name} की उपयुक्तता {suitability} प्रतिशत है। बुआई का समय {planting_time} है "
        "और कटाई का समय {harvest_time} है। {irrigation}। उर्वरक: {fertilizer}।"
    ),
    "narration_dashboard": (
        "डैशबोर्ड सारांश: {name} सबसे अनुशंसित फसल है जिसकी उपयुक्तता {suitability} प्रतिशत है। "
        "वर्तमान तापमान {temperature} डिग्री है। मिट्टी का पीएच {ph} है।"
    ),
}

_ENGLISH = {
    # Header and tabs
    "title": "AI Crop Recommendation System",
    "location": "Location",
    "weather": "Weather",
    "soil": "Soil",
    "recommendations": "Recommendations",
    "dashboard": "Dashboard",
    "listen": "Listen",
    "get_recommendations": "Get Recommendations",

    # Units
    "celsius": "°C",
    "percent": "%",
    "kmh": "km/h",
    "ppm": "ppm",

    # Location
    "enter_location": "Enter Your Location",
    "manual_entry": "Manual Location Entry",
    "enter_location_hint": "Enter Location (e.g., Delhi, India)",
    "location_placeholder": "Enter city, state, or PIN code",
    "use_gps": "Use GPS",
    "submit": "Submit",
    "getting_location": "Getting location...",
    "gps_description": "Get accurate crop recommendations using your current location.",
    "interactive_map": "Interactive Location Map",
    "location_label": "Location:",
    "coordinates": "Coordinates:",

    # Weather
    "current_weather": "Current Weather",
    "temperature": "Temperature",
    "humidity": "Humidity",
    "wind_speed": "Wind Speed",
    "wind_direction": "Wind Direction",
    "forecast": "Weather Forecast",
    "forecast_days": "Next Days Forecast",
    "weather_summary": "Weather Summary",
    "weather_insights": "Weather Insights",
    "insight_humidity": "High humidity ({humidity}%) makes it suitable weather for rice cultivation.",
    "insight_temperature": "Current temperature ({temperature}°C) is ideal for most crops.",
    "insight_wind": "Moderate wind speed ({wind_speed} km/h) helps reduce disease spread.",
    "condition_sunny": "Sunny",
    "condition_partly_cloudy": "Partly Cloudy",
    "condition_rainy": "Rainy",

    # Soil
    "soil_analysis": "Soil Analysis",
    "soil_type": "Soil Type",
    "ph_level": "pH Level",
    "organic_content": "Organic Content",
    "nitrogen": "Nitrogen",
    "phosphorus": "Phosphorus",
    "potassium": "Potassium",
    "soil_health": "Soil Health",
    "suggestions": "Recommendations",
    "soil_map": "Soil Map",
    "excellent": "Excellent",
    "good": "Good",
    "moderate": "Moderate",
    "poor": "Poor",
    "soil_type_loamy": "Loamy",
    "soil_type_clay": "Clay",
    "soil_type_sandy": "Sandy",
    "tip_soil_type": "{soil_type} soil is excellent for rice, wheat, and sugarcane cultivation.",
    "tip_ph": "Use lime or organic compost to improve pH level.",
    "tip_organic": "Use farmyard manure and compost to increase organic content.",

    # Crops
    "crop_recommendations": "Crop Recommendations",
    "suitability": "Suitability",
    "planting_time": "Planting Time",
    "harvest_time": "Harvest Time",
    "irrigation": "Irrigation",
    "fertilizer": "Fertilizer",
    "pest_control": "Pest Control",
    "highly_recommended": "Highly Recommended",
    "recommended": "Recommended",
    "low_recommended": "Low Recommended",
    "details": "Details",
    "additional_insights": "Additional Insights",
    "insight_top_crop": "Based on current weather and soil conditions, rice is the most suitable crop.",
    "insight_rotation": "Consider wheat cultivation after rice for crop rotation benefits.",
    "insight_expert": "Consultation with local agricultural experts is recommended.",

    # Dashboard
    "overview": "Overview",
    "analytics": "Analytics",
    "schedule": "Schedule",
    "reports": "Reports",
    "crop_suitability": "Crop Suitability",
    "soil_nutrients": "Soil Nutrients",
    "weather_trend": "Weather Trend",
    "planting_schedule": "Planting Schedule",
    "harvest_calendar": "Harvest Calendar",
    "irrigation_schedule": "Irrigation Schedule",
    "fertilization_plan": "Fertilization Plan",
    "pest_control_schedule": "Pest Control Schedule",
    "alerts": "Alerts",
    "download": "Download",
    "share": "Share",
    "high_priority": "High Priority",
    "medium_priority": "Medium Priority",
    "suitability_score": "Suitability Score",
    "top_crop": "Top Crop",
    "soil_ph": "Soil pH",
    "within_ideal_range": "Within ideal range",
    "balanced": "Balanced",
    "high": "High",
    "harvest": "Harvest",
    "organic_short": "Organic",
    "alert_monsoon": "Monsoon season approaching - prepare for rice planting",
    "alert_organic": "Soil organic content needs improvement",
    "detailed_report": "Detailed Report",
    "location_summary": "Location Summary",
    "soil_summary": "Soil Summary",
    "report_weather": "Temperature: {temperature}°C, Humidity: {humidity}%, Wind: {wind_speed} km/h",
    "report_soil": "Type: {soil_type}, pH: {ph}, Organic: {organic_content}%",

    # Narration
    "narration_weather": (
        "Current temperature is {temperature} degrees Celsius. Humidity is {humidity} percent. "
        "Wind speed is {wind_speed} kilometers per hour."
    ),
    "narration_soil": (
        "Your soil is {soil_type} type. pH level is {ph}, organic content is {organic_content} percent. "
        "Nitrogen is {nitrogen} ppm, phosphorus is {phosphorus} ppm, and potassium is {potassium} ppm."
    ),
    "narration_crop": (
        "{name} has {suitability} percent suitability. Planting time is {planting_time} "
        "and harvest time is {harvest_time}. {irrigation}. Fertilizer: {fertilizer}."
    ),
    "narration_dashboard": (
        "Dashboard summary: {name} is the most recommended crop with {suitability} percent suitability. "
        "Current temperature is {temperature} degrees. Soil pH is {ph}."
    ),
}

# Read-only after import
MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "hi": MappingProxyType(_HINDI),
    "en": MappingProxyType(_ENGLISH),
})


def resolve_language(code: str) -> str:
    """
    Map a selector language code to the code of the label table to use.

    Raises:
        UnsupportedLanguageError: If the code is not offered by the selector
    """
    code = (code or "").strip().lower()
    if code not in SUPPORTED_LANGUAGE_CODES:
        raise UnsupportedLanguageError(code)
    if code in MESSAGES:
        return code
    return FALLBACK_LANGUAGE


def translate(key: str, language: str, **values: Any) -> str:
    """
    Look up a message by key and fill in its placeholders.

    Args:
        key: Message key (e.g. "temperature", "narration_soil")
        language: Selector language code
        **values: Placeholder values for templated messages

    Returns:
        Localized text
    """
    table = MESSAGES[resolve_language(language)]
    text = table[key]
    if values:
        text = text.format(**values)
    return text


def translate_optional(key: str, language: str, default: str) -> str:
    """Look up a data-derived key, returning default when no entry exists."""
    return MESSAGES[resolve_language(language)].get(key, default)


def data_key(prefix: str, value: str) -> str:
    """Build a catalog key from a data value, e.g. ("condition", "Partly Cloudy")."""
    return f"{prefix}_{value.strip().lower().replace(' ', '_')}"


def format_number(value: Any) -> str:
    """Render numbers the way the dashboard shows them (28, 6.8, 3.2)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    return f"{value:g}"


def list_languages() -> List[Dict[str, Any]]:
    """Selector entries with a flag telling whether a full table exists."""
    return [
        {**lang, "has_translations": lang["code"] in MESSAGES}
        for lang in LANGUAGES
    ]
