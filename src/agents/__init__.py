"""
Crop Advisor Agents
===================

This package implements the dashboard behind the crop advisor:
- Location Agent: manual address, device GPS and map-click locations
- Weather Agent: weather snapshot and weather view
- Soil Agent: soil sample, per-parameter health bands and soil view
- Crop Planning Agent: crop suitability list and recommendation levels
- Dashboard Agent: overview, charts, schedules and report
- Orchestrator: session state, cancellable population and view assembly

Every agent is stateless; session state lives in the orchestrator.

The response schemas below document the JSON produced by the API.
"""

GEO_LOCATION_SCHEMA = {
    "latitude": "float",
    "longitude": "float",
    "address": "string",      # literal text, "lat, lon" or fallback label
    "is_fallback": "bool"     # True when the reference coordinate was substituted
}

SESSION_STATE_SCHEMA = {
    "language": "string",           # selected code: hi, en, te, ta, bn, gu, mr, pa
    "label_language": "string",     # table actually used for labels: hi or en
    "active_tab": "string",         # location, weather, soil, recommendations, dashboard
    "is_loading": "bool",
    "location": "GEO_LOCATION_SCHEMA",
    "tabs": {"tab_id": "bool"},     # enabled flags
    "has_weather": "bool",
    "has_soil": "bool",
    "recommendation_count": "int"
}

SOIL_PARAMETER_SCHEMA = {
    "parameter": "string",    # ph, organic, nitrogen, phosphorus, potassium
    "label": "string",
    "value": "float",
    "display_value": "string",
    "unit": "string",
    "band": "string",         # excellent, good, moderate, poor
    "band_label": "string",
    "color": "string",        # green, blue, yellow, red
    "bar_width": "float"      # 0-100
}

CROP_CARD_SCHEMA = {
    "name": "string",
    "subtitle": "string",     # English name under the Hindi name
    "suitability": "int",     # 0-100
    "level": "string",        # highly_recommended, recommended, moderate, low_recommended
    "level_label": "string",
    "badge_variant": "string",
    "color": "string",
    "bar_width": "int",
    "details": [{"label": "string", "value": "string"}]
}

VIEW_RESPONSE_SCHEMA = {
    "tab": "string",
    "language": "string",
    "label_language": "string",
    "header": {
        "title": "string",
        "languages": [{"code": "string", "name": "string", "has_translations": "bool"}],
        "tabs": [{"id": "string", "label": "string", "enabled": "bool", "active": "bool"}]
    },
    "view": "object"          # tab specific view model
}

NARRATION_SCHEMA = {
    "subject": "string",      # title, weather, soil, crop, dashboard
    "text": "string",
    "label_language": "string",
    "speech_tag": "string",   # hi-IN or en-US
    "audio": {
        "provider": "string",
        "audio_base64": "string",
        "content_type": "string"
    }
}
