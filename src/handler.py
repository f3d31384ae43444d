"""
Dashboard Lambda Handlers
-------------------------
API Gateway handlers for the crop advisor dashboard:
- /location, /location/gps, /location/map-click: select a location
- /language, /tab: change session settings
- /state, /view/{tab}: read the session
- /narrate: spoken summaries
- /languages, /health
"""

import json
import uuid
from typing import Any, Callable, Dict, Optional, Tuple
from .agents.location_agent import (
    LocationInputError,
    location_from_address,
    location_from_device,
    location_from_map_click,
)
from .agents.orchestrator import (
    TabUnavailableError,
    build_view,
    describe_state,
    session_store,
)
from .swagger_handler import cors_handler, openapi_spec_handler, swagger_ui_handler
from .utils.logger import logger
from .utils.translations import UnsupportedLanguageError, list_languages
from .voice.narration import NARRATION_SUBJECTS, NarrationDataMissing, build_narration, speak

# CORS headers for API Gateway responses
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Session-Id,X-Language",
    "Access-Control-Expose-Headers": "X-Session-Id",
}

# Handlers that read or mutate a dashboard session
SESSION_ROUTES = {"/location", "/location/gps", "/location/map-click", "/language",
                  "/tab", "/state", "/view", "/narrate"}

# Extra seconds allowed on top of the simulated delay when a caller waits
WAIT_GRACE_SECONDS = 5.0


class BadRequest(ValueError):
    """Raised for malformed request bodies."""
    pass


def _response(status_code: int, body: dict, headers: dict = None) -> dict:
    """Build API Gateway response."""
    response_headers = dict(CORS_HEADERS)
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(body, ensure_ascii=False),
    }


def _get_body(event: dict) -> dict:
    raw = event.get("body")
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BadRequest(f"Invalid JSON body: {e}")
    if not isinstance(body, dict):
        raise BadRequest("JSON body must be an object")
    return body


def _get_session_id(event: dict) -> str:
    """
    Extract session ID from request.

    Requests without one are issued a fresh ID, stored back on the event so
    every lookup during the request sees the same session.
    """
    headers = event.get("headers") or {}
    params = event.get("queryStringParameters") or {}

    session_id = (
        headers.get("X-Session-Id") or
        headers.get("x-session-id") or
        params.get("session_id")
    )
    if not session_id:
        session_id = uuid.uuid4().hex
        event["headers"] = {**headers, "X-Session-Id": session_id}
        logger.info(f"Issued new session id {session_id}")
    return session_id


def _get_language(event: dict) -> Optional[str]:
    """Language requested via query param or X-Language header, if any."""
    params = event.get("queryStringParameters") or {}
    headers = event.get("headers") or {}

    return (
        params.get("language") or
        headers.get("X-Language") or
        headers.get("x-language")
    )


def _get_session(event: dict):
    return session_store.get_or_create(_get_session_id(event), _get_language(event))


def _select(event: dict, body: dict, location) -> dict:
    session = _get_session(event)
    task = session.select_location(location)

    if body.get("wait") is True:
        task.wait(session.delay + WAIT_GRACE_SECONDS)

    return _response(202 if not task.done else 200, {
        "location": location.to_dict(),
        "state": describe_state(session.snapshot()),
    })


def _handle_errors(name: str, func: Callable[[dict], dict], event: dict) -> dict:
    """Translate domain errors into HTTP responses."""
    try:
        return func(event)
    except (BadRequest, LocationInputError, UnsupportedLanguageError) as e:
        return _response(400, {"error": str(e)})
    except TabUnavailableError as e:
        status = 400 if e.reason == "unknown tab" else 409
        return _response(status, {"error": str(e), "tab": e.tab})
    except NarrationDataMissing as e:
        return _response(409, {"error": str(e), "subject": e.subject})
    except Exception as e:
        logger.error(f"{name} error: {e}")
        return _response(500, {"error": str(e)})


# =============================================================================
# LOCATION HANDLERS
# =============================================================================

def _manual_location(event: dict) -> dict:
    body = _get_body(event)
    location = location_from_address(body.get("address"))
    return _select(event, body, location)


def manual_location_handler(event: dict, context: Any) -> dict:
    """
    Select a manually typed location.

    POST /location
    Body: {"address": "Pune, Maharashtra", "wait": false}
    """
    return _handle_errors("Manual location", _manual_location, event)


def _gps_location(event: dict) -> dict:
    body = _get_body(event)
    position = None
    if "latitude" in body or "longitude" in body:
        position = {"latitude": body.get("latitude"), "longitude": body.get("longitude")}
    location = location_from_device(position, body.get("error"))
    return _select(event, body, location)


def gps_location_handler(event: dict, context: Any) -> dict:
    """
    Select the location reported by the device.

    POST /location/gps
    Body: {"latitude": 18.52, "longitude": 73.85} or {"error": "Permission denied"}
    An empty body means geolocation is unavailable on the device.
    """
    return _handle_errors("GPS location", _gps_location, event)


def _map_click(event: dict) -> dict:
    body = _get_body(event)
    session = _get_session(event)
    current = session.snapshot().location
    if current is None:
        raise BadRequest("Select a location before adjusting it on the map")
    try:
        dx = float(body.get("dx", 0))
        dy = float(body.get("dy", 0))
    except (TypeError, ValueError):
        raise BadRequest("dx and dy must be numbers")
    return _select(event, body, location_from_map_click(current, dx, dy))


def map_click_handler(event: dict, context: Any) -> dict:
    """
    Move the location by a click offset on the map.

    POST /location/map-click
    Body: {"dx": 40, "dy": -25}
    """
    return _handle_errors("Map click", _map_click, event)


# =============================================================================
# SESSION HANDLERS
# =============================================================================

def _language(event: dict) -> dict:
    body = _get_body(event)
    language = body.get("language")
    if not language:
        raise BadRequest("language is required")
    state = _get_session(event).set_language(language)
    return _response(200, {"state": describe_state(state)})


def language_handler(event: dict, context: Any) -> dict:
    """
    Change the session language.

    POST /language
    Body: {"language": "en"}
    """
    return _handle_errors("Language", _language, event)


def _tab(event: dict) -> dict:
    body = _get_body(event)
    state = _get_session(event).select_tab(body.get("tab") or "")
    return _response(200, {"state": describe_state(state)})


def tab_handler(event: dict, context: Any) -> dict:
    """
    Change the active tab.

    POST /tab
    Body: {"tab": "soil"}
    """
    return _handle_errors("Tab", _tab, event)


def state_handler(event: dict, context: Any) -> dict:
    """
    Current session snapshot.

    GET /state
    """
    return _handle_errors(
        "State",
        lambda e: _response(200, {"state": describe_state(_get_session(e).snapshot())}),
        event,
    )


def _view(event: dict) -> dict:
    path_params = event.get("pathParameters") or {}
    params = event.get("queryStringParameters") or {}
    state = _get_session(event).snapshot()
    tab = path_params.get("tab") or params.get("tab") or state.active_tab
    return _response(200, build_view(state, tab))


def view_handler(event: dict, context: Any) -> dict:
    """
    Localized view model for a tab.

    GET /view/{tab}
    """
    return _handle_errors("View", _view, event)


# =============================================================================
# NARRATION HANDLER
# =============================================================================

def _narrate(event: dict) -> dict:
    body = _get_body(event)
    subject = body.get("subject", "title")
    if subject not in NARRATION_SUBJECTS:
        raise BadRequest(f"subject must be one of {', '.join(NARRATION_SUBJECTS)}")
    try:
        crop_index = int(body.get("index", 0))
    except (TypeError, ValueError):
        raise BadRequest("index must be an integer")

    state = _get_session(event).snapshot()
    try:
        text = build_narration(
            subject,
            state.language,
            weather=state.weather,
            soil=state.soil,
            recommendations=list(state.recommendations),
            crop_index=crop_index,
        )
    except ValueError as e:
        raise BadRequest(str(e))

    result = speak(text, state.language)
    result["subject"] = subject
    result["language"] = state.language
    return _response(200, result)


def narrate_handler(event: dict, context: Any) -> dict:
    """
    Spoken summary of a dashboard record.

    POST /narrate
    Body: {"subject": "crop", "index": 0}

    Returns the narration text and, when speech synthesis is available,
    base64 encoded audio.
    """
    return _handle_errors("Narration", _narrate, event)


def languages_handler(event: dict, context: Any) -> dict:
    """GET /languages"""
    return _response(200, {"languages": list_languages()})


def health_handler(event: dict, context: Any) -> dict:
    """GET /health"""
    return _response(200, {"status": "healthy", "service": "crop-advisor-dashboard"})


# =============================================================================
# ROUTER
# =============================================================================

ROUTES: Dict[Tuple[str, str], Callable[[dict, Any], dict]] = {
    ("POST", "/location"): manual_location_handler,
    ("POST", "/location/gps"): gps_location_handler,
    ("POST", "/location/map-click"): map_click_handler,
    ("POST", "/language"): language_handler,
    ("POST", "/tab"): tab_handler,
    ("GET", "/state"): state_handler,
    ("GET", "/view"): view_handler,
    ("POST", "/narrate"): narrate_handler,
    ("GET", "/languages"): languages_handler,
    ("GET", "/health"): health_handler,
    ("GET", "/openapi.json"): openapi_spec_handler,
    ("GET", "/docs"): swagger_ui_handler,
}


def _route_key(event: dict) -> Tuple[str, str]:
    method = (event.get("httpMethod") or "GET").upper()
    path = (event.get("path") or "/").rstrip("/") or "/"

    if path.startswith("/view/"):
        tab = path[len("/view/"):]
        event["pathParameters"] = {**(event.get("pathParameters") or {}), "tab": tab}
        path = "/view"

    return method, path


def lambda_handler(event, context):
    """Single entry point dispatching on HTTP method and path."""
    logger.info(f"{event.get('httpMethod')} {event.get('path')}")

    if (event.get("httpMethod") or "").upper() == "OPTIONS":
        return cors_handler(event, context)

    method, path = _route_key(event)
    handler = ROUTES.get((method, path))
    if handler is None:
        return _response(404, {"error": f"No route for {event.get('httpMethod')} {event.get('path')}"})

    if path not in SESSION_ROUTES:
        return handler(event, context)

    session_id = _get_session_id(event)
    response = handler(event, context)
    response["headers"] = {**response.get("headers", {}), "X-Session-Id": session_id}
    return response
