import json

from .utils.translations import SUPPORTED_LANGUAGE_CODES


def _get_cors_headers():
    """Get CORS headers for API responses."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type,X-Session-Id,X-Language",
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Max-Age": "86400",
    }


def cors_handler(event, context):
    """Handle CORS preflight requests (OPTIONS)."""
    return {
        "statusCode": 200,
        "headers": _get_cors_headers(),
        "body": json.dumps({"message": "OK"}),
    }


def swagger_ui_handler(event, context):
    """Serve Swagger UI HTML."""
    if event.get("httpMethod") == "OPTIONS":
        return cors_handler(event, context)

    swagger_html = """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Crop Advisor Dashboard API - Swagger UI</title>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1">
        <link rel="stylesheet" type="text/css" href="https://cdnjs.cloudflare.com/ajax/libs/swagger-ui/4.18.3/swagger-ui.min.css">
    </head>
    <body>
        <div id="swagger-ui"></div>
        <script src="https://cdnjs.cloudflare.com/ajax/libs/swagger-ui/4.18.3/swagger-ui.min.js"></script>
        <script>
            window.onload = function() {
                window.ui = SwaggerUIBundle({
                    url: "./openapi.json",
                    dom_id: '#swagger-ui',
                    presets: [SwaggerUIBundle.presets.apis],
                    deepLinking: true
                });
            };
        </script>
    </body>
    </html>
    """

    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "text/html; charset=utf-8",
            **_get_cors_headers(),
        },
        "body": swagger_html,
    }


_SESSION_HEADER = {
    "name": "X-Session-Id",
    "in": "header",
    "description": "Dashboard session identifier; a new one is issued in the X-Session-Id response header when omitted",
    "schema": {"type": "string"}
}

_LANGUAGE_HEADER = {
    "name": "X-Language",
    "in": "header",
    "description": "Initial language for a new session",
    "schema": {"type": "string", "enum": list(SUPPORTED_LANGUAGE_CODES), "default": "hi"}
}


def _json_body(properties, required=None):
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return {
        "required": bool(required),
        "content": {"application/json": {"schema": schema}}
    }


def _operation(tag, summary, description, body=None, responses=None, parameters=None):
    operation = {
        "tags": [tag],
        "summary": summary,
        "description": description,
        "parameters": [_SESSION_HEADER, _LANGUAGE_HEADER] + (parameters or []),
        "responses": responses or {"200": {"description": "OK"}},
    }
    if body:
        operation["requestBody"] = body
    return operation


_LOCATION_RESPONSES = {
    "200": {"description": "Location selected and data populated"},
    "202": {"description": "Location selected, data population in progress"},
    "400": {"description": "Invalid input"},
}


def openapi_spec_handler(event, context):
    """Serve OpenAPI specification."""
    if event.get("httpMethod") == "OPTIONS":
        return cors_handler(event, context)

    wait_property = {
        "type": "boolean",
        "default": False,
        "description": "Block until weather, soil and crop data are loaded"
    }

    openapi_spec = {
        "openapi": "3.0.0",
        "info": {
            "title": "Crop Advisor Dashboard API",
            "description": "Location based weather, soil and crop recommendation dashboard with localized labels and narration",
            "version": "1.0.0",
        },
        "servers": [
            {
                "url": event.get("requestContext", {}).get("stage", "/Prod"),
                "description": "Current API Gateway"
            }
        ],
        "tags": [
            {"name": "Location", "description": "Select the farm location"},
            {"name": "Session", "description": "Language, tabs and session state"},
            {"name": "Views", "description": "Localized view models per tab"},
            {"name": "Narration", "description": "Spoken summaries"},
            {"name": "Health Check", "description": "API health monitoring"}
        ],
        "paths": {
            "/location": {
                "post": _operation(
                    "Location", "Submit a manual location",
                    "Attaches the reference coordinate to the address as typed",
                    body=_json_body({
                        "address": {"type": "string", "example": "Pune, Maharashtra"},
                        "wait": wait_property,
                    }, required=["address"]),
                    responses=_LOCATION_RESPONSES,
                )
            },
            "/location/gps": {
                "post": _operation(
                    "Location", "Submit a device geolocation result",
                    "Uses the reported coordinates, or the reference coordinate marked as default on failure",
                    body=_json_body({
                        "latitude": {"type": "number", "example": 18.5204},
                        "longitude": {"type": "number", "example": 73.8567},
                        "error": {"type": "string", "example": "User denied Geolocation"},
                        "wait": wait_property,
                    }),
                    responses=_LOCATION_RESPONSES,
                )
            },
            "/location/map-click": {
                "post": _operation(
                    "Location", "Adjust the location from a map click",
                    "Moves the location 0.001 degrees per pixel of offset from the map center",
                    body=_json_body({
                        "dx": {"type": "number", "example": 40},
                        "dy": {"type": "number", "example": -25},
                        "wait": wait_property,
                    }),
                    responses=_LOCATION_RESPONSES,
                )
            },
            "/language": {
                "post": _operation(
                    "Session", "Change the session language", "Select one of the eight selector languages",
                    body=_json_body({
                        "language": {"type": "string", "enum": list(SUPPORTED_LANGUAGE_CODES)}
                    }, required=["language"]),
                    responses={"200": {"description": "OK"}, "400": {"description": "Unsupported language"}},
                )
            },
            "/tab": {
                "post": _operation(
                    "Session", "Change the active tab", "Tabs are enabled once their data is loaded",
                    body=_json_body({
                        "tab": {"type": "string", "enum": ["location", "weather", "soil", "recommendations", "dashboard"]}
                    }, required=["tab"]),
                    responses={"200": {"description": "OK"}, "409": {"description": "Tab not enabled yet"}},
                )
            },
            "/state": {
                "get": _operation("Session", "Session snapshot", "Location, active tab, loading flag and enabled tabs")
            },
            "/view/{tab}": {
                "get": _operation(
                    "Views", "Localized view model", "Labels, values and chart data for one tab",
                    parameters=[{
                        "name": "tab",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "string", "enum": ["location", "weather", "soil", "recommendations", "dashboard"]}
                    }],
                    responses={"200": {"description": "OK"}, "409": {"description": "Data not loaded yet"}},
                )
            },
            "/narrate": {
                "post": _operation(
                    "Narration", "Narrate a record",
                    "Builds the spoken summary in the session language and synthesizes audio when available",
                    body=_json_body({
                        "subject": {"type": "string", "enum": ["title", "weather", "soil", "crop", "dashboard"]},
                        "index": {"type": "integer", "default": 0, "description": "Crop index for subject=crop"},
                    }),
                    responses={"200": {"description": "OK"}, "409": {"description": "Data not loaded yet"}},
                )
            },
            "/languages": {
                "get": {
                    "tags": ["Session"],
                    "summary": "Selector languages",
                    "responses": {"200": {"description": "OK"}}
                }
            },
            "/health": {
                "get": {
                    "tags": ["Health Check"],
                    "summary": "Health check endpoint",
                    "responses": {"200": {"description": "API is healthy"}}
                }
            }
        }
    }

    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "application/json",
            **_get_cors_headers(),
        },
        "body": json.dumps(openapi_spec),
    }
