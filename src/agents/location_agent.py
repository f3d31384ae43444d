"""
Location Agent
==============

Turns user location input into a GeoLocation.

Entry paths:
- Manual address: no geocoding, the reference coordinate is attached to the
  text exactly as typed
- Device geolocation: reported coordinates on success, the reference
  coordinate flagged as fallback on any failure (no retry)
- Map click: nudges the current location by the click offset from the map
  center
"""

import math
from typing import Any, Dict, Optional
from ..config import REFERENCE_LATITUDE, REFERENCE_LONGITUDE, FALLBACK_ADDRESS
from ..utils.logger import logger
from ..utils.translations import translate, format_number
from .models import GeoLocation

# Degrees moved per pixel of map click offset
MAP_DEGREES_PER_PIXEL = 0.001


class LocationInputError(ValueError):
    """Raised when a manual location submission has no usable text."""
    pass


def location_from_address(address: str) -> GeoLocation:
    """
    Build a location from a manually typed address.

    Args:
        address: Text typed by the user (city, state or PIN code)

    Returns:
        GeoLocation at the reference coordinate carrying the submitted text

    Raises:
        LocationInputError: If the text is empty or whitespace only
    """
    if not isinstance(address, str) or not address.strip():
        raise LocationInputError("Location text is required")

    location = GeoLocation(
        latitude=REFERENCE_LATITUDE,
        longitude=REFERENCE_LONGITUDE,
        address=address,
    )
    logger.info(f"Manual location submitted: {address!r}")
    return location


def fallback_location() -> GeoLocation:
    """Reference coordinate marked as a fallback result."""
    return GeoLocation(
        latitude=REFERENCE_LATITUDE,
        longitude=REFERENCE_LONGITUDE,
        address=FALLBACK_ADDRESS,
        is_fallback=True,
    )


def location_from_device(
    position: Optional[Dict[str, Any]] = None,
    error: Optional[Any] = None
) -> GeoLocation:
    """
    Build a location from a device geolocation result.

    Args:
        position: Reported coordinates {"latitude": ..., "longitude": ...},
            None when geolocation is unavailable
        error: Failure reported by the device, if any

    Returns:
        GeoLocation at the device coordinates, or the fallback location
    """
    if error is not None:
        logger.warning(f"Error getting location: {error}")
        return fallback_location()

    if not position:
        logger.warning("Geolocation not supported, using fallback location")
        return fallback_location()

    coords = _parse_coordinates(position)
    if coords is None:
        logger.warning(f"Invalid device coordinates: {position}")
        return fallback_location()

    lat, lon = coords
    return GeoLocation(
        latitude=lat,
        longitude=lon,
        address=f"{lat:.4f}, {lon:.4f}",
    )


def location_from_map_click(current: GeoLocation, dx: float, dy: float) -> GeoLocation:
    """
    Move the location by a click offset (in pixels) from the map center.

    Args:
        current: Location currently shown by the map marker
        dx: Horizontal offset from the center, positive to the right
        dy: Vertical offset from the center, positive downwards
    """
    new_lat = current.latitude + float(dy) * MAP_DEGREES_PER_PIXEL
    new_lon = current.longitude + float(dx) * MAP_DEGREES_PER_PIXEL

    return GeoLocation(
        latitude=round(new_lat, 4),
        longitude=round(new_lon, 4),
        address=f"{new_lat:.4f}, {new_lon:.4f} (Updated)",
    )


def _parse_coordinates(position: Dict[str, Any]) -> Optional[tuple]:
    try:
        lat = float(position["latitude"])
        lon = float(position["longitude"])
    except (KeyError, TypeError, ValueError):
        return None

    if math.isnan(lat) or math.isnan(lon):
        return None
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None
    return lat, lon


def build_location_view(
    location: Optional[GeoLocation],
    language: str,
    is_loading: bool = False
) -> Dict[str, Any]:
    """Localized view model for the location tab (entry forms and map)."""
    view = {
        "title": translate("enter_location", language),
        "manual_entry": {
            "heading": translate("manual_entry", language),
            "label": translate("enter_location_hint", language),
            "placeholder": translate("location_placeholder", language),
            "submit": translate("getting_location" if is_loading else "submit", language),
            "disabled": is_loading,
        },
        "gps": {
            "heading": translate("use_gps", language),
            "description": translate("gps_description", language),
            "button": translate("getting_location" if is_loading else "use_gps", language),
            "disabled": is_loading,
        },
        "map": None,
    }

    if location is not None:
        view["map"] = {
            "title": translate("interactive_map", language),
            "marker": location.address,
            "latitude": location.latitude,
            "longitude": location.longitude,
            "coordinates_label": translate("coordinates", language),
            "coordinates": f"{format_number(location.latitude)}, {format_number(location.longitude)}",
            "is_fallback": location.is_fallback,
        }

    return view
