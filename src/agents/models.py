"""
Dashboard Data Model
--------------------
Immutable value records shared by the agents, plus the validation applied
where readings enter the system.
"""

import math
from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Tuple


class SoilBand(Enum):
    """Qualitative band of a single soil parameter reading."""
    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class SuitabilityLevel(Enum):
    """Display bucket for a crop suitability score."""
    HIGHLY_RECOMMENDED = "highly_recommended"
    RECOMMENDED = "recommended"
    MODERATE = "moderate"
    LOW_RECOMMENDED = "low_recommended"


class DataValidationError(ValueError):
    """Raised when a reading is outside its physical range."""
    def __init__(self, field_name: str, value: Any, low: float, high: float):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name}={value} outside [{low}, {high}]")


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    address: str
    is_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ForecastDay:
    date: str  # ISO date, e.g. "2025-09-18"
    temperature: float
    condition: str


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float     # °C
    humidity: float        # %
    wind_speed: float      # km/h
    wind_direction: str    # compass point
    forecast: Tuple[ForecastDay, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SoilSample:
    soil_type: str
    ph: float
    organic_content: float  # %
    nitrogen: float         # ppm
    phosphorus: float       # ppm
    potassium: float        # ppm

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CropSuitability:
    name: str
    localized_name: str  # Hindi name
    suitability: int     # 0-100
    planting_time: str
    harvest_time: str
    irrigation: str
    fertilizer: str
    pest_control: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _check_range(field_name: str, value: float, low: float, high: float) -> None:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataValidationError(field_name, value, low, high)
    if math.isnan(value) or not low <= value <= high:
        raise DataValidationError(field_name, value, low, high)


def validate_weather(weather: WeatherSnapshot) -> WeatherSnapshot:
    _check_range("humidity", weather.humidity, 0, 100)
    _check_range("wind_speed", weather.wind_speed, 0, math.inf)
    return weather


def validate_soil(soil: SoilSample) -> SoilSample:
    """Enforce pH and percentage ranges on a soil sample."""
    _check_range("ph", soil.ph, 0, 14)
    _check_range("organic_content", soil.organic_content, 0, 100)
    for nutrient in ("nitrogen", "phosphorus", "potassium"):
        _check_range(nutrient, getattr(soil, nutrient), 0, math.inf)
    return soil


def validate_crop(crop: CropSuitability) -> CropSuitability:
    _check_range("suitability", crop.suitability, 0, 100)
    return crop
