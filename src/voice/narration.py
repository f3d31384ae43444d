"""
Narration
---------
Builds the spoken summary for a dashboard record in the selected language
and hands it to the speech synthesizer.

Playback is best effort: when no TTS provider is available, or the provider
fails during synthesis, the narration text is still returned, without audio.
"""

import logging
from typing import Any, Dict, List, Optional
from ..agents.models import CropSuitability, SoilSample, WeatherSnapshot
from ..agents.crop_planning_agent import crop_narration_values
from ..agents.dashboard_agent import dashboard_narration_values
from ..agents.soil_agent import soil_narration_values
from ..agents.weather_agent import weather_narration_values
from ..utils.translations import translate, resolve_language
from .config import Language, get_speech_tag
from .tts.router import tts_router

# Setup logger (compatible with both local and Lambda)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

NARRATION_SUBJECTS = ("title", "weather", "soil", "crop", "dashboard")


class NarrationDataMissing(LookupError):
    """Raised when the record a narration needs has not been populated yet."""
    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"No data available to narrate '{subject}'")


def build_narration(
    subject: str,
    language: str,
    weather: Optional[WeatherSnapshot] = None,
    soil: Optional[SoilSample] = None,
    recommendations: Optional[List[CropSuitability]] = None,
    crop_index: int = 0
) -> str:
    """
    Assemble the narration sentence for a subject.

    Args:
        subject: One of title, weather, soil, crop, dashboard
        language: Selector language code
        weather: Current weather snapshot (weather, dashboard)
        soil: Current soil sample (soil, dashboard)
        recommendations: Crop list (crop, dashboard)
        crop_index: Which crop to narrate for the crop subject

    Raises:
        ValueError: Unknown subject or crop index out of range
        NarrationDataMissing: Required record not populated
    """
    if subject == "title":
        return translate("title", language)

    if subject == "weather":
        if weather is None:
            raise NarrationDataMissing(subject)
        return translate("narration_weather", language, **weather_narration_values(weather))

    if subject == "soil":
        if soil is None:
            raise NarrationDataMissing(subject)
        return translate("narration_soil", language, **soil_narration_values(soil, language))

    if subject == "crop":
        if not recommendations:
            raise NarrationDataMissing(subject)
        if not 0 <= crop_index < len(recommendations):
            raise ValueError(f"Crop index out of range: {crop_index}")
        crop = recommendations[crop_index]
        return translate("narration_crop", language, **crop_narration_values(crop, language))

    if subject == "dashboard":
        if not recommendations or weather is None or soil is None:
            raise NarrationDataMissing(subject)
        values = dashboard_narration_values(recommendations, weather, soil, language)
        return translate("narration_dashboard", language, **values)

    raise ValueError(f"Unknown narration subject: {subject}")


def speak(text: str, language: str) -> Dict[str, Any]:
    """
    Hand narration text to the speech synthesizer.

    Returns:
        dict with text, label_language, speech_tag and audio (None when
        speech synthesis is unavailable)
    """
    label_language = Language(resolve_language(language))
    speech_tag = get_speech_tag(label_language)

    result = {
        "text": text,
        "label_language": label_language.value,
        "speech_tag": speech_tag,
        "audio": None,
    }

    if not tts_router.is_available(label_language):
        logger.warning(f"Speech synthesis not available, skipping playback ({speech_tag})")
        return result

    try:
        result["audio"] = tts_router.synthesize_speech(text, label_language)
    except Exception as e:
        logger.warning(f"Speech synthesis failed, skipping playback ({speech_tag}): {e}")
    return result
