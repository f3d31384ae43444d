"""
Unit tests for narration and speech synthesis routing
"""

import pytest
from unittest.mock import patch, MagicMock
from botocore.exceptions import ClientError
from src.agents.crop_planning_agent import CROP_TABLE
from src.agents.soil_agent import SAMPLE_SOIL
from src.agents.weather_agent import SAMPLE_WEATHER
from src.voice.config import Language, TTSProvider, get_speech_tag, get_tts_provider
from src.voice.narration import NarrationDataMissing, build_narration, speak
from src.voice.tts.router import TTSRouter

CROPS = list(CROP_TABLE)


class TestBuildNarration:

    def test_title(self):
        assert build_narration("title", "en") == "AI Crop Recommendation System"

    def test_weather_english(self):
        text = build_narration("weather", "en", weather=SAMPLE_WEATHER)
        assert text == (
            "Current temperature is 28 degrees Celsius. Humidity is 65 percent. "
            "Wind speed is 12 kilometers per hour."
        )

    def test_soil_hindi_uses_localized_soil_type(self):
        text = build_narration("soil", "hi", soil=SAMPLE_SOIL)
        assert text.startswith("आपकी मिट्टी दोमट प्रकार की है।")
        assert "6.8" in text

    def test_crop_by_index(self):
        text = build_narration("crop", "en", recommendations=CROPS, crop_index=1)
        assert text.startswith("Wheat has 88 percent suitability.")

    def test_crop_hindi_name(self):
        text = build_narration("crop", "hi", recommendations=CROPS)
        assert text.startswith("चावल की उपयुक्तता 95 प्रतिशत है।")

    def test_dashboard(self):
        text = build_narration("dashboard", "en", weather=SAMPLE_WEATHER, soil=SAMPLE_SOIL, recommendations=CROPS)
        assert "Rice is the most recommended crop with 95 percent suitability" in text
        assert text.endswith("Soil pH is 6.8.")

    def test_missing_data(self):
        with pytest.raises(NarrationDataMissing):
            build_narration("weather", "en")
        with pytest.raises(NarrationDataMissing):
            build_narration("dashboard", "en", weather=SAMPLE_WEATHER, recommendations=CROPS)

    def test_crop_index_out_of_range(self):
        with pytest.raises(ValueError):
            build_narration("crop", "en", recommendations=CROPS, crop_index=3)

    def test_unknown_subject(self):
        with pytest.raises(ValueError):
            build_narration("market", "en")


class TestSpeak:

    @patch('src.voice.narration.tts_router')
    @patch('src.voice.narration.logger')
    def test_unavailable_returns_text_without_audio(self, mock_logger, mock_router):
        mock_router.is_available.return_value = False

        result = speak("Hello", "en")

        assert result == {"text": "Hello", "label_language": "en", "speech_tag": "en-US", "audio": None}
        mock_router.synthesize_speech.assert_not_called()
        mock_logger.warning.assert_called_once()

    @patch('src.voice.narration.tts_router')
    def test_hindi_uses_hindi_speech_tag(self, mock_router):
        mock_router.is_available.return_value = True
        mock_router.synthesize_speech.return_value = {"provider": "polly", "audio_base64": "AAA="}

        result = speak("नमस्ते", "hi")

        assert result["speech_tag"] == "hi-IN"
        assert result["audio"]["provider"] == "polly"
        mock_router.synthesize_speech.assert_called_once_with("नमस्ते", Language.HINDI)

    @patch('src.voice.narration.tts_router')
    @patch('src.voice.narration.logger')
    def test_provider_error_returns_text_without_audio(self, mock_logger, mock_router):
        mock_router.is_available.return_value = True
        mock_router.synthesize_speech.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "not authorized"}},
            "SynthesizeSpeech",
        )

        result = speak("Hello", "en")

        assert result["text"] == "Hello"
        assert result["audio"] is None
        mock_logger.warning.assert_called_once()

    @patch('src.voice.narration.tts_router')
    def test_fallback_language_speaks_english(self, mock_router):
        mock_router.is_available.return_value = False

        result = speak("Hello", "pa")

        assert result["label_language"] == "en"
        assert result["speech_tag"] == "en-US"


class TestSpeechRouting:

    def test_speech_tags(self):
        assert get_speech_tag(Language.HINDI) == "hi-IN"
        assert get_speech_tag(Language.ENGLISH) == "en-US"
        assert get_speech_tag(Language.TAMIL) == "en-US"

    @patch('src.voice.config.config')
    def test_provider_override(self, mock_config):
        mock_config.tts_provider = "openai"
        assert get_tts_provider(Language.HINDI) == TTSProvider.OPENAI

        mock_config.tts_provider = ""
        assert get_tts_provider(Language.HINDI) == TTSProvider.POLLY

    def test_router_reports_unavailable_polly(self):
        router = TTSRouter()
        router._polly = MagicMock()
        router._polly.is_available.return_value = False

        with patch('src.voice.tts.router.get_tts_provider', return_value=TTSProvider.POLLY):
            assert router.is_available(Language.ENGLISH) is False

    def test_router_synthesizes_with_polly(self):
        router = TTSRouter()
        router._polly = MagicMock()
        router._polly.synthesize.return_value = b"mp3-bytes"

        with patch('src.voice.tts.router.get_tts_provider', return_value=TTSProvider.POLLY):
            result = router.synthesize_speech("Hello", Language.ENGLISH)

        router._polly.synthesize.assert_called_once_with("Hello", "en-US")
        assert result["provider"] == "polly"
        assert result["speech_tag"] == "en-US"
        assert result["audio_size"] == len(b"mp3-bytes")
        assert result["audio_base64"] == "bXAzLWJ5dGVz"
