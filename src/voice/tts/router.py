"""
TTS Router
----------
Routes TTS requests to the configured provider and reports whether speech
synthesis is available at all.
"""

import base64
import logging
from typing import Optional
from ..config import Language, TTSProvider, get_speech_tag, get_tts_provider
from .polly_client import PollyTTS
from .openai_client import OpenAITTS

# Setup logger (compatible with both local and Lambda)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class TTSRouter:
    """
    Routes TTS requests to the appropriate provider.

    Routing Logic:
    - Hindi (HI) → Amazon Polly, hi-IN voice
    - English (EN) → Amazon Polly, en-US voice
    - TTS_PROVIDER=openai → OpenAI TTS for every language
    """

    def __init__(self):
        self._polly: Optional[PollyTTS] = None
        self._openai: Optional[OpenAITTS] = None

    @property
    def polly(self) -> PollyTTS:
        """Lazy initialization of Polly client."""
        if self._polly is None:
            self._polly = PollyTTS()
        return self._polly

    @property
    def openai_tts(self) -> OpenAITTS:
        """Lazy initialization of OpenAI TTS client."""
        if self._openai is None:
            self._openai = OpenAITTS()
        return self._openai

    def _client_for(self, provider: TTSProvider):
        if provider == TTSProvider.POLLY:
            return self.polly
        elif provider == TTSProvider.OPENAI:
            return self.openai_tts
        raise ValueError(f"Unknown TTS provider: {provider}")

    def is_available(self, language: Language) -> bool:
        """
        Feature-detect speech synthesis for a language.

        Returns False when the provider cannot be configured (missing
        credentials or API key, unknown provider name).
        """
        try:
            provider = get_tts_provider(language)
            return self._client_for(provider).is_available()
        except Exception as e:
            logger.warning(f"Speech synthesis unavailable: {e}")
            return False

    def synthesize_speech(self, text: str, language: Language) -> dict:
        """
        Convert text to speech using the appropriate provider.

        Args:
            text: Text to convert to speech
            language: Label language of the text

        Returns:
            dict with keys: audio_base64, provider, speech_tag, text_length, audio_size
        """
        provider = get_tts_provider(language)
        speech_tag = get_speech_tag(language)

        logger.info(
            f"TTS routing: language={language.value}, "
            f"provider={provider.value}, speech_tag={speech_tag}"
        )

        try:
            audio_bytes = self._client_for(provider).synthesize(text, speech_tag)
        except Exception as e:
            logger.error(f"TTS error: {e}")
            raise

        return {
            "provider": provider.value,
            "speech_tag": speech_tag,
            "text_length": len(text),
            "audio_size": len(audio_bytes),
            "audio_base64": base64.b64encode(audio_bytes).decode('utf-8'),
            "content_type": "audio/mpeg",
        }


# Singleton instance
tts_router = TTSRouter()
