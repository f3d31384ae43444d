"""
Voice Configuration
-------------------
Central configuration for speech synthesis routing.
"""

import os
from enum import Enum
from dataclasses import dataclass


class Language(Enum):
    """Languages offered by the dashboard language selector."""
    HINDI = "hi"
    ENGLISH = "en"
    TELUGU = "te"
    TAMIL = "ta"
    BENGALI = "bn"
    GUJARATI = "gu"
    MARATHI = "mr"
    PUNJABI = "pa"


class TTSProvider(Enum):
    """TTS service providers."""
    POLLY = "polly"    # Amazon Polly (default)
    OPENAI = "openai"  # OpenAI TTS API


@dataclass
class VoiceConfig:
    """Voice configuration settings."""

    # AWS Settings
    aws_region: str = os.environ.get("AWS_REGION", "ap-south-1")

    # Provider override ("polly" or "openai"); empty uses TTS_ROUTING
    tts_provider: str = os.environ.get("TTS_PROVIDER", "")

    # Polly Settings, keyed by speech tag
    polly_voice_ids: dict = None
    polly_engine: str = os.environ.get("POLLY_ENGINE", "standard")

    # OpenAI Settings
    openai_api_key: str = os.environ.get("OPENAI_API_KEY", "")
    openai_tts_model: str = "tts-1"
    openai_tts_voice: str = "alloy"

    def __post_init__(self):
        """Initialize speech-tag specific settings."""
        self.polly_voice_ids = {
            "hi-IN": "Aditi",    # Hindi female voice
            "en-US": "Joanna",   # US English female voice
        }


# Speech synthesizer language tag per label language
SPEECH_TAGS = {
    Language.HINDI: "hi-IN",
}
DEFAULT_SPEECH_TAG = "en-US"

# TTS Routing Map
TTS_ROUTING = {
    Language.HINDI: TTSProvider.POLLY,
    Language.ENGLISH: TTSProvider.POLLY,
}


def get_speech_tag(language: Language) -> str:
    """Speech tag for a language: hi-IN for Hindi, en-US otherwise."""
    return SPEECH_TAGS.get(language, DEFAULT_SPEECH_TAG)


def get_tts_provider(language: Language) -> TTSProvider:
    """Get TTS provider for a given language."""
    if config.tts_provider:
        return TTSProvider(config.tts_provider.lower())
    return TTS_ROUTING.get(language, TTSProvider.POLLY)


# Global config instance
config = VoiceConfig()
