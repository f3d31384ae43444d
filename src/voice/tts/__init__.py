# Speech synthesis for dashboard narration (Polly by default, OpenAI optional)
from .polly_client import PollyTTS
from .openai_client import OpenAITTS
from .router import TTSRouter, tts_router

__all__ = ["PollyTTS", "OpenAITTS", "TTSRouter", "tts_router"]
