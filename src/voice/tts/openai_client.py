"""
OpenAI TTS Client
-----------------
Optional narration voice over the OpenAI speech endpoint, selected with
TTS_PROVIDER=openai. The endpoint infers the spoken language from the text,
so Hindi and English narration share one voice.
"""

import json
import logging
import urllib.error
import urllib.request
from typing import Optional
from ..config import config

# Setup logger (compatible with both local and Lambda)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class OpenAITTSError(RuntimeError):
    """Raised when the speech endpoint cannot be reached or rejects a request."""
    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class OpenAITTS:
    """Narration through the OpenAI speech endpoint (tts-1 by default)."""

    TTS_API_URL = "https://api.openai.com/v1/audio/speech"
    TIMEOUT_SECONDS = 30

    def __init__(self):
        self.api_key = config.openai_api_key
        self.model = config.openai_tts_model
        self.voice = config.openai_tts_voice

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _build_request(self, text: str, voice: str, response_format: str) -> urllib.request.Request:
        payload = {
            "model": self.model,
            "input": text,
            "voice": voice,
            "response_format": response_format,
        }
        return urllib.request.Request(
            self.TTS_API_URL,
            data=json.dumps(payload).encode('utf-8'),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            }
        )

    def synthesize(
        self,
        text: str,
        speech_tag: str = "en-US",
        voice: Optional[str] = None,
        response_format: str = "mp3"
    ) -> bytes:
        """
        Synthesize narration text.

        Args:
            text: Narration sentence
            speech_tag: hi-IN or en-US, logged only
            voice: Overrides the configured voice
            response_format: mp3 (default), opus, aac or flac

        Raises:
            ValueError: No API key configured
            OpenAITTSError: HTTP error status or network failure
        """
        if not self.api_key:
            raise ValueError("OpenAI API key not configured")

        voice = voice or self.voice
        logger.info(f"OpenAI narration: voice={voice}, speech_tag={speech_tag}, chars={len(text)}")

        request = self._build_request(text, voice, response_format)
        try:
            with urllib.request.urlopen(request, timeout=self.TIMEOUT_SECONDS) as response:
                audio_bytes = response.read()
        except urllib.error.HTTPError as e:
            detail = e.read().decode('utf-8', errors='replace')
            logger.error(f"OpenAI TTS rejected request: {e.code} - {detail}")
            raise OpenAITTSError(f"OpenAI TTS error: {e.code}", status=e.code) from e
        except urllib.error.URLError as e:
            logger.error(f"OpenAI TTS unreachable: {e.reason}")
            raise OpenAITTSError(f"OpenAI TTS unreachable: {e.reason}") from e

        logger.info(f"OpenAI narration complete: {len(audio_bytes)} bytes")
        return audio_bytes
