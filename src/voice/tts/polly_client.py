"""
Amazon Polly Client
-------------------
Text-to-speech for Hindi and English using AWS Polly.
"""

import boto3
import logging
from botocore.exceptions import BotoCoreError, ClientError
from typing import Optional
from ..config import config

# Setup logger (compatible with both local and Lambda)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class PollyTTS:
    """
    Amazon Polly wrapper for dashboard narration.

    Voices used:
    - Hindi (hi-IN): Aditi (female)
    - English (en-US): Joanna (female)
    """

    def __init__(self):
        self.session = boto3.session.Session(region_name=config.aws_region)
        self.client = self.session.client('polly')
        self.voice_ids = config.polly_voice_ids

    def is_available(self) -> bool:
        """Polly is usable when AWS credentials can be resolved."""
        try:
            return self.session.get_credentials() is not None
        except BotoCoreError as e:
            logger.warning(f"AWS credentials could not be resolved: {e}")
            return False

    def synthesize(
        self,
        text: str,
        speech_tag: str,
        voice_id: Optional[str] = None,
        output_format: str = "mp3"
    ) -> bytes:
        """
        Convert text to speech using Amazon Polly.

        Args:
            text: Text to convert to speech
            speech_tag: Language tag of the text (hi-IN or en-US)
            voice_id: Optional specific voice ID (default from config)
            output_format: Audio format (mp3, ogg_vorbis, pcm)

        Returns:
            Audio content as bytes
        """
        if speech_tag not in self.voice_ids:
            raise ValueError(f"Speech tag {speech_tag} not supported by Polly")

        voice = voice_id or self.voice_ids[speech_tag]

        logger.info(f"Synthesizing speech: voice={voice}, language={speech_tag}")

        try:
            response = self.client.synthesize_speech(
                Text=text,
                TextType="text",
                OutputFormat=output_format,
                VoiceId=voice,
                LanguageCode=speech_tag,
                Engine=config.polly_engine
            )

            audio_bytes = response['AudioStream'].read()

            logger.info(f"Polly synthesis complete: {len(audio_bytes)} bytes")

            return audio_bytes

        except ClientError as e:
            logger.error(f"Polly synthesis error: {e.response['Error']['Code']} - {e}")
            raise
        except BotoCoreError as e:
            logger.error(f"Polly synthesis error: {e}")
            raise
