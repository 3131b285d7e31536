"""ElevenLabs integration."""

from .client import ElevenLabsClient, is_audio_result
from .tool import ElevenLabsTool, ElevenLabsToolParams

__all__ = ["ElevenLabsClient", "ElevenLabsTool", "ElevenLabsToolParams", "is_audio_result"]
