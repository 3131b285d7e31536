"""
ElevenLabs Tool - Speech synthesis, voice conversion and voice catalog.

Requires ELEVENLABS_API_KEY environment variable.
"""

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from apitoolbox.constants import (
    ELEVENLABS_API_KEY_ENV,
    ELEVENLABS_DEFAULT_OUTPUT_FORMAT,
    ELEVENLABS_DEFAULT_SIMILARITY_BOOST,
    ELEVENLABS_DEFAULT_STABILITY,
    ELEVENLABS_DEFAULT_STS_MODEL,
    ELEVENLABS_DEFAULT_STYLE,
    ELEVENLABS_DEFAULT_TTS_MODEL,
    ELEVENLABS_DEFAULT_VOICE_ID,
    TOOL_ELEVENLABS,
)
from apitoolbox.params import read_number_param, read_string_param
from apitoolbox.result import audio_envelope
from apitoolbox.tools.base import ActionHandler, IntegrationTool

from .client import ElevenLabsClient, is_audio_result

logger = logging.getLogger(__name__)

ElevenLabsAction = Literal[
    "textToSpeech",
    "listVoices",
    "getVoice",
    "speechToSpeech",
    "getModels",
    "getHistory",
]


class ElevenLabsToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, title="ElevenLabsToolParams")

    action: ElevenLabsAction = Field(description="ElevenLabs API action to perform")
    text: Optional[str] = Field(None, description="Text to convert to speech")
    voice_id: Optional[str] = Field(None, alias="voiceId", description="Voice ID to use (default: Rachel)")
    model_id: Optional[str] = Field(
        None, alias="modelId", description="Model ID (default: eleven_multilingual_v2)"
    )
    audio_url: Optional[str] = Field(
        None, alias="audioUrl", description="URL to audio file for speech-to-speech"
    )
    stability: Optional[float] = Field(None, description="Voice stability (0-1, default: 0.5)")
    similarity_boost: Optional[float] = Field(
        None, alias="similarityBoost", description="Similarity boost (0-1, default: 0.75)"
    )
    style: Optional[float] = Field(None, description="Style exaggeration (0-1, default: 0)")
    output_format: Optional[str] = Field(
        None, alias="outputFormat", description="Output format (mp3_44100_128, pcm_16000, etc.)"
    )


class ElevenLabsTool(IntegrationTool):
    """ElevenLabs voice AI tool."""

    name = TOOL_ELEVENLABS
    label = "ElevenLabs"
    description = (
        "ElevenLabs voice AI API. Actions: textToSpeech, listVoices, getVoice, speechToSpeech, "
        "getModels, getHistory. API key handled securely server-side."
    )
    credential_env = ELEVENLABS_API_KEY_ENV
    params_model = ElevenLabsToolParams

    def create_client(self, credential: str) -> ElevenLabsClient:
        return ElevenLabsClient(credential, transport=self.transport, timeout=self.timeout)

    def build_handlers(self) -> Dict[str, ActionHandler]:
        return {
            "textToSpeech": self._text_to_speech,
            "listVoices": self._list_voices,
            "getVoice": self._get_voice,
            "speechToSpeech": self._speech_to_speech,
            "getModels": self._get_models,
            "getHistory": self._get_history,
        }

    async def _text_to_speech(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        text = read_string_param(params, "text", required=True)
        voice_id = read_string_param(params, "voiceId") or ELEVENLABS_DEFAULT_VOICE_ID
        model_id = read_string_param(params, "modelId") or ELEVENLABS_DEFAULT_TTS_MODEL
        output_format = read_string_param(params, "outputFormat") or ELEVENLABS_DEFAULT_OUTPUT_FORMAT
        voice_settings = {
            "stability": read_number_param(params, "stability", default=ELEVENLABS_DEFAULT_STABILITY),
            "similarity_boost": read_number_param(
                params, "similarityBoost", default=ELEVENLABS_DEFAULT_SIMILARITY_BOOST
            ),
            "style": read_number_param(params, "style", default=ELEVENLABS_DEFAULT_STYLE),
            "use_speaker_boost": True,
        }

        result = await client.text_to_speech(voice_id, text, model_id, voice_settings, output_format)
        if is_audio_result(result):
            return audio_envelope(
                "textToSpeech",
                f"Audio generated successfully ({result['contentType']}). Base64 audio data:",
                result["audio"],
            )
        return result

    async def _speech_to_speech(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        audio_url = read_string_param(params, "audioUrl", required=True)
        voice_id = read_string_param(params, "voiceId") or ELEVENLABS_DEFAULT_VOICE_ID
        model_id = read_string_param(params, "modelId") or ELEVENLABS_DEFAULT_STS_MODEL
        voice_settings = {
            "stability": read_number_param(params, "stability", default=ELEVENLABS_DEFAULT_STABILITY),
            "similarity_boost": read_number_param(
                params, "similarityBoost", default=ELEVENLABS_DEFAULT_SIMILARITY_BOOST
            ),
        }

        audio, content_type = await client.fetch_audio(audio_url)
        result = await client.speech_to_speech(voice_id, audio, content_type, model_id, voice_settings)
        if is_audio_result(result):
            return audio_envelope(
                "speechToSpeech",
                "Speech-to-speech conversion successful. Base64 audio:",
                result["audio"],
            )
        return result

    async def _list_voices(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        return await client.list_voices()

    async def _get_voice(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        voice_id = read_string_param(params, "voiceId", required=True)
        return await client.get_voice(voice_id)

    async def _get_models(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        return await client.get_models()

    async def _get_history(self, client: ElevenLabsClient, params: Dict[str, Any]) -> Any:
        return await client.get_history()
