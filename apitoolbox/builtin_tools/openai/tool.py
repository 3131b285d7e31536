"""
OpenAI Tool - Chat completions, embeddings, moderation and transcription.

Requires OPENAI_API_KEY environment variable.
"""

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from apitoolbox.constants import (
    OPENAI_API_KEY_ENV,
    OPENAI_DEFAULT_CHAT_MODEL,
    OPENAI_DEFAULT_EMBEDDING_MODEL,
    TOOL_OPENAI,
)
from apitoolbox.params import read_string_param
from apitoolbox.tools.base import ActionHandler, IntegrationTool

from .client import OpenAIClient

logger = logging.getLogger(__name__)

OpenAIAction = Literal["chat", "embedding", "moderation", "transcribe"]


class OpenAIToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, title="OpenAIToolParams")

    action: OpenAIAction = Field(description="API action to perform")
    prompt: Optional[str] = Field(None, description="Prompt for chat completion")
    text: Optional[str] = Field(None, description="Text for embedding or moderation")
    model: Optional[str] = Field(None, description="Model to use (default: gpt-4o-mini)")
    audio_url: Optional[str] = Field(None, alias="audioUrl", description="URL to audio file for transcription")
    system_prompt: Optional[str] = Field(None, alias="systemPrompt", description="System prompt for chat")


class OpenAITool(IntegrationTool):
    """Direct OpenAI API tool."""

    name = TOOL_OPENAI
    label = "OpenAI"
    description = (
        "Direct OpenAI API access. Actions: chat (completions), embedding, moderation, transcribe. "
        "API key is handled securely server-side."
    )
    credential_env = OPENAI_API_KEY_ENV
    params_model = OpenAIToolParams

    def create_client(self, credential: str) -> OpenAIClient:
        return OpenAIClient(credential, transport=self.transport, timeout=self.timeout)

    def build_handlers(self) -> Dict[str, ActionHandler]:
        return {
            "chat": self._chat,
            "embedding": self._embedding,
            "moderation": self._moderation,
            "transcribe": self._transcribe,
        }

    async def _chat(self, client: OpenAIClient, params: Dict[str, Any]) -> Any:
        prompt = read_string_param(params, "prompt", required=True)
        model = read_string_param(params, "model") or OPENAI_DEFAULT_CHAT_MODEL
        system_prompt = read_string_param(params, "systemPrompt")
        return await client.chat(prompt, model, system_prompt)

    async def _embedding(self, client: OpenAIClient, params: Dict[str, Any]) -> Any:
        text = read_string_param(params, "text", required=True)
        model = read_string_param(params, "model") or OPENAI_DEFAULT_EMBEDDING_MODEL
        return await client.embedding(text, model)

    async def _moderation(self, client: OpenAIClient, params: Dict[str, Any]) -> Any:
        text = read_string_param(params, "text", required=True)
        return await client.moderation(text)

    async def _transcribe(self, client: OpenAIClient, params: Dict[str, Any]) -> Any:
        audio_url = read_string_param(params, "audioUrl", required=True)
        audio, content_type = await client.fetch_audio(audio_url)
        return await client.transcribe(audio, content_type)
