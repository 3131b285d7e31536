"""
OpenAI API Client - REST wrapper used by the openai tool.

Requires OPENAI_API_KEY environment variable.
"""

import logging
from typing import Any, Dict, List, Optional

from apitoolbox.constants import OPENAI_TRANSCRIPTION_MODEL, UPLOAD_AUDIO_FILENAME
from apitoolbox.tools.http import BaseAPIClient

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openai.com/v1"


class OpenAIClient(BaseAPIClient):
    """Async OpenAI REST API client."""

    provider = "OpenAI"
    base_url = BASE_URL

    @property
    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """POST a JSON body and return the parsed response."""
        headers = self._headers
        headers["Content-Type"] = "application/json"

        async with self._client() as client:
            resp = await client.post(f"{self.base_url}{endpoint}", headers=headers, json=body)
        self._raise_for_status(resp)
        return resp.json()

    async def chat(self, prompt: str, model: str, system_prompt: Optional[str] = None) -> Any:
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return await self.post("/chat/completions", {"model": model, "messages": messages})

    async def embedding(self, text: str, model: str) -> Any:
        return await self.post("/embeddings", {"model": model, "input": text})

    async def moderation(self, text: str) -> Any:
        return await self.post("/moderations", {"input": text})

    async def transcribe(self, audio: bytes, content_type: str) -> Any:
        """Upload audio to the transcription endpoint as multipart form data."""
        async with self._client() as client:
            resp = await client.post(
                f"{self.base_url}/audio/transcriptions",
                headers=self._headers,
                data={"model": OPENAI_TRANSCRIPTION_MODEL},
                files={"file": (UPLOAD_AUDIO_FILENAME, audio, content_type)},
            )
        self._raise_for_status(resp, prefix="Whisper")
        return resp.json()
