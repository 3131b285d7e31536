"""
ElevenLabs API Client - REST wrapper used by the elevenlabs tool.

Responses are either JSON or raw audio; audio is returned base64-encoded
together with its content type.

Requires ELEVENLABS_API_KEY environment variable.
"""

import base64
import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from apitoolbox.constants import UPLOAD_AUDIO_FILENAME
from apitoolbox.tools.http import BaseAPIClient

logger = logging.getLogger(__name__)

BASE_URL = "https://api.elevenlabs.io/v1"


def is_audio_result(result: Any) -> bool:
    """True for the ``{audio, contentType}`` shape produced for audio bodies."""
    return isinstance(result, dict) and "audio" in result


class ElevenLabsClient(BaseAPIClient):
    """Async ElevenLabs REST API client."""

    provider = "ElevenLabs"
    base_url = BASE_URL

    @property
    def _headers(self) -> Dict[str, str]:
        return {"xi-api-key": self.api_key}

    @staticmethod
    def parse_response(resp: httpx.Response) -> Any:
        """JSON body, or ``{"audio": <base64>, "contentType": ...}`` for audio."""
        content_type = resp.headers.get("content-type", "")
        if "audio" in content_type:
            encoded = base64.b64encode(resp.content).decode("ascii")
            logger.debug(f"Received {len(resp.content)} bytes of {content_type}")
            return {"audio": encoded, "contentType": content_type}
        return resp.json()

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request.

        Args:
            endpoint: Path under the API base
            method: GET or POST
            body: JSON body
            params: Query string parameters
            data: Multipart form fields (used together with files)
            files: Multipart file parts
        """
        headers = self._headers
        kwargs: Dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if files is not None:
            kwargs["files"] = files
            kwargs["data"] = data or {}
        elif body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        async with self._client() as client:
            resp = await client.request(method, f"{self.base_url}{endpoint}", headers=headers, **kwargs)
        self._raise_for_status(resp)
        return self.parse_response(resp)

    # ── Synthesis ──

    async def text_to_speech(
        self,
        voice_id: str,
        text: str,
        model_id: str,
        voice_settings: Dict[str, Any],
        output_format: str,
    ) -> Any:
        return await self.request(
            f"/text-to-speech/{quote(voice_id, safe='')}",
            method="POST",
            params={"output_format": output_format},
            body={
                "text": text,
                "model_id": model_id,
                "voice_settings": voice_settings,
            },
        )

    async def speech_to_speech(
        self,
        voice_id: str,
        audio: bytes,
        audio_content_type: str,
        model_id: str,
        voice_settings: Dict[str, Any],
    ) -> Any:
        """Upload source audio as multipart form data and convert it to *voice_id*."""
        return await self.request(
            f"/speech-to-speech/{quote(voice_id, safe='')}",
            method="POST",
            data={
                "model_id": model_id,
                "voice_settings": json.dumps(voice_settings),
            },
            files={"audio": (UPLOAD_AUDIO_FILENAME, audio, audio_content_type)},
        )

    # ── Catalog ──

    async def list_voices(self) -> Any:
        return await self.request("/voices")

    async def get_voice(self, voice_id: str) -> Any:
        return await self.request(f"/voices/{quote(voice_id, safe='')}")

    async def get_models(self) -> Any:
        return await self.request("/models")

    async def get_history(self) -> Any:
        return await self.request("/history")
