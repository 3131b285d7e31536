"""
Base class for the per-provider transport helpers.

Each request opens its own httpx.AsyncClient. An httpx transport can be
injected for tests or for hosts that want to share one; the timeout stays at
httpx's default unless one is configured.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

import httpx

from ..errors import ProviderAPIError

logger = logging.getLogger(__name__)

Timeout = Union[float, httpx.Timeout]


class BaseAPIClient:
    """Shared plumbing for provider REST/GraphQL clients."""

    #: Prefix used in "<provider> API error (<status>): <body>" messages
    provider: str = ""
    base_url: str = ""

    def __init__(
        self,
        api_key: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[Timeout] = None,
    ):
        self.api_key = api_key
        self._transport = transport
        self._timeout = timeout

    @property
    def _headers(self) -> Dict[str, str]:
        return {}

    def _client(self, **kwargs: Any) -> httpx.AsyncClient:
        options: Dict[str, Any] = {}
        if self._transport is not None:
            options["transport"] = self._transport
        if self._timeout is not None:
            options["timeout"] = self._timeout
        options.update(kwargs)
        return httpx.AsyncClient(**options)

    def _raise_for_status(self, response: httpx.Response, prefix: Optional[str] = None) -> None:
        if not response.is_success:
            logger.warning(f"{prefix or self.provider} API returned {response.status_code}")
            raise ProviderAPIError.from_response(prefix or self.provider, response)

    async def fetch_audio(self, url: str) -> Tuple[bytes, str]:
        """
        Download a remote audio file (no provider credentials are sent).

        Returns:
            (payload, content type)

        Raises:
            ProviderAPIError: "Failed to fetch audio: <status>"
        """
        async with self._client(follow_redirects=True) as client:
            response = await client.get(url)

        if not response.is_success:
            raise ProviderAPIError(
                f"Failed to fetch audio: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        content_type = response.headers.get("content-type") or "audio/mpeg"
        logger.debug(f"Fetched {len(response.content)} bytes of audio ({content_type})")
        return response.content, content_type
