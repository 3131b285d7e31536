"""
apitoolbox Errors - Exceptions raised inside tools before they are
converted to result envelopes.

Nothing here escapes ``IntegrationTool.execute``; these types only exist so
the boundary can tell expected failures from unexpected ones.
"""

from typing import Optional

import httpx


class ToolError(Exception):
    """Base class for all tool failures."""


class ToolInputError(ToolError):
    """A parameter is missing, blank or malformed."""


class MissingCredentialError(ToolError):
    """The provider credential is not configured."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} is not set")


class ProviderAPIError(ToolError):
    """
    The upstream API rejected the request.

    Attributes:
        status_code: HTTP status, if the failure came from a response
        body: Raw upstream response text
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, prefix: str, response: httpx.Response) -> "ProviderAPIError":
        """Build ``"<prefix> API error (<status>): <body>"`` from a failed response."""
        body = response.text
        return cls(
            f"{prefix} API error ({response.status_code}): {body}",
            status_code=response.status_code,
            body=body,
        )
