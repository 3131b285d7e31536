"""
apitoolbox Credentials - Call-time credential lookup for tools.

Tools never read a secret at construction time. Each invocation asks its
CredentialProvider for the provider's variable, so rotating a key in the
environment takes effect on the next call.

Usage:
    provider = EnvCredentialProvider()
    token = provider.require("GITHUB_TOKEN")   # raises MissingCredentialError

    # Tests / embedding without touching os.environ
    provider = StaticCredentialProvider({"LINEAR_API_KEY": "lin_api_..."})
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from .errors import MissingCredentialError

logger = logging.getLogger(__name__)


class CredentialProvider(ABC):
    """Resolves a named secret at call time."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the secret, or None if it is not configured."""

    def require(self, name: str) -> str:
        """Return the secret or raise MissingCredentialError."""
        value = self.get(name)
        if not value:
            logger.debug(f"Credential {name} not configured")
            raise MissingCredentialError(name)
        return value


class EnvCredentialProvider(CredentialProvider):
    """
    Reads secrets from the process environment.

    An explicit mapping can be passed instead of os.environ; it is still
    consulted on every lookup.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    def get(self, name: str) -> Optional[str]:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(name) or None


class StaticCredentialProvider(CredentialProvider):
    """Fixed in-memory secrets."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values = dict(values or {})

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name) or None
