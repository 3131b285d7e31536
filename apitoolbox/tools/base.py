"""
apitoolbox Tool Base - Shared contract for every integration tool

An IntegrationTool declares its name, label, description and a pydantic
parameter model, plus one handler per action. ``execute`` runs the fixed
pipeline:

    credential lookup -> parameter validation -> dispatch -> transport -> envelope

and never raises. Every failure is turned into a ToolEnvelope by
``run_action``, so handlers can simply raise.

Example:
    class WeatherParams(BaseModel):
        action: Literal["current"]
        city: Optional[str] = None

    class WeatherTool(IntegrationTool):
        name = "weather"
        label = "Weather"
        description = "Weather API. Actions: current."
        credential_env = "WEATHER_API_KEY"
        params_model = WeatherParams

        def create_client(self, credential):
            return WeatherClient(credential, transport=self.transport, timeout=self.timeout)

        def build_handlers(self):
            return {"current": self._current}

        async def _current(self, client, params):
            city = read_string_param(params, "city", required=True)
            return await client.current(city)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from ..constants import ERROR_MISSING_API_KEY
from ..credentials import CredentialProvider, EnvCredentialProvider
from ..errors import MissingCredentialError, ToolError, ToolInputError
from ..result import (
    ToolEnvelope,
    error_envelope,
    missing_credential_envelope,
    success_envelope,
    unknown_action_envelope,
)
from .http import Timeout
from .models import ToolDescriptor

logger = logging.getLogger(__name__)

ActionHandler = Callable[[Any, Dict[str, Any]], Awaitable[Any]]


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``"field: message; field: message"``."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(exc)


class IntegrationTool(ABC):
    """
    Base class for provider tools.

    Subclasses set the class attributes and implement ``create_client`` and
    ``build_handlers``. Handlers receive the transport helper and the
    validated arguments (a dict keyed by wire names) and return either a
    JSON-serializable result or a ready-made ToolEnvelope.
    """

    name: str = ""
    label: str = ""
    description: str = ""
    credential_env: str = ""
    credential_noun: str = "API key"
    missing_credential_code: str = ERROR_MISSING_API_KEY
    params_model: Type[BaseModel]

    def __init__(
        self,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[Timeout] = None,
    ):
        """
        Args:
            credentials: Where to resolve the provider secret (defaults to os.environ)
            transport: Optional httpx transport passed to every client
            timeout: Optional request timeout; httpx's default when None
        """
        self.credentials = credentials or EnvCredentialProvider()
        self.transport = transport
        self.timeout = timeout
        self._handlers: Dict[str, ActionHandler] = self.build_handlers()

    # ===== Subclass hooks =====

    @abstractmethod
    def build_handlers(self) -> Dict[str, ActionHandler]:
        """Return the closed action -> handler table."""

    @abstractmethod
    def create_client(self, credential: str) -> Any:
        """Build the transport helper for one invocation."""

    # ===== Descriptor =====

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.params_model.model_json_schema(by_alias=True)

    @property
    def actions(self) -> List[str]:
        return list(self._handlers)

    @property
    def missing_credential_message(self) -> str:
        return f"{self.label} {self.credential_noun} not configured. Set {self.credential_env}."

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            label=self.label,
            description=self.description,
            parameters=self.parameters,
        )

    def to_openai_schema(self) -> Dict[str, Any]:
        return self.descriptor().to_openai_schema()

    # ===== Execution =====

    def validate(self, args: Any) -> Dict[str, Any]:
        """Validate raw arguments against the parameter model."""
        try:
            model = self.params_model.model_validate(args)
        except ValidationError as e:
            raise ToolInputError(format_validation_error(e)) from e
        return model.model_dump(by_alias=True, exclude_none=True)

    async def execute(self, call_id: str, args: Optional[Dict[str, Any]] = None) -> ToolEnvelope:
        """
        Run one invocation.

        Args:
            call_id: Host-assigned call ID (only used for logging)
            args: Raw invocation arguments

        Returns:
            Exactly one ToolEnvelope; never raises
        """
        args = {} if args is None else args
        action = args.get("action") if isinstance(args, dict) else None

        try:
            credential = self.credentials.require(self.credential_env)
        except MissingCredentialError:
            logger.warning(f"{self.label} call {call_id}: {self.credential_env} not configured")
            return missing_credential_envelope(
                self.missing_credential_message, self.missing_credential_code
            )
        except Exception as e:
            logger.error(f"{self.label} credential lookup failed: {e}", exc_info=True)
            return error_envelope(self.label, action, str(e))

        return await self.run_action(action, args, credential)

    async def run_action(self, action: Any, args: Any, credential: str) -> ToolEnvelope:
        """Validate, dispatch and wrap the outcome of a single action."""
        try:
            params = self.validate(args)
            handler = self._handlers.get(action)
            if handler is None:
                logger.warning(f"{self.label}: unknown action {action!r}")
                return unknown_action_envelope(action)

            logger.info(f"{self.label}: running {action}")
            client = self.create_client(credential)
            result = await handler(client, params)

            if isinstance(result, ToolEnvelope):
                return result
            return success_envelope(action, result)

        except (ToolError, httpx.HTTPError) as e:
            message = str(e) or e.__class__.__name__
            logger.warning(f"{self.label} {action} failed: {message}")
            return error_envelope(self.label, action, message)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"{self.label} {action} failed: {message}", exc_info=True)
            return error_envelope(self.label, action, message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} actions={len(self._handlers)}>"
