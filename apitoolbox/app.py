"""
apitoolbox Application - Single entry point for hosting the tools.

Usage:
    from apitoolbox import ApiToolbox

    toolbox = ApiToolbox("config.yaml")
    envelope = await toolbox.call("github", {"action": "getRepo", "owner": "octo", "repo": "hello"})
    print(envelope.text)

    # Schemas for an LLM tool-calling request
    tools = toolbox.tools_schema()
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .builtin_tools import register_all_builtin_tools
from .config import get_enabled_tools, get_http_timeout, load_api_keys_to_env, load_config
from .credentials import CredentialProvider
from .result import ToolEnvelope, text_envelope
from .tools.executor import ToolExecutor
from .tools.models import ToolDescriptor, ToolResult
from .tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ApiToolbox:
    """
    Holds a registry of configured tools and runs invocations against it.

    Args:
        config: Path to YAML configuration file (optional)
        credentials: Credential provider shared by all tools (defaults to os.environ)
        transport: httpx transport shared by all tools (tests, proxies)
        registry: Registry to populate (a private one by default)

    Example:
        toolbox = ApiToolbox()
        envelope = await toolbox.call("linear", {"action": "listTeams"})
    """

    def __init__(
        self,
        config: Optional[str] = None,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self._config: Dict[str, Any] = load_config(config) if config else {}
        loaded = load_api_keys_to_env(self._config)
        if loaded:
            logger.info(f"Loaded credentials for {', '.join(loaded)} from config")

        self.registry = registry if registry is not None else ToolRegistry()
        self.tool_names = register_all_builtin_tools(
            self.registry,
            names=get_enabled_tools(self._config),
            credentials=credentials,
            transport=transport,
            timeout=get_http_timeout(self._config),
        )
        self.executor = ToolExecutor(self.registry)

    @property
    def config(self) -> Dict[str, Any]:
        """Return a copy of the raw configuration dict."""
        return dict(self._config)

    def list_tools(self) -> List[ToolDescriptor]:
        return [tool.descriptor() for tool in self.registry.get_all_tools()]

    def tools_schema(self) -> List[Dict[str, Any]]:
        return self.registry.get_tools_schema()

    async def call(
        self,
        tool_name: str,
        args: Dict[str, Any],
        call_id: str = "direct_call",
    ) -> ToolEnvelope:
        """Run one tool invocation and return its envelope."""
        tool = self.registry.get_tool(tool_name)
        if tool is None:
            logger.warning(f"Unknown tool '{tool_name}'")
            return text_envelope(f"Unknown tool: {tool_name}", error="unknown_tool")
        return await tool.execute(call_id, args)

    async def handle_tool_call(self, tool_call: Any) -> ToolResult:
        """Run an LLM tool call (ToolCall or OpenAI-style object)."""
        return await self.executor.execute(tool_call)

    async def handle_tool_calls(self, tool_calls: List[Any]) -> List[ToolResult]:
        return await self.executor.execute_many(tool_calls)

