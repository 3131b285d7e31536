"""
apitoolbox Tool Executor - Route structured tool calls to registered tools

The host agent framework hands over tool calls (ours, or OpenAI-style
objects); the executor looks the tool up, runs it and returns a ToolResult
built from the envelope.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from ..result import ToolEnvelope
from .models import ToolCall, ToolResult
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Executes tool calls against a ToolRegistry

    Usage:
        executor = ToolExecutor()
        result = await executor.execute(
            ToolCall(id="call_1", name="github", arguments={"action": "getUser"})
        )
    """

    def __init__(self, registry: Optional[ToolRegistry] = None):
        """
        Args:
            registry: ToolRegistry instance (defaults to singleton)
        """
        self.registry = registry if registry is not None else ToolRegistry.get_instance()

    async def execute(self, tool_call: Any) -> ToolResult:
        """Execute a single tool call"""
        parsed_call = self.parse_tool_call(tool_call)
        tool = self.registry.get_tool(parsed_call.name)

        if not tool:
            logger.warning(f"Unknown tool '{parsed_call.name}'")
            return ToolResult(
                tool_call_id=parsed_call.id,
                content=f"Error: Unknown tool '{parsed_call.name}'",
                is_error=True,
            )

        envelope = await tool.execute(parsed_call.id, parsed_call.arguments)
        logger.info(
            f"Tool '{parsed_call.name}' executed: {'error' if envelope.is_error() else 'success'}"
        )
        return self.envelope_to_result(parsed_call.id, envelope)

    async def execute_many(self, tool_calls: List[Any]) -> List[ToolResult]:
        """Execute independent tool calls concurrently, preserving order"""
        return list(await asyncio.gather(*(self.execute(call) for call in tool_calls)))

    async def execute_single_tool(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
        """Execute a tool directly by name"""
        return await self.execute(ToolCall(id="direct_call", name=tool_name, arguments=arguments))

    @staticmethod
    def envelope_to_result(tool_call_id: str, envelope: ToolEnvelope) -> ToolResult:
        return ToolResult(
            tool_call_id=tool_call_id,
            content=envelope.text,
            is_error=envelope.is_error(),
            data=dict(envelope.details),
        )

    @staticmethod
    def parse_tool_call(tool_call: Any) -> ToolCall:
        """Parse LLM tool call to ToolCall object"""
        if isinstance(tool_call, ToolCall):
            return tool_call

        if isinstance(tool_call, dict):
            function = tool_call.get("function")
            if isinstance(function, dict):
                return ToolCall(
                    id=tool_call.get("id", "unknown"),
                    name=function.get("name", ""),
                    arguments=_parse_arguments(function.get("arguments")),
                )
            return ToolCall(
                id=tool_call.get("id", "unknown"),
                name=tool_call.get("name", ""),
                arguments=_parse_arguments(tool_call.get("arguments")),
            )

        if hasattr(tool_call, "name") and hasattr(tool_call, "arguments"):
            return ToolCall(
                id=getattr(tool_call, "id", "unknown"),
                name=tool_call.name,
                arguments=_parse_arguments(tool_call.arguments),
            )

        # OpenAI SDK format
        function = getattr(tool_call, "function", None)
        return ToolCall(
            id=getattr(tool_call, "id", "unknown"),
            name=getattr(function, "name", ""),
            arguments=_parse_arguments(getattr(function, "arguments", None)),
        )

    @staticmethod
    def tool_result_to_message(result: ToolResult) -> Dict[str, Any]:
        """Convert ToolResult to chat message format"""
        return {
            "role": "tool",
            "tool_call_id": result.tool_call_id,
            "content": result.content,
        }


def _parse_arguments(arguments: Any) -> Dict[str, Any]:
    if isinstance(arguments, dict):
        return arguments
    if isinstance(arguments, str):
        try:
            parsed = json.loads(arguments)
        except json.JSONDecodeError:
            logger.warning("Tool call arguments are not valid JSON")
            return {}
        return parsed if isinstance(parsed, dict) else {}
    return {}
