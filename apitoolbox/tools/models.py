"""
apitoolbox Tool Models - Data structures crossing the host boundary
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class ToolDescriptor:
    """
    Static description of a tool, built once at registration time

    Attributes:
        name: Tool identifier used in LLM tool calls (e.g., "linear")
        label: Display name (e.g., "Linear")
        description: What the tool does (shown to the LLM)
        parameters: JSON Schema for the tool arguments
    """
    name: str
    label: str
    description: str
    parameters: Dict[str, Any]

    def to_openai_schema(self) -> Dict[str, Any]:
        """Convert to OpenAI function calling format"""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


@dataclass
class ToolCall:
    """
    Represents a tool call from LLM response

    Attributes:
        id: Unique call ID from LLM
        name: Tool name
        arguments: Parsed arguments dict
    """
    id: str
    name: str
    arguments: Dict[str, Any]


@dataclass
class ToolResult:
    """
    Result of a tool execution

    Attributes:
        tool_call_id: ID of the tool call this result is for
        content: String result content
        is_error: Whether execution failed
        data: Envelope details for further processing
    """
    tool_call_id: str
    content: str
    is_error: bool = False
    data: Optional[Dict[str, Any]] = None
