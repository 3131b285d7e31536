"""
apitoolbox Tools - Tool contract, registry and executor

Provides:
- IntegrationTool: base class for provider tools (validate, dispatch, envelope)
- BaseAPIClient: base class for per-provider transport helpers
- ToolRegistry: register and look up tools
- ToolExecutor: route structured tool calls to tools
"""

from .models import ToolCall, ToolDescriptor, ToolResult
from .http import BaseAPIClient
from .base import IntegrationTool, format_validation_error
from .registry import ToolRegistry
from .executor import ToolExecutor

__all__ = [
    # Models
    "ToolCall",
    "ToolDescriptor",
    "ToolResult",
    # Base classes
    "BaseAPIClient",
    "IntegrationTool",
    "format_validation_error",
    # Registry
    "ToolRegistry",
    # Executor
    "ToolExecutor",
]
