"""
apitoolbox Tool Registry - Central registry for available tools
"""

import logging
import threading
from typing import Dict, List, Optional

from .base import IntegrationTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Singleton registry for managing all available tools

    Usage:
        registry = ToolRegistry.get_instance()
        registry.register(LinearTool())
        schemas = registry.get_tools_schema(["linear", "github"])
    """

    _instance: Optional["ToolRegistry"] = None
    _lock: threading.Lock = threading.Lock()

    def __init__(self):
        self._tools: Dict[str, IntegrationTool] = {}

    @classmethod
    def get_instance(cls) -> "ToolRegistry":
        """Get singleton instance"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset registry (for testing)"""
        with cls._lock:
            cls._instance = None

    def register(self, tool: IntegrationTool) -> None:
        """
        Register a tool

        An existing tool with the same name is replaced.
        """
        if tool.name in self._tools:
            logger.warning(f"Tool '{tool.name}' already registered, overwriting")

        self._tools[tool.name] = tool
        logger.info(f"Registered tool: {tool.name} ({len(tool.actions)} actions)")

    def unregister(self, name: str) -> bool:
        """
        Unregister a tool by name

        Returns:
            True if tool was unregistered, False if not found
        """
        if name in self._tools:
            del self._tools[name]
            logger.info(f"Unregistered tool: {name}")
            return True
        return False

    def get_tool(self, name: str) -> Optional[IntegrationTool]:
        return self._tools.get(name)

    def get_tools(self, names: List[str]) -> List[IntegrationTool]:
        """Get multiple tools by name (skips unknown tools)"""
        tools = []
        for name in names:
            tool = self._tools.get(name)
            if tool:
                tools.append(tool)
            else:
                logger.warning(f"Unknown tool requested: {name}")
        return tools

    def get_tools_schema(self, names: Optional[List[str]] = None) -> List[Dict]:
        """
        Get OpenAI-format tool schemas

        Args:
            names: Tool names; all registered tools when None
        """
        if names is None:
            return [tool.to_openai_schema() for tool in self._tools.values()]
        return [tool.to_openai_schema() for tool in self.get_tools(names)]

    def get_all_tools(self) -> List[IntegrationTool]:
        return list(self._tools.values())

    def get_all_tool_names(self) -> List[str]:
        return list(self._tools.keys())

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"<ToolRegistry tools={len(self._tools)}>"
