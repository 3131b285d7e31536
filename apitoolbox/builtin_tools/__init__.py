"""
apitoolbox Built-in Tools - One tool per third-party API

Provides:
- linear: issues, projects and teams (GraphQL)
- github: repositories, issues, PRs, search, users, gists (REST)
- elevenlabs: text-to-speech, speech-to-speech, voices, models, history
- openai: chat, embedding, moderation, transcription

Each tool reads its credential from the environment at call time.

Usage:
    from apitoolbox.builtin_tools import register_all_builtin_tools

    register_all_builtin_tools()
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type

from ..constants import BUILTIN_TOOL_NAMES
from ..tools.base import IntegrationTool
from ..tools.registry import ToolRegistry
from .elevenlabs import ElevenLabsTool
from .github import GitHubTool
from .linear import LinearTool
from .openai import OpenAITool

logger = logging.getLogger(__name__)

BUILTIN_TOOL_CLASSES: Dict[str, Type[IntegrationTool]] = {
    LinearTool.name: LinearTool,
    GitHubTool.name: GitHubTool,
    ElevenLabsTool.name: ElevenLabsTool,
    OpenAITool.name: OpenAITool,
}


def create_builtin_tools(names: Optional[Sequence[str]] = None, **kwargs: Any) -> List[IntegrationTool]:
    """
    Instantiate built-in tools.

    Args:
        names: Tool names to build (all when None)
        **kwargs: Passed to every tool constructor (credentials, transport, timeout)

    Raises:
        ValueError: If a name is not a built-in tool
    """
    selected = list(names) if names is not None else list(BUILTIN_TOOL_NAMES)
    unknown = [name for name in selected if name not in BUILTIN_TOOL_CLASSES]
    if unknown:
        raise ValueError(
            f"Unknown built-in tool(s): {', '.join(unknown)}. "
            f"Available: {', '.join(BUILTIN_TOOL_NAMES)}"
        )
    return [BUILTIN_TOOL_CLASSES[name](**kwargs) for name in selected]


def register_all_builtin_tools(
    registry: Optional[ToolRegistry] = None,
    names: Optional[Sequence[str]] = None,
    **kwargs: Any,
) -> List[str]:
    """Register built-in tools and return their names."""
    registry = registry if registry is not None else ToolRegistry.get_instance()
    tools = create_builtin_tools(names, **kwargs)
    for tool in tools:
        registry.register(tool)
    return [tool.name for tool in tools]


__all__ = [
    "BUILTIN_TOOL_CLASSES",
    "ElevenLabsTool",
    "GitHubTool",
    "LinearTool",
    "OpenAITool",
    "create_builtin_tools",
    "register_all_builtin_tools",
]
