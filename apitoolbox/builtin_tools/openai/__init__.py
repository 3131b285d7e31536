"""OpenAI integration."""

from .client import OpenAIClient
from .tool import OpenAITool, OpenAIToolParams

__all__ = ["OpenAIClient", "OpenAITool", "OpenAIToolParams"]
