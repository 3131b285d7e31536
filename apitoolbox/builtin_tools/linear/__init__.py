"""Linear integration."""

from .client import LinearClient
from .tool import LinearTool, LinearToolParams, build_issue_filter

__all__ = ["LinearClient", "LinearTool", "LinearToolParams", "build_issue_filter"]
