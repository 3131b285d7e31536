"""GitHub integration."""

from .client import GitHubClient
from .tool import GitHubTool, GitHubToolParams

__all__ = ["GitHubClient", "GitHubTool", "GitHubToolParams"]
