"""
apitoolbox - Agent tools for third-party HTTP APIs

Each tool wraps one provider (Linear, GitHub, ElevenLabs, OpenAI) behind the
same calling convention: validate the arguments, dispatch on ``action``, make
one request (or a fetch-then-upload pair), and return a uniform envelope

    {"content": [{"type": "text", "text": ...}], "details": {"action": ..., "success": True}}

Errors never escape ``execute``; they come back as envelopes with
``details["error"]``.

Quick Start:
    from apitoolbox import GitHubTool

    tool = GitHubTool()                      # reads GITHUB_TOKEN at call time
    envelope = await tool.execute("call_1", {"action": "getUser", "username": "octocat"})
    print(envelope.text)

Hosting all tools:
    from apitoolbox import ApiToolbox

    toolbox = ApiToolbox("config.yaml")
    schemas = toolbox.tools_schema()         # OpenAI function-calling format
    result = await toolbox.handle_tool_call(tool_call_from_llm)
"""

__version__ = "0.1.0"

# Envelope
from .result import (
    ContentBlock,
    ToolEnvelope,
    audio_envelope,
    error_envelope,
    missing_credential_envelope,
    success_envelope,
    text_envelope,
    unknown_action_envelope,
)

# Errors
from .errors import MissingCredentialError, ProviderAPIError, ToolError, ToolInputError

# Credentials
from .credentials import CredentialProvider, EnvCredentialProvider, StaticCredentialProvider

# Tool contract
from .tools import (
    BaseAPIClient,
    IntegrationTool,
    ToolCall,
    ToolDescriptor,
    ToolExecutor,
    ToolRegistry,
    ToolResult,
)

# Built-in tools
from .builtin_tools import (
    ElevenLabsTool,
    GitHubTool,
    LinearTool,
    OpenAITool,
    create_builtin_tools,
    register_all_builtin_tools,
)

# Application
from .app import ApiToolbox

__all__ = [
    "__version__",
    # Envelope
    "ContentBlock",
    "ToolEnvelope",
    "audio_envelope",
    "error_envelope",
    "missing_credential_envelope",
    "success_envelope",
    "text_envelope",
    "unknown_action_envelope",
    # Errors
    "MissingCredentialError",
    "ProviderAPIError",
    "ToolError",
    "ToolInputError",
    # Credentials
    "CredentialProvider",
    "EnvCredentialProvider",
    "StaticCredentialProvider",
    # Tool contract
    "BaseAPIClient",
    "IntegrationTool",
    "ToolCall",
    "ToolDescriptor",
    "ToolExecutor",
    "ToolRegistry",
    "ToolResult",
    # Built-in tools
    "ElevenLabsTool",
    "GitHubTool",
    "LinearTool",
    "OpenAITool",
    "create_builtin_tools",
    "register_all_builtin_tools",
    # Application
    "ApiToolbox",
]
