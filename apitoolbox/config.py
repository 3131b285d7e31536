"""
apitoolbox Config - YAML configuration with ${VAR} substitution.

Example config.yaml:

    tools: [linear, github]        # optional; all built-in tools when omitted
    http:
      timeout: 30                  # optional; httpx default when omitted
    credentials:
      linear:
        api_key: ${MY_LINEAR_KEY}
      github:
        token: ghp_xxx

Static credentials are copied into the provider environment variables, so the
tools keep resolving them at call time like any other env var.
"""

import logging
import os
import re
from typing import Any, Dict, List, MutableMapping, Optional

import yaml

from .constants import (
    BUILTIN_TOOL_NAMES,
    ELEVENLABS_API_KEY_ENV,
    GITHUB_TOKEN_ENV,
    LINEAR_API_KEY_ENV,
    OPENAI_API_KEY_ENV,
    TOOL_ELEVENLABS,
    TOOL_GITHUB,
    TOOL_LINEAR,
    TOOL_OPENAI,
)

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")

# service -> {config key -> env var}
API_KEY_ENV_MAP: Dict[str, Dict[str, str]] = {
    TOOL_LINEAR: {"api_key": LINEAR_API_KEY_ENV},
    TOOL_GITHUB: {"token": GITHUB_TOKEN_ENV},
    TOOL_ELEVENLABS: {"api_key": ELEVENLABS_API_KEY_ENV},
    TOOL_OPENAI: {"api_key": OPENAI_API_KEY_ENV},
}


def substitute_env(raw: str, source: str = "<string>") -> str:
    """Replace ${VAR} with environment variable values."""

    def _replace_env(match):
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(
                f"Environment variable '{var_name}' not set "
                f"(referenced in config file '{source}')"
            )
        return value

    return _ENV_PATTERN.sub(_replace_env, raw)


def load_config(path: str) -> Dict[str, Any]:
    """Read YAML config file with ${VAR} environment variable substitution."""
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()

    config = yaml.safe_load(substitute_env(raw, path)) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file '{path}' must contain a mapping")
    return config


def load_api_keys_to_env(
    config: Dict[str, Any],
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Copy the ``credentials`` section into provider env vars.

    Returns:
        Names of the environment variables that were set
    """
    environ = os.environ if environ is None else environ
    file_creds = config.get("credentials") or {}
    loaded: List[str] = []

    for service, mapping in API_KEY_ENV_MAP.items():
        svc_creds = file_creds.get(service) or {}
        if not svc_creds:
            continue
        for key, env_var in mapping.items():
            val = svc_creds.get(key, "")
            if val:
                environ[env_var] = str(val)
                loaded.append(env_var)
        logger.debug(f"Loaded {service} credentials from config")

    unknown = set(file_creds) - set(API_KEY_ENV_MAP)
    if unknown:
        logger.warning(f"Ignoring credentials for unknown services: {', '.join(sorted(unknown))}")
    return loaded


def get_http_timeout(config: Dict[str, Any]) -> Optional[float]:
    """``http.timeout`` in seconds, or None to keep httpx's default."""
    timeout = (config.get("http") or {}).get("timeout")
    if timeout is None:
        return None
    try:
        value = float(timeout)
    except (TypeError, ValueError):
        raise ValueError(f"http.timeout must be a number, got {timeout!r}")
    if value <= 0:
        raise ValueError("http.timeout must be positive")
    return value


def get_enabled_tools(config: Dict[str, Any]) -> List[str]:
    """Tool names from ``tools``, defaulting to every built-in tool."""
    tools = config.get("tools")
    if tools is None:
        return list(BUILTIN_TOOL_NAMES)
    if not isinstance(tools, list) or not all(isinstance(name, str) for name in tools):
        raise ValueError("tools must be a list of tool names")
    return tools
