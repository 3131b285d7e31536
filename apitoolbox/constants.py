"""
Shared constants for apitoolbox.

Centralizes tool names, credential environment variables and provider
defaults so that tools, config loading and the CLI agree on them.
"""

from typing import Dict, Tuple

# ── Tool names ──

TOOL_LINEAR = "linear"
TOOL_GITHUB = "github"
TOOL_ELEVENLABS = "elevenlabs"
TOOL_OPENAI = "openai"
BUILTIN_TOOL_NAMES: Tuple[str, ...] = (TOOL_LINEAR, TOOL_GITHUB, TOOL_ELEVENLABS, TOOL_OPENAI)

# ── Credential environment variables ──
# Read at call time, never cached by the tools.

LINEAR_API_KEY_ENV = "LINEAR_API_KEY"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
ELEVENLABS_API_KEY_ENV = "ELEVENLABS_API_KEY"
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"

CREDENTIAL_ENV_VARS: Dict[str, str] = {
    TOOL_LINEAR: LINEAR_API_KEY_ENV,
    TOOL_GITHUB: GITHUB_TOKEN_ENV,
    TOOL_ELEVENLABS: ELEVENLABS_API_KEY_ENV,
    TOOL_OPENAI: OPENAI_API_KEY_ENV,
}

# ── Envelope error codes ──

ERROR_MISSING_API_KEY = "missing_api_key"
ERROR_MISSING_TOKEN = "missing_token"
ERROR_UNKNOWN_ACTION = "unknown_action"

# ── Envelope shaping ──

AUDIO_PREVIEW_CHARS = 100

# ── ElevenLabs defaults ──

ELEVENLABS_DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"  # Rachel
ELEVENLABS_DEFAULT_TTS_MODEL = "eleven_multilingual_v2"
ELEVENLABS_DEFAULT_STS_MODEL = "eleven_english_sts_v2"
ELEVENLABS_DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"
ELEVENLABS_DEFAULT_STABILITY = 0.5
ELEVENLABS_DEFAULT_SIMILARITY_BOOST = 0.75
ELEVENLABS_DEFAULT_STYLE = 0

# ── OpenAI defaults ──

OPENAI_DEFAULT_CHAT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
OPENAI_TRANSCRIPTION_MODEL = "whisper-1"

# ── GitHub defaults ──

GITHUB_DEFAULT_STATE = "open"
GITHUB_PER_PAGE = 30

# ── Linear page sizes ──

LINEAR_ISSUES_PAGE_SIZE = 50
LINEAR_PROJECTS_PAGE_SIZE = 50
LINEAR_SEARCH_PAGE_SIZE = 30

# Filename used for re-uploaded audio in multipart bodies
UPLOAD_AUDIO_FILENAME = "audio.mp3"
