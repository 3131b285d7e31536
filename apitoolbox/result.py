"""
apitoolbox Result - Uniform result envelope returned by every tool call

Every invocation ends in exactly one ToolEnvelope: success, upstream error,
missing credential or unknown action. The builders below are the only place
these shapes are constructed.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import AUDIO_PREVIEW_CHARS, ERROR_UNKNOWN_ACTION


@dataclass
class ContentBlock:
    """One block of envelope content. Only ``text`` blocks are produced."""
    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass
class ToolEnvelope:
    """
    Result of a tool invocation

    Attributes:
        content: Ordered human-readable blocks
        details: Structured outcome; carries ``success`` or ``error``

    Example:
        envelope = ToolEnvelope(
            content=[ContentBlock(text='{"id": "I1"}')],
            details={"action": "getIssue", "success": True},
        )
    """
    content: List[ContentBlock] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block.text for block in self.content if block.type == "text")

    @property
    def action(self) -> Optional[str]:
        return self.details.get("action")

    @property
    def error(self) -> Optional[str]:
        return self.details.get("error")

    def is_success(self) -> bool:
        return self.details.get("success") is True

    def is_error(self) -> bool:
        return "error" in self.details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the plain ``{content, details}`` mapping"""
        return {
            "content": [block.to_dict() for block in self.content],
            "details": dict(self.details),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToolEnvelope":
        blocks = [
            ContentBlock(text=item.get("text", ""), type=item.get("type", "text"))
            for item in data.get("content", [])
        ]
        return cls(content=blocks, details=dict(data.get("details", {})))


def text_envelope(text: str, **details: Any) -> ToolEnvelope:
    """Single text block with the given details."""
    return ToolEnvelope(content=[ContentBlock(text=text)], details=details)


def success_envelope(action: str, result: Any) -> ToolEnvelope:
    """Pretty-printed JSON of *result* with ``{action, success: true}``."""
    text = json.dumps(result, indent=2, ensure_ascii=False)
    return text_envelope(text, action=action, success=True)


def audio_envelope(action: str, summary: str, audio: str) -> ToolEnvelope:
    """
    Confirmation text plus a truncated base64 preview.

    The full payload is never echoed back as text.
    """
    preview = audio[:AUDIO_PREVIEW_CHARS]
    text = f"{summary} {preview}... (truncated)"
    return text_envelope(text, action=action, success=True, hasAudio=True)


def missing_credential_envelope(message: str, error_code: str) -> ToolEnvelope:
    return text_envelope(message, error=error_code)


def unknown_action_envelope(action: Any) -> ToolEnvelope:
    return text_envelope(f"Unknown action: {action}", error=ERROR_UNKNOWN_ACTION)


def error_envelope(label: str, action: Any, message: str) -> ToolEnvelope:
    """One-line ``"<Label> error: <message>"`` with ``{action, error}``."""
    return text_envelope(f"{label} error: {message}", action=action, error=message)
