"""Tests for apitoolbox.result"""

import json

from apitoolbox.result import (
    ContentBlock,
    ToolEnvelope,
    audio_envelope,
    error_envelope,
    missing_credential_envelope,
    success_envelope,
    text_envelope,
    unknown_action_envelope,
)


class TestToolEnvelope:

    def test_text_joins_text_blocks(self):
        envelope = ToolEnvelope(content=[
            ContentBlock(text="first"),
            ContentBlock(text="ignored", type="image"),
            ContentBlock(text="second"),
        ])
        assert envelope.text == "first\nsecond"

    def test_success_and_error_flags(self):
        assert ToolEnvelope(details={"success": True}).is_success()
        assert not ToolEnvelope(details={"success": "yes"}).is_success()
        assert ToolEnvelope(details={"error": "x"}).is_error()
        assert not ToolEnvelope(details={"action": "a", "success": True}).is_error()

    def test_dict_round_trip(self):
        envelope = text_envelope("hi", action="getUser", success=True)
        data = envelope.to_dict()

        assert data == {
            "content": [{"type": "text", "text": "hi"}],
            "details": {"action": "getUser", "success": True},
        }
        assert ToolEnvelope.from_dict(data) == envelope

    def test_to_dict_copies_details(self):
        envelope = text_envelope("hi", error="x")
        envelope.to_dict()["details"]["error"] = "changed"
        assert envelope.error == "x"


class TestBuilders:

    def test_success_envelope_pretty_prints(self):
        envelope = success_envelope("getIssue", {"id": "I1", "title": "Café"})

        assert envelope.details == {"action": "getIssue", "success": True}
        assert envelope.text == json.dumps({"id": "I1", "title": "Café"}, indent=2, ensure_ascii=False)
        assert "Café" in envelope.text
        assert len(envelope.content) == 1

    def test_success_envelope_accepts_lists_and_null(self):
        assert json.loads(success_envelope("listIssues", []).text) == []
        assert success_envelope("getUser", None).text == "null"

    def test_audio_envelope_truncates(self):
        audio = "A" * 500
        envelope = audio_envelope("textToSpeech", "Audio generated successfully (audio/mpeg). Base64 audio data:", audio)

        assert envelope.details == {"action": "textToSpeech", "success": True, "hasAudio": True}
        assert envelope.text == (
            "Audio generated successfully (audio/mpeg). Base64 audio data: " + "A" * 100 + "... (truncated)"
        )

    def test_audio_envelope_short_payload(self):
        envelope = audio_envelope("speechToSpeech", "Done:", "abc")
        assert envelope.text == "Done: abc... (truncated)"

    def test_missing_credential_envelope(self):
        envelope = missing_credential_envelope("GitHub token not configured. Set GITHUB_TOKEN.", "missing_token")
        assert envelope.details == {"error": "missing_token"}
        assert "action" not in envelope.details

    def test_unknown_action_envelope(self):
        envelope = unknown_action_envelope("fly")
        assert envelope.text == "Unknown action: fly"
        assert envelope.details == {"error": "unknown_action"}

    def test_error_envelope(self):
        envelope = error_envelope("GitHub", "getRepo", "GitHub API error (404): Not Found")
        assert envelope.text == "GitHub error: GitHub API error (404): Not Found"
        assert envelope.details == {"action": "getRepo", "error": "GitHub API error (404): Not Found"}
