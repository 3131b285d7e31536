"""Tests for apitoolbox.config"""

import pytest

from apitoolbox.config import (
    get_enabled_tools,
    get_http_timeout,
    load_api_keys_to_env,
    load_config,
    substitute_env,
)
from apitoolbox.constants import BUILTIN_TOOL_NAMES


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestLoadConfig:

    def test_basic(self, write_config):
        path = write_config("tools: [linear, github]\nhttp:\n  timeout: 15\n")
        config = load_config(path)

        assert config == {"tools": ["linear", "github"], "http": {"timeout": 15}}

    def test_env_substitution(self, write_config, monkeypatch):
        monkeypatch.setenv("MY_LINEAR_KEY", "lin_from_env")
        path = write_config("credentials:\n  linear:\n    api_key: ${MY_LINEAR_KEY}\n")

        assert load_config(path)["credentials"]["linear"]["api_key"] == "lin_from_env"

    def test_missing_env_var(self, write_config, monkeypatch):
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        path = write_config("credentials:\n  github:\n    token: ${NOT_SET_ANYWHERE}\n")

        with pytest.raises(ValueError, match="Environment variable 'NOT_SET_ANYWHERE' not set"):
            load_config(path)

    def test_empty_file(self, write_config):
        assert load_config(write_config("")) == {}

    def test_non_mapping_rejected(self, write_config):
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(write_config("- linear\n- github\n"))

    def test_substitute_env_leaves_plain_text(self):
        assert substitute_env("token: $HOME and {x}") == "token: $HOME and {x}"


class TestLoadApiKeysToEnv:

    def test_copies_known_credentials(self):
        environ = {}
        config = {
            "credentials": {
                "linear": {"api_key": "lin_1"},
                "github": {"token": "ghp_1"},
                "openai": {"api_key": ""},
            }
        }

        loaded = load_api_keys_to_env(config, environ)

        assert environ == {"LINEAR_API_KEY": "lin_1", "GITHUB_TOKEN": "ghp_1"}
        assert loaded == ["LINEAR_API_KEY", "GITHUB_TOKEN"]

    def test_unknown_service_ignored(self, caplog):
        environ = {}
        loaded = load_api_keys_to_env({"credentials": {"jira": {"api_key": "x"}}}, environ)

        assert loaded == []
        assert environ == {}
        assert "jira" in caplog.text

    def test_no_credentials_section(self):
        assert load_api_keys_to_env({}, {}) == []


class TestSettings:

    def test_timeout_default(self):
        assert get_http_timeout({}) is None
        assert get_http_timeout({"http": {}}) is None

    def test_timeout_value(self):
        assert get_http_timeout({"http": {"timeout": "2.5"}}) == 2.5

    @pytest.mark.parametrize("value", ["soon", 0, -1])
    def test_timeout_invalid(self, value):
        with pytest.raises(ValueError, match="http.timeout"):
            get_http_timeout({"http": {"timeout": value}})

    def test_enabled_tools_default(self):
        assert get_enabled_tools({}) == list(BUILTIN_TOOL_NAMES)

    def test_enabled_tools_subset(self):
        assert get_enabled_tools({"tools": ["openai"]}) == ["openai"]

    @pytest.mark.parametrize("value", ["linear", [1, 2]])
    def test_enabled_tools_invalid(self, value):
        with pytest.raises(ValueError, match="tools must be a list"):
            get_enabled_tools({"tools": value})
