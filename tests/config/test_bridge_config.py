# tests/config/test_bridge_config.py
"""
Tests for environment-driven configuration loading.
"""

import pytest
from pydantic import ValidationError

from genai_bridge.config import BridgeConfig, ConfigLoader, get_config, reset_config
from genai_bridge.core import ConfigurationError, Default

ENV_VARS = [
    "OPENROUTER_API_KEY",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_MODEL",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "OPENROUTER_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate each test from the real environment and any .env files."""
    for name in ENV_VARS:
        # setenv first so monkeypatch restores (or removes) it afterwards,
        # including values written by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_config()
    yield
    reset_config()


class TestBridgeConfig:
    """Model defaults and validation"""

    def test_defaults(self):
        config = BridgeConfig()

        assert config.base_url == "https://openrouter.ai/api/v1"
        assert config.model == "google/gemini-2.0-flash-001"
        assert config.api_key is None
        assert config.referer == "https://github.com/google/gemini-cli"
        assert config.title == "Gemini CLI"
        assert config.timeout == Default.TIMEOUT

    def test_trailing_slash_is_stripped(self):
        assert BridgeConfig(base_url="http://localhost:8080/v1//").base_url == (
            "http://localhost:8080/v1"
        )

    def test_api_key_hidden_from_repr(self):
        assert "secret" not in repr(BridgeConfig(api_key="secret"))

    def test_frozen(self):
        config = BridgeConfig()

        with pytest.raises(ValidationError):
            config.model = "other"


class TestConfigLoader:
    """Environment, .env files and overrides"""

    def test_reads_mapping(self):
        loader = ConfigLoader(
            environ={
                "OPENROUTER_API_KEY": "sk-or-1",
                "OPENROUTER_MODEL": "anthropic/claude-3-haiku",
                "OPENROUTER_BASE_URL": "https://proxy.test/api/v1/",
                "OPENROUTER_TIMEOUT": "15",
            }
        )

        config = loader.load()

        assert config.api_key == "sk-or-1"
        assert config.model == "anthropic/claude-3-haiku"
        assert config.base_url == "https://proxy.test/api/v1"
        assert config.timeout == 15.0

    def test_empty_values_count_as_unset(self):
        config = ConfigLoader(
            environ={"OPENROUTER_MODEL": "", "OPENROUTER_BASE_URL": ""}
        ).load()

        assert config.model == Default.MODEL
        assert config.base_url == Default.BASE_URL

    def test_overrides_win(self):
        loader = ConfigLoader(environ={"OPENROUTER_API_KEY": "from-env"})

        config = loader.load(api_key="explicit", model=None)

        assert config.api_key == "explicit"
        assert config.model == Default.MODEL

    def test_invalid_value(self):
        loader = ConfigLoader(environ={"OPENROUTER_TIMEOUT": "-1"})

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load()

        assert "Invalid configuration" in str(exc_info.value)

    def test_get_caches(self):
        loader = ConfigLoader(environ={})

        assert loader.get() is loader.get()

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_MODEL", "mistralai/mistral-7b-instruct")

        assert ConfigLoader().load().model == "mistralai/mistral-7b-instruct"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "bridge.env"
        env_file.write_text("OPENROUTER_API_KEY=sk-from-file\nOPENROUTER_TITLE=My Tool\n")

        config = ConfigLoader(env_file=env_file).load()

        assert config.api_key == "sk-from-file"
        assert config.title == "My Tool"

    def test_env_file_does_not_override_process_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OPENROUTER_API_KEY", "from-process")
        (tmp_path / ".env").write_text("OPENROUTER_API_KEY=from-file\n")

        assert ConfigLoader().load().api_key == "from-process"


class TestGlobalConfig:
    """Module-level cached configuration"""

    def test_get_config_is_cached_until_reset(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_MODEL", "first/model")
        first = get_config()

        monkeypatch.setenv("OPENROUTER_MODEL", "second/model")
        assert get_config() is first

        reset_config()
        assert get_config().model == "second/model"
