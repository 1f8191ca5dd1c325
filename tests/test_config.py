"""Unit tests for configuration loading."""
import os

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from soudan.chat.config import (
    DEFAULT_ENDPOINT_URL,
    ENV_ENDPOINT_URL,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
    ChatSettings,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (ENV_ENDPOINT_URL, ENV_TIMEOUT, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight to os.environ
    for name in (ENV_ENDPOINT_URL, ENV_TIMEOUT, ENV_LOG_LEVEL):
        os.environ.pop(name, None)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        """Test the settings used when nothing is configured."""
        settings = load_settings()

        assert str(settings.endpoint_url) == DEFAULT_ENDPOINT_URL
        assert settings.timeout is None
        assert settings.log_level is None

    def test_environment(self, monkeypatch):
        """Test that environment variables are read."""
        monkeypatch.setenv(ENV_ENDPOINT_URL, "https://village.example/api/chat")
        monkeypatch.setenv(ENV_TIMEOUT, "12.5")
        monkeypatch.setenv(ENV_LOG_LEVEL, "info")

        settings = load_settings()

        assert str(settings.endpoint_url) == "https://village.example/api/chat"
        assert settings.timeout == 12.5
        assert settings.log_level == "info"

    def test_explicit_values_override_environment(self, monkeypatch):
        """Test that CLI values win over the environment."""
        monkeypatch.setenv(ENV_ENDPOINT_URL, "https://env.example/api/chat")
        monkeypatch.setenv(ENV_TIMEOUT, "5")

        settings = load_settings(endpoint_url="http://cli.example/chat", timeout=9)

        assert str(settings.endpoint_url) == "http://cli.example/chat"
        assert settings.timeout == 9

    def test_dotenv_file(self, tmp_path):
        """Test that a .env file in the working directory is honoured."""
        (tmp_path / ".env").write_text(f"{ENV_ENDPOINT_URL}=http://dotenv.example/api/chat\n")

        settings = load_settings()

        assert str(settings.endpoint_url) == "http://dotenv.example/api/chat"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"endpoint_url": "not a url"},
            {"timeout": 0},
            {"timeout": -1},
            {"log_level": "verbose"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Test that bad values raise ValueError."""
        with pytest.raises(ValueError):
            load_settings(**kwargs)


class TestChatSettings:
    """Tests for the ChatSettings model."""

    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    @given(st.sampled_from(["debug", "INFO", "Warning", "error"]))
    def test_log_level_case_insensitive(self, level: str):
        """Property test: known levels are accepted in any case."""
        assert ChatSettings(log_level=level).log_level == level

    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    @given(st.floats(min_value=0.001, max_value=3600, allow_nan=False))
    def test_positive_timeouts_accepted(self, timeout: float):
        """Property test: any positive timeout is valid."""
        assert ChatSettings(timeout=timeout).timeout == timeout
