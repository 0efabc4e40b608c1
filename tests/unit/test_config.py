# SPDX-License-Identifier: MIT
"""Unit tests for configuration management."""

import dataclasses

import pytest

from sora_video_mcp.config import SORA_API_BASE, Settings, get_client, load_settings
from sora_video_mcp.errors import ConfigurationError


@pytest.mark.unit
class TestLoadSettingsHappyPath:
    """Test load_settings() with valid environments."""

    def test_minimal_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = load_settings({"OPENAI_API_KEY": "sk-abc"})

        assert settings.api_key == "sk-abc"
        assert settings.download_dir == tmp_path / "Downloads"
        assert settings.api_base == SORA_API_BASE
        assert settings.host == "0.0.0.0"
        assert settings.port == 3001

    def test_download_dir_resolved_to_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        settings = load_settings({"OPENAI_API_KEY": "sk-abc", "DOWNLOAD_DIR": "videos"})

        assert settings.download_dir.is_absolute()
        assert settings.download_dir == (tmp_path / "videos").resolve()

    def test_download_dir_not_created_at_load(self, tmp_path):
        target = tmp_path / "later"
        load_settings({"OPENAI_API_KEY": "sk-abc", "DOWNLOAD_DIR": str(target)})
        assert not target.exists()

    def test_transport_settings(self):
        settings = load_settings({"OPENAI_API_KEY": "sk-abc", "HOST": "127.0.0.1", "PORT": " 8080 "})
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080

    def test_base_url_override_strips_slash(self):
        settings = load_settings({"OPENAI_API_KEY": "sk-abc", "OPENAI_BASE_URL": "http://localhost:9000/v1/"})
        assert settings.api_base == "http://localhost:9000/v1"

    def test_reads_process_environment_by_default(self, mocker):
        mocker.patch.dict("os.environ", {"OPENAI_API_KEY": "sk-from-env"}, clear=True)
        assert load_settings().api_key == "sk-from-env"

    def test_settings_are_immutable(self):
        settings = load_settings({"OPENAI_API_KEY": "sk-abc"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api_key = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestLoadSettingsErrorCases:
    """Test load_settings() error handling."""

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY environment variable is required"):
            load_settings({})

    def test_whitespace_api_key(self):
        with pytest.raises(ConfigurationError):
            load_settings({"OPENAI_API_KEY": "   \t"})

    def test_configuration_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            load_settings({})

    @pytest.mark.parametrize("port", ["http", "0", "70000", "-1"])
    def test_bad_port(self, port):
        with pytest.raises(ConfigurationError, match="PORT"):
            load_settings({"OPENAI_API_KEY": "sk-abc", "PORT": port})


@pytest.mark.unit
def test_get_client_uses_settings(tmp_path):
    settings = Settings(api_key="sk-abc", download_dir=tmp_path, api_base="http://localhost:9000/v1")

    client = get_client(settings)

    assert client.api_key == "sk-abc"
    assert str(client.base_url).rstrip("/") == "http://localhost:9000/v1"
    assert client.max_retries == 0
