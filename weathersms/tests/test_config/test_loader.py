"""Tests for credential and settings loading."""

import os
from pathlib import Path

import pytest

from weathersms.config.loader import load_config, load_credentials, load_env_file
from weathersms.config.schema import CREDENTIAL_ENV_VARS, DARKSKY_BASE_URL
from weathersms.errors import ConfigurationError


class TestLoadCredentials:
    def test_all_present(self, env: dict):
        creds = load_credentials(env)
        assert creds.darksky_key == "test-darksky-key"
        assert creds.darksky_lat_long == "51.5074,-0.1278"
        assert creds.twilio_to == "+447700900123"

    @pytest.mark.parametrize("var", list(CREDENTIAL_ENV_VARS.values()))
    def test_each_missing_var_rejected(self, env: dict, var: str):
        del env[var]
        with pytest.raises(ConfigurationError) as exc_info:
            load_credentials(env)
        assert exc_info.value.missing == [var]

    def test_empty_value_counts_as_missing(self, env: dict):
        env["TWILIO_TOKEN"] = ""
        with pytest.raises(ConfigurationError) as exc_info:
            load_credentials(env)
        assert exc_info.value.missing == ["TWILIO_TOKEN"]

    def test_reports_every_missing_var(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_credentials({})
        assert exc_info.value.missing == list(CREDENTIAL_ENV_VARS.values())
        assert "DARKSKY_KEY" in str(exc_info.value)

    def test_malformed_lat_long(self, env: dict):
        env["DARKSKY_LATLONG"] = "London"
        with pytest.raises(ConfigurationError, match="DARKSKY_LATLONG"):
            load_credentials(env)

    def test_reads_os_environ_by_default(self, env: dict, monkeypatch):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        assert load_credentials().twilio_from == "+15005550006"


class TestLoadConfig:
    def test_defaults_without_path(self):
        config = load_config(None)
        assert config.log_level == "INFO"
        assert config.forecast_api.base_url == DARKSKY_BASE_URL

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.log_level == "DEBUG"
        assert config.forecast_api.timeout == 5.0

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.forecast_api.timeout == 30.0

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("recipients:\n  - '+441234'\n")
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)


class TestLoadEnvFile:
    def test_seeds_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DARKSKY_KEY", "placeholder")
        monkeypatch.delenv("DARKSKY_KEY")
        path = tmp_path / ".env"
        path.write_text("DARKSKY_KEY=from-dotenv\n")
        load_env_file(path)
        assert os.environ["DARKSKY_KEY"] == "from-dotenv"

    def test_existing_variable_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DARKSKY_KEY", "from-shell")
        path = tmp_path / ".env"
        path.write_text("DARKSKY_KEY=from-dotenv\n")
        load_env_file(path)
        assert os.environ["DARKSKY_KEY"] == "from-shell"

    def test_missing_env_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_env_file(tmp_path / "missing.env")
