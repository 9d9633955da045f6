"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest
import yaml

from weathersms.config.schema import Credentials

FIXTURE_DIR = Path(__file__).parent / "fixtures"

ENV = {
    "DARKSKY_KEY": "test-darksky-key",
    "DARKSKY_LATLONG": "51.5074,-0.1278",
    "TWILIO_ACCOUNT": "AC00000000000000000000000000000000",
    "TWILIO_TOKEN": "test-token",
    "TWILIO_FROM": "+15005550006",
    "TWILIO_TO": "+447700900123",
}


@pytest.fixture
def env() -> dict[str, str]:
    return dict(ENV)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        darksky_key=ENV["DARKSKY_KEY"],
        darksky_lat_long=ENV["DARKSKY_LATLONG"],
        twilio_account=ENV["TWILIO_ACCOUNT"],
        twilio_token=ENV["TWILIO_TOKEN"],
        twilio_from=ENV["TWILIO_FROM"],
        twilio_to=ENV["TWILIO_TO"],
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def darksky_forecast() -> dict:
    """Dark Sky response with two daily and twelve hourly objects."""
    with open(FIXTURE_DIR / "darksky_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def make_forecast_payload(darksky_forecast: dict):
    """Build a payload with an arbitrary number of hourly entries."""

    def _make(hours: int) -> dict:
        payload = copy.deepcopy(darksky_forecast)
        start = payload["hourly"]["data"][0]["time"]
        payload["hourly"]["data"] = [
            {"time": start + 3600 * i, "icon": "cloudy", "temperature": 10.0 + i / 10}
            for i in range(hours)
        ]
        return payload

    return _make


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "log_level": "debug",
        "forecast_api": {"base_url": "https://test-darksky.example.com/forecast", "timeout": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
