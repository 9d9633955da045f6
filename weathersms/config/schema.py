"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

DARKSKY_BASE_URL = "https://api.darksky.net/forecast"

# Environment variable backing each credential field.
CREDENTIAL_ENV_VARS: dict[str, str] = {
    "darksky_key": "DARKSKY_KEY",
    "darksky_lat_long": "DARKSKY_LATLONG",
    "twilio_account": "TWILIO_ACCOUNT",
    "twilio_token": "TWILIO_TOKEN",
    "twilio_from": "TWILIO_FROM",
    "twilio_to": "TWILIO_TO",
}


class Credentials(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    darksky_key: str = Field(min_length=1)
    darksky_lat_long: str = Field(min_length=1)
    twilio_account: str = Field(min_length=1)
    twilio_token: str = Field(min_length=1, repr=False)
    twilio_from: str = Field(min_length=1)
    twilio_to: str = Field(min_length=1)

    @field_validator("darksky_lat_long")
    @classmethod
    def _check_lat_long(cls, value: str) -> str:
        parts = value.split(",")
        if len(parts) != 2:
            raise ValueError("expected 'latitude,longitude'")
        lat, lon = (float(p) for p in parts)
        if not -90.0 <= lat <= 90.0 or not -180.0 <= lon <= 180.0:
            raise ValueError("coordinates out of range")
        return value.replace(" ", "")


class ForecastApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DARKSKY_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    log_level: str = "INFO"
    forecast_api: ForecastApiConfig = ForecastApiConfig()

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level
