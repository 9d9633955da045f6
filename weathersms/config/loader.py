"""Configuration loading: credentials from the environment, ops settings from YAML."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from weathersms.config.schema import CREDENTIAL_ENV_VARS, AppConfig, Credentials
from weathersms.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate operational settings from a YAML file.

    With no path, returns the defaults.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config {path} must be a mapping")

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {path}: {e}") from e


def load_env_file(path: str | Path) -> None:
    """Seed os.environ from a dotenv file. Existing variables win."""
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Env file not found: {path}")
    load_dotenv(path, override=False)


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """Read the six required credentials.

    Empty values count as missing. Raises ConfigurationError naming every
    missing variable at once.
    """
    env = os.environ if environ is None else environ
    values = {field: env.get(var, "") for field, var in CREDENTIAL_ENV_VARS.items()}

    missing = [CREDENTIAL_ENV_VARS[field] for field, value in values.items() if not value]
    if missing:
        raise ConfigurationError(
            "All of the "
            + ", ".join(CREDENTIAL_ENV_VARS.values())
            + " environment variables must be set before running the program."
            + " Missing: "
            + ", ".join(missing),
            missing=missing,
        )

    try:
        return Credentials(**values)
    except ValidationError as e:
        invalid = [CREDENTIAL_ENV_VARS[str(err["loc"][0])] for err in e.errors()]
        raise ConfigurationError(
            f"Invalid value for {', '.join(invalid)}", missing=[]
        ) from e
