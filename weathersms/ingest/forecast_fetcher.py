"""Forecast fetcher: retrieves the Dark Sky forecast and validates it into a Forecast."""

import logging

from pydantic import ValidationError

from weathersms.config.schema import Credentials
from weathersms.errors import FetchError
from weathersms.ingest.darksky_client import DarkSkyClient
from weathersms.models.forecast import DailySummary, Forecast, HourlyEntry

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: DarkSkyClient, credentials: Credentials):
        self.client = client
        self.api_key = credentials.darksky_key
        self.lat_long = credentials.darksky_lat_long

    def fetch(self) -> Forecast:
        """Fetch and parse the forecast for the configured location."""
        raw = self.client.get_forecast(self.api_key, self.lat_long)
        forecast = _extract_forecast(raw)
        logger.info(
            "Fetched forecast for %s: %d hourly entries",
            self.lat_long, len(forecast.hourly),
        )
        return forecast


def _extract_forecast(raw: dict) -> Forecast:
    """Build a Forecast from the first daily object and every hourly object."""
    daily_data = _block_data(raw, "daily")
    hourly_data = _block_data(raw, "hourly")
    if not daily_data:
        raise FetchError("Forecast response has no daily data")

    try:
        daily = DailySummary.model_validate(daily_data[0])
        hourly = [HourlyEntry.model_validate(h) for h in hourly_data]
    except ValidationError as e:
        raise FetchError(f"Forecast response failed validation: {e}") from e

    return Forecast(daily=daily, hourly=hourly)


def _block_data(raw: dict, name: str) -> list:
    block = raw.get(name)
    if not isinstance(block, dict) or not isinstance(block.get("data"), list):
        raise FetchError(f"Forecast response is missing the {name} block")
    return block["data"]
