"""Dark Sky forecast API client. One request per call, no retry."""

import logging

import httpx

from weathersms.config.schema import DARKSKY_BASE_URL
from weathersms.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weather-sms/0.1.0"
UNITS = "uk2"
EXCLUDED_BLOCKS = ("currently", "minutely", "alerts", "flags")


class DarkSkyClient:
    def __init__(
        self,
        base_url: str = DARKSKY_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, api_key: str, lat_long: str) -> dict:
        """Fetch the daily and hourly forecast blocks for a location.

        Any transport error, non-2xx status or non-JSON body raises FetchError.
        """
        url = f"{self.base_url}/{api_key}/{lat_long}"
        params = {"units": UNITS, "exclude": ",".join(EXCLUDED_BLOCKS)}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            # The key is part of the path; keep it out of the logs.
            logger.error("Dark Sky returned %d for %s", e.response.status_code, lat_long)
            raise FetchError(f"Forecast request failed: HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error("Dark Sky request error for %s: %s", lat_long, type(e).__name__)
            raise FetchError(f"Forecast request failed: {type(e).__name__}") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise FetchError("Forecast response is not valid JSON") from e

        if not isinstance(body, dict):
            raise FetchError("Forecast response is not a JSON object")
        return body
