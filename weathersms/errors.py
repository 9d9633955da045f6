"""Error taxonomy for a single forecast-to-SMS run."""


class WeatherSmsError(Exception):
    """Base class for every failure the pipeline knows how to classify."""


class ConfigurationError(WeatherSmsError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class FetchError(WeatherSmsError):
    """Raised when the forecast could not be retrieved or parsed."""


class DispatchTransportError(WeatherSmsError):
    """Raised when the SMS gateway could not be reached or rejected the call."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DispatchLogicalError(WeatherSmsError):
    """The gateway accepted the request but reported a delivery problem."""

    def __init__(self, code: int | str | None, message: str | None):
        super().__init__(f"Delivery failed: {code} {message}")
        self.code = code
        self.message = message


class AlreadyDispatchedError(WeatherSmsError):
    """Raised when a dispatcher is asked to send a second message."""
