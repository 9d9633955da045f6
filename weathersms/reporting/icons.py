"""Dark Sky icon keys and the symbols used for them in text messages."""

from enum import StrEnum


class Icon(StrEnum):
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    WIND = "wind"
    FOG = "fog"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"


ICON_SYMBOLS: dict[Icon, str] = {
    Icon.CLEAR_DAY: "☀️",
    Icon.CLEAR_NIGHT: "🌘",
    Icon.RAIN: "🌧",
    Icon.SNOW: "❄️",
    Icon.SLEET: "e",
    Icon.WIND: "💨",
    Icon.FOG: "🌫",
    Icon.CLOUDY: "☁️",
    Icon.PARTLY_CLOUDY_DAY: "⛅️",
    Icon.PARTLY_CLOUDY_NIGHT: "⛅️",
}


def icon_symbol(key: str | None) -> str:
    """Symbol for a provider icon key; empty for unknown or missing keys."""
    if key is None:
        return ""
    try:
        return ICON_SYMBOLS[Icon(key)]
    except ValueError:
        return ""
