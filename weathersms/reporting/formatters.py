"""Text formatters turning a Forecast into the SMS body."""

import math
from datetime import datetime, timedelta

from weathersms.models.forecast import DailySummary, Forecast, HourlyEntry
from weathersms.reporting.icons import icon_symbol

MAX_HOURLY_LINES = 10
DEFAULT_PRECIP_KIND = "precipitation"


def to_local(instant: datetime, offset: timedelta) -> datetime:
    """Shift a UTC instant by the run's UTC offset into naive wall-clock time."""
    return (instant + offset).replace(tzinfo=None)


def format_clock(instant: datetime, offset: timedelta) -> str:
    """24-hour clock with seconds, e.g. '07:26:40'."""
    return to_local(instant, offset).strftime("%H:%M:%S")


def format_short_hour(instant: datetime, offset: timedelta) -> str:
    """Short 12-hour form, e.g. '7 AM', '12 PM'."""
    local = to_local(instant, offset)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour} {meridiem}"


def format_daily(daily: DailySummary, offset: timedelta) -> str:
    """One-sentence overview of the day."""
    low = math.floor(daily.temperature_min)
    high = math.floor(daily.temperature_max)
    feel_low = math.floor(daily.apparent_temperature_min)
    feel_high = math.floor(daily.apparent_temperature_max)
    precip_kind = daily.precip_type or DEFAULT_PRECIP_KIND

    return (
        f"Good Morning! Your weather forecast for today is {daily.summary.lower()}"
        f" The temperature will be {low}–{high}°c,"
        f" which will feel like {feel_low}–{feel_high}°c."
        f" There's a {daily.precip_percent}% chance of {precip_kind}"
        f" and today's sunrise is at {format_clock(daily.sunrise_time, offset)}"
        f" with sunset due at {format_clock(daily.sunset_time, offset)}."
    )


def format_hourly(entry: HourlyEntry, offset: timedelta) -> str:
    """One line per hour: time, floored temperature and the icon symbol if known."""
    line = f"{format_short_hour(entry.time, offset)} : {math.floor(entry.temperature)}°c"
    symbol = icon_symbol(entry.icon)
    if symbol:
        line += f" {symbol}"
    return line


def format_summary(
    forecast: Forecast, offset: timedelta, max_hours: int = MAX_HOURLY_LINES
) -> str:
    """Daily sentence, a blank line, then up to max_hours hourly lines."""
    daily = format_daily(forecast.daily, offset)
    hourly = [format_hourly(h, offset) for h in forecast.hourly[:max_hours]]
    if not hourly:
        return daily
    return daily + "\n\n" + "\n".join(hourly)
