"""Plain-text renderings of NWS records.

Every optional field is routed through ``present`` so that a missing value shows
up as a fixed placeholder and never as ``None`` or a blank field.
"""

from typing import Any

from models import AlertFeature, ForecastPeriod

SEPARATOR = "---"


def present(value: Any, default: str) -> str:
    """Return value as text, or default when it is missing or blank."""
    if value is None or value == "":
        return default
    return str(value)


def format_coordinate(value: float) -> str:
    """Render a coordinate as given, without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_alert(feature: AlertFeature) -> str:
    props = feature.properties
    return "\n".join([
        f"Event: {present(props.event, 'Unknown')}",
        f"Area: {present(props.area_desc, 'Unknown')}",
        f"Severity: {present(props.severity, 'Unknown')}",
        f"Status: {present(props.status, 'Unknown')}",
        f"Headline: {present(props.headline, 'No headline')}",
        SEPARATOR,
    ])


def format_period(period: ForecastPeriod) -> str:
    wind = f"{present(period.wind_speed, 'Unknown')} {present(period.wind_direction, '')}"
    return "\n".join([
        f"{present(period.name, 'Unknown')}:",
        f"Temperature: {present(period.temperature, 'Unknown')}°{present(period.temperature_unit, 'F')}",
        f"Wind: {wind.rstrip()}",
        present(period.short_forecast, "No forecast available"),
        SEPARATOR,
    ])
