import logging
from typing import Annotated, Any

from pydantic import Field, ValidationError

from formatters import format_alert, format_coordinate, format_period
from models import (
    AlertsResult,
    Err,
    ForecastResult,
    Ok,
    PointsResult,
    Result,
)
from nws_client import alerts_url, make_nws_request, points_url

logger = logging.getLogger(__name__)

StateCode = Annotated[
    str,
    Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)"),
]
Latitude = Annotated[
    float, Field(ge=-90, le=90, description="Latitude of the location")
]
Longitude = Annotated[
    float, Field(ge=-180, le=180, description="Longitude of the location")
]

ALERTS_FAILED = "Failed to retrieve alerts data"
FORECAST_URL_MISSING = "Failed to get forecast URL from grid point data"
FORECAST_FAILED = "Failed to retrieve forecast data"
NO_PERIODS = "No forecast periods available"


def _parse(model, data: Any, failure: str) -> Result:
    """Validate a gateway payload into model; None or an unusable shape becomes Err(failure)."""
    if data is None:
        return Err(failure)
    try:
        return Ok(model.model_validate(data))
    except ValidationError as exc:
        logger.error("Unexpected %s payload: %s", model.__name__, exc)
        return Err(failure)


# ── Alerts ───────────────────────────────────────────────────────────────────

async def fetch_alerts(state: str) -> Result:
    data = await make_nws_request(alerts_url(state))
    return _parse(AlertsResult, data, ALERTS_FAILED)


async def get_alerts(state: StateCode) -> str:
    """Get weather alerts for a state."""
    state_code = state.upper()
    logger.info("Tool call: get-alerts state=%s", state_code)

    result = await fetch_alerts(state_code)
    if isinstance(result, Err):
        return result.reason

    features = result.value.features
    if not features:
        return f"No active alerts for {state_code}"

    formatted = "\n".join(format_alert(feature) for feature in features)
    return f"Active alerts for {state_code}:\n\n{formatted}"


# ── Forecast ─────────────────────────────────────────────────────────────────

async def fetch_forecast_url(latitude: float, longitude: float) -> Result:
    """Stage 1: resolve the forecast URL for a coordinate via the points endpoint."""
    data = await make_nws_request(points_url(latitude, longitude))
    coordinates = f"{format_coordinate(latitude)}, {format_coordinate(longitude)}"
    parsed = _parse(
        PointsResult,
        data,
        f"Failed to retrieve grid point data for coordinates: {coordinates}. "
        "This location may not be supported by the NWS API "
        "(only US locations are supported).",
    )
    if isinstance(parsed, Err):
        return parsed

    forecast_url = parsed.value.properties.forecast
    if not forecast_url:
        return Err(FORECAST_URL_MISSING)
    return Ok(forecast_url)


async def fetch_periods(forecast_url: str) -> Result:
    """Stage 2: fetch the forecast and return its non-empty period list."""
    data = await make_nws_request(forecast_url)
    parsed = _parse(ForecastResult, data, FORECAST_FAILED)
    if isinstance(parsed, Err):
        return parsed

    periods = parsed.value.properties.periods
    if not periods:
        return Err(NO_PERIODS)
    return Ok(periods)


async def get_forecast(latitude: Latitude, longitude: Longitude) -> str:
    """Get weather forecast for a location."""
    logger.info("Tool call: get-forecast latitude=%s longitude=%s", latitude, longitude)

    forecast_url = await fetch_forecast_url(latitude, longitude)
    if isinstance(forecast_url, Err):
        return forecast_url.reason

    periods = await fetch_periods(forecast_url.value)
    if isinstance(periods, Err):
        return periods.reason

    formatted = "\n".join(format_period(period) for period in periods.value)
    return f"Forecast for {format_coordinate(latitude)}, {format_coordinate(longitude)}:\n\n{formatted}"
