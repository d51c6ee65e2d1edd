from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

T = TypeVar("T")


class NWSModel(BaseModel):
    """Lenient base: unknown keys ignored, numbers accepted where text is expected."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class NWSRecord(NWSModel):
    """A single upstream record. A field of the wrong type is treated as missing."""

    @field_validator("*", mode="wrap")
    @classmethod
    def _invalid_as_missing(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


# ── Alerts ───────────────────────────────────────────────────────────────────

class AlertProperties(NWSRecord):
    event: str | None = None
    area_desc: str | None = Field(default=None, alias="areaDesc")
    severity: str | None = None
    status: str | None = None
    headline: str | None = None


class AlertFeature(NWSModel):
    properties: AlertProperties = AlertProperties()

    @field_validator("properties", mode="wrap")
    @classmethod
    def _invalid_as_empty(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> AlertProperties:
        try:
            return handler(value)
        except ValidationError:
            return AlertProperties()


class AlertsResult(NWSModel):
    features: list[AlertFeature] = []


# ── Points / forecast ────────────────────────────────────────────────────────

class PointsProperties(NWSRecord):
    forecast: str | None = None


class PointsResult(NWSModel):
    properties: PointsProperties = PointsProperties()


class ForecastPeriod(NWSRecord):
    name: str | None = None
    temperature: int | float | None = None
    temperature_unit: str | None = Field(default=None, alias="temperatureUnit")
    wind_speed: str | None = Field(default=None, alias="windSpeed")
    wind_direction: str | None = Field(default=None, alias="windDirection")
    short_forecast: str | None = Field(default=None, alias="shortForecast")


class ForecastProperties(NWSModel):
    periods: list[ForecastPeriod] = []


class ForecastResult(NWSModel):
    properties: ForecastProperties = ForecastProperties()


# ── Stage results ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    reason: str


Result = Union[Ok[T], Err]
