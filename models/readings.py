"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class SensorReading(BaseModel):
    """Latest air-data sample as served by the device's local API.

    Values are passed through untouched. Unknown keys are ignored and missing
    or null numeric keys read as zero. Numbers must be JSON numbers; booleans
    and numeric strings are rejected.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True, strict=True)

    # ISO 8601, e.g. "2020-08-09T05:35:28.034Z"
    timestamp: str = ""
    score: float = 0.0
    dew_point_celsius: float = Field(default=0.0, alias="dew_point")
    temp_celsius: float = Field(default=0.0, alias="temp")
    relative_humidity: float = Field(default=0.0, alias="humid")
    absolute_humidity: float = Field(default=0.0, alias="abs_humid")
    co2_parts_per_million: float = Field(default=0.0, alias="co2")
    co2_estimated_parts_per_million: float = Field(default=0.0, alias="co2_est")
    voc_parts_per_billion: float = Field(default=0.0, alias="voc")
    # Observed values around 2352254740
    voc_baseline: float = 0.0
    voc_h2_raw: float = 0.0
    voc_ethanol_raw: float = 0.0
    particulate_25: float = Field(default=0.0, alias="pm25")
    particulate_10_estimated: float = Field(default=0.0, alias="pm10_est")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return "" if info.field_name == "timestamp" else 0.0
        return value


@dataclass(frozen=True, slots=True)
class ScrapeSample:
    """App-level values produced once per scrape, whatever the outcome."""

    duration_seconds: float
    errors: int
