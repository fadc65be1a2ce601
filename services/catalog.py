"""Process-wide metric descriptors for device scrapes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

NAMESPACE = "awair"


@dataclass(frozen=True)
class MetricDescriptor:
    """Name and help text of one unlabeled gauge.

    ``field`` is the ``SensorReading`` attribute the gauge reads, or ``None``
    for the adapter's own metrics.
    """

    name: str
    documentation: str
    field: Optional[str] = None


@dataclass(frozen=True)
class MetricCatalog:
    device: Tuple[MetricDescriptor, ...]
    duration: MetricDescriptor
    errors: MetricDescriptor

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.device) + (self.duration.name, self.errors.name)


def _gauge(suffix: str, documentation: str, field: Optional[str] = None) -> MetricDescriptor:
    return MetricDescriptor(
        name=f"{NAMESPACE}_{suffix}",
        documentation=documentation,
        field=field,
    )


@lru_cache
def build_default_catalog() -> MetricCatalog:
    """Descriptors are shared by every request; only values are per scrape."""
    device = (
        _gauge("awair_score", "Awair score.", "score"),
        _gauge("dew_point_celsius", "Dew point.", "dew_point_celsius"),
        _gauge("temp_celsius", "Temperature.", "temp_celsius"),
        _gauge("relative_humidity", "Relative humidity.", "relative_humidity"),
        _gauge(
            "absolute_humidity_grams_per_cubic_meter",
            "Absolute humidity.",
            "absolute_humidity",
        ),
        _gauge("co2_parts_per_million", "CO2.", "co2_parts_per_million"),
        _gauge(
            "co2_est_parts_per_million",
            "(Estimated?) CO2; unclear how this metric differs from CO2.",
            "co2_estimated_parts_per_million",
        ),
        _gauge(
            "voc_parts_per_billion",
            "VOC (Volatile organic compounds).",
            "voc_parts_per_billion",
        ),
        _gauge("voc_baseline", "Unknown, possibly unused?", "voc_baseline"),
        _gauge("voc_h2_raw", "Unknown, possibly dihydrogen ppb?", "voc_h2_raw"),
        _gauge("voc_ethanol_raw", "Unknown, possibly ethanol ppb?", "voc_ethanol_raw"),
        _gauge(
            "pm25_micrograms_per_cubic_meter",
            "Particulate matter (fine-dust).",
            "particulate_25",
        ),
        _gauge(
            "pm10_est_micrograms_per_cubic_meter",
            "Likely estimated particulate matter (big particles).",
            "particulate_10_estimated",
        ),
    )
    return MetricCatalog(
        device=device,
        duration=_gauge("scrape_duration_seconds", "Amount of time spent scraping metrics."),
        errors=_gauge("scrape_errors", "How many errors occured during the scrape event."),
    )
