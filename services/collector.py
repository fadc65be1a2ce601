"""Translate one device reading into the Prometheus exposition format."""

from __future__ import annotations

import logging
import time
from typing import Iterator, Optional, Tuple

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily, Metric

from models.readings import ScrapeSample, SensorReading
from services.catalog import MetricCatalog, MetricDescriptor
from services.device_client import DeviceClient, DeviceScrapeError, build_device_url

logger = logging.getLogger(__name__)


def _family(descriptor: MetricDescriptor, value: Optional[float] = None) -> GaugeMetricFamily:
    return GaugeMetricFamily(descriptor.name, descriptor.documentation, value=value)


class AwairCollector:
    """Custom collector that samples the device once per ``collect`` call.

    The scrape clock starts when the collector is created, so the reported
    duration covers the fetch and decode of the device payload.
    """

    def __init__(self, client: DeviceClient, catalog: MetricCatalog, url: str) -> None:
        self.client = client
        self.catalog = catalog
        self.url = url
        self.sample: Optional[ScrapeSample] = None
        self._start = time.perf_counter()

    def describe(self) -> Iterator[Metric]:
        for descriptor in self.catalog.device:
            yield _family(descriptor)
        yield _family(self.catalog.duration)
        yield _family(self.catalog.errors)

    def collect(self) -> Iterator[Metric]:
        reading: Optional[SensorReading] = None
        try:
            reading = self.client.fetch_latest(self.url)
        except DeviceScrapeError as exc:
            logger.warning(
                "Error scraping metrics",
                extra={"url": exc.url, "reason": exc.reason},
            )

        if reading is not None:
            for descriptor in self.catalog.device:
                yield _family(descriptor, float(getattr(reading, descriptor.field)))

        self.sample = sample = ScrapeSample(
            duration_seconds=time.perf_counter() - self._start,
            errors=0 if reading is not None else 1,
        )
        logger.debug(
            "Scrape finished",
            extra={"url": self.url, "duration_seconds": round(sample.duration_seconds, 6)},
        )
        yield _family(self.catalog.duration, sample.duration_seconds)
        yield _family(self.catalog.errors, float(sample.errors))


def render_scrape(
    client: DeviceClient, catalog: MetricCatalog, host: str
) -> Tuple[bytes, Optional[ScrapeSample]]:
    """Scrape ``host`` through a registry that lives only for this call.

    Returns the exposition body and the app-level sample of the scrape.
    """
    collector = AwairCollector(client=client, catalog=catalog, url=build_device_url(host))
    registry = CollectorRegistry()
    registry.register(collector)
    body = generate_latest(registry)
    return body, collector.sample
