"""HTTP access to a device's local air-data endpoint."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional

import httpx
from pydantic import ValidationError

from models.readings import SensorReading

logger = logging.getLogger(__name__)

# Narrow injection guard for the URL built below, not full hostname validation.
HOST_PATTERN = re.compile(r"^[A-Za-z0-9.-]+$")
AIR_DATA_PATH = "/air-data/latest"


class InvalidHostError(ValueError):
    """Raised when the requested device host is missing or malformed."""


class DeviceScrapeError(Exception):
    """Raised when the device could not be reached or its payload decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


def validate_host(value: Optional[str]) -> str:
    if not value:
        raise InvalidHostError("host query parameter is required")
    if HOST_PATTERN.fullmatch(value) is None:
        raise InvalidHostError(
            f"host query parameter does not match valid hostname: {HOST_PATTERN.pattern}"
        )
    return value


def build_device_url(host: str) -> str:
    return f"http://{host}{AIR_DATA_PATH}"


class DeviceClient:
    """Single-shot fetcher; no retries and no timeout beyond the client's defaults."""

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client or httpx.Client()

    def close(self) -> None:
        self._client.close()

    def fetch_latest(self, url: str) -> SensorReading:
        try:
            response = self._client.get(url)
        # Hosts with empty or over-long labels fail IDNA encoding during name resolution.
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise DeviceScrapeError(url, f"Unable to poll url: {exc}") from exc

        logger.debug(
            "Device responded",
            extra={"url": url, "status_code": response.status_code},
        )
        try:
            return SensorReading.model_validate_json(response.content)
        except ValidationError as exc:
            raise DeviceScrapeError(url, f"Invalid response: {exc}") from exc


@lru_cache
def build_default_device_client() -> DeviceClient:
    """Factory for the process-wide device client."""
    return DeviceClient()
