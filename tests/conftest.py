from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from services.device_client import DeviceClient

FULL_PAYLOAD: Dict[str, Any] = {
    "timestamp": "2020-08-09T05:35:28.034Z",
    "score": 87,
    "dew_point": 9.75,
    "temp": 21.5,
    "humid": 52.25,
    "abs_humid": 9.5,
    "co2": 612,
    "co2_est": 450,
    "voc": 174,
    "voc_baseline": 2352254740,
    "voc_h2_raw": 27,
    "voc_ethanol_raw": 38,
    "pm25": 3,
    "pm10_est": 4,
}


class StubDevice:
    """Fake device API that records every outbound request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = json.dumps(FULL_PAYLOAD).encode("utf-8")
        self.error: Optional[Exception] = None

    def respond_with(self, payload: Any, status_code: int = 200) -> None:
        self.body = json.dumps(payload).encode("utf-8")
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    def client(self) -> DeviceClient:
        return DeviceClient(httpx.Client(transport=httpx.MockTransport(self.handler)))


@pytest.fixture
def stub_device() -> StubDevice:
    return StubDevice()


@pytest.fixture
def api_client(stub_device: StubDevice, monkeypatch) -> Iterator[TestClient]:
    clients: List[DeviceClient] = []

    def build_test_client() -> DeviceClient:
        if not clients:
            clients.append(stub_device.client())
        return clients[0]

    build_test_client.cache_clear = clients.clear  # type: ignore[attr-defined]

    monkeypatch.setattr("app.main.build_default_device_client", build_test_client)
    monkeypatch.setattr("app.api.build_default_device_client", build_test_client)

    app = create_app()
    with TestClient(app) as client:
        yield client
