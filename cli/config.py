from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from settings import get_settings

ALL_INTERFACES = "0.0.0.0"


@dataclass(frozen=True)
class ListenAddress:
    host: str
    port: int

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


def parse_listen_address(value: str) -> ListenAddress:
    """Parse ``host:port``; an empty host listens on every interface."""
    candidate = value.strip()
    host, sep, port_raw = candidate.rpartition(":")
    if not sep:
        raise ValueError(f"Listen address {value!r} must be of the form host:port.")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_raw)
    except ValueError as exc:
        raise ValueError(f"Listen address {value!r} has an invalid port.") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"Listen address {value!r} has an out of range port.")
    return ListenAddress(host=host or ALL_INTERFACES, port=port)


def load_listen_address(listen_address: Optional[str] = None) -> ListenAddress:
    return parse_listen_address(listen_address or get_settings().listen_address)
