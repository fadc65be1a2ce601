from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_LISTEN_ADDRESS_ENV = "AWAIR_LISTEN_ADDRESS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_LISTEN_ADDRESS = ":8123"


@dataclass(frozen=True)
class Settings:
    listen_address: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        listen_address=_read_str_env(_LISTEN_ADDRESS_ENV, DEFAULT_LISTEN_ADDRESS),
        log_level=_read_log_level("INFO"),
    )
