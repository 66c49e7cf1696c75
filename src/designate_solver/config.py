"""Configuration loading: process settings from env, zone settings per challenge."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from designate_solver.errors import ConfigError
from designate_solver.models import ZoneConfig

_DEFAULT_RECORD_TTL = 600


@dataclass(frozen=True)
class SolverConfig:
    """Process-wide configuration loaded from environment variables."""

    group_name: str
    os_cloud: str | None = None
    os_region_name: str | None = None
    record_ttl: int = _DEFAULT_RECORD_TTL


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def load_config() -> SolverConfig:
    """Load and validate solver configuration from environment variables.

    OpenStack credentials themselves are not read here: openstacksdk picks them
    up from ``OS_*`` variables or ``clouds.yaml`` when the client is built.
    """
    group_name = _require_env("GROUP_NAME")

    raw_ttl = os.environ.get("DESIGNATE_RECORD_TTL", str(_DEFAULT_RECORD_TTL))
    try:
        record_ttl = int(raw_ttl)
    except ValueError:
        raise ValueError(f"DESIGNATE_RECORD_TTL must be an integer, got: {raw_ttl!r}")
    if record_ttl < 1:
        raise ValueError(f"DESIGNATE_RECORD_TTL must be a positive integer, got: {record_ttl}")

    return SolverConfig(
        group_name=group_name,
        os_cloud=os.environ.get("OS_CLOUD") or None,
        os_region_name=os.environ.get("OS_REGION_NAME") or None,
        record_ttl=record_ttl,
    )


def decode_zone_config(raw: Any) -> ZoneConfig:
    """Decode the opaque per-challenge config into a ZoneConfig.

    Accepts the already-parsed JSON object or its raw text/bytes form.
    Unknown fields are ignored.
    """
    if raw is None:
        raise ConfigError("Missing zone_id field")

    data = raw
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise ConfigError("error decoding solver config", cause=exc) from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"solver config must be a JSON object, got {type(data).__name__}")

    zone_id = data.get("zone_id")
    if zone_id is None:
        raise ConfigError("Missing zone_id field")
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise ConfigError(f"zone_id must be a non-empty string, got: {zone_id!r}")

    return ZoneConfig(zone_id=zone_id.strip())
