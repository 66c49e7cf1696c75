"""Data classes exchanged between the host entry point, the solver and Designate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from designate_solver.errors import SolverError

TXT = "TXT"


@dataclass(frozen=True)
class ChallengeRequest:
    """A single DNS-01 challenge as delivered by cert-manager.

    ``config`` is left opaque here; it is decoded per call into a ZoneConfig.
    """

    dns_name: str
    resolved_fqdn: str
    key: str
    config: Any = None
    uid: str = ""
    action: str = ""
    resolved_zone: str = ""

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "action": self.action,
            "type": "dns-01",
            "dnsName": self.dns_name,
            "key": self.key,
            "resolvedFQDN": self.resolved_fqdn,
            "resolvedZone": self.resolved_zone,
            "config": self.config,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeRequest:
        return cls(
            uid=data.get("uid", ""),
            action=data.get("action", ""),
            dns_name=data["dnsName"],
            resolved_fqdn=data["resolvedFQDN"],
            resolved_zone=data.get("resolvedZone", ""),
            key=data["key"],
            config=data.get("config"),
        )


@dataclass(frozen=True)
class ZoneConfig:
    """Per-challenge solver configuration."""

    zone_id: str


@dataclass(frozen=True)
class RecordSet:
    """Snapshot of a Designate record-set. Remote state is the source of truth."""

    id: str
    zone_id: str
    name: str
    type: str = TXT
    records: tuple[str, ...] = ()
    ttl: int | None = None
    description: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "zone_id": self.zone_id,
            "name": self.name,
            "type": self.type,
            "records": list(self.records),
            "ttl": self.ttl,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RecordSet:
        return cls(
            id=data["id"],
            zone_id=data.get("zone_id") or "",
            name=data["name"],
            type=data.get("type", TXT),
            records=tuple(data.get("records") or ()),
            ttl=data.get("ttl"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class ChallengeResponse:
    """Outcome of a challenge request, rendered in cert-manager's response shape."""

    uid: str
    success: bool
    error: SolverError | None = None

    def to_dict(self) -> dict:
        result: dict = {"uid": self.uid, "success": self.success}
        if self.error is not None:
            retryable = self.error.retryable
            result["status"] = {
                "status": "Failure",
                "message": str(self.error),
                "reason": "InternalError" if retryable else "BadRequest",
                "code": 500 if retryable else 400,
            }
        return result
