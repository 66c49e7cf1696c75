"""DNS-01 challenge solver — reconcile ACME TXT records in a Designate zone."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from designate_solver.config import decode_zone_config
from designate_solver.designate.base import DesignateClient
from designate_solver.designate.util import absolute_name, same_name, unquote_txt
from designate_solver.errors import (
    CleanUpError,
    ConfigError,
    DesignateApiError,
    PresentError,
    RecordLookupError,
    Step,
)
from designate_solver.models import TXT, ChallengeRequest, RecordSet

logger = logging.getLogger(__name__)

SOLVER_NAME = "designate-solver"
CHALLENGE_TTL = 600


def _record_name(request: ChallengeRequest) -> str:
    try:
        return absolute_name(request.resolved_fqdn)
    except ValueError as exc:
        raise ConfigError("Challenge request has no resolved FQDN", cause=exc) from exc


def _plain_values(record_set: RecordSet) -> list[str]:
    return [unquote_txt(v) for v in record_set.records]


class DesignateSolver:
    """Presents and cleans up DNS-01 challenge records in OpenStack Designate.

    The solver keeps no record state between calls: every operation re-reads
    the zone before mutating it, so independent solver instances can work on
    the same zone. The only shared state is the Designate client, created once
    by ``client_factory`` and then used read-only by concurrent calls.
    """

    def __init__(
        self,
        client_factory: Callable[[], DesignateClient],
        record_ttl: int = CHALLENGE_TTL,
    ) -> None:
        self._client_factory = client_factory
        self._record_ttl = record_ttl
        self._client: DesignateClient | None = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Solver name referenced from an ACME issuer's webhook config."""
        return SOLVER_NAME

    def initialize(self, kube_client_config: Any = None, stop_event: threading.Event | None = None) -> None:
        """Establish the Designate client before the first challenge arrives.

        ``kube_client_config`` and ``stop_event`` are part of the host contract;
        this solver needs neither.
        """
        self._get_client()
        logger.info("Initialized %s", self.name)

    def close(self) -> None:
        """Release the Designate client. A later call re-establishes it."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def _get_client(self) -> DesignateClient:
        with self._lock:
            if self._client is None:
                self._client = self._client_factory()
            return self._client

    def locate(self, zone_id: str, record_name: str) -> list[RecordSet]:
        """Return every TXT record-set in the zone named exactly ``record_name``."""
        client = self._get_client()
        try:
            found = client.list_recordsets(zone_id, type=TXT, name=record_name)
        except DesignateApiError as exc:
            raise RecordLookupError(
                f"Could not list TXT records named {record_name} in zone {zone_id}",
                step=Step.LOOKUP,
                zone_id=zone_id,
                record_name=record_name,
                cause=exc,
            ) from exc
        # The name filter is server-side but may match wildcards; re-check exactly.
        return [rs for rs in found if rs.type.upper() == TXT and same_name(rs.name, record_name)]

    def present(self, request: ChallengeRequest) -> None:
        """Publish ``request.key`` as the only value of the challenge TXT record.

        Safe to call repeatedly: when the record already holds exactly the key,
        nothing is changed.
        """
        zone = decode_zone_config(request.config)
        record_name = _record_name(request)

        try:
            existing = self.locate(zone.zone_id, record_name)
        except RecordLookupError as exc:
            raise PresentError(
                f"Could not check if record {record_name} exists",
                step=Step.LOOKUP,
                zone_id=zone.zone_id,
                record_name=record_name,
                cause=exc,
            ) from exc

        client = self._get_client()

        if not existing:
            try:
                client.create_recordset(
                    zone.zone_id,
                    name=record_name,
                    type=TXT,
                    ttl=self._record_ttl,
                    description=f"The acme record for {request.dns_name}",
                    records=[request.key],
                )
            except DesignateApiError as exc:
                raise PresentError(
                    f"Could not create record {record_name}",
                    step=Step.CREATE,
                    zone_id=zone.zone_id,
                    record_name=record_name,
                    cause=exc,
                ) from exc
            logger.info("Presented challenge record %s in zone %s", record_name, zone.zone_id)
            return

        # Designate keeps every value of a name in a single record-set.
        current = existing[0]
        if _plain_values(current) == [request.key]:
            logger.debug("Challenge record %s already up to date", record_name)
            return

        zone_id = current.zone_id or zone.zone_id
        try:
            client.update_recordset(zone_id, current.id, records=[request.key])
        except DesignateApiError as exc:
            raise PresentError(
                f"Could not update record {record_name}",
                step=Step.UPDATE,
                zone_id=zone_id,
                record_name=record_name,
                recordset_id=current.id,
                cause=exc,
            ) from exc
        logger.info("Replaced stale value of challenge record %s in zone %s", record_name, zone_id)

    def cleanup(self, request: ChallengeRequest) -> None:
        """Remove ``request.key`` from the challenge TXT record.

        Only this challenge's value is removed. Record-sets holding other values
        for the same name belong to concurrent challenges and are left alone.
        Finding nothing to remove is a success. The first failure aborts; changes
        already made in this call are kept.
        """
        zone = decode_zone_config(request.config)
        record_name = _record_name(request)

        existing = self.locate(zone.zone_id, record_name)
        if not existing:
            logger.debug("No challenge record %s in zone %s, nothing to clean up", record_name, zone.zone_id)
            return

        client = self._get_client()
        for record_set in existing:
            zone_id = record_set.zone_id or zone.zone_id
            plain = _plain_values(record_set)
            if request.key not in plain:
                logger.warning(
                    "Leaving TXT record-set %s (%s) in zone %s untouched: value belongs to another challenge",
                    record_set.id,
                    record_name,
                    zone_id,
                )
                continue

            remaining = [raw for raw, value in zip(record_set.records, plain) if value != request.key]
            try:
                if remaining:
                    client.update_recordset(zone_id, record_set.id, records=remaining)
                else:
                    client.delete_recordset(zone_id, record_set.id)
            except DesignateApiError as exc:
                step = Step.UPDATE if remaining else Step.DELETE
                raise CleanUpError(
                    f"Could not {step.value} record {record_set.id} in zone {zone_id}",
                    step=step,
                    zone_id=zone_id,
                    record_name=record_name,
                    recordset_id=record_set.id,
                    cause=exc,
                ) from exc
            logger.info("Cleaned up challenge value from record-set %s (%s) in zone %s", record_set.id, record_name, zone_id)
