"""OpenStack Designate client: manage record-sets via openstacksdk."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from keystoneauth1 import exceptions as ks_exceptions
from openstack import exceptions as sdk_exceptions
from openstack.connection import Connection
from openstack.dns.v2.recordset import Recordset

from designate_solver.designate.base import DesignateClient
from designate_solver.errors import DesignateApiError
from designate_solver.models import RecordSet

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (sdk_exceptions.SDKException, ks_exceptions.ClientException)


def _to_record_set(resource: Recordset, zone_id: str) -> RecordSet:
    return RecordSet(
        id=resource.id,
        zone_id=resource.zone_id or zone_id,
        name=resource.name,
        type=resource.type,
        records=tuple(resource.records or ()),
        ttl=resource.ttl,
        description=resource.description,
    )


class OpenStackDesignateClient(DesignateClient):
    """Record-set client backed by the Designate v2 API."""

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    def list_recordsets(self, zone_id: str, *, type: str, name: str) -> list[RecordSet]:
        try:
            # The proxy yields across every page; list() drains them all.
            resources = list(self._conn.dns.recordsets(zone_id, type=type, name=name))
        except _REMOTE_ERRORS as exc:
            raise DesignateApiError(f"Could not list {type} record-sets named {name} in zone {zone_id}") from exc
        logger.debug("Listed %d %s record-set(s) named %s in zone %s", len(resources), type, name, zone_id)
        return [_to_record_set(r, zone_id) for r in resources]

    def create_recordset(
        self,
        zone_id: str,
        *,
        name: str,
        type: str,
        ttl: int,
        description: str,
        records: Sequence[str],
    ) -> RecordSet:
        try:
            created = self._conn.dns.create_recordset(
                zone_id,
                name=name,
                type=type,
                ttl=ttl,
                description=description,
                records=list(records),
            )
        except _REMOTE_ERRORS as exc:
            raise DesignateApiError(f"Could not create {type} record-set {name} in zone {zone_id}") from exc
        logger.info("Created %s record-set %s in zone %s", type, name, zone_id)
        return _to_record_set(created, zone_id)

    def update_recordset(self, zone_id: str, recordset_id: str, *, records: Sequence[str]) -> RecordSet:
        target = Recordset.existing(id=recordset_id, zone_id=zone_id)
        try:
            updated = self._conn.dns.update_recordset(target, records=list(records))
        except _REMOTE_ERRORS as exc:
            raise DesignateApiError(f"Could not update record-set {recordset_id} in zone {zone_id}") from exc
        logger.info("Updated record-set %s in zone %s", recordset_id, zone_id)
        return _to_record_set(updated, zone_id)

    def delete_recordset(self, zone_id: str, recordset_id: str) -> None:
        target = Recordset.existing(id=recordset_id, zone_id=zone_id)
        try:
            self._conn.dns.delete_recordset(target, ignore_missing=True)
        except _REMOTE_ERRORS as exc:
            raise DesignateApiError(f"Could not delete record-set {recordset_id} in zone {zone_id}") from exc
        logger.info("Deleted record-set %s in zone %s", recordset_id, zone_id)

    def close(self) -> None:
        """Close the underlying OpenStack connection."""
        self._conn.close()
