"""Abstract base class for Designate record-set clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Self

from designate_solver.models import RecordSet


class DesignateClient(ABC):
    """Interface to the record-set operations of a DNS zone service.

    Implementations raise DesignateApiError when a remote call fails.
    """

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def list_recordsets(self, zone_id: str, *, type: str, name: str) -> list[RecordSet]:
        """Return every record-set in the zone matching type and name.

        All result pages are drained before returning.
        """

    @abstractmethod
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
        """Create a record-set and return it as stored by the service."""

    @abstractmethod
    def update_recordset(self, zone_id: str, recordset_id: str, *, records: Sequence[str]) -> RecordSet:
        """Replace the values of an existing record-set."""

    @abstractmethod
    def delete_recordset(self, zone_id: str, recordset_id: str) -> None:
        """Delete a record-set. Deleting a record-set that no longer exists is not an error."""
