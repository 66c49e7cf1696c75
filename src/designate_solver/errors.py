"""Error taxonomy for challenge reconciliation failures."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIG = "config"
    LOOKUP = "lookup"
    PRESENT = "present"
    CLEANUP = "cleanup"


class Step(str, Enum):
    """Remote operation that was in flight when a failure happened."""

    LOOKUP = "lookup"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class DesignateApiError(Exception):
    """Raised by DesignateClient implementations when a remote call fails."""


class SolverError(Exception):
    """Base class for errors surfaced to the challenge controller.

    Carries enough context (zone, record name, record-set id and the
    underlying cause) to diagnose a failed challenge without the logs.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        step: Step | None = None,
        zone_id: str | None = None,
        record_name: str | None = None,
        recordset_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.step = step
        self.zone_id = zone_id
        self.record_name = record_name
        self.recordset_id = recordset_id
        self.cause = cause

    @property
    def retryable(self) -> bool:
        """Whether re-driving the same request may succeed."""
        return self.kind is not ErrorKind.CONFIG

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class ConfigError(SolverError):
    kind = ErrorKind.CONFIG


class RecordLookupError(SolverError):
    kind = ErrorKind.LOOKUP


class PresentError(SolverError):
    kind = ErrorKind.PRESENT


class CleanUpError(SolverError):
    kind = ErrorKind.CLEANUP
