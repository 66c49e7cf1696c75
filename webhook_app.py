"""cert-manager webhook entry point — dispatch challenge payloads to the Designate solver."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from designate_solver.config import load_config
from designate_solver.designate import get_designate_client
from designate_solver.errors import SolverError
from designate_solver.models import ChallengeRequest, ChallengeResponse
from designate_solver.solver import DesignateSolver

API_VERSION = "acme.cert-manager.io/v1alpha1"

_solver: DesignateSolver | None = None


def get_solver() -> DesignateSolver:
    """Return the process-wide solver, building and initializing it on first use."""
    global _solver
    if _solver is None:
        config = load_config()
        solver = DesignateSolver(
            client_factory=partial(get_designate_client, config),
            record_ttl=config.record_ttl,
        )
        solver.initialize()
        logging.info("Serving solver %s under group %s", solver.name, config.group_name)
        _solver = solver
    return _solver


def _run(operation: Callable[[ChallengeRequest], None], request: ChallengeRequest) -> ChallengeResponse:
    try:
        operation(request)
    except SolverError as exc:
        logging.error("Challenge %s for %s failed: %s", request.uid, request.resolved_fqdn, exc)
        return ChallengeResponse(uid=request.uid, success=False, error=exc)
    return ChallengeResponse(uid=request.uid, success=True)


# Present: publish the challenge TXT record
def present(request: dict) -> dict:
    challenge = ChallengeRequest.from_dict(request)
    return _run(get_solver().present, challenge).to_dict()


# CleanUp: remove this challenge's TXT value
def cleanup(request: dict) -> dict:
    challenge = ChallengeRequest.from_dict(request)
    return _run(get_solver().cleanup, challenge).to_dict()


_ACTIONS: dict[str, Callable[[dict], dict]] = {
    "Present": present,
    "CleanUp": cleanup,
}


def handle_challenge_payload(payload: dict) -> dict:
    """Answer a cert-manager ``ChallengePayload`` with its ``response`` filled in."""
    request = payload.get("request")
    if not request:
        raise ValueError("ChallengePayload has no request")
    action = request.get("action")
    handler = _ACTIONS.get(action)
    if handler is None:
        raise ValueError(f"Unknown challenge action: {action!r}")
    return {
        "apiVersion": payload.get("apiVersion", API_VERSION),
        "kind": "ChallengePayload",
        "response": handler(request),
    }
