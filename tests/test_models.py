"""Tests for designate_solver.models."""

from designate_solver.errors import ConfigError, PresentError
from designate_solver.models import ChallengeRequest, ChallengeResponse, RecordSet

_CERT_MANAGER_REQUEST = {
    "uid": "0f6b1d2c",
    "action": "Present",
    "type": "dns-01",
    "dnsName": "example.com",
    "key": "abc123",
    "resourceNamespace": "default",
    "resolvedFQDN": "_acme-challenge.example.com.",
    "resolvedZone": "example.com.",
    "allowAmbientCredentials": False,
    "config": {"zone_id": "zone-123"},
}


class TestChallengeRequest:
    def test_from_cert_manager_json(self):
        req = ChallengeRequest.from_dict(_CERT_MANAGER_REQUEST)

        assert req.uid == "0f6b1d2c"
        assert req.action == "Present"
        assert req.dns_name == "example.com"
        assert req.key == "abc123"
        assert req.resolved_fqdn == "_acme-challenge.example.com."
        assert req.resolved_zone == "example.com."
        assert req.config == {"zone_id": "zone-123"}

    def test_config_is_optional(self):
        data = {k: v for k, v in _CERT_MANAGER_REQUEST.items() if k != "config"}
        assert ChallengeRequest.from_dict(data).config is None

    def test_to_dict_round_trips_fields(self):
        req = ChallengeRequest.from_dict(_CERT_MANAGER_REQUEST)
        restored = ChallengeRequest.from_dict(req.to_dict())
        assert restored == req


class TestRecordSet:
    def test_from_dict_defaults(self):
        rs = RecordSet.from_dict({"id": "rs-1", "name": "_acme-challenge.example.com.", "records": ["v"]})

        assert rs.zone_id == ""
        assert rs.type == "TXT"
        assert rs.records == ("v",)

    def test_to_dict_lists_records(self):
        rs = RecordSet(id="rs-1", zone_id="zone-123", name="n.", records=("a", "b"), ttl=600)
        assert rs.to_dict()["records"] == ["a", "b"]
        assert rs.to_dict()["ttl"] == 600


class TestChallengeResponse:
    def test_success(self):
        assert ChallengeResponse(uid="u1", success=True).to_dict() == {"uid": "u1", "success": True}

    def test_retryable_failure_is_internal_error(self):
        err = PresentError("Could not create record x")
        status = ChallengeResponse(uid="u1", success=False, error=err).to_dict()["status"]

        assert status == {
            "status": "Failure",
            "message": "Could not create record x",
            "reason": "InternalError",
            "code": 500,
        }

    def test_config_failure_is_bad_request(self):
        err = ConfigError("Missing zone_id field")
        status = ChallengeResponse(uid="u1", success=False, error=err).to_dict()["status"]

        assert status["reason"] == "BadRequest"
        assert status["code"] == 400
