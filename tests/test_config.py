"""Tests for designate_solver.config."""

import pytest

from designate_solver.config import decode_zone_config, load_config
from designate_solver.errors import ConfigError, ErrorKind
from designate_solver.models import ZoneConfig


def test_load_config_required_vars(monkeypatch):
    monkeypatch.setenv("GROUP_NAME", "acme.example.com")
    monkeypatch.delenv("OS_CLOUD", raising=False)
    monkeypatch.delenv("OS_REGION_NAME", raising=False)
    monkeypatch.delenv("DESIGNATE_RECORD_TTL", raising=False)

    cfg = load_config()
    assert cfg.group_name == "acme.example.com"
    assert cfg.os_cloud is None
    assert cfg.os_region_name is None
    assert cfg.record_ttl == 600


def test_load_config_custom_optionals(monkeypatch):
    monkeypatch.setenv("GROUP_NAME", "acme.example.com")
    monkeypatch.setenv("OS_CLOUD", "prod")
    monkeypatch.setenv("OS_REGION_NAME", "RegionOne")
    monkeypatch.setenv("DESIGNATE_RECORD_TTL", "300")

    cfg = load_config()
    assert cfg.os_cloud == "prod"
    assert cfg.os_region_name == "RegionOne"
    assert cfg.record_ttl == 300


def test_load_config_missing_group_name(monkeypatch):
    monkeypatch.delenv("GROUP_NAME", raising=False)

    with pytest.raises(ValueError, match="GROUP_NAME"):
        load_config()


def test_load_config_invalid_ttl(monkeypatch):
    monkeypatch.setenv("GROUP_NAME", "acme.example.com")
    monkeypatch.setenv("DESIGNATE_RECORD_TTL", "soon")

    with pytest.raises(ValueError, match="DESIGNATE_RECORD_TTL must be an integer"):
        load_config()


def test_load_config_zero_ttl(monkeypatch):
    monkeypatch.setenv("GROUP_NAME", "acme.example.com")
    monkeypatch.setenv("DESIGNATE_RECORD_TTL", "0")

    with pytest.raises(ValueError, match="DESIGNATE_RECORD_TTL must be a positive integer"):
        load_config()


class TestDecodeZoneConfig:
    def test_decodes_mapping(self):
        assert decode_zone_config({"zone_id": "zone-123"}) == ZoneConfig(zone_id="zone-123")

    def test_decodes_json_bytes(self):
        assert decode_zone_config(b'{"zone_id": "zone-123"}') == ZoneConfig(zone_id="zone-123")

    def test_decodes_json_text_and_ignores_unknown_fields(self):
        cfg = decode_zone_config('{"zone_id": "zone-9", "email": "ops@example.com"}')
        assert cfg.zone_id == "zone-9"

    def test_missing_config_is_config_error(self):
        with pytest.raises(ConfigError, match="Missing zone_id field") as excinfo:
            decode_zone_config(None)
        assert excinfo.value.kind is ErrorKind.CONFIG
        assert excinfo.value.retryable is False

    def test_missing_zone_id_field(self):
        with pytest.raises(ConfigError, match="Missing zone_id field"):
            decode_zone_config({})

    def test_empty_zone_id(self):
        with pytest.raises(ConfigError, match="non-empty"):
            decode_zone_config({"zone_id": "  "})

    def test_non_string_zone_id(self):
        with pytest.raises(ConfigError, match="non-empty string"):
            decode_zone_config({"zone_id": 42})

    def test_malformed_json(self):
        with pytest.raises(ConfigError, match="error decoding solver config") as excinfo:
            decode_zone_config(b"{zone_id:")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_non_object_json(self):
        with pytest.raises(ConfigError, match="JSON object"):
            decode_zone_config("[1, 2]")
