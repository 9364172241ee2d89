"""Tests for entities, the live observables and configuration helpers."""

from datetime import timedelta, timezone

import pytest

from randstr_service.common.config import DEFAULT_DATABASE_URL, ServiceConfig
from randstr_service.data.entities import RandomStringData, parse_created
from randstr_service.data.live import StateFlow


def test_formatted_date_in_utc(random_string):
    assert random_string.formatted_date(timezone.utc) == "Oct 01, 2024 12:00:00"


def test_formatted_date_converts_time_zone(random_string):
    assert random_string.formatted_date(timezone(timedelta(hours=2))) == "Oct 01, 2024 14:00:00"


@pytest.mark.parametrize(
    "created",
    ["2024-10-01T12:00:00Z", "2024-10-01T12:00:00+00:00", "2024-10-01T12:00:00"],
)
def test_parse_created_is_utc(created):
    parsed = parse_created(created)
    assert parsed.utcoffset() == timedelta(0)
    assert parsed.hour == 12


def test_records_are_immutable(random_string):
    with pytest.raises(AttributeError):
        random_string.value = "changed"


def test_with_id_returns_copy():
    record = RandomStringData(value="abc", length=3, created="2024-10-01T12:00:00Z")
    stored = record.with_id(5)
    assert record.id is None
    assert stored.id == 5
    assert stored.value == record.value


def test_state_flow_skips_equal_values():
    flow = StateFlow(0)
    seen = []
    flow.subscribe(seen.append)

    flow.set(1)
    flow.set(1)
    flow.set(2)

    assert seen == [0, 1, 2]
    assert flow.value == 2


def test_state_flow_survives_failing_subscriber():
    flow = StateFlow("a")
    seen = []

    def broken(value):
        if value == "b":
            raise RuntimeError("subscriber failure")

    flow.subscribe(broken)
    flow.subscribe(seen.append)
    flow.set("b")

    assert seen == ["a", "b"]


def test_config_defaults():
    config = ServiceConfig.from_env({})
    assert config.database_url == DEFAULT_DATABASE_URL
    assert config.provider_timeout == 30.0
    assert config.io_workers == 4


def test_config_from_env_and_overrides():
    config = ServiceConfig.from_env(
        {"DATABASE_URL": "sqlite://", "PROVIDER_URL": "http://p:1", "PROVIDER_TIMEOUT": "2.5", "IO_WORKERS": "1"}
    )
    assert config.provider_url == "http://p:1"
    assert config.provider_timeout == 2.5
    assert config.io_workers == 1

    overridden = config.with_overrides(provider_url="http://q:2", database_url=None)
    assert overridden.provider_url == "http://q:2"
    assert overridden.database_url == "sqlite://"


@pytest.mark.parametrize(
    "created, microsecond",
    [("2024-10-01T12:00:00.123456789Z", 123456), ("2024-10-01T12:00:00.5Z", 500000)],
)
def test_parse_created_fractional_seconds(created, microsecond):
    parsed = parse_created(created)
    assert parsed.microsecond == microsecond
    assert RandomStringData(value="x", length=1, created=created).formatted_date(timezone.utc) == "Oct 01, 2024 12:00:00"
