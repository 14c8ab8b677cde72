from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from projecthub.config import Settings
from projecthub.utils import day_bounds, localize, to_storage
from projecthub.utils.datetime import parse_timezone


def _settings(**overrides):
    values = {"database_url": "sqlite://", "secret_key": "s3cret"}
    values.update(overrides)
    return Settings(**values)


def test_defaults():
    settings = _settings()

    assert settings.access_token_expire_minutes == 60
    assert (settings.deadline_check_hour, settings.deadline_check_minute) == (9, 0)
    assert settings.default_activity_role == "client"
    assert settings.log_level == "INFO"


def test_log_level_is_normalized():
    assert _settings(log_level=" debug ").log_level == "DEBUG"

    with pytest.raises(ValidationError):
        _settings(log_level="chatty")


@pytest.mark.parametrize("hour", [-1, 24])
def test_deadline_check_hour_must_be_a_clock_hour(hour):
    with pytest.raises(ValidationError):
        _settings(deadline_check_hour=hour)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("utc+2", timedelta(hours=2)),
    ],
)
def test_parse_timezone_offsets(name, offset):
    assert parse_timezone(name).utcoffset(datetime(2025, 1, 1)) == offset


def test_parse_timezone_accepts_iana_names():
    bogota = parse_timezone("America/Bogota")

    assert bogota.utcoffset(datetime(2025, 6, 1)) == timedelta(hours=-5)


def test_parse_timezone_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timezone("Mars/Olympus_Mons")


def test_naive_values_are_read_as_app_local_time():
    stored = datetime(2025, 12, 10, 9, 30)

    assert localize(stored) == datetime(2025, 12, 10, 9, 30, tzinfo=timezone.utc)
    assert to_storage(localize(stored)) == stored
    assert localize(None) is None
    assert to_storage(None) is None


def test_aware_values_are_converted_before_storage():
    value = datetime(2025, 12, 10, 4, 0, tzinfo=timezone(timedelta(hours=-5)))

    assert to_storage(value) == datetime(2025, 12, 10, 9, 0)


def test_day_bounds_span_24_hours():
    start, end = day_bounds(date(2025, 3, 1))

    assert end - start == timedelta(days=1)
    assert to_storage(start) == datetime(2025, 3, 1)
