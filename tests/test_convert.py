"""UTC <-> local conversion tests."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from tzconvert import (
    convert_local_to_utc,
    convert_utc_to_local,
    get_local_now,
)
from tzconvert import _convert
from tzconvert.registry.pytz import PytzRegistry
from tzconvert.registry.zoneinfo import ZoneInfoRegistry

ALL_REGISTRIES = [
    pytest.param(ZoneInfoRegistry(), id="zoneinfo"),
    pytest.param(PytzRegistry(), id="pytz"),
]


class TestConvertUtcToLocal:
    def test_naive_is_treated_as_utc(self):
        result = convert_utc_to_local("Europe/Paris", datetime(2012, 3, 28, 10, 8, 16))
        assert result.replace(tzinfo=None) == datetime(2012, 3, 28, 12, 8, 16)
        assert result.utcoffset() == timedelta(hours=2)

    def test_aware_utc(self):
        utc = datetime(2024, 1, 15, 17, 0, tzinfo=timezone.utc)
        result = convert_utc_to_local("America/New_York", utc)
        assert result.replace(tzinfo=None) == datetime(2024, 1, 15, 12, 0)
        assert result == utc

    def test_result_carries_zone(self):
        result = convert_utc_to_local("Asia/Tokyo", datetime(2024, 1, 1))
        assert result.tzinfo == ZoneInfo("Asia/Tokyo")

    def test_keeps_microseconds(self):
        result = convert_utc_to_local("Asia/Kolkata", datetime(2024, 1, 1, 0, 0, 0, 123456))
        assert result.replace(tzinfo=None) == datetime(2024, 1, 1, 5, 30, 0, 123456)

    def test_aware_non_utc_input_converts_its_instant(self):
        tokyo = datetime(2024, 1, 1, 9, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        result = convert_utc_to_local("Europe/London", tokyo)
        assert result.replace(tzinfo=None) == datetime(2024, 1, 1, 0, 0)

    @pytest.mark.parametrize("registry", ALL_REGISTRIES)
    def test_summer_and_winter(self, registry):
        winter = convert_utc_to_local("Europe/Paris", datetime(2024, 1, 10, 12), registry=registry)
        summer = convert_utc_to_local("Europe/Paris", datetime(2024, 7, 10, 12), registry=registry)
        assert winter.hour == 13
        assert summer.hour == 14

    def test_fixed_registry(self, fixed_registry):
        result = convert_utc_to_local(
            "Test/Minus330", datetime(2024, 1, 1, 12), registry=fixed_registry
        )
        assert result.replace(tzinfo=None) == datetime(2024, 1, 1, 8, 30)


class TestConvertLocalToUtc:
    def test_basic(self):
        result = convert_local_to_utc("Europe/Paris", datetime(2012, 3, 28, 12, 8, 16))
        assert result == datetime(2012, 3, 28, 10, 8, 16, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_existing_tzinfo_is_discarded(self):
        tagged = datetime(2012, 3, 28, 12, 8, 16, tzinfo=timezone.utc)
        result = convert_local_to_utc("Europe/Paris", tagged)
        assert result == datetime(2012, 3, 28, 10, 8, 16, tzinfo=timezone.utc)

    def test_other_zone_tzinfo_is_discarded(self):
        tagged = datetime(2024, 1, 15, 12, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        result = convert_local_to_utc("America/New_York", tagged)
        assert result == datetime(2024, 1, 15, 17, 0, tzinfo=timezone.utc)

    def test_half_hour_zone(self):
        result = convert_local_to_utc("Asia/Kolkata", datetime(2024, 1, 1, 5, 30))
        assert result == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("registry", ALL_REGISTRIES)
    def test_registries_agree_outside_transitions(self, registry):
        result = convert_local_to_utc(
            "America/New_York", datetime(2024, 7, 4, 12, 0), registry=registry
        )
        assert result == datetime(2024, 7, 4, 16, 0, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_fixed_registry(self, fixed_registry):
        result = convert_local_to_utc(
            "Test/Plus2", datetime(2024, 1, 1, 12), registry=fixed_registry
        )
        assert result == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "tz_id",
        ["Europe/Paris", "America/New_York", "Asia/Kolkata", "Asia/Kathmandu", "Australia/Adelaide", "UTC"],
    )
    @pytest.mark.parametrize(
        "utc",
        [datetime(2024, 1, 15, 8, 30, 0, 250000), datetime(2024, 7, 15, 23, 59, 59)],
    )
    def test_local_to_utc_undoes_utc_to_local(self, tz_id, utc):
        local = convert_utc_to_local(tz_id, utc)
        assert convert_local_to_utc(tz_id, local) == utc.replace(tzinfo=timezone.utc)


class TestDaylightSavingTransitions:
    """Wall clocks at DST transitions are resolved by the registry.

    Times inside a spring-forward gap do not exist, so they do not survive a
    local -> UTC -> local round trip.
    """

    def test_gap_uses_offset_before_transition(self):
        # 02:30 does not exist in New York on 2024-03-10
        result = convert_local_to_utc("America/New_York", datetime(2024, 3, 10, 2, 30))
        assert result == datetime(2024, 3, 10, 7, 30, tzinfo=timezone.utc)

    def test_gap_does_not_round_trip(self):
        wall = datetime(2024, 3, 10, 2, 30)
        back = convert_utc_to_local("America/New_York", convert_local_to_utc("America/New_York", wall))
        assert back.replace(tzinfo=None) == datetime(2024, 3, 10, 3, 30)

    def test_overlap_fold_zero_is_daylight_time(self):
        result = convert_local_to_utc("America/New_York", datetime(2024, 11, 3, 1, 30))
        assert result == datetime(2024, 11, 3, 5, 30, tzinfo=timezone.utc)

    def test_overlap_fold_one_is_standard_time(self):
        result = convert_local_to_utc("America/New_York", datetime(2024, 11, 3, 1, 30, fold=1))
        assert result == datetime(2024, 11, 3, 6, 30, tzinfo=timezone.utc)

    def test_pytz_overlap_defaults_to_standard_time(self, pytz_registry):
        result = convert_local_to_utc(
            "America/New_York", datetime(2024, 11, 3, 1, 30), registry=pytz_registry
        )
        assert result == datetime(2024, 11, 3, 6, 30, tzinfo=timezone.utc)


class TestGetLocalNow:
    def test_uses_current_utc_time(self, monkeypatch):
        monkeypatch.setattr(
            _convert, "utc_now", lambda: datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        )
        result = get_local_now("Asia/Tokyo")
        assert result.replace(tzinfo=None) == datetime(2024, 1, 1, 9, 0)
        assert result.utcoffset() == timedelta(hours=9)

    def test_is_close_to_host_clock(self):
        before = datetime.now(timezone.utc)
        result = get_local_now("Europe/Paris")
        after = datetime.now(timezone.utc)
        assert before <= result <= after
        assert result.tzinfo == ZoneInfo("Europe/Paris")

    def test_registry_is_forwarded(self, fixed_registry, monkeypatch):
        monkeypatch.setattr(
            _convert, "utc_now", lambda: datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        )
        result = get_local_now("Test/Minus5", registry=fixed_registry)
        assert result.hour == 7
