"""Shared test fixtures."""

from datetime import timedelta

import pytest

from tzconvert.registry.fixed import FixedOffsetRegistry
from tzconvert.registry.pytz import PytzRegistry
from tzconvert.registry.zoneinfo import ZoneInfoRegistry


@pytest.fixture
def zoneinfo_registry():
    return ZoneInfoRegistry()


@pytest.fixture
def pytz_registry():
    return PytzRegistry()


@pytest.fixture
def fixed_registry():
    return FixedOffsetRegistry(
        {
            "Test/Minus5": timedelta(hours=-5),
            "Test/Plus2": 120,
            "Test/Plus545": timedelta(hours=5, minutes=45),
            "Test/Minus330": -210,
        }
    )
