"""Timezone registry backed by pytz."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

import pytz

from tzconvert._constants import DEFAULT_PYTZ_IS_DST
from tzconvert._errors import (
    ERR_MSG_AMBIGUOUS_TIME,
    ERR_MSG_NONEXISTENT_TIME,
    ERR_MSG_UNKNOWN_TIMEZONE,
    InvalidLocalTimeError,
    UnknownTimeZoneError,
)
from tzconvert.registry._base import TimeZoneRegistry

logger = logging.getLogger(__name__)


class PytzRegistry(TimeZoneRegistry):
    """Olson zones from pytz.

    pytz zones cannot be attached with ``replace(tzinfo=...)``, so wall
    clocks go through ``zone.localize``. ``is_dst`` picks the side of a DST
    transition: False means standard time, True daylight time, and None
    rejects ambiguous or non-existent wall clocks with InvalidLocalTimeError.
    """

    name = "pytz"

    def __init__(self, *, is_dst: bool | None = DEFAULT_PYTZ_IS_DST) -> None:
        self.is_dst = is_dst

    def get_zone(self, tz_id: str) -> tzinfo:
        try:
            return pytz.timezone(tz_id)
        except pytz.UnknownTimeZoneError as e:
            details = f"pytz has no timezone {tz_id!r}"
            logger.debug(details)
            raise UnknownTimeZoneError(ERR_MSG_UNKNOWN_TIMEZONE, details, wrapped=e) from e

    def localize(self, wall: datetime, zone: tzinfo) -> datetime:
        localize = getattr(zone, "localize", None)
        if localize is None:
            # pytz.utc and fixed offsets are plain tzinfo objects
            return wall.replace(tzinfo=zone)
        try:
            return localize(wall, is_dst=self.is_dst)
        except pytz.AmbiguousTimeError as e:
            raise InvalidLocalTimeError(
                ERR_MSG_AMBIGUOUS_TIME,
                f"{wall.isoformat()} is ambiguous in {zone}",
                wrapped=e,
            ) from e
        except pytz.NonExistentTimeError as e:
            raise InvalidLocalTimeError(
                ERR_MSG_NONEXISTENT_TIME,
                f"{wall.isoformat()} does not exist in {zone}",
                wrapped=e,
            ) from e

    def __repr__(self) -> str:
        return f"PytzRegistry(is_dst={self.is_dst!r})"
