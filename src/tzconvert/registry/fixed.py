"""Timezone registry of fixed offsets."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta, timezone

from tzconvert._errors import ERR_MSG_UNKNOWN_TIMEZONE, UnknownTimeZoneError
from tzconvert.registry._base import TimeZoneRegistry

logger = logging.getLogger(__name__)


class FixedOffsetRegistry(TimeZoneRegistry):
    """Zones that never change offset, keyed by identifier.

    Useful as a test double or for embedded zone tables. Offsets are
    ``timedelta`` values or whole minutes.
    """

    name = "fixed"

    def __init__(self, offsets: Mapping[str, timedelta | int]) -> None:
        self._zones: dict[str, timezone] = {}
        for tz_id, offset in offsets.items():
            if not isinstance(offset, timedelta):
                offset = timedelta(minutes=offset)
            self._zones[tz_id] = timezone(offset, tz_id)

    @property
    def identifiers(self) -> list[str]:
        return sorted(self._zones)

    def get_zone(self, tz_id: str) -> timezone:
        zone = self._zones.get(tz_id)
        if zone is None:
            details = f"fixed registry has no timezone {tz_id!r}"
            logger.debug(details)
            raise UnknownTimeZoneError(ERR_MSG_UNKNOWN_TIMEZONE, details)
        return zone

    def __len__(self) -> int:
        return len(self._zones)

    def __repr__(self) -> str:
        return f"FixedOffsetRegistry({self.identifiers!r})"
