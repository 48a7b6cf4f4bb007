"""Abstract base class for timezone registries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, tzinfo


class TimeZoneRegistry(ABC):
    """Abstract base class defining the timezone lookup interface.

    All knowledge of a timezone database lives behind this interface.
    Conversion code only asks a registry for a zone, how to attach that
    zone to a wall clock, and how to move a UTC instant into it.
    """

    name: str = ""

    @abstractmethod
    def get_zone(self, tz_id: str) -> tzinfo:
        """Resolve ``tz_id``, raising UnknownTimeZoneError if it is not known."""

    def localize(self, wall: datetime, zone: tzinfo) -> datetime:
        """Interpret the naive ``wall`` clock reading in ``zone``."""
        return wall.replace(tzinfo=zone)

    def from_utc(self, utc: datetime, zone: tzinfo) -> datetime:
        """Express the aware instant ``utc`` in ``zone``."""
        return utc.astimezone(zone)

    def utc_offset(self, instant: datetime, tz_id: str) -> timedelta:
        """Offset of ``tz_id`` from UTC at ``instant``.

        Naive instants are wall-clock readings in the zone; aware instants
        are moved into the zone first.
        """
        zone = self.get_zone(tz_id)
        if instant.tzinfo is None:
            local = self.localize(instant, zone)
        else:
            local = self.from_utc(instant, zone)
        offset = local.utcoffset()
        if offset is None:
            return timedelta(0)
        return offset

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
