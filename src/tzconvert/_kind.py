"""Kind tags for datetime values."""

from __future__ import annotations

import enum
from datetime import datetime, timedelta, timezone


class DateTimeKind(enum.StrEnum):
    UNSPECIFIED = "unspecified"
    UTC = "utc"
    LOCAL = "local"


_UTC_ZONE_NAMES = frozenset({"UTC", "Etc/UTC", "Etc/Universal", "Universal", "Zulu"})


def _is_utc_zone(dt: datetime) -> bool:
    tz = dt.tzinfo
    if tz is timezone.utc:
        return True
    if dt.utcoffset() != timedelta(0):
        return False
    # ZoneInfo exposes .key, pytz exposes .zone
    name = getattr(tz, "key", None) or getattr(tz, "zone", None)
    return name in _UTC_ZONE_NAMES


def kind_of(dt: datetime) -> DateTimeKind:
    """Return the kind tag a datetime carries through its ``tzinfo``."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        return DateTimeKind.UNSPECIFIED
    if _is_utc_zone(dt):
        return DateTimeKind.UTC
    return DateTimeKind.LOCAL


def specify_kind(dt: datetime, kind: DateTimeKind) -> datetime:
    """Retag ``dt`` as ``kind`` without moving its wall clock.

    UNSPECIFIED drops ``tzinfo``, UTC attaches ``timezone.utc`` and LOCAL
    attaches the host's local zone. ``fold`` is kept.
    """
    naive = dt.replace(tzinfo=None)
    if kind == DateTimeKind.UNSPECIFIED:
        return naive
    if kind == DateTimeKind.UTC:
        return naive.replace(tzinfo=timezone.utc)
    if kind == DateTimeKind.LOCAL:
        return naive.astimezone()
    raise ValueError(f"unknown datetime kind: {kind!r}")
