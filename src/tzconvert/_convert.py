"""Conversion between UTC and named timezones, offsets and timestamp formats.

All functions are stateless. Functions that resolve a timezone identifier
accept a ``registry`` keyword; when omitted the zoneinfo registry is used.
An identifier the registry does not know raises UnknownTimeZoneError, which
is a ``LookupError``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tzconvert._constants import (
    DEFAULT_REGISTRY_NAME,
    NANOSECONDS_PER_TICK,
    TICKS_PER_MICROSECOND,
    TICKS_PER_SECOND,
    UNIX_EPOCH,
)
from tzconvert._kind import DateTimeKind, specify_kind
from tzconvert.registry import TimeZoneRegistry, get_registry

_default_registry = get_registry(DEFAULT_REGISTRY_NAME)

_ONE_MINUTE = timedelta(minutes=1)


def _resolve(registry: TimeZoneRegistry | None) -> TimeZoneRegistry:
    if registry is None:
        return _default_registry
    return registry


def _split_offset(offset: timedelta) -> tuple[str, int, int]:
    """Split an offset into sign, whole hours and remaining minutes."""
    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(offset) // _ONE_MINUTE
    hours, minutes = divmod(total_minutes, 60)
    return sign, hours, minutes


def utc_now() -> datetime:
    """Current host time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def convert_utc_to_local(
    tz_id: str,
    utc_instant: datetime,
    *,
    registry: TimeZoneRegistry | None = None,
) -> datetime:
    """Convert a UTC datetime to the wall clock of ``tz_id``.

    Args:
        tz_id: Timezone identifier, e.g. ``"Europe/Paris"``.
        utc_instant: The instant to convert. A naive value is taken to be UTC;
            the caller is responsible for it actually holding UTC.
        registry: Registry used to resolve ``tz_id``.

    Returns:
        An aware datetime carrying the zone of ``tz_id``.

    Raises:
        UnknownTimeZoneError: If ``tz_id`` is not known to the registry.
    """
    registry = _resolve(registry)
    if utc_instant.tzinfo is None:
        utc_instant = specify_kind(utc_instant, DateTimeKind.UTC)
    zone = registry.get_zone(tz_id)
    return registry.from_utc(utc_instant, zone)


def convert_local_to_utc(
    tz_id: str,
    local_instant: datetime,
    *,
    registry: TimeZoneRegistry | None = None,
) -> datetime:
    """Convert a wall-clock reading in ``tz_id`` to UTC.

    Any ``tzinfo`` on ``local_instant`` is discarded: the wall clock is read
    in ``tz_id``, which need not be the host's zone. Wall clocks inside a DST
    gap or overlap are resolved by the registry (``fold`` for zoneinfo,
    ``is_dst`` for pytz).

    Raises:
        UnknownTimeZoneError: If ``tz_id`` is not known to the registry.
        InvalidLocalTimeError: If the registry rejects the wall clock.
    """
    registry = _resolve(registry)
    wall = specify_kind(local_instant, DateTimeKind.UNSPECIFIED)
    zone = registry.get_zone(tz_id)
    return registry.localize(wall, zone).astimezone(timezone.utc)


def get_local_now(tz_id: str, *, registry: TimeZoneRegistry | None = None) -> datetime:
    """Current time expressed in ``tz_id``."""
    return convert_utc_to_local(tz_id, utc_now(), registry=registry)


def format_iso8601(instant: datetime) -> str:
    """Render ``instant`` as ``yyyy-MM-ddTHH:mm:ss.fffffffzzz``.

    The seven fractional digits are 100 ns ticks; values exposing a
    ``nanosecond`` attribute (such as ``pandas.Timestamp``) fill the last
    digit. The zone is the instant's own offset, ``+00:00`` when naive.

    Example:
        >>> format_iso8601(datetime(2012, 3, 28, 12, 8, 16, 227787,
        ...     tzinfo=timezone(timedelta(hours=2))))
        '2012-03-28T12:08:16.2277870+02:00'
    """
    fraction = (
        instant.microsecond * TICKS_PER_MICROSECOND
        + getattr(instant, "nanosecond", 0) // NANOSECONDS_PER_TICK
    )
    sign, hours, minutes = _split_offset(instant.utcoffset() or timedelta(0))
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{fraction:07d}{sign}{hours:02d}:{minutes:02d}"
    )


def get_offset_string(
    instant: datetime,
    tz_id: str,
    *,
    registry: TimeZoneRegistry | None = None,
) -> str:
    """Offset of ``tz_id`` at ``instant`` as ``±H:M``.

    Hours and minutes are not zero padded: UTC-5 renders as ``-5:0`` and
    UTC+5:45 as ``+5:45``. A zero offset renders as ``+0:0``.

    Raises:
        UnknownTimeZoneError: If ``tz_id`` is not known to the registry.
    """
    offset = _resolve(registry).utc_offset(instant, tz_id)
    sign, hours, minutes = _split_offset(offset)
    return f"{sign}{hours}:{minutes}"


def get_offset(
    instant: datetime,
    tz_id: str,
    *,
    registry: TimeZoneRegistry | None = None,
) -> int:
    """Whole hours of the offset of ``tz_id`` at ``instant``.

    Minutes are truncated toward zero, so UTC-3:30 gives -3.

    Raises:
        UnknownTimeZoneError: If ``tz_id`` is not known to the registry.
    """
    offset = _resolve(registry).utc_offset(instant, tz_id)
    sign, hours, _ = _split_offset(offset)
    return -hours if sign == "-" else hours


def to_unix_timestamp(instant: datetime) -> int:
    """Whole seconds between 1970-01-01T00:00:00 and ``instant``.

    Both sides are compared as wall clocks: ``instant`` is not normalized to
    UTC first, so pass a UTC value to get a true Unix timestamp. The result
    is truncated toward zero.
    """
    delta = instant.replace(tzinfo=None) - UNIX_EPOCH
    ticks = (
        ((delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds)
        * TICKS_PER_MICROSECOND
        + getattr(delta, "nanoseconds", 0) // NANOSECONDS_PER_TICK
    )
    seconds = abs(ticks) // TICKS_PER_SECOND
    return -seconds if ticks < 0 else seconds
