"""tzconvert - Timezone-aware date conversion and formatting."""

from __future__ import annotations

try:
    from tzconvert._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from tzconvert._constants import ISO8601_FORMAT
from tzconvert._convert import (
    convert_local_to_utc,
    convert_utc_to_local,
    format_iso8601,
    get_local_now,
    get_offset,
    get_offset_string,
    to_unix_timestamp,
    utc_now,
)
from tzconvert._errors import (
    InvalidLocalTimeError,
    TimeConversionError,
    UnknownTimeZoneError,
)
from tzconvert._kind import DateTimeKind, kind_of, specify_kind
from tzconvert.registry import TimeZoneRegistry, get_registry
from tzconvert.registry.fixed import FixedOffsetRegistry
from tzconvert.registry.zoneinfo import ZoneInfoRegistry

__all__ = [
    "convert_local_to_utc",
    "convert_utc_to_local",
    "format_iso8601",
    "get_local_now",
    "get_offset",
    "get_offset_string",
    "get_registry",
    "kind_of",
    "specify_kind",
    "to_unix_timestamp",
    "utc_now",
    "ISO8601_FORMAT",
    "DateTimeKind",
    "FixedOffsetRegistry",
    "TimeZoneRegistry",
    "ZoneInfoRegistry",
    "InvalidLocalTimeError",
    "TimeConversionError",
    "UnknownTimeZoneError",
]
