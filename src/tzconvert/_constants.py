"""Format patterns and defaults for timezone conversion."""

from datetime import datetime

ISO8601_FORMAT = "yyyy-MM-ddTHH:mm:ss.fffffffzzz"
"""Pattern rendered by format_iso8601 (seven fractional digits, ``±HH:mm`` zone)."""

UNIX_EPOCH = datetime(1970, 1, 1)
"""Wall-clock epoch; compared against wall clocks, never normalized to UTC."""

TICKS_PER_MICROSECOND = 10
NANOSECONDS_PER_TICK = 100
MICROSECONDS_PER_SECOND = 1_000_000

DEFAULT_REGISTRY_NAME = "zoneinfo"
"""Registry used when callers do not pass one."""

DEFAULT_PYTZ_IS_DST: bool | None = False
"""pytz disambiguation: False resolves ambiguous wall clocks to standard time."""

TICKS_PER_SECOND = TICKS_PER_MICROSECOND * MICROSECONDS_PER_SECOND
