"""Timezone registry backed by the standard library zoneinfo database."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzconvert._errors import ERR_MSG_UNKNOWN_TIMEZONE, UnknownTimeZoneError
from tzconvert.registry._base import TimeZoneRegistry

logger = logging.getLogger(__name__)


class ZoneInfoRegistry(TimeZoneRegistry):
    """IANA zones from the host database, falling back to the tzdata package.

    Wall clocks in a DST gap or overlap are resolved by PEP 495 ``fold``:
    fold=0 (the default) takes the offset in effect before the transition.
    """

    name = "zoneinfo"

    def get_zone(self, tz_id: str) -> ZoneInfo:
        try:
            return ZoneInfo(tz_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            # OSError covers directory names such as "America"
            details = f"zoneinfo has no timezone {tz_id!r}: {e}"
            logger.debug(details)
            raise UnknownTimeZoneError(ERR_MSG_UNKNOWN_TIMEZONE, details, wrapped=e) from e
