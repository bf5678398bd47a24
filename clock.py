"""Timezone-resolved "now" for the calendar builds."""

import logging
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Indochina Time (UTC+7)
DEFAULT_TIMEZONE = "Asia/Ho_Chi_Minh"


class ClockUnavailable(RuntimeError):
    """Raised when the current time cannot be resolved in the requested zone."""


def get_zone(tz_name: str) -> ZoneInfo:
    if not isinstance(tz_name, str) or not tz_name.strip():
        raise ClockUnavailable(f"Invalid timezone name: {tz_name!r}")
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ClockUnavailable(f"Unknown timezone '{tz_name}'") from exc


def now(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Return the current time as an aware datetime in *tz_name*."""
    instant = datetime.now(get_zone(tz_name))
    logger.debug("Resolved now in %s: %s", tz_name, instant.isoformat())
    return instant


def seconds_until_midnight(instant: datetime) -> float:
    """Return seconds from *instant* to the next local midnight in its zone."""
    if instant.tzinfo is None:
        raise ValueError("instant must be timezone-aware")
    tomorrow = (instant + timedelta(days=1)).date()
    # Wall-clock midnight in the same zone; converting through UTC keeps
    # the difference right across DST changes.
    midnight = datetime(tomorrow.year, tomorrow.month, tomorrow.day, tzinfo=instant.tzinfo)
    return midnight.timestamp() - instant.timestamp()
