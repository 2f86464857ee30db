"""Timezone utilities for US/Eastern market time."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Naive datetimes are stored and entered as Eastern wall time
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def to_naive_eastern(dt: datetime) -> datetime:
    """Eastern wall time without tzinfo, as persisted in SQLite DateTime columns."""
    return to_eastern(dt).replace(tzinfo=None)


def market_year(dt: datetime) -> int:
    """Calendar year of a timestamp as observed in US/Eastern."""
    return to_eastern(dt).year


def parse_datetime_eastern(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it in US/Eastern timezone.

    If no timezone is provided in the string, assumes US/Eastern.
    Date-only strings resolve to midnight.
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        tz = default_tz or EASTERN_TZ
        dt = tz.localize(dt)
    return to_eastern(dt)
