#!/usr/bin/env python3
"""
Utility functions for IGC to GeoJSON converter
"""

import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from igc_constants import (
    NEWLINE_RE,
    EARTH_RADIUS_METERS,
    DATE_FORMAT_YMD,
    TIME_FORMAT_HM
)


def splitLines(text: Union[str, bytes]) -> List[str]:
    """Split a document on \\r\\n, \\r or \\n"""
    if isinstance(text, bytes):
        text = text.decode('utf-8', errors='ignore')
    return NEWLINE_RE.split(text)


def calendarTimestamp(year: int, month: int, day: int,
                      hour: int, minute: int, second: int) -> int:
    """
    Seconds since the Unix epoch for a UTC calendar moment.

    month is 0-based. Out-of-range month, day, hour, minute and second
    values carry into the next larger unit, so day 32 of January is
    February 1st and month 12 is January of the following year.
    """
    carry_years, month = divmod(month, 12)
    moment = datetime(year + carry_years, month + 1, 1, tzinfo=timezone.utc)
    moment += timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
    return int(moment.timestamp())


def calculateDistance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on earth.
    Returns distance in meters.
    """
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    # Haversine formula
    dlon = lon2_rad - lon1_rad
    dlat = lat2_rad - lat1_rad
    a = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))

    return EARTH_RADIUS_METERS * c


def fromTimestamp(seconds: Optional[float]) -> Optional[datetime]:
    """Convert epoch seconds to an aware UTC datetime"""
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def toYMD(seconds: Optional[float]) -> str:
    """Convert epoch seconds to YYYY/MM/DD (UTC)"""
    moment = fromTimestamp(seconds)
    return moment.strftime(DATE_FORMAT_YMD) if moment else "N/A"


def toHM(seconds: Optional[float]) -> str:
    """Convert epoch seconds to HH:MM (UTC)"""
    moment = fromTimestamp(seconds)
    return moment.strftime(TIME_FORMAT_HM) if moment else "N/A"
