#!/usr/bin/env python3
"""
Data models and enums for IGC to GeoJSON converter
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from igc_constants import (
    AltitudeModeName, DEFAULT_YEAR, DEFAULT_MONTH, DEFAULT_DAY
)


class AltitudeMode(Enum):
    NONE = AltitudeModeName.NONE
    GPS = AltitudeModeName.GPS
    BAROMETRIC = AltitudeModeName.BAROMETRIC

    @classmethod
    def from_value(cls, value: Union['AltitudeMode', str, None]) -> 'AltitudeMode':
        """Accept an AltitudeMode, its name or its value (case-insensitive)"""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown altitude mode: {value!r} (expected one of "
                         f"{', '.join(mode.value for mode in cls)})")


class GeometryLayout(Enum):
    XYM = 'XYM'
    XYZM = 'XYZM'

    @property
    def stride(self) -> int:
        return len(self.value)


class RecordType(Enum):
    FIX = 'fix'
    DATE_HEADER = 'date_header'
    HEADER = 'header'
    IGNORED = 'ignored'


@dataclass
class DateContext:
    """Current calendar date of the document; month is 0-based"""
    year: int = DEFAULT_YEAR
    month: int = DEFAULT_MONTH
    day: int = DEFAULT_DAY


@dataclass(frozen=True)
class FixRecord:
    """Fields of a single B record, decoded but not yet converted"""
    hour: int
    minute: int
    second: int
    latitude_degrees: int
    latitude_minute_thousandths: int
    north_south: str
    longitude_degrees: int
    longitude_minute_thousandths: int
    east_west: str
    validity: str
    gps_altitude: int
    pressure_altitude: int


# One variant per record kind seen by the classifier

@dataclass(frozen=True)
class FixLine:
    record: FixRecord
    kind: RecordType = field(default=RecordType.FIX, init=False)


@dataclass(frozen=True)
class DateHeaderLine:
    day: int
    month: int
    year: int
    kind: RecordType = field(default=RecordType.DATE_HEADER, init=False)


@dataclass(frozen=True)
class HeaderLine:
    key: str
    value: str
    kind: RecordType = field(default=RecordType.HEADER, init=False)


@dataclass(frozen=True)
class IgnoredLine:
    raw_line: str
    kind: RecordType = field(default=RecordType.IGNORED, init=False)


IgcRecord = Union[FixLine, DateHeaderLine, HeaderLine, IgnoredLine]


@dataclass
class LineString:
    """Ordered track of (x, y, [z,] t) points stored as a flat list"""
    flat_coordinates: List[float]
    layout: GeometryLayout

    def __post_init__(self):
        if len(self.flat_coordinates) % self.stride != 0:
            raise ValueError(
                f"{len(self.flat_coordinates)} coordinates do not fit layout {self.layout.value}"
            )

    @property
    def stride(self) -> int:
        return self.layout.stride

    def __len__(self) -> int:
        return len(self.flat_coordinates) // self.stride

    def get_coordinates(self) -> List[Tuple[float, ...]]:
        stride = self.stride
        flat = self.flat_coordinates
        return [tuple(flat[i:i + stride]) for i in range(0, len(flat), stride)]

    def get_first_coordinate(self) -> Optional[Tuple[float, ...]]:
        if not self.flat_coordinates:
            return None
        return tuple(self.flat_coordinates[:self.stride])

    def get_last_coordinate(self) -> Optional[Tuple[float, ...]]:
        if not self.flat_coordinates:
            return None
        return tuple(self.flat_coordinates[-self.stride:])

    def get_times(self) -> List[float]:
        """Measure (time) component of every point"""
        stride = self.stride
        return self.flat_coordinates[stride - 1::stride]


@dataclass
class Feature:
    """A decoded track together with its header properties"""
    geometry: LineString
    properties: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def get_properties(self) -> Dict[str, str]:
        return dict(self.properties)
