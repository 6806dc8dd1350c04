#!/usr/bin/env python3
"""
IGC file parser module for IGC to GeoJSON converter

This module decodes IGC flight recorder logs into a single time-stamped
track plus a mapping of header metadata. Lines are classified by their
leading character, position fixes are decoded from their fixed-width
columns and stamped against the running flight date, and header lines
either move that date or land in the property mapping.

Lines that do not match their layout are skipped without error.
"""

import logging
from typing import Callable, TextIO, Dict, List, Optional, Union

from igc_model import (
    AltitudeMode,
    GeometryLayout,
    DateContext,
    FixRecord,
    FixLine,
    DateHeaderLine,
    HeaderLine,
    IgnoredLine,
    IgcRecord,
    RecordType,
    LineString,
    Feature,
)
from igc_utils import splitLines, calendarTimestamp
from igc_projection import transformGeometry
from igc_constants import (
    B_RECORD_RE,
    HFDTE_RECORD_RE,
    H_RECORD_RE,
    IGC_RECORD_POSITION,
    IGC_RECORD_HEADER,
    IGC_CENTURY,
    MINUTE_THOUSANDTHS_PER_DEGREE,
    DATA_PROJECTION,
)

# Configure logger
logger = logging.getLogger(__name__)


class IgcPositionParser:
    """
    Parses position records (B records) from IGC files.
    Extracts time, coordinates, validity and both altitude readings.
    """

    @staticmethod
    def parse_position_record(line: str) -> Optional[FixRecord]:
        """Decode the fixed-width columns of a B record, or None if they don't match"""
        m = B_RECORD_RE.match(line)
        if not m:
            return None
        return FixRecord(
            hour=int(m.group(1)),
            minute=int(m.group(2)),
            second=int(m.group(3)),
            latitude_degrees=int(m.group(4)),
            latitude_minute_thousandths=int(m.group(5)),
            north_south=m.group(6),
            longitude_degrees=int(m.group(7)),
            longitude_minute_thousandths=int(m.group(8)),
            east_west=m.group(9),
            validity=m.group(10),
            gps_altitude=int(m.group(11)),
            pressure_altitude=int(m.group(12)),
        )

    @staticmethod
    def parse_latitude(fix: FixRecord) -> float:
        latitude = fix.latitude_degrees + fix.latitude_minute_thousandths / MINUTE_THOUSANDTHS_PER_DEGREE
        if fix.north_south == 'S':
            latitude = -latitude
        return latitude

    @staticmethod
    def parse_longitude(fix: FixRecord) -> float:
        longitude = fix.longitude_degrees + fix.longitude_minute_thousandths / MINUTE_THOUSANDTHS_PER_DEGREE
        if fix.east_west == 'W':
            longitude = -longitude
        return longitude

    @staticmethod
    def select_altitude(fix: FixRecord, altitude_mode: AltitudeMode) -> Optional[int]:
        """Altitude reading for the configured mode; None when altitude is omitted"""
        if altitude_mode == AltitudeMode.GPS:
            return fix.gps_altitude
        if altitude_mode == AltitudeMode.BAROMETRIC:
            return fix.pressure_altitude
        return None


class IgcHeaderParser:
    """
    Parses header records (H records). The date header is tried first;
    every other header with a three-letter code and a colon becomes a
    property.
    """

    @staticmethod
    def parse_date_header(line: str) -> Optional[DateHeaderLine]:
        """HFDTEDDMMYY -> day, 0-based month and four-digit year"""
        m = HFDTE_RECORD_RE.match(line)
        if not m:
            return None
        # No window: 2-digit years always land in the 2000s
        return DateHeaderLine(
            day=int(m.group(1)),
            month=int(m.group(2)) - 1,
            year=IGC_CENTURY + int(m.group(3)),
        )

    @staticmethod
    def parse_property(line: str) -> Optional[HeaderLine]:
        m = H_RECORD_RE.match(line)
        if not m:
            return None
        return HeaderLine(key=m.group(1), value=m.group(2).strip())

    def parse_header_line(self, line: str) -> Optional[Union[DateHeaderLine, HeaderLine]]:
        return self.parse_date_header(line) or self.parse_property(line)

    @staticmethod
    def apply_date(date_context: DateContext, record: DateHeaderLine) -> None:
        """Overwrite the running date; values are not range checked"""
        date_context.year = record.year
        date_context.month = record.month
        date_context.day = record.day


class RecordClassifier:
    """
    Turns one raw line into exactly one record variant. Lines that start
    with B or H but fail their layout come back as IgnoredLine.
    """

    def __init__(self):
        self.position_parser = IgcPositionParser()
        self.header_parser = IgcHeaderParser()

    def classify_line(self, line: str) -> IgcRecord:
        record = None
        if line.startswith(IGC_RECORD_POSITION):
            fix = self.position_parser.parse_position_record(line)
            if fix:
                record = FixLine(fix)
        elif line.startswith(IGC_RECORD_HEADER):
            record = self.header_parser.parse_header_line(line)
        return record or IgnoredLine(line)


class TimestampSequencer:
    """
    Stamps fixes with absolute UTC times and keeps them non-decreasing.

    A fix whose time of day falls before the previous fix is taken to have
    crossed UTC midnight and is moved to the next day. The day advance is
    remembered, so a document spanning several midnights without a new
    date header keeps counting forward.
    """

    def __init__(self):
        self.last_timestamp: Optional[int] = None
        self.day_offset = 0
        self.rollovers = 0

    def reset_day_offset(self) -> None:
        """A new date header replaces any implied day advance"""
        self.day_offset = 0

    def sequence(self, date_context: DateContext, fix: FixRecord) -> int:
        timestamp = self._timestamp(date_context, fix)
        if self.last_timestamp is not None and timestamp < self.last_timestamp:
            self.day_offset += 1
            self.rollovers += 1
            timestamp = self._timestamp(date_context, fix)
            logger.debug(f"UTC midnight rollover detected at "
                         f"{fix.hour:02d}:{fix.minute:02d}:{fix.second:02d}")
        self.last_timestamp = timestamp
        return timestamp

    def _timestamp(self, date_context: DateContext, fix: FixRecord) -> int:
        return calendarTimestamp(
            date_context.year, date_context.month, date_context.day + self.day_offset,
            fix.hour, fix.minute, fix.second
        )


class TrackAssembler:
    """
    Accumulates decoded fixes into a flat coordinate buffer laid out as
    x, y, [z,] t per point.
    """

    def __init__(self, altitude_mode: AltitudeMode = AltitudeMode.NONE):
        self.altitude_mode = altitude_mode
        self.flat_coordinates: List[float] = []

    @property
    def layout(self) -> GeometryLayout:
        return GeometryLayout.XYM if self.altitude_mode == AltitudeMode.NONE else GeometryLayout.XYZM

    def __len__(self) -> int:
        return len(self.flat_coordinates) // self.layout.stride

    def add_fix(self, fix: FixRecord, timestamp: int) -> None:
        self.flat_coordinates.append(IgcPositionParser.parse_longitude(fix))
        self.flat_coordinates.append(IgcPositionParser.parse_latitude(fix))
        altitude = IgcPositionParser.select_altitude(fix, self.altitude_mode)
        if altitude is not None:
            self.flat_coordinates.append(altitude)
        self.flat_coordinates.append(timestamp)

    def build(self, properties: Dict[str, str]) -> Optional[Feature]:
        """The finished feature, or None if no fix was decoded"""
        if not self.flat_coordinates:
            return None
        geometry = LineString(list(self.flat_coordinates), self.layout)
        return Feature(geometry, dict(properties))


class IgcParser:
    """
    Decodes one IGC document. Holds the running date, the last timestamp
    and the coordinate buffer, so a fresh instance is used per document.
    """

    def __init__(self, altitude_mode: AltitudeMode = AltitudeMode.NONE):
        self.altitude_mode = altitude_mode
        self.classifier = RecordClassifier()
        self.date_context = DateContext()
        self.sequencer = TimestampSequencer()
        self.assembler = TrackAssembler(altitude_mode)
        self.properties: Dict[str, str] = {}
        self.ignored = 0
        # One handler per RecordType member
        self.handlers: Dict[RecordType, Callable[[IgcRecord], None]] = {
            RecordType.FIX: self._handle_fix,
            RecordType.DATE_HEADER: self._handle_date_header,
            RecordType.HEADER: self._handle_header,
            RecordType.IGNORED: self._handle_ignored,
        }

    def handle_record(self, record: IgcRecord) -> None:
        handler = self.handlers.get(record.kind)
        if handler is None:
            raise TypeError(f"Unhandled IGC record kind: {record.kind!r}")
        handler(record)

    def _handle_fix(self, record: FixLine) -> None:
        timestamp = self.sequencer.sequence(self.date_context, record.record)
        self.assembler.add_fix(record.record, timestamp)

    def _handle_date_header(self, record: DateHeaderLine) -> None:
        IgcHeaderParser.apply_date(self.date_context, record)
        self.sequencer.reset_day_offset()

    def _handle_header(self, record: HeaderLine) -> None:
        self.properties[record.key] = record.value

    def _handle_ignored(self, record: IgnoredLine) -> None:
        self.ignored += 1

    def parse_lines(self, lines: List[str]) -> Optional[Feature]:
        for line in lines:
            self.handle_record(self.classifier.classify_line(line))

        logger.debug(f"Decoded {len(self.assembler)} fixes from {len(lines)} lines "
                     f"({self.ignored} ignored, {self.sequencer.rollovers} midnight rollovers)")
        return self.assembler.build(self.properties)

    def parse_text(self, text: Union[str, bytes]) -> Optional[Feature]:
        return self.parse_lines(splitLines(text))


class IgcFormat:
    """
    Feature format for *.igc flight recording files.

    Reading yields at most one feature: a LineString in XYM layout, or XYZM
    when an altitude mode is configured, plus the header properties.
    Writing is not supported.
    """

    def __init__(self, altitude_mode: Union[AltitudeMode, str, None] = AltitudeMode.NONE):
        self.altitude_mode = AltitudeMode.from_value(altitude_mode)
        self.data_projection = DATA_PROJECTION

    def read_feature(self, text: Union[str, bytes],
                     data_projection: Optional[str] = None,
                     feature_projection: Optional[str] = None) -> Optional[Feature]:
        """Read the single feature of an IGC document, or None if it has no fixes"""
        feature = IgcParser(self.altitude_mode).parse_text(text)
        if feature is None:
            return None
        feature.geometry = transformGeometry(
            feature.geometry,
            data_projection or self.data_projection,
            feature_projection
        )
        return feature

    def read_features(self, text: Union[str, bytes],
                      data_projection: Optional[str] = None,
                      feature_projection: Optional[str] = None) -> List[Feature]:
        """
        Read the features of an IGC document. IGC sources hold a single
        feature, so the result has zero or one element.
        """
        feature = self.read_feature(text, data_projection, feature_projection)
        return [feature] if feature else []

    def read_projection(self, text: Union[str, bytes, None] = None) -> str:
        return self.data_projection

    def read_geometry(self, text: Union[str, bytes]) -> LineString:
        raise NotImplementedError("IGC reading is feature based; use read_feature()")

    def write_feature(self, feature: Feature) -> str:
        raise NotImplementedError("Writing IGC files is not supported")

    def write_features(self, features: List[Feature]) -> str:
        raise NotImplementedError("Writing IGC files is not supported")

    def write_geometry(self, geometry: LineString) -> str:
        raise NotImplementedError("Writing IGC files is not supported")


# Public functions

def parseIgcFile(config, track_file: TextIO) -> List[Feature]:
    """
    Decode an open IGC file using the altitude mode from the configuration.
    Features stay in geographic coordinates; reprojection is up to the caller.
    """
    igc_format = IgcFormat(config.altitude_mode)
    return igc_format.read_features(track_file.read())
