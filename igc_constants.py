#!/usr/bin/env python3
"""
Constants for IGC to GeoJSON converter
"""
import re

# Altitude modes
class AltitudeModeName:
    BAROMETRIC = 'barometric'
    GPS = 'gps'
    NONE = 'none'

# Default configuration values
DEFAULT_ALTITUDE_MODE = AltitudeModeName.NONE
DEFAULT_OUT_PATH = None
DEFAULT_INDENT = None
DEFAULT_FEATURE_PROJECTION = None

# IGC record prefixes
IGC_RECORD_POSITION = "B"
IGC_RECORD_HEADER = "H"

# Fixed-width layouts: time, lat deg/min, hemisphere, lon deg/min, hemisphere,
# validity, GPS altitude, pressure altitude
B_RECORD_RE = re.compile(
    r'^B(\d{2})(\d{2})(\d{2})(\d{2})(\d{5})([NS])(\d{3})(\d{5})([EW])([AV])(\d{5})(\d{5})',
    re.ASCII
)
HFDTE_RECORD_RE = re.compile(r'^HFDTE(\d{2})(\d{2})(\d{2})', re.ASCII)
H_RECORD_RE = re.compile(r'^H.([A-Z]{3}).*?:(.*)', re.ASCII)
NEWLINE_RE = re.compile(r'\r\n|\r|\n')

# Date context before any HFDTE record (month is 0-based)
DEFAULT_YEAR = 2000
DEFAULT_MONTH = 0
DEFAULT_DAY = 1
IGC_CENTURY = 2000

MINUTE_THOUSANDTHS_PER_DEGREE = 60000

# Header codes used in summaries
IGC_HEADER_PILOT = "PLT"
IGC_HEADER_GLIDER_TYPE = "GTY"
IGC_HEADER_GLIDER_ID = "GID"
IGC_HEADER_SITE = "SIT"

# Projections
DATA_PROJECTION = "EPSG:4326"

# Earth radius in meters (for distance calculations)
EARTH_RADIUS_METERS = 6371000

# Date and time formats
DATE_FORMAT_YMD = "%Y/%m/%d"
TIME_FORMAT_HM = "%H:%M"

# Configuration
CONFIG_SECTION_DEFAULTS = "Defaults"
CONFIG_FILE_NAMES = ('igc2geojson.conf', 'igc2geojson.ini')

# GeoJSON output
OUTPUT_SUFFIX = ".geojson"
GEOJSON_FEATURE_COLLECTION = "FeatureCollection"
GEOJSON_FEATURE = "Feature"
GEOJSON_LINE_STRING = "LineString"
