"""
Tests for igc_model.py data models
"""
import pytest
from dataclasses import FrozenInstanceError
from igc_model import (
    AltitudeMode,
    GeometryLayout,
    DateContext,
    FixLine,
    IgnoredLine,
    RecordType,
    LineString,
    Feature
)
from igc_parser import IgcPositionParser


class TestAltitudeMode:
    """Tests for AltitudeMode enum"""

    def test_values(self):
        assert AltitudeMode.NONE.value == 'none'
        assert AltitudeMode.GPS.value == 'gps'
        assert AltitudeMode.BAROMETRIC.value == 'barometric'

    @pytest.mark.parametrize('value,expected', [
        (None, AltitudeMode.NONE),
        ('none', AltitudeMode.NONE),
        ('GPS', AltitudeMode.GPS),
        (' Barometric ', AltitudeMode.BAROMETRIC),
        (AltitudeMode.GPS, AltitudeMode.GPS),
    ])
    def test_from_value(self, value, expected):
        assert AltitudeMode.from_value(value) == expected

    def test_from_value_unknown(self):
        with pytest.raises(ValueError, match='radar'):
            AltitudeMode.from_value('radar')


class TestGeometryLayout:
    """Tests for GeometryLayout enum"""

    def test_stride(self):
        assert GeometryLayout.XYM.stride == 3
        assert GeometryLayout.XYZM.stride == 4


class TestDateContext:
    """Tests for DateContext"""

    def test_default_initialization(self):
        context = DateContext()
        assert (context.year, context.month, context.day) == (2000, 0, 1)

    def test_contexts_are_independent(self):
        first = DateContext()
        first.day = 15
        assert DateContext().day == 1


class TestRecords:
    """Tests for record variants"""

    def test_kind_is_fixed(self):
        fix = IgcPositionParser.parse_position_record('B1011105000000N00100000EA0012300089')
        assert FixLine(fix).kind == RecordType.FIX
        assert IgnoredLine('X').kind == RecordType.IGNORED

    def test_records_are_immutable(self):
        record = IgnoredLine('X')
        with pytest.raises(FrozenInstanceError):
            record.raw_line = 'Y'


class TestLineString:
    """Tests for LineString"""

    def test_xym_coordinates(self):
        line = LineString([1.0, 2.0, 10, 3.0, 4.0, 20], GeometryLayout.XYM)
        assert line.stride == 3
        assert len(line) == 2
        assert line.get_coordinates() == [(1.0, 2.0, 10), (3.0, 4.0, 20)]
        assert line.get_times() == [10, 20]

    def test_xyzm_coordinates(self):
        line = LineString([1.0, 2.0, 500, 10, 3.0, 4.0, 600, 20], GeometryLayout.XYZM)
        assert line.get_first_coordinate() == (1.0, 2.0, 500, 10)
        assert line.get_last_coordinate() == (3.0, 4.0, 600, 20)
        assert line.get_times() == [10, 20]

    def test_empty(self):
        line = LineString([], GeometryLayout.XYM)
        assert len(line) == 0
        assert line.get_coordinates() == []
        assert line.get_first_coordinate() is None
        assert line.get_last_coordinate() is None

    def test_length_must_fit_layout(self):
        with pytest.raises(ValueError):
            LineString([1.0, 2.0, 3.0, 4.0], GeometryLayout.XYM)


class TestFeature:
    """Tests for Feature"""

    def test_properties(self):
        feature = Feature(LineString([1.0, 2.0, 3], GeometryLayout.XYM), {'PLT': 'John'})
        assert feature.get('PLT') == 'John'
        assert feature.get('GID') is None
        assert feature.get('GID', 'n/a') == 'n/a'

    def test_get_properties_is_a_copy(self):
        feature = Feature(LineString([1.0, 2.0, 3], GeometryLayout.XYM), {'PLT': 'John'})
        feature.get_properties()['PLT'] = 'Jane'
        assert feature.get('PLT') == 'John'

    def test_default_properties(self):
        assert Feature(LineString([], GeometryLayout.XYM)).properties == {}
