"""
Tests for igc_summary.py flight summary generation
"""
import pytest
from igc_summary import flightSummary, trackLength
from igc_model import Feature, LineString, GeometryLayout
from igc_parser import IgcFormat


def make_feature(flat, properties=None, layout=GeometryLayout.XYM):
    return Feature(LineString(flat, layout), properties or {})


class TestTrackLength:
    """Tests for trackLength"""

    def test_single_point(self):
        assert trackLength(make_feature([8.0, 45.0, 0])) == 0.0

    def test_one_degree_north(self):
        feature = make_feature([0.0, 0.0, 0, 0.0, 1.0, 60])
        assert trackLength(feature) == pytest.approx(111195, rel=1e-3)

    def test_xyzm_layout(self):
        feature = make_feature([0.0, 0.0, 500, 0, 0.0, 1.0, 900, 60], layout=GeometryLayout.XYZM)
        assert trackLength(feature) == pytest.approx(111195, rel=1e-3)


class TestFlightSummary:
    """Tests for flightSummary function"""

    def test_basic_summary(self):
        # 2025-05-23 12:00Z to 13:30Z
        feature = make_feature(
            [8.1, 45.5, 1748001600, 8.2, 45.6, 1748007000],
            {'GID': 'TEST-123'}
        )

        summary = flightSummary(feature)

        assert 'TEST-123' in summary
        assert '2025/05/23' in summary
        assert '1 hours and 30 minutes' in summary
        assert '12:00Z' in summary
        assert '13:30Z' in summary
        assert '45.500000' in summary
        assert '8.100000' in summary
        assert ' km' in summary

    def test_summary_with_pilot(self):
        feature = make_feature([8.1, 45.5, 0], {'PLT': 'John Doe'})
        summary = flightSummary(feature)
        assert 'by John Doe' in summary

    def test_summary_without_pilot(self):
        summary = flightSummary(make_feature([8.1, 45.5, 0]))
        assert 'by' not in summary.split('\n')[0]
        assert summary.startswith('Unknown')

    def test_single_point_has_no_distance(self):
        summary = flightSummary(make_feature([8.1, 45.5, 0]))
        assert 'km' not in summary
        assert '0 hours and 0 minutes' in summary

    def test_summary_of_decoded_file(self, sample_igc_content):
        feature = IgcFormat('gps').read_feature(sample_igc_content)
        summary = flightSummary(feature)
        assert 'CC-JUGA - 2025/05/09' in summary
        assert 'by Juan Gabriel' in summary
        assert 'Test Site' in summary
        assert 'JS3-15' in summary
        assert 'Points: 4 (XYZM)' in summary

    def test_underline_matches_heading(self):
        summary = flightSummary(make_feature([8.1, 45.5, 0], {'GID': 'D-1234'}))
        heading, underline = summary.split('\n')[:2]
        assert underline == '-' * len(heading)
