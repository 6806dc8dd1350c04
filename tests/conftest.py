"""
Pytest configuration and shared fixtures for igc2geojson tests
"""
import pytest


@pytest.fixture
def sample_igc_content():
    """Sample IGC file content for testing"""
    return """AXCS001
HFDTE090525
HFPLTPILOTINCHARGE:Juan Gabriel
HFGTYGLIDERTYPE:JS3-15
HFGIDGLIDERID:CC-JUGA
HFSITSITE:Test Site
B1214284530000S07030000WA0090200950
B1214294530060S07030060WA0090500955
B1214304530120S07030120WA0091000960
LXCSSOMETHING
B1214314530180S07030180WA0091500965
G0123456789ABCDEF
"""


@pytest.fixture
def sample_igc_file(tmp_path, sample_igc_content):
    """Create a temporary IGC file for testing"""
    igc_file = tmp_path / "test_flight.igc"
    igc_file.write_text(sample_igc_content)
    return igc_file


@pytest.fixture
def sample_config_content():
    """Sample configuration file content"""
    return """[Defaults]
AltitudeMode = barometric
FeatureProjection = EPSG:3857
Indent = 2
"""


@pytest.fixture
def sample_config_file(tmp_path, sample_config_content):
    """Create a temporary config file for testing"""
    config_file = tmp_path / "test_config.conf"
    config_file.write_text(sample_config_content)
    return config_file


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory"""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def mock_cli_args(sample_config_file, temp_output_dir):
    """Mock command-line arguments for testing"""
    class MockArgs:
        def __init__(self):
            self.config = str(sample_config_file)
            self.altitude_mode = None
            self.projection = None
            self.output = str(temp_output_dir)
            self.indent = None
            self.trackfile = []

    return MockArgs()
