"""Shared test fixtures for the Group Design tests."""
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from groupdesign.inputs import SeismicZone
from groupdesign.location import LocationData, Region

CONFIG_DIR = Path(__file__).parent.parent / "config"


class FakeSource:
    """In-memory location source; ``fail`` makes every lookup return None."""

    def __init__(self):
        self.fail = False
        self.calls = []

    def states(self):
        self.calls.append(("states",))
        if self.fail:
            return None
        return [Region(id="MH", name="Maharashtra"), Region(id="DL", name="Delhi")]

    def districts(self, state_id):
        self.calls.append(("districts", state_id))
        if self.fail:
            return None
        return [Region(id=f"{state_id}-1", name="First"), Region(id=f"{state_id}-2", name="Second")]

    def location_data(self, district_id):
        self.calls.append(("location_data", district_id))
        if self.fail:
            return None
        return LocationData(
            basic_wind_speed=39.0,
            seismic_zone=SeismicZone.III,
            zone_factor=0.16,
            max_shade_air_temp=42.5,
            min_shade_air_temp=5.0,
        )


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture(scope="session")
def sample_input_path():
    return CONFIG_DIR / "sample_input.yaml"


@pytest.fixture(scope="session")
def catalogue_path():
    return CONFIG_DIR / "locations.yaml"
