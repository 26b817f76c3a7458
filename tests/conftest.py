import pytest

from orrery.catalog import Catalog, default_catalog
from orrery.data_models import CatalogEntry
from orrery.registry import BodyRegistry
from orrery.simulator import OrbitSimulator


class RecordingSurface:
    """In-memory DrawSurface that records every call."""

    def __init__(self):
        self.clears = 0
        self.discs = []
        self.labels = []

    def clear(self):
        self.clears += 1
        self.discs.clear()
        self.labels.clear()

    def draw_disc(self, center, radius, color):
        self.discs.append((center, radius, color))

    def draw_label(self, text, position):
        self.labels.append((text, position))

    @property
    def label_texts(self):
        return [text for text, _ in self.labels]


class ManualClock:
    """FrameClock that only runs the scheduled callback when told to."""

    def __init__(self):
        self.pending = None
        self.scheduled = 0

    def schedule_next(self, callback):
        self.pending = callback
        self.scheduled += 1

    def fire(self):
        callback, self.pending = self.pending, None
        callback()


@pytest.fixture
def small_catalog():
    # A(primary), B(primary) with dependent M, then C
    return Catalog([
        CatalogEntry("A", "gray", 4, orbital_radius=50, angular_speed=0.02),
        CatalogEntry("B", "blue", 8, orbital_radius=80, angular_speed=0.015),
        CatalogEntry("M", "lightgray", 3, primary_name="B",
                     orbit_radius_around_primary=10, angular_speed_around_primary=0.08),
        CatalogEntry("C", "red", 5, orbital_radius=120, angular_speed=0.01),
    ])


@pytest.fixture
def registry(small_catalog):
    return BodyRegistry(small_catalog)


@pytest.fixture
def solar_registry():
    return BodyRegistry(default_catalog())


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def simulator(registry, surface, clock):
    return OrbitSimulator(registry, surface, clock, center=(400.0, 300.0))
