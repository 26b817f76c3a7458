import random

import pytest

from orrery.catalog import Catalog
from orrery.data_models import CatalogEntry
from orrery.registry import BodyRegistry, ToggleResult, UnknownBodyError


def _ranks(registry):
    return [registry.catalog.index_of(n) for n in registry.names()]


def test_initialize_all_active_in_catalog_order(registry):
    assert registry.names() == ["A", "B", "M", "C"]
    assert all(b.active and b.phase_angle == 0.0 for b in registry.bodies)


def test_initialize_resets_state(registry):
    registry.toggle("B")
    registry.remove("A")
    registry.bodies[0].phase_angle = 2.0
    registry.initialize()
    assert registry.names() == ["A", "B", "M", "C"]
    assert all(b.active and b.phase_angle == 0.0 for b in registry.bodies)


def test_live_bodies_do_not_touch_catalog(registry):
    registry.get("A").phase_angle = 3.0
    registry.get("A").size = 99
    assert registry.catalog.get("A").size == 4


def test_deactivating_primary_cascades_to_dependent(registry):
    assert registry.toggle("B") is ToggleResult.DEACTIVATED
    assert not registry.is_active("B")
    assert not registry.is_active("M")
    assert registry.is_active("A")
    assert registry.names() == ["A", "B", "M", "C"]


def test_reactivating_primary_restores_bound_dependent(registry):
    registry.toggle("B")
    assert registry.toggle("B") is ToggleResult.ACTIVATED
    assert registry.is_active("B")
    assert registry.is_active("M")


def test_reactivating_primary_leaves_unbound_dependent_off():
    catalog = Catalog([
        CatalogEntry("B", "blue", 8, orbital_radius=80, angular_speed=0.015),
        CatalogEntry("M", "gray", 3, primary_name="B", orbit_radius_around_primary=10,
                     angular_speed_around_primary=0.08, bound=False),
    ])
    registry = BodyRegistry(catalog)
    registry.toggle("B")
    registry.toggle("B")
    assert registry.is_active("B")
    assert not registry.is_active("M")
    # an unbound dependent comes back through its own toggle
    assert registry.toggle("M") is ToggleResult.ACTIVATED
    assert registry.is_active("M")


def test_dependent_toggles_on_its_own(registry):
    assert registry.toggle("M") is ToggleResult.DEACTIVATED
    assert registry.is_active("B")
    assert registry.toggle("M") is ToggleResult.ACTIVATED
    assert registry.is_active("M")


def test_dependent_cannot_activate_without_primary(registry):
    registry.toggle("B")
    assert registry.toggle("M") is ToggleResult.BLOCKED
    assert not registry.is_active("M")
    assert registry.get("M").phase_angle == 0.0


def test_unknown_name_is_reported_and_changes_nothing(registry):
    before = [(b.name, b.active, b.phase_angle) for b in registry.bodies]
    result = registry.toggle("Pluto")
    assert result is ToggleResult.UNKNOWN_NAME
    assert not result.ok
    assert [(b.name, b.active, b.phase_angle) for b in registry.bodies] == before


def test_unknown_name_queries_raise(registry):
    with pytest.raises(UnknownBodyError):
        registry.is_active("Pluto")
    with pytest.raises(UnknownBodyError):
        registry.remove("Pluto")
    with pytest.raises(KeyError):
        registry.is_active("")


def test_remove_then_toggle_reinserts_at_catalog_position(registry):
    assert registry.remove("A")
    assert not registry.remove("A")
    assert registry.names() == ["B", "M", "C"]
    assert not registry.is_active("A")

    assert registry.toggle("A") is ToggleResult.ADDED
    assert registry.names() == ["A", "B", "M", "C"]
    assert registry.is_active("A")


def test_reinserted_body_starts_fresh(registry):
    registry.get("C").phase_angle = 1.25
    registry.remove("C")
    registry.toggle("C")
    assert registry.get("C").phase_angle == 0.0
    assert registry.names()[-1] == "C"


def test_removing_primary_forces_dependent_inactive(registry):
    registry.remove("B")
    assert registry.names() == ["A", "M", "C"]
    assert not registry.is_active("M")
    assert registry.toggle("M") is ToggleResult.BLOCKED


def test_readding_primary_brings_back_missing_bound_dependent(registry):
    registry.remove("M")
    registry.remove("B")
    assert registry.names() == ["A", "C"]
    assert registry.toggle("B") is ToggleResult.ADDED
    assert registry.names() == ["A", "B", "M", "C"]
    assert registry.is_active("B") and registry.is_active("M")


def test_readding_primary_reactivates_present_bound_dependent(registry):
    registry.remove("B")
    assert registry.toggle("B") is ToggleResult.ADDED
    assert registry.names() == ["A", "B", "M", "C"]
    assert registry.is_active("M")


def test_readding_removed_dependent(registry):
    registry.remove("M")
    assert registry.toggle("M") is ToggleResult.ADDED
    assert registry.names() == ["A", "B", "M", "C"]
    registry.remove("M")
    registry.toggle("B")
    assert registry.toggle("M") is ToggleResult.BLOCKED
    assert registry.names() == ["A", "B", "M", "C"]


def test_toggle_pair_restores_activity(registry):
    for name in ["A", "B", "M", "C"]:
        before = registry.is_active(name)
        registry.toggle(name)
        registry.toggle(name)
        assert registry.is_active(name) == before


def test_random_toggle_sequences_keep_order_and_cascade(solar_registry):
    rng = random.Random(1234)
    names = [e.name for e in solar_registry.catalog]
    for _ in range(500):
        name = rng.choice(names)
        if rng.random() < 0.25:
            solar_registry.remove(name)
        else:
            solar_registry.toggle(name)
        ranks = _ranks(solar_registry)
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == len(ranks)
        moon = solar_registry.get("Moon")
        if moon is not None and moon.active:
            assert solar_registry.is_active("Earth")


def test_reinsertion_position_ignores_intermediate_toggles(solar_registry):
    solar_registry.remove("Mars")
    solar_registry.remove("Venus")
    solar_registry.toggle("Jupiter")
    solar_registry.remove("Neptune")
    solar_registry.toggle("Mars")
    assert solar_registry.names() == [
        "Mercury", "Earth", "Moon", "Mars", "Jupiter", "Saturn", "Uranus",
    ]
    solar_registry.toggle("Neptune")
    solar_registry.toggle("Venus")
    assert solar_registry.names() == [e.name for e in solar_registry.catalog]


def test_earth_and_moon_scenario(solar_registry):
    solar_registry.toggle("Earth")
    assert not solar_registry.is_active("Moon")
    solar_registry.toggle("Earth")
    assert solar_registry.is_active("Moon")
    assert solar_registry.get("Moon").phase_angle == 0.0


def test_active_bodies(registry):
    registry.toggle("B")
    assert [b.name for b in registry.active_bodies()] == ["A", "C"]
    assert registry.is_present("B")
