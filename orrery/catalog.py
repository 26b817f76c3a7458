#!/usr/bin/env python3
"""
Body catalog: the immutable, ordered list of every body that can exist.

Catalog order is canonical: the registry uses it to decide where a re-added body goes.
The built-in system lives in default_catalog(); other systems can be loaded from JSON.

Schema
======
Catalog JSON (catalogs/*.json):
{
  "name": "Human-friendly system name",
  "central": {"name": "Sun", "size": 20, "color": "yellow"},      # optional
  "bodies": [
    {"name": "Earth", "color": "blue", "size": 8,
     "orbital_radius": 120, "angular_speed": 0.01},
    {"name": "Moon", "color": [211, 211, 211], "size": 3,
     "primary_name": "Earth", "orbit_radius_around_primary": 20,
     "angular_speed_around_primary": 0.08, "bound": true}
  ]
}
"""
import json
import logging
import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .data_models import CatalogEntry, CentralBody, Color

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog definition is inconsistent or cannot be read."""


class Catalog:
    """
    Ordered, read-only collection of catalog entries.

    Entries are validated once on construction and never change afterwards.
    """

    def __init__(self, entries: Sequence[CatalogEntry]):
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._index: Dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            if entry.name in self._index:
                raise CatalogError(f"Duplicate body name '{entry.name}'.")
            self._index[entry.name] = i
        for entry in self._entries:
            _validate_entry(entry, self)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Catalog({[e.name for e in self._entries]!r})"

    def index_of(self, name: str) -> Optional[int]:
        """Canonical position of ``name``, or None if the catalog has no such body."""
        return self._index.get(name)

    def get(self, name: str) -> Optional[CatalogEntry]:
        i = self._index.get(name)
        return None if i is None else self._entries[i]

    def primaries(self) -> List[CatalogEntry]:
        return [e for e in self._entries if not e.is_dependent]

    def dependents_of(self, name: str) -> List[CatalogEntry]:
        return [e for e in self._entries if e.primary_name == name]


def _positive(val) -> bool:
    return val is not None and math.isfinite(val) and val > 0


def _non_negative(val) -> bool:
    return val is not None and math.isfinite(val) and val >= 0


def _validate_entry(entry: CatalogEntry, catalog: Catalog) -> None:
    if not _positive(entry.size):
        raise CatalogError(f"Body '{entry.name}' must have a positive size.")
    has_primary_orbit = entry.orbital_radius is not None or entry.angular_speed is not None
    if entry.is_dependent:
        if has_primary_orbit:
            raise CatalogError(f"Body '{entry.name}' cannot orbit both the center and '{entry.primary_name}'.")
        if entry.orbit_radius_around_primary is None or entry.angular_speed_around_primary is None:
            raise CatalogError(f"Dependent body '{entry.name}' needs a radius and speed around its primary.")
        if not _non_negative(entry.orbit_radius_around_primary):
            raise CatalogError(f"Body '{entry.name}' has a negative or non-finite orbit radius.")
        if not math.isfinite(entry.angular_speed_around_primary):
            raise CatalogError(f"Body '{entry.name}' has a non-finite angular speed.")
        if not isinstance(entry.primary_name, str):
            raise CatalogError(f"Body '{entry.name}' has an invalid primary name {entry.primary_name!r}.")
        primary = catalog.get(entry.primary_name)
        if primary is None:
            raise CatalogError(f"Body '{entry.name}' orbits unknown body '{entry.primary_name}'.")
        if primary.is_dependent:
            raise CatalogError(f"Body '{entry.name}' orbits '{primary.name}', which is itself a dependent.")
    else:
        if entry.orbit_radius_around_primary is not None or entry.angular_speed_around_primary is not None:
            raise CatalogError(f"Body '{entry.name}' has orbit parameters around a primary but no primary.")
        if entry.orbital_radius is None or entry.angular_speed is None:
            raise CatalogError(f"Body '{entry.name}' needs an orbital radius and angular speed.")
        if not _non_negative(entry.orbital_radius):
            raise CatalogError(f"Body '{entry.name}' has a negative or non-finite orbital radius.")
        if not math.isfinite(entry.angular_speed):
            raise CatalogError(f"Body '{entry.name}' has a non-finite angular speed.")


def default_catalog() -> Catalog:
    """
    Sun-centred system with the eight planets and Earth's Moon.

    Distances are screen pixels, speeds radians per frame; nothing here is to scale.
    """
    return Catalog([
        CatalogEntry("Mercury", "gray", 4, orbital_radius=50, angular_speed=0.02),
        CatalogEntry("Venus", "orange", 7, orbital_radius=80, angular_speed=0.015),
        CatalogEntry("Earth", "blue", 8, orbital_radius=120, angular_speed=0.01),
        CatalogEntry("Moon", "lightgray", 3, primary_name="Earth",
                     orbit_radius_around_primary=20, angular_speed_around_primary=0.08),
        CatalogEntry("Mars", "red", 5, orbital_radius=160, angular_speed=0.008),
        CatalogEntry("Jupiter", "brown", 15, orbital_radius=220, angular_speed=0.005),
        CatalogEntry("Saturn", "gold", 12, orbital_radius=280, angular_speed=0.004),
        CatalogEntry("Uranus", "lightblue", 10, orbital_radius=330, angular_speed=0.003),
        CatalogEntry("Neptune", "darkblue", 9, orbital_radius=380, angular_speed=0.002),
    ])


# -----------------------
# JSON loading
# -----------------------

def _read_json(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read catalog '{path}': {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog '{path}' must contain a JSON object.")
    return data


def _coerce_color(c) -> Color:
    if isinstance(c, str):
        return c
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError, KeyError, OverflowError) as e:
        raise CatalogError(f"Invalid color {c!r}.") from e
    r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
    return (r, g, b)


def _optional_float(data: dict, key: str) -> Optional[float]:
    val = data.get(key)
    return None if val is None else float(val)


def _entry_from_dict(data: dict) -> CatalogEntry:
    if not isinstance(data, dict):
        raise CatalogError(f"Invalid body definition {data!r}: expected an object.")
    primary_name = data.get("primary_name")
    if primary_name is not None and not isinstance(primary_name, str):
        raise CatalogError(f"Invalid body definition {data!r}: primary_name must be a string.")
    bound = data.get("bound", True)
    if not isinstance(bound, bool):
        raise CatalogError(f"Invalid body definition {data!r}: bound must be true or false.")
    try:
        return CatalogEntry(
            name=str(data["name"]),
            color=_coerce_color(data.get("color", "white")),
            size=float(data["size"]),
            orbital_radius=_optional_float(data, "orbital_radius"),
            angular_speed=_optional_float(data, "angular_speed"),
            primary_name=primary_name,
            orbit_radius_around_primary=_optional_float(data, "orbit_radius_around_primary"),
            angular_speed_around_primary=_optional_float(data, "angular_speed_around_primary"),
            bound=bound,
        )
    except (KeyError, TypeError, ValueError) as e:
        if isinstance(e, CatalogError):
            raise
        raise CatalogError(f"Invalid body definition {data!r}: {e}") from e


def load_catalog(path: str) -> Tuple[Catalog, CentralBody]:
    """
    Load a catalog JSON file.
    Returns (catalog, central_body).
    """
    data = _read_json(path)
    bodies = data.get("bodies")
    if not isinstance(bodies, list) or not bodies:
        raise CatalogError(f"Catalog '{path}' has no bodies.")
    catalog = Catalog([_entry_from_dict(b) for b in bodies])

    central_data = data.get("central") or {}
    if not isinstance(central_data, dict):
        raise CatalogError(f"Invalid central body in '{path}': expected an object.")
    try:
        central = CentralBody(
            name=str(central_data.get("name", CentralBody.name)),
            size=float(central_data.get("size", CentralBody.size)),
            color=_coerce_color(central_data.get("color", CentralBody.color)),
        )
    except (KeyError, TypeError, ValueError) as e:
        if isinstance(e, CatalogError):
            raise
        raise CatalogError(f"Invalid central body in '{path}': {e}") from e
    if not _positive(central.size):
        raise CatalogError(f"Central body in '{path}' must have a positive size.")

    logger.info("Loaded catalog '%s' with %d bodies from %s", data.get("name", path), len(catalog), path)
    return catalog, central
