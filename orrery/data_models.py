#!/usr/bin/env python3
"""
Data models for the solar system orrery.

This module defines the catalog templates and the live runtime bodies shared between
the registry, the simulator and the control panel.

Units and usage
- Radii and sizes are in pixels, angular speeds in radians per tick, angles in radians.
- CatalogEntry is frozen; every LiveBody is an independent copy made by LiveBody.from_entry.
- color is opaque here; only the renderer interprets it (a colour name or an RGB tuple).
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .constants import CENTRAL_COLOR, CENTRAL_NAME, CENTRAL_SIZE

Color = Union[str, Tuple[int, int, int]]


@dataclass(frozen=True)
class CatalogEntry:
    """
    Immutable template for one body that can exist in the system.

    Fields:
    - name: Unique identifier for the body
    - color: Display colour
    - size: Display radius in pixels
    - orbital_radius / angular_speed: Orbit around the system center (primary orbiters)
    - primary_name: Body this one circles (dependent orbiters)
    - orbit_radius_around_primary / angular_speed_around_primary: Orbit around the primary
    - bound: Dependent follows its primary back on when the primary is re-activated
    """
    name: str
    color: Color
    size: float
    orbital_radius: Optional[float] = None
    angular_speed: Optional[float] = None
    primary_name: Optional[str] = None
    orbit_radius_around_primary: Optional[float] = None
    angular_speed_around_primary: Optional[float] = None
    bound: bool = True

    @property
    def is_dependent(self) -> bool:
        return self.primary_name is not None


@dataclass
class LiveBody:
    """
    Mutable runtime instance of a catalog entry.

    An inactive body stays in the live set but neither advances nor draws.
    """
    name: str
    color: Color
    size: float
    orbital_radius: Optional[float] = None
    angular_speed: Optional[float] = None
    primary_name: Optional[str] = None
    orbit_radius_around_primary: Optional[float] = None
    angular_speed_around_primary: Optional[float] = None
    bound: bool = True
    phase_angle: float = 0.0
    active: bool = True

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "LiveBody":
        """Fresh body from a catalog template: phase 0, active."""
        return cls(
            name=entry.name,
            color=entry.color,
            size=entry.size,
            orbital_radius=entry.orbital_radius,
            angular_speed=entry.angular_speed,
            primary_name=entry.primary_name,
            orbit_radius_around_primary=entry.orbit_radius_around_primary,
            angular_speed_around_primary=entry.angular_speed_around_primary,
            bound=entry.bound,
        )

    @property
    def is_dependent(self) -> bool:
        return self.primary_name is not None

    @property
    def radius(self) -> float:
        """Orbit radius around whatever this body circles."""
        if self.is_dependent:
            return self.orbit_radius_around_primary
        return self.orbital_radius

    @property
    def speed(self) -> float:
        if self.is_dependent:
            return self.angular_speed_around_primary
        return self.angular_speed


@dataclass(frozen=True)
class CentralBody:
    """The fixed body drawn at the system center."""
    name: str = CENTRAL_NAME
    size: float = CENTRAL_SIZE
    color: Color = CENTRAL_COLOR
