#!/usr/bin/env python3
"""
Orbit simulator: advances orbital phases and draws the system each frame.

Frame order
1) Clear the surface and draw the central body at the fixed center.
2) Draw every active live body, in live-set order, at the position given by its phase
   at the start of the frame. A dependent is placed relative to its primary's position
   in this same frame.
3) Advance each drawn body's phase by its own angular speed (skipped while paused).
4) Ask the frame clock to run the next tick.

Drawing and the clock are collaborators described by the DrawSurface and FrameClock
protocols, so the simulator can run against pygame or against in-memory fakes.
"""
import logging
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from .constants import CENTER, LABEL_OFFSET
from .data_models import CentralBody, Color, LiveBody
from .registry import BodyRegistry
from .vector_utils import orbit_point

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class DrawSurface(Protocol):
    def clear(self) -> None: ...

    def draw_disc(self, center: Point, radius: float, color: Color) -> None: ...

    def draw_label(self, text: str, position: Point) -> None: ...


class FrameClock(Protocol):
    def schedule_next(self, callback: Callable[[], None]) -> None: ...


class OrbitSimulator:
    """
    Per-frame stepping and drawing of the bodies held by a BodyRegistry.
    """

    def __init__(self, registry: BodyRegistry, surface: DrawSurface, clock: FrameClock,
                 center: Point = CENTER, central_body: Optional[CentralBody] = None,
                 show_labels: bool = True):
        self.registry = registry
        self.surface = surface
        self.clock = clock
        self.center = (float(center[0]), float(center[1]))
        self.central_body = central_body or CentralBody()
        self.show_labels = show_labels
        self.paused = False
        self.frame_count = 0

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    def _position(self, body: LiveBody, lookup: Dict[str, LiveBody]) -> Optional[Point]:
        if not body.active:
            return None
        if not body.is_dependent:
            return orbit_point(self.center, body.orbital_radius, body.phase_angle)
        primary = lookup.get(body.primary_name)
        if primary is None or not primary.active or primary.is_dependent:
            logger.debug("Skipping '%s': primary '%s' is not active", body.name, body.primary_name)
            return None
        primary_pos = orbit_point(self.center, primary.orbital_radius, primary.phase_angle)
        return orbit_point(primary_pos, body.orbit_radius_around_primary, body.phase_angle)

    def resolve_position(self, body: LiveBody) -> Optional[Point]:
        """
        Screen position of ``body`` for the current frame.

        Returns None if the body is inactive, or is a dependent whose primary is
        missing or inactive.
        """
        return self._position(body, {b.name: b for b in self.registry.bodies})

    def frame_positions(self) -> List[Tuple[LiveBody, Point]]:
        """Every drawable body with its position, in live-set order."""
        lookup = {b.name: b for b in self.registry.bodies}
        placed = []
        for body in self.registry.bodies:
            pos = self._position(body, lookup)
            if pos is not None:
                placed.append((body, pos))
        return placed

    def _draw_body(self, name: str, pos: Point, size: float, color: Color) -> None:
        self.surface.draw_disc(pos, size, color)
        if self.show_labels:
            self.surface.draw_label(name, (pos[0] + size + LABEL_OFFSET, pos[1]))

    def draw(self, placed: Optional[List[Tuple[LiveBody, Point]]] = None) -> None:
        if placed is None:
            placed = self.frame_positions()
        self.surface.clear()
        sun = self.central_body
        self._draw_body(sun.name, self.center, sun.size, sun.color)
        for body, pos in placed:
            self._draw_body(body.name, pos, body.size, body.color)

    def advance(self, placed: Optional[List[Tuple[LiveBody, Point]]] = None) -> None:
        """Advance every drawable body by its own angular speed."""
        if placed is None:
            placed = self.frame_positions()
        for body, _ in placed:
            body.phase_angle += body.speed

    def step(self) -> None:
        """Draw the frame, then advance phases unless paused."""
        # Positions are resolved once, before any phase moves.
        placed = self.frame_positions()
        self.draw(placed)
        if not self.paused:
            self.advance(placed)
        self.frame_count += 1

    def tick(self) -> None:
        """One animation frame; schedules the next one on the frame clock."""
        self.step()
        self.clock.schedule_next(self.tick)
