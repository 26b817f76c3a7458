#!/usr/bin/env python3
"""
Body registry: the live set of bodies and the toggle state machine.

Responsibilities
- Own the catalog (read-only) and the live set (ordered list of LiveBody).
- Toggle bodies on and off, cascading to dependents, and re-insert removed bodies at
  their catalog position.

Rules
- Live set order always follows catalog order.
- A dependent is active only while its primary is live and active. Deactivating a
  primary deactivates all of its dependents; re-activating (or re-adding) a primary
  brings back its bound dependents only.
- Names are unique in the live set.

Threading
- None. The registry is driven from the same loop that runs the frame ticks, so
  toggles and ticks never interleave.
"""
import logging
from enum import Enum
from typing import List, Optional

from .catalog import Catalog
from .data_models import CatalogEntry, LiveBody

logger = logging.getLogger(__name__)


class UnknownBodyError(KeyError):
    """Raised by queries on a name that is not in the catalog."""


class ToggleResult(Enum):
    ADDED = "added"
    ACTIVATED = "activated"
    DEACTIVATED = "deactivated"
    BLOCKED = "blocked"  # dependent whose primary is not active
    UNKNOWN_NAME = "unknown name"

    @property
    def ok(self) -> bool:
        return self is not ToggleResult.UNKNOWN_NAME


class BodyRegistry:
    """
    Authoritative state for which bodies exist and which of them animate.

    Attributes:
        catalog: every body that can ever exist, in canonical order.
        bodies: the live set; inactive bodies stay in it until removed.
    """

    def __init__(self, catalog: Catalog, initialize: bool = True):
        self.catalog = catalog
        self.bodies: List[LiveBody] = []
        if initialize:
            self.initialize()

    def initialize(self) -> None:
        """One fresh, active body per catalog entry, in catalog order."""
        self.bodies = [LiveBody.from_entry(entry) for entry in self.catalog]
        self.check_invariants()
        logger.debug("Registry initialized with %d bodies", len(self.bodies))

    # -----------------------
    # Queries
    # -----------------------

    def get(self, name: str) -> Optional[LiveBody]:
        for body in self.bodies:
            if body.name == name:
                return body
        return None

    def is_present(self, name: str) -> bool:
        return self.get(name) is not None

    def is_active(self, name: str) -> bool:
        """True if ``name`` is live and active; raises UnknownBodyError outside the catalog."""
        if name not in self.catalog:
            raise UnknownBodyError(name)
        body = self.get(name)
        return body is not None and body.active

    def names(self) -> List[str]:
        return [b.name for b in self.bodies]

    def active_bodies(self) -> List[LiveBody]:
        return [b for b in self.bodies if b.active]

    # -----------------------
    # State transitions
    # -----------------------

    def toggle(self, name: str) -> ToggleResult:
        """
        Flip a body between animating and not.

        A live body has its active flag flipped (cascading to dependents); a body that
        was removed is re-created from the catalog and inserted at its catalog position.
        Unknown names change nothing and return ToggleResult.UNKNOWN_NAME.
        """
        entry = self.catalog.get(name)
        if entry is None:
            logger.warning("Toggle ignored: '%s' is not in the catalog", name)
            return ToggleResult.UNKNOWN_NAME

        body = self.get(name)
        if body is not None:
            body.active = not body.active
            if not entry.is_dependent:
                if body.active:
                    self._restore_bound_dependents(name)
                else:
                    self._deactivate_dependents(name)
            result = ToggleResult.ACTIVATED if body.active else ToggleResult.DEACTIVATED
        else:
            body = self._insert(entry)
            if not entry.is_dependent:
                self._restore_bound_dependents(name)
            result = ToggleResult.ADDED

        self._enforce_dependents()
        if entry.is_dependent and result is not ToggleResult.DEACTIVATED and not body.active:
            result = ToggleResult.BLOCKED
        self.check_invariants()
        logger.debug("Toggled '%s': %s", name, result.value)
        return result

    def remove(self, name: str) -> bool:
        """
        Take a body out of the live set entirely.

        Its dependents stay but are forced inactive. Returns False if it was already absent.
        """
        if name not in self.catalog:
            raise UnknownBodyError(name)
        body = self.get(name)
        if body is None:
            return False
        self.bodies.remove(body)
        self._enforce_dependents()
        self.check_invariants()
        logger.debug("Removed '%s' from the live set", name)
        return True

    def _insert(self, entry: CatalogEntry) -> LiveBody:
        """Insert a fresh body before the first live body that comes later in the catalog."""
        fresh = LiveBody.from_entry(entry)
        rank = self.catalog.index_of(entry.name)
        for i, body in enumerate(self.bodies):
            if self.catalog.index_of(body.name) > rank:
                self.bodies.insert(i, fresh)
                break
        else:
            self.bodies.append(fresh)
        logger.debug("Inserted '%s' at position %d", entry.name, self.bodies.index(fresh))
        return fresh

    def _deactivate_dependents(self, primary_name: str) -> None:
        for body in self.bodies:
            if body.primary_name == primary_name:
                body.active = False

    def _restore_bound_dependents(self, primary_name: str) -> None:
        for dep in self.catalog.dependents_of(primary_name):
            if not dep.bound:
                continue
            live = self.get(dep.name)
            if live is None:
                self._insert(dep)
            else:
                live.active = True

    def _enforce_dependents(self) -> None:
        """Force inactive every dependent whose primary is missing or inactive."""
        active_primaries = {b.name for b in self.bodies if b.active and not b.is_dependent}
        for body in self.bodies:
            if body.is_dependent and body.active and body.primary_name not in active_primaries:
                body.active = False

    def check_invariants(self) -> None:
        """Consistency checks on the live set; compiled out under ``python -O``."""
        ranks = [self.catalog.index_of(b.name) for b in self.bodies]
        assert None not in ranks, f"live set holds bodies outside the catalog: {self.names()}"
        assert len(set(ranks)) == len(ranks), f"duplicate names in live set: {self.names()}"
        assert ranks == sorted(ranks), f"live set out of catalog order: {self.names()}"
        active_primaries = {b.name for b in self.bodies if b.active and not b.is_dependent}
        assert all(
            b.primary_name in active_primaries for b in self.bodies if b.is_dependent and b.active
        ), "active dependent without an active primary"
