"""Animated 2D solar system: body catalog, toggle registry and orbit simulator."""
