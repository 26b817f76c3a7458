#!/usr/bin/env python3
"""
Shared constants for the solar system orrery (pixels and radians per tick).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Rendering (viewport)
VIEW_WIDTH = 800
VIEW_HEIGHT = 600
CENTER = (VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
BACKGROUND_COLOR = (0, 0, 0)
FALLBACK_BODY_COLOR = (200, 200, 255)

# Labels
LABEL_COLOR = (255, 255, 255)
LABEL_FONT_SIZE = 14
LABEL_OFFSET = 5  # pixels right of the disc edge

# Central body
CENTRAL_NAME = "Sun"
CENTRAL_SIZE = 20
CENTRAL_COLOR = "yellow"

# Frame pacing
DEFAULT_FPS = 60

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
