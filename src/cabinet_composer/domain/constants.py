"""Layout constants (all lengths in meters)."""

from __future__ import annotations

# --- Part cross-sections ---

SHELF_THICKNESS = 0.02
DRAWER_HEIGHT = 0.15
DRAWER_DEPTH_RATIO = 0.7  # drawers are shallower than shelves

# --- Cabinet defaults ---

DEFAULT_WALL_THICKNESS = 0.02
DEFAULT_CABINET_COLOR = 0x8B4513

# --- Span rules ---

MIN_SPAN = 0.1  # reported spans never fall below this
ADMISSIBLE_SPAN = 0.01  # a raw span must exceed this to accept a placement

# --- Preview feedback colors ---

PREVIEW_COLOR_VALID = 0x00FF00
PREVIEW_COLOR_INVALID = 0xFF0000
SHELF_FINISH_COLOR = 0xDEB887
DRAWER_FINISH_COLOR = 0xF5F5DC
