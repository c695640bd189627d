"""Interactive cabinet interior composer.

Lays out horizontal shelves, vertical shelves and drawers inside a cabinet
by dragging a live preview, snapping each part to the free span around the
cursor.
"""

__version__ = "0.1.0"
