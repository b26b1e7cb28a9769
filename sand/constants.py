"""Simulation constants. Background = 0; every other id is a registered material."""

BACKGROUND_ID = 0
BACKGROUND_COLOR = (0, 0, 0)
# Grid size in cells; y increases downward (row 0 is the top).
DEFAULT_WIDTH, DEFAULT_HEIGHT = 200, 120
# Straight down first, then the two diagonals. Horizontal probes follow, built per material.
DOWN = (0, 1)
