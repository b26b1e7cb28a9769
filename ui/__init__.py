"""UI: color projection, grid view and HUD."""

from ui.colors import cells_to_rgb, for_each_cell
from ui.grid_view import draw_grid, screen_to_cell
from ui.hud import draw_hud, hud_lines

__all__ = ["cells_to_rgb", "for_each_cell", "draw_grid", "screen_to_cell", "draw_hud", "hud_lines"]
