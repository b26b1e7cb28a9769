"""Simulation area: RGB buffer scaled up to the window rect with a thin grey border."""

import pygame
import numpy as np

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1


def rgb_to_surface(rgb: np.ndarray) -> pygame.Surface:
    """(height, width, 3) uint8 -> unscaled surface."""
    h, w = rgb.shape[0], rgb.shape[1]
    data = np.ascontiguousarray(rgb, dtype=np.uint8).tobytes()
    return pygame.image.frombytes(data, (w, h), "RGB")


def draw_grid(surface: pygame.Surface, grid_rect: pygame.Rect, rgb: np.ndarray, border: bool = True) -> None:
    """Nearest-neighbour scale so cells stay crisp at any pixel scale."""
    if rgb.shape[0] == 0 or rgb.shape[1] == 0:
        return
    img = rgb_to_surface(rgb)
    if img.get_size() != grid_rect.size:
        img = pygame.transform.scale(img, grid_rect.size)
    surface.blit(img, grid_rect.topleft)
    if border:
        pygame.draw.rect(surface, BORDER_COLOR, grid_rect, BORDER_PX)


def screen_to_cell(pos: tuple[int, int], grid_rect: pygame.Rect, width: int, height: int) -> tuple[int, int]:
    """Mouse position -> grid coordinates. May fall outside the grid; paint clips."""
    mx, my = pos
    cell_w = grid_rect.width / width
    cell_h = grid_rect.height / height
    return int((mx - grid_rect.x) // cell_w), int((my - grid_rect.y) // cell_h)
