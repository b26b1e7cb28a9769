"""
App shell: window, input and main loop. Each frame: paint from the mouse, step the
simulation, then project the grid to colors and draw it with the HUD on top.
"""

import logging
import sys

import pygame

from sand import Grid, Stepper, BACKGROUND_ID
from sand.benchmark import run_benchmark
from sand.spawn import make_rng
from ui.colors import cells_to_rgb
from ui.grid_view import draw_grid, screen_to_cell
from ui.hud import draw_hud, hud_lines
import config

TITLE = "Sand Simulator"
FONT_SIZE = 20
BACKGROUND = (0, 0, 0)
MATERIAL_KEYS = (
    pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5,
    pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9,
)

logger = logging.getLogger(__name__)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = config.load_config()
    try:
        config.validate_config(cfg)
    except config.ConfigError as exc:
        logger.critical("Invalid configuration: %s", exc)
        sys.exit(1)
    logging.getLogger().setLevel(config.log_level(cfg))

    registry = config.registry_from_config(cfg)
    width, height = cfg["world"]["width"], cfg["world"]["height"]
    scale = cfg["pixel_scale"]
    grid = Grid(width, height)
    stepper = Stepper(grid, registry)
    logger.info("Session started: %dx%d grid, %d materials", width, height, len(registry))

    pygame.init()
    screen = pygame.display.set_mode((width * scale, height * scale))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, FONT_SIZE)
    grid_rect = pygame.Rect(0, 0, width * scale, height * scale)

    material_ids = registry.ids()
    current_mat = material_ids[0]
    brush_radius = cfg["brush_radius"]
    brush_min, brush_max = cfg["brush_min"], cfg["brush_max"]
    allow_overwrite = bool(cfg["allow_overwrite"])
    benchmark_text = None

    running = True
    while running:
        clock.tick(cfg["target_fps"])

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue
            k = event.key
            if k == pygame.K_ESCAPE:
                running = False
            elif k == pygame.K_c:
                grid.clear()
                logger.info("Grid cleared")
            elif k == pygame.K_LEFTBRACKET:
                brush_radius = max(brush_min, brush_radius - 1)
            elif k == pygame.K_RIGHTBRACKET:
                brush_radius = min(brush_max, brush_radius + 1)
            elif k == pygame.K_o:
                allow_overwrite = not allow_overwrite
            elif k == pygame.K_s:
                cfg.update(brush_radius=brush_radius, allow_overwrite=allow_overwrite)
                config.save_config(cfg)
            elif k == pygame.K_b:
                rng, seed_used = make_rng(cfg["seed"])
                result = run_benchmark(stepper, cfg["benchmark_frames"], rng, cfg["spawn_density"])
                benchmark_text = (
                    f"Benchmark: {result.frames} frames in {result.elapsed_s:.2f} s "
                    f"({result.steps_per_second:.0f}/s, seed {seed_used})"
                )
            elif k in MATERIAL_KEYS:
                idx = MATERIAL_KEYS.index(k)
                if idx < len(material_ids):
                    current_mat = material_ids[idx]

        buttons = pygame.mouse.get_pressed(3)
        if buttons[0] or buttons[2]:
            gx, gy = screen_to_cell(pygame.mouse.get_pos(), grid_rect, width, height)
            if buttons[0]:
                grid.paint(gx, gy, current_mat, brush_radius, allow_overwrite)
            else:
                grid.paint(gx, gy, BACKGROUND_ID, brush_radius, True)

        for _ in range(cfg["steps_per_frame"]):
            stepper.step()

        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, cells_to_rgb(grid, registry))
        draw_hud(
            screen,
            font,
            hud_lines(
                clock.get_fps(),
                registry.by_id(current_mat).name,
                brush_radius,
                allow_overwrite,
                stepper.frame,
                benchmark_text,
            ),
        )
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    run()
