"""Diagnostics box in the top-left corner: title, fps, brush and material selection."""

import re

import pygame

HUD_BG = (200, 200, 200)
HUD_BORDER = (60, 60, 68)
HUD_TEXT = (0, 0, 0)
HUD_PADDING = 6
HUD_MARGIN = 10
HUD_MAX_WIDTH = 420
HUD_LINE_GAP = 2
HUD_GROUP_SEP = re.compile(r"\s{2,}")
HUD_GROUP_JOIN = "   "


def wrap_hud_line(line: str, font: pygame.font.Font, max_width: int = HUD_MAX_WIDTH) -> list[str]:
    """Break between groups separated by two or more spaces, so a key stays next to its label."""
    groups = [g for g in HUD_GROUP_SEP.split(line.strip()) if g]
    if not groups:
        return [""]
    rows = [groups[0]]
    for group in groups[1:]:
        joined = rows[-1] + HUD_GROUP_JOIN + group
        if font.size(joined)[0] > max_width:
            rows.append(group)
        else:
            rows[-1] = joined
    return rows


def hud_lines(
    fps: float,
    material_name: str,
    brush_radius: int,
    allow_overwrite: bool,
    frame: int,
    benchmark: str | None = None,
) -> list[str]:
    lines = [
        "Sand Simulator",
        f"FPS: {fps:.0f}   Frame: {frame}",
        f"Material: {material_name}   Brush: {brush_radius}   Overwrite: {'on' if allow_overwrite else 'off'}",
        "LMB paint  RMB erase  1-9 material  [ ] brush  O overwrite  C clear  B bench  S save  Esc quit",
    ]
    if benchmark:
        lines.append(benchmark)
    return lines


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, lines: list[str]) -> None:
    if not lines:
        return
    wrapped: list[str] = []
    for line in lines:
        wrapped.extend(wrap_hud_line(line, font))
    line_h = font.get_height() + HUD_LINE_GAP
    box_w = max(font.size(l)[0] for l in wrapped) + 2 * HUD_PADDING
    box_h = len(wrapped) * line_h + 2 * HUD_PADDING
    sw, sh = surface.get_size()
    box_w = min(box_w, sw - HUD_MARGIN)
    box_h = min(box_h, sh - HUD_MARGIN)
    rect = pygame.Rect(HUD_MARGIN, HUD_MARGIN, box_w, box_h)
    pygame.draw.rect(surface, HUD_BG, rect)
    pygame.draw.rect(surface, HUD_BORDER, rect, 1)
    y = rect.y + HUD_PADDING
    for line in wrapped:
        surface.blit(font.render(line, True, HUD_TEXT), (rect.x + HUD_PADDING, y))
        y += line_h
