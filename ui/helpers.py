"""ui.helpers — Shared drawing utilities for panels and modals."""

from __future__ import annotations
import pygame

PANEL_BG = (30, 34, 40)
PANEL_BORDER = (90, 110, 100)
ACCENT = (52, 211, 153)         # emerald
LOW = (248, 113, 113)           # red, stat at or below 50
TEXT = (230, 230, 230)
TEXT_DIM = (140, 150, 145)

STAT_COLORS = {
    "energy": (250, 204, 21),
    "sleep": (192, 132, 252),
    "health": (74, 222, 128),
}


def draw_overlay(surface: pygame.Surface, alpha: int = 160) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def draw_panel(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, PANEL_BG, rect, border_radius=8)
    pygame.draw.rect(surface, PANEL_BORDER, rect, 2, border_radius=8)


def centered_box(surface: pygame.Surface, w: int, h: int) -> pygame.Rect:
    sw, sh = surface.get_size()
    w = min(w, sw - 40)
    h = min(h, sh - 40)
    return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)


def draw_stat_bar(surface: pygame.Surface, app, x: int, y: int, w: int,
                  name: str, value: float) -> None:
    """Label + filled bar; turns red at 50 or below (the win floor)."""
    color = STAT_COLORS.get(name, ACCENT) if value > 50 else LOW
    app.draw_text(surface, f"{name.capitalize():<7}{value:5.1f}", x, y, TEXT, font=app.font_sm)
    bar = pygame.Rect(x, y + 18, w, 10)
    pygame.draw.rect(surface, (55, 60, 65), bar, border_radius=4)
    fill = bar.copy()
    fill.width = int(w * max(0.0, min(100.0, value)) / 100.0)
    if fill.width > 0:
        pygame.draw.rect(surface, color, fill, border_radius=4)


def draw_button(surface: pygame.Surface, app, rect: pygame.Rect, label: str, *,
                selected: bool = False, disabled: bool = False) -> pygame.Rect:
    """Flat button; returns *rect* for hit-testing."""
    if disabled:
        bg, fg = (40, 42, 46), (90, 95, 95)
    elif selected:
        bg, fg = ACCENT, (15, 20, 20)
    else:
        bg, fg = (55, 62, 70), TEXT
    pygame.draw.rect(surface, bg, rect, border_radius=6)
    img = app.font_sm.render(label, True, fg)
    surface.blit(img, (rect.centerx - img.get_width() // 2,
                       rect.centery - img.get_height() // 2))
    return rect


def wrap_text(text: str, font: pygame.font.Font, width: int) -> list[str]:
    """Greedy word wrap to *width* pixels."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        trial = f"{current} {word}".strip()
        if font.size(trial)[0] <= width or not current:
            current = trial
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
