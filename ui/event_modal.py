"""ui/event_modal.py — Narrative event prompt."""

from __future__ import annotations
import pygame

from components import NarrativeEvent
from ui.modal import Modal
from ui.commands import ChooseOption, UICommand
from ui.helpers import (
    draw_overlay, draw_panel, centered_box, wrap_text,
    ACCENT, TEXT, TEXT_DIM,
)


class EventModal(Modal):
    """Shows a pending event and lets the player pick one of its choices.

    There is no way to dismiss it without choosing: the session stays
    paused until a ``ChooseOption`` command is applied.
    """

    def __init__(self, event: NarrativeEvent):
        self._event = event
        self._cursor = 0
        self._choice_rects: list[pygame.Rect] = []

    @property
    def event_id(self) -> str:
        return self._event.id

    def _select(self, index: int) -> list[UICommand]:
        return [ChooseOption(index=index)]

    # ── Modal interface ──────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        n = len(self._event.choices)
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_w, pygame.K_UP):
                self._cursor = max(0, self._cursor - 1)
            elif event.key in (pygame.K_s, pygame.K_DOWN):
                self._cursor = min(n - 1, self._cursor + 1)
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_e):
                return self._select(self._cursor)
            elif pygame.K_1 <= event.key < pygame.K_1 + n:
                return self._select(event.key - pygame.K_1)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, rect in enumerate(self._choice_rects):
                if rect.collidepoint(event.pos):
                    return self._select(i)
        elif event.type == pygame.MOUSEMOTION:
            for i, rect in enumerate(self._choice_rects):
                if rect.collidepoint(event.pos):
                    self._cursor = i
                    break
        return []

    def draw(self, surface: pygame.Surface, app):
        draw_overlay(surface)
        box = centered_box(surface, 600, 360)
        draw_panel(surface, box)

        app.draw_text(surface, self._event.title, box.x + 16, box.y + 14, ACCENT, font=app.font_lg)
        pygame.draw.line(surface, (70, 80, 80),
                         (box.x + 10, box.y + 48), (box.right - 10, box.y + 48))

        y = box.y + 60
        for line in wrap_text(self._event.description, app.font, box.width - 32):
            app.draw_text(surface, line, box.x + 16, y, TEXT)
            y += 22
        y += 12

        self._choice_rects = []
        for i, choice in enumerate(self._event.choices):
            selected = i == self._cursor
            rect = pygame.Rect(box.x + 12, y, box.width - 24, 44)
            pygame.draw.rect(surface, (60, 70, 72) if selected else (42, 48, 52),
                             rect, border_radius=6)
            prefix = "> " if selected else "  "
            app.draw_text(surface, f"{prefix}{i + 1}. {choice.text}", rect.x + 8, rect.y + 4,
                          (255, 255, 255) if selected else (190, 190, 190))
            app.draw_text(surface, choice.effect.describe(), rect.x + 36, rect.y + 24,
                          TEXT_DIM, font=app.font_sm)
            self._choice_rects.append(rect)
            y += 50
