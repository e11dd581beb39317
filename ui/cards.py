"""ui/cards.py — Welcome and end-of-game cards."""

from __future__ import annotations
import pygame

from components import Terminal
from ui.modal import Modal
from ui.commands import BeginSession, ResetSession, UICommand
from ui.helpers import (
    draw_overlay, draw_panel, centered_box, draw_button, wrap_text,
    ACCENT, LOW, TEXT,
)

_WELCOME = (
    "Guide Alex through one week on a journey to better sleep and health. "
    "Energy, sleep and health drain during the day and recover at night. "
    "Use objects around the house (each only once) and choose wisely when "
    "something happens. Survive seven days with every stat above 50 to win."
)

_CONTROLS = "Space pause   1-5 rooms   +/- speed   R restart   Esc quit"


class _Card(Modal):
    """Single-button card; Enter, Space or a click on the button confirms."""

    button_label = "OK"

    def __init__(self):
        self._button = pygame.Rect(0, 0, 0, 0)

    def _confirm(self) -> list[UICommand]:
        raise NotImplementedError

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
            return self._confirm()
        if (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self._button.collidepoint(event.pos)):
            return self._confirm()
        return []

    def _draw_body(self, surface, app, box: pygame.Rect) -> None:
        pass

    def draw(self, surface: pygame.Surface, app):
        draw_overlay(surface, alpha=180)
        box = centered_box(surface, 520, 340)
        draw_panel(surface, box)
        self._draw_body(surface, app, box)
        self._button = pygame.Rect(box.centerx - 90, box.bottom - 60, 180, 40)
        draw_button(surface, app, self._button, self.button_label, selected=True)


class WelcomeModal(_Card):
    button_label = "Let's go!"

    def _confirm(self) -> list[UICommand]:
        return [BeginSession()]

    def _draw_body(self, surface, app, box):
        app.draw_text_centered(surface, "Welcome to Dream Story", box.centerx, box.y + 20,
                               ACCENT, font=app.font_lg)
        y = box.y + 64
        for line in wrap_text(_WELCOME, app.font, box.width - 40):
            app.draw_text_centered(surface, line, box.centerx, y, TEXT)
            y += 22
        app.draw_text_centered(surface, _CONTROLS, box.centerx, box.bottom - 92,
                               (150, 160, 155), font=app.font_sm)


class OutcomeModal(_Card):
    button_label = "Play again"

    def __init__(self, verdict: Terminal, day: int):
        super().__init__()
        self.verdict = verdict
        self.day = day

    def _confirm(self) -> list[UICommand]:
        return [ResetSession()]

    def _draw_body(self, surface, app, box):
        won = self.verdict is Terminal.WON
        title = "Congratulations!" if won else "Game Over"
        if won:
            body = ("Alex made it through the week with energy, sleep and "
                    "health all in good shape.")
        else:
            body = (f"Alex ran out of steam on day {self.day}. Keep an eye "
                    "on every stat and try again.")
        app.draw_text_centered(surface, title, box.centerx, box.y + 24,
                               ACCENT if won else LOW, font=app.font_lg)
        y = box.y + 80
        for line in wrap_text(body, app.font, box.width - 40):
            app.draw_text_centered(surface, line, box.centerx, y, TEXT)
            y += 22
