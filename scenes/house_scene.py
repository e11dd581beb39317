"""scenes/house_scene.py — The only gameplay screen.

Hosts a ``GameSession``: feeds it ticks from a ``Ticker``, turns clicks
and keys into session operations and draws the read-only state.  No
game rule lives here — every change goes through the session.

Layout (top → bottom):
  HUD        weekday / day, clock, speed, energy / sleep / health bars
  Room tabs  five rooms, the current one highlighted
  Room       the current room's objects (used ones greyed out)

Keys: Space play/pause · 1-5 rooms · +/- speed · R restart · Esc quit
"""

from __future__ import annotations
import pygame

from components import Terminal
from core.app import App
from core.events import (
    EventBus, SessionBegan, SessionReset, NarrativeEventTriggered,
    NarrativeEventResolved, SessionEnded, InteractionUsed,
)
from core.scene import Scene
from core.ticker import Ticker
from core.constants import STAT_NAMES
from logic.session import GameSession, InvalidChoiceError
from ui import (
    ModalStack, EventModal, WelcomeModal, OutcomeModal,
    BeginSession, ChooseOption, ResetSession,
)
from ui.helpers import draw_stat_bar, draw_button, ACCENT, TEXT, TEXT_DIM

_BG = (16, 20, 24)
_TOAST_SECONDS = 2.5


class HouseScene(Scene):
    def __init__(self, session: GameSession, bus: EventBus,
                 speed_steps: list[int] | None = None):
        self.session = session
        self.bus = bus
        self.speed_steps = list(speed_steps or [1])
        self.ticker = Ticker()
        self.modals = ModalStack()
        self._room_rects: list[tuple[pygame.Rect, str]] = []
        self._object_rects: list[tuple[pygame.Rect, str]] = []
        self._toast = ""
        self._toast_timer = 0.0
        self._subscribed = False

    # ── lifecycle ────────────────────────────────────────────────────

    def on_enter(self, app: App):
        if not self._subscribed:
            self.bus.subscribe("SessionBegan", self._on_began)
            self.bus.subscribe("SessionReset", self._on_reset)
            self.bus.subscribe("NarrativeEventTriggered", self._on_event_triggered)
            self.bus.subscribe("NarrativeEventResolved", self._on_event_resolved)
            self.bus.subscribe("SessionEnded", self._on_ended)
            self.bus.subscribe("InteractionUsed", self._on_interaction)
            self._subscribed = True
        if self.session.state.onboarding and not self.modals.is_open:
            self.modals.push(WelcomeModal())

    def on_exit(self, app: App):
        self.ticker.stop()

    # ── bus handlers ─────────────────────────────────────────────────

    def _on_began(self, evt: SessionBegan):
        self.modals.clear()

    def _on_reset(self, evt: SessionReset):
        self.ticker.stop()
        self.modals.clear()
        self.modals.push(WelcomeModal())

    def _on_event_triggered(self, evt: NarrativeEventTriggered):
        pending = self.session.state.pending_event
        if pending is not None:
            self.modals.push(EventModal(pending))

    def _on_event_resolved(self, evt: NarrativeEventResolved):
        active = self.modals.active
        if isinstance(active, EventModal) and active.event_id == evt.event_id:
            self.modals.pop()

    def _on_ended(self, evt: SessionEnded):
        self.ticker.stop()
        self.modals.clear()
        self.modals.push(OutcomeModal(Terminal(evt.verdict), evt.day))

    def _on_interaction(self, evt: InteractionUsed):
        room = self.session.catalog.room(evt.room_id)
        obj = room.get_object(evt.object_id) if room else None
        if obj is not None:
            self._show_toast(f"{obj.label}: {obj.effect.describe()}")

    def _show_toast(self, text: str):
        self._toast = text
        self._toast_timer = _TOAST_SECONDS

    # ── input ────────────────────────────────────────────────────────

    def _apply(self, commands: list) -> None:
        for cmd in commands:
            if isinstance(cmd, BeginSession):
                self.session.begin()
            elif isinstance(cmd, ChooseOption):
                try:
                    self.session.resolve_event(cmd.index)
                except InvalidChoiceError as exc:
                    print(f"[SCENE] {exc}")
            elif isinstance(cmd, ResetSession):
                self.session.reset()

    def _cycle_speed(self, step: int) -> None:
        rate = self.session.state.tick_rate
        steps = self.speed_steps
        idx = steps.index(rate) if rate in steps else 0
        idx = max(0, min(len(steps) - 1, idx + step))
        if steps[idx] != rate:
            self.session.set_tick_rate(steps[idx])
            self._show_toast(f"Speed x{steps[idx]:g}")

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            app.quit()
            return

        if self.modals.is_open:
            self._apply(self.modals.handle_event(event))
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.session.toggle_pause()
            elif event.key == pygame.K_r:
                self.session.reset()
            elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self._cycle_speed(+1)
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self._cycle_speed(-1)
            elif pygame.K_1 <= event.key <= pygame.K_9:
                ids = self.session.catalog.room_ids()
                idx = event.key - pygame.K_1
                if idx < len(ids):
                    self.session.change_room(ids[idx])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for rect, room_id in self._room_rects:
                if rect.collidepoint(event.pos):
                    self.session.change_room(room_id)
                    return
            for rect, object_id in self._object_rects:
                if rect.collidepoint(event.pos):
                    self.session.interact(object_id)
                    return

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        if self.session.state.running:
            due = self.ticker.update(dt, self.session.tick_interval_ms())
            for _ in range(due):
                self.session.tick()
                if not self.session.state.running:
                    break
        else:
            self.ticker.stop()

        self.bus.drain()

        if self._toast_timer > 0:
            self._toast_timer = max(0.0, self._toast_timer - dt)

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(_BG)
        s = self.session.state
        sw, sh = surface.get_size()

        if not s.onboarding:
            self._draw_hud(surface, app, sw)
            self._draw_rooms(surface, app, sw)
            self._draw_objects(surface, app, sw, sh)

            if self._toast_timer > 0:
                app.draw_text_centered(surface, self._toast, sw // 2, sh - 40, ACCENT)

        self.modals.draw(surface, app)

    def _draw_hud(self, surface, app: App, sw: int):
        s = self.session.state
        app.draw_text(surface, f"{self.session.weekday()}  ·  Day {s.day}", 20, 16,
                      ACCENT, font=app.font_lg)
        app.draw_text(surface, self.session.clock_label(), 20, 46, TEXT, font=app.font_lg)
        if s.running:
            status = f"Playing  x{s.tick_rate:g}"
        elif s.pending_event is not None:
            status = "Waiting for your choice"
        else:
            status = "Paused"
        app.draw_text(surface, status, 110, 52, TEXT_DIM, font=app.font_sm)

        bar_w = 180
        x = sw - (bar_w + 24) * len(STAT_NAMES)
        for name in STAT_NAMES:
            draw_stat_bar(surface, app, x, 24, bar_w, name, s.stat(name))
            x += bar_w + 24

    def _draw_rooms(self, surface, app: App, sw: int):
        self._room_rects = []
        rooms = self.session.rooms
        gap = 10
        w = (sw - 40 - gap * (len(rooms) - 1)) // max(1, len(rooms))
        x, y = 20, 90
        for i, room in enumerate(rooms):
            rect = pygame.Rect(x, y, w, 36)
            draw_button(surface, app, rect, f"{i + 1}  {room.label}",
                        selected=room.id == self.session.state.current_room)
            self._room_rects.append((rect, room.id))
            x += w + gap

    def _draw_objects(self, surface, app: App, sw: int, sh: int):
        self._object_rects = []
        area = pygame.Rect(20, 144, sw - 40, sh - 200)
        pygame.draw.rect(surface, (26, 31, 36), area, border_radius=10)

        objects = self.session.room_objects()
        cols = 3
        cell_w = (area.width - 40) // cols
        for i, (obj, used) in enumerate(objects):
            col, row = i % cols, i // cols
            rect = pygame.Rect(area.x + 20 + col * cell_w, area.y + 24 + row * 120,
                               cell_w - 20, 96)
            label = f"{obj.label}  (used)" if used else obj.label
            draw_button(surface, app, rect, label, disabled=used)
            app.draw_text_centered(surface, obj.effect.describe(), rect.centerx,
                                   rect.bottom - 22, TEXT_DIM, font=app.font_sm)
            if not used:
                self._object_rects.append((rect, obj.id))
