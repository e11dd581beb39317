"""
core/scene.py — Scene interface

A scene is one full screen of the game.  The app holds a stack of them
and only the top one receives events, updates and draws.

    class MyScene(Scene):
        def handle_event(self, event, app): ...
        def update(self, dt, app): ...      # dt in seconds
        def draw(self, surface, app): ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes the top of the stack."""

    def on_exit(self, app: App):
        """Called when this scene is popped or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
