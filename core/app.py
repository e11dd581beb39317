"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
Scenes do the actual work; the app only routes events, calls
``update``/``draw`` on the top scene and flips the display.

    app = App(title="Dream Story", width=960, height=640)
    app.push_scene(HouseScene(session))
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Dream Story", width: int = 960, height: int = 640,
                 fps: int = 60):
        pygame.init()
        # Fixed virtual resolution; SDL scales it to the window.
        self.screen = pygame.display.set_mode((width, height),
                                              pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        # Only the top scene is active.
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 16)
        self.font_sm = pygame.font.SysFont("monospace", 13)
        self.font_lg = pygame.font.SysFont("monospace", 22, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    def quit(self):
        self.running = False

    # -- Main loop --

    def run(self):
        print(f"[APP] running at {self.fps} fps")
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif self.scene:
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        while self._scenes:
            self.pop_scene()
        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_centered(self, surface: pygame.Surface, text: str, cx: int, y: int,
                           color=(255, 255, 255), font=None):
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (cx - img.get_width() // 2, y))
