"""
core/app.py — Pygame application shell

Handles the window, the fixed-step main loop, and the scene stack.
You don't edit this file to build a view.
You write Scenes and push them.

    app = App(title="Delver", width=960, height=640)
    app.push_scene(MyScene())
    app.run()

The simulation always advances in whole ``step`` increments (1/60 s by
default).  Frame time is accumulated and spent in fixed steps, so a
slow frame runs several updates rather than one long one.
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Delver", width: int = 960, height: int = 640,
                 step: float = 1.0 / 60.0):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 60
        self.step = step
        self.time_scale = 1.0
        self._accum = 0.0

        # Cap on steps per frame so a stall can't spiral.
        self.max_steps = 10

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        self._scenes.append(scene)

    # -- Main loop --

    def run(self):
        while self.running:
            frame = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif self.scene:
                    self.scene.handle_event(event, self)

            self._accum += frame * self.time_scale
            steps = 0
            while self._accum >= self.step and steps < self.max_steps:
                if self.scene:
                    self.scene.update(self.step, self)
                self._accum -= self.step
                steps += 1
            if steps == self.max_steps:
                self._accum = 0.0

            if self.scene:
                self.scene.draw(self.screen, self)
            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))
