"""
scenes/life_scene.py — Debug view of one actor and its dungeon cycle.

Draws the fixed locations, the actor (coloured by state), vitals bars,
the current run's depth, and the tail of the DevLog.

Controls:
  Space = start a dungeon cycle (restarts one in progress)
  A     = abandon the current cycle
  F4    = hot-reload tuning
  +/-   = simulation speed
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core import tuning
from components.actor import ActorState
from simulation.orchestrator import DungeonCycle

# ── UI constants ─────────────────────────────────────────────────────
_BG = (16, 20, 24)
_TEXT = (200, 200, 200)
_DIM = (90, 90, 90)
_HEADER = (0, 255, 200)

_STATE_COLORS: dict[ActorState, tuple[int, int, int]] = {
    ActorState.TRAVEL: (100, 255, 160),
    ActorState.SATISFYING_NEED: (200, 180, 100),
    ActorState.IN_DUNGEON: (255, 100, 80),
    ActorState.ESCAPING: (80, 180, 255),
}

_LOCATION_COLORS = {
    "home": (180, 180, 80),
    "dungeon": (160, 60, 60),
    "food": (120, 200, 120),
    "healing": (255, 140, 100),
    "entertainment": (200, 160, 255),
}

_CAT_COLORS = {
    "state": (120, 200, 255),
    "need": (200, 180, 100),
    "dungeon": (255, 100, 80),
    "reward": (255, 220, 100),
    "cycle": (180, 180, 180),
    "status": (90, 90, 90),
}


class LifeScene(Scene):
    def __init__(self, cycle: DungeonCycle):
        self.cycle = cycle

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_SPACE:
            self.cycle.start()
        elif event.key == pygame.K_a:
            self.cycle.abandon()
        elif event.key == pygame.K_F4:
            tuning.reload()
        elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            app.time_scale = min(16.0, app.time_scale * 2.0)
        elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            app.time_scale = max(0.25, app.time_scale / 2.0)

    def update(self, dt: float, app: App):
        self.cycle.update(dt)

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(_BG)
        actor = self.cycle.actor

        # Locations
        for name, color in _LOCATION_COLORS.items():
            loc = getattr(actor.locations, name)
            rect = pygame.Rect(int(loc.x) - 10, int(loc.y) - 10, 20, 20)
            pygame.draw.rect(surface, color, rect, 2)
            app.draw_text(surface, name, rect.x, rect.bottom + 2,
                          color=color, font=app.font_sm)

        # Actor + travel line
        ax, ay = int(actor.position.x), int(actor.position.y)
        if actor.state is ActorState.TRAVEL:
            tx, ty = int(actor.target_position.x), int(actor.target_position.y)
            pygame.draw.line(surface, _DIM, (ax, ay), (tx, ty))
        pygame.draw.circle(surface, _STATE_COLORS[actor.state], (ax, ay), 6)

        # HUD
        x, y = 10, 10
        app.draw_text(surface, f"{actor.name} — {actor.state.value}", x, y,
                      color=_HEADER)
        y += 20
        for label, value in actor.vitals().items():
            self._bar(surface, app, x, y, label, value)
            y += 16
        y += 4
        app.draw_text(surface, f"wallet {self.cycle.wallet}  runs "
                      f"{self.cycle.runs_completed}  cycle {self.cycle.phase}  "
                      f"x{app.time_scale:g}", x, y, color=_TEXT)
        y += 18

        run = actor.run
        if run is not None:
            app.draw_text(surface, f"{run.name}: level "
                          f"{run.current_level_index + 1}/{run.depth}  "
                          f"{run.progress * 100:.0f}%  {run.phase.value}",
                          x, y, color=_STATE_COLORS[actor.state])
            y += 18

        # Log tail
        h = surface.get_height()
        entries = [e for e in self.cycle.log.recent(40) if e["cat"] != "status"]
        ly = h - 16
        for entry in reversed(entries[-12:]):
            color = _CAT_COLORS.get(entry["cat"], _TEXT)
            app.draw_text(surface, f"{entry['t']:7.1f}  {entry['msg']}", 10, ly,
                          color=color, font=app.font_sm)
            ly -= 14
        latest = self.cycle.log.latest("status")
        if latest:
            app.draw_text(surface, latest["msg"], 10, ly - 6, color=_DIM,
                          font=app.font_sm)

    def _bar(self, surface, app: App, x: int, y: int, label: str, value: float):
        app.draw_text(surface, f"{label:<10}", x, y, color=_TEXT, font=app.font_sm)
        bx, bw = x + 90, 120
        ratio = max(0.0, min(1.0, value / 100.0))
        pygame.draw.rect(surface, (40, 40, 40), (bx, y + 3, bw, 8))
        if ratio > 0.5:
            color = (80, 200, 80)
        elif ratio > 0.3:
            color = (220, 180, 50)
        else:
            color = (220, 80, 50)
        pygame.draw.rect(surface, color, (bx, y + 3, max(1, int(bw * ratio)), 8))
