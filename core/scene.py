"""
core/scene.py — Base class for views pushed onto the App.

``App`` forwards pygame input, fixed simulation steps and draw calls to
the top scene only.  ``LifeScene`` is the one view in use.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """Run one fixed step of *dt* seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
