"""core package initialization.

Engine-level pieces that know nothing about actors or dungeons:
tuning constants, the event bus, and the pygame app / scene shell.
"""

__all__ = ["app", "events", "scene", "tuning"]
