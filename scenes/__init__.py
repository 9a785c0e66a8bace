"""scenes — pygame views.  ``life_scene`` is the actor debug view."""
