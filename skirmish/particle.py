"""Base class for short-lived visual effects."""

from __future__ import annotations

from typing import Any

from skirmish.geometry import Vec2
from skirmish.objects import GameObject


class Particle(GameObject):
    """A transient effect; subclasses define how it evolves each tick."""

    def __init__(self, game_core: Any, id: int, position: Vec2, rotation: float = 0.0) -> None:
        super().__init__(game_core, id, position, rotation)