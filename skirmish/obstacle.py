"""Base class for static scenery that blocks movement and bullets."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Tuple

from skirmish.geometry import Vec2
from skirmish.objects import GameObject


class Obstacle(GameObject):
    """A blocking shape in the world."""

    def __init__(self, game_core: Any, id: int, position: Vec2, rotation: float = 0.0) -> None:
        super().__init__(game_core, id, position, rotation)

    @abstractmethod
    def is_blocked(self, p: Vec2) -> bool:
        """Whether the world point ``p`` lies inside the obstacle."""

    def update(self) -> None:
        """Obstacles are static unless a subclass says otherwise."""

    def surface_normal(self, origin: Vec2, terminus: Vec2) -> Tuple[Vec2, Vec2]:
        """Hit point and outward normal for a segment; zero vectors when not reflective."""
        return Vec2(0.0, 0.0), Vec2(0.0, 0.0)