"""Base class for projectiles fired by units."""

from __future__ import annotations

from typing import Any

from skirmish.geometry import Vec2
from skirmish.objects import GameObject


class Bullet(GameObject):
    """A projectile owned by a unit and a player."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float = 0.0,
        damage_scale: float = 1.0,
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.unit_id = unit_id
        self.player_id = player_id
        self.damage_scale = damage_scale

    def on_destroy(self) -> None:
        """Hook run when the bullet is removed from the world."""