"""Base class for controllable units with health and a life bar."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Tuple

from skirmish.geometry import Vec2
from skirmish.objects import GameObject, Skill

Color = Tuple[float, float, float, float]


class Unit(GameObject):
    """A unit belonging to a player; health is stored as a ratio in [0, 1]."""

    def __init__(self, game_core: Any, id: int, player_id: int) -> None:
        super().__init__(game_core, id)
        self.player_id = player_id
        self._health = 1.0
        self.skills: List[Skill] = []
        self.lifebar_display = True
        self.lifebar_offset = Vec2(0.0, 1.0)
        self.lifebar_length = 2.4
        self.front_lifebar_color: Color = (0.0, 1.0, 0.0, 0.9)
        self.background_lifebar_color: Color = (1.0, 0.0, 0.0, 0.9)
        self.fadeout_lifebar_color: Color = (1.0, 1.0, 1.0, 0.5)

    @property
    def health(self) -> float:
        """Remaining health as a fraction of max_health()."""
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = min(max(value, 0.0), 1.0)

    def set_position(self, position: Vec2) -> None:
        self.position = position

    def set_rotation(self, rotation: float) -> None:
        self.rotation = rotation

    def damage_scale(self) -> float:
        return 1.0

    def speed_scale(self) -> float:
        return 1.0

    def basic_max_health(self) -> float:
        return 100.0

    def health_scale(self) -> float:
        return 1.0

    def max_health(self) -> float:
        """Scaled maximum health, never below 1."""
        return max(self.health_scale() * self.basic_max_health(), 1.0)

    def set_life_bar_length(self, new_length: float) -> None:
        self.lifebar_length = min(new_length, 0.0)

    def show_life_bar(self) -> None:
        self.lifebar_display = True

    def hide_life_bar(self) -> None:
        self.lifebar_display = False

    @abstractmethod
    def is_hit(self, position: Vec2) -> bool:
        """Whether a bullet at the world point ``position`` hits this unit."""

    def generate_bullet(self, bullet_type, position, rotation, damage_scale=1.0, *args) -> None:
        """Queue creation of a bullet owned by this unit."""
        self.game_core.push_event_generate_bullet(
            bullet_type, self.id, self.player_id, position, rotation, damage_scale, *args
        )

    def unit_name(self) -> str:
        return "Unknown Unit"

    def author(self) -> str:
        return "Unknown Author"