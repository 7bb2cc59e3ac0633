"""Base game object, skills, and simulation timing constants."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from skirmish.geometry import Vec2

if TYPE_CHECKING:
    from skirmish.game_core import GameCore

TICKS_PER_SECOND = 60
SECONDS_PER_TICK = 1.0 / TICKS_PER_SECOND


class SkillType(enum.Enum):
    """Activation kind of a skill: keys E, Q, R, passive, or bullet type."""

    E = 0
    Q = 1
    R = 2
    P = 3
    B = 4


@dataclass
class Skill:
    """A unit ability as shown to the player."""

    name: str
    type: SkillType
    time_remain: int = 0
    time_total: int = 0
    bullet_type: int = 0
    bullet_total_number: int = 0
    description: str = ""
    src: str = ""
    function: Optional[Callable[[], None]] = None
    switch_bullet: Optional[Callable[[int], None]] = None


class GameObject(ABC):
    """Something placed in the world with a position and a rotation."""

    def __init__(
        self,
        game_core: Optional["GameCore"],
        id: int,
        position: Optional[Vec2] = None,
        rotation: float = 0.0,
    ) -> None:
        self.game_core = game_core
        self.id = id
        self.position = position if position is not None else Vec2(0.0, 0.0)
        self.rotation = rotation

    def local_to_world(self, p: Vec2) -> Vec2:
        """Map a point from this object's frame into world coordinates."""
        return p.rotated(self.rotation) + self.position

    def world_to_local(self, p: Vec2) -> Vec2:
        """Map a world point into this object's frame."""
        return (p - self.position).rotated(-self.rotation)

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one game tick."""