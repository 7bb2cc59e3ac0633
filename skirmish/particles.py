"""Concrete particles: bullet holes, explosions, smoke and thunderbolts."""

from __future__ import annotations

from typing import Any, Tuple

from skirmish.geometry import Vec2
from skirmish.objects import SECONDS_PER_TICK
from skirmish.particle import Particle

Color = Tuple[float, float, float, float]

EXPLOSION_DAMAGE = 10.0


class _TimedParticle(Particle):
    """A particle that removes itself after a fixed number of ticks."""

    def __init__(
        self, game_core: Any, id: int, position: Vec2, rotation: float, duration: int
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.duration = duration

    def _tick_down(self) -> None:
        self.duration -= 1
        if self.duration <= 0:
            self.game_core.push_event_remove_particle(self.id)


class BulletHole(_TimedParticle):
    """A mark left by a critical hit."""

    def update(self) -> None:
        self._tick_down()


class Thunderbolt(_TimedParticle):
    """A brief lightning flash."""

    def update(self) -> None:
        self._tick_down()


class Explosion(_TimedParticle):
    """A blast that damages every unit inside it once, on its first tick."""

    def __init__(
        self, game_core: Any, id: int, position: Vec2, rotation: float, duration: int
    ) -> None:
        super().__init__(game_core, id, position, rotation, duration)
        self.should_damage = True

    def update(self) -> None:
        if self.should_damage:
            for unit_id, unit in list(self.game_core.units.items()):
                if self.is_in_explosion(unit.position):
                    self.game_core.push_event_deal_damage(unit_id, self.id, EXPLOSION_DAMAGE)
            self.should_damage = False
        self._tick_down()

    def is_in_explosion(self, position: Vec2) -> bool:
        """Whether the world point lies inside the blast's clipped box."""
        p = self.world_to_local(position)
        return (
            -1.6 < p.x < 1.6
            and -2.0 < p.y < 2.0
            and p.x + p.y < 3.2
            and p.y - p.x < 3.2
        )


class Smoke(Particle):
    """A drifting puff that fades out and then removes itself."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        position: Vec2,
        rotation: float,
        v: Vec2,
        size: float = 0.2,
        color: Color = (1.0, 1.0, 1.0, 1.0),
        decay_scale: float = 1.0,
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.v = v
        self.size = size
        self.color = color
        self.decay_scale = decay_scale
        self.strength = 1.0

    @property
    def render_color(self) -> Color:
        """The base colour with its alpha faded by the current strength."""
        r, g, b, a = self.color
        return (r, g, b, a * self.strength)

    def update(self) -> None:
        self.position = self.position + self.v * SECONDS_PER_TICK
        self.strength -= SECONDS_PER_TICK * self.decay_scale
        if self.strength < 0.0:
            self.game_core.push_event_remove_particle(self.id)