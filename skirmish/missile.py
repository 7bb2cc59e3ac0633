"""A homing missile that steers towards the most reachable enemy."""

from __future__ import annotations

import math
from typing import Any

from skirmish.bullet import Bullet
from skirmish.geometry import Vec2
from skirmish.objects import SECONDS_PER_TICK
from skirmish.particles import Smoke

MISSILE_DAMAGE = 10.0
TRACKING_RANGE = 12.0
PROXIMITY_RANGE = 1.0
INITIAL_BEST_COST = 500.0
RESISTANCE = 0.02
SMOKE_PUFFS = 6
SMOKE_COLOR = (0.0, 0.0, 0.0, 1.0)

_ZERO = Vec2(0.0, 0.0)


def _clamped_acos(value: float) -> float:
    return math.acos(min(1.0, max(-1.0, value)))


class Missile(Bullet):
    """A guided projectile limited by a maximum speed and air resistance."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        velocity: Vec2,
        max_velocity: float,
    ) -> None:
        super().__init__(game_core, id, unit_id, player_id, position, rotation, damage_scale)
        self.velocity = velocity
        self.max_velocity = max(1.0, max_velocity)
        self.resistance = RESISTANCE

    def _enemies(self):
        for unit_id, unit in list(self.game_core.units.items()):
            if unit_id == self.unit_id or unit.player_id == self.player_id:
                continue
            yield unit_id, unit

    def update(self) -> None:
        core = self.game_core
        self.position = self.position + self.velocity * SECONDS_PER_TICK
        self.rotation = math.atan2(self.velocity.y, self.velocity.x) - math.radians(90.0)
        should_die = core.is_blocked_by_obstacles(self.position)

        for unit_id, unit in self._enemies():
            if unit.is_hit(self.position):
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * MISSILE_DAMAGE)
                should_die = True

        if should_die:
            core.push_event_remove_bullet(self.id)
            return

        best_diff = self.velocity
        best_cost = INITIAL_BEST_COST
        for unit_id, unit in self._enemies():
            diff = unit.position - self.position
            distance = diff.length()
            if distance > TRACKING_RANGE:
                continue
            if distance < PROXIMITY_RANGE:
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * MISSILE_DAMAGE)
                core.push_event_remove_bullet(self.id)
                return
            cost = self._cost(diff)
            if cost < best_cost:
                best_cost = cost
                best_diff = diff

        fix = self._fix(best_diff)
        speed = self.velocity.length()
        self.velocity = self.velocity * (1 - self.resistance * speed / self.max_velocity) + fix
        if self.velocity.length() > self.max_velocity:
            self.velocity = self.velocity.normalized() * self.max_velocity

    def _cost(self, diff: Vec2) -> float:
        """How hard a target at offset ``diff`` is to reach at the current velocity."""
        distance = diff.length()
        direction = diff.normalized()
        speed = self.velocity.length()
        if speed < 1e-3:
            return distance
        heading = self.velocity.normalized()
        angle = _clamped_acos(direction.dot(heading))
        return distance * (1 - speed * math.cos(angle) / self.max_velocity)

    def _fix(self, diff: Vec2) -> Vec2:
        """Steering correction towards offset ``diff`` for one tick."""
        if diff.length() == 0.0:
            return _ZERO
        direction = diff.normalized()
        thrust = self.resistance * self.max_velocity
        speed = self.velocity.length()
        if speed < 1e-3:
            return direction * (2 * thrust)
        heading = self.velocity.normalized()
        angle = _clamped_acos(direction.dot(heading))
        limit = math.atan2(thrust, (1 - self.resistance * speed / self.max_velocity) * speed)
        if angle < limit:
            return direction * thrust
        turn = math.radians(60.0)
        if heading.rotated(math.radians(90.0)).dot(direction) < 0:
            turn = -turn
        return (heading * thrust).rotated(turn) + heading * (math.sin(angle) * thrust)

    def on_destroy(self) -> None:
        core = self.game_core
        for _ in range(SMOKE_PUFFS):
            core.push_event_generate_particle(
                Smoke,
                self.position,
                self.rotation,
                core.random_in_circle() * 3.0,
                0.2,
                SMOKE_COLOR,
                3.0,
            )