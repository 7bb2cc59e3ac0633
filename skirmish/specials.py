"""Projectiles with special behaviour: rebounding balls, homing rockets,
smoke bombs, soybeans, warning lines and water drops."""

from __future__ import annotations

import math
from typing import Any

from skirmish.bullet import Bullet
from skirmish.geometry import Vec2
from skirmish.objects import SECONDS_PER_TICK, TICKS_PER_SECOND
from skirmish.particles import Smoke
from skirmish.shells import SMOKE_COLOR, SMOKE_PUFFS, _emit_smoke, _MovingBullet, _units_hit

REBOUNDING_BALL_DAMAGE = 10.0
SWEATY_SOYBEAN_DAMAGE = 10.0

ROCKET_INITIAL_HARM = 5.0
ROCKET_MAX_HARM = 20.0
ROCKET_HARM_GROWTH = 1.02
ROCKET_SPEED_PER_HARM = 0.25

SMOKE_BOMB_SPIN = 5.0
SMOKE_BOMB_BASE_DAMAGE = 10.0
SMOKE_BOMB_DAMAGE_STEP = 2.0
SMOKE_BOMB_PULSES = 5
SMOKE_BOMB_SELF_DAMAGE_RATIO = 0.5

_ZERO = Vec2(0.0, 0.0)


def _heading(direction: Vec2) -> float:
    """Angle in [0, 2*pi] turning the +y axis counter-clockwise onto ``direction``."""
    return math.atan2(-direction.x, direction.y) % math.tau


class ReboundingBall(_MovingBullet):
    """A shot that bounces off reflective obstacles a limited number of times."""

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
        rebounding_times: int = 1,
    ) -> None:
        super().__init__(
            game_core, id, unit_id, player_id, position, rotation, damage_scale, velocity
        )
        self.rebounding_times_left = rebounding_times

    def update(self) -> None:
        core = self.game_core
        last_position = self.position
        should_die = self._advance()
        if should_die:
            obstacle = core.blocked_obstacle(self.position)
            if obstacle is not None and self.rebounding_times_left:
                point, normal = obstacle.surface_normal(last_position, self.position)
                if normal != _ZERO:
                    self.rebounding_times_left -= 1
                    self.position = self.position - normal * (
                        2.0 * normal.dot(self.position - point)
                    )
                    self.velocity = self.velocity - normal * (2.0 * normal.dot(self.velocity))
                    should_die = False

        for unit_id, _ in _units_hit(self, self.unit_id):
            core.push_event_deal_damage(
                unit_id, self.id, self.damage_scale * REBOUNDING_BALL_DAMAGE
            )
            should_die = True
        if should_die:
            core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class Rocket(_MovingBullet):
    """A homing rocket locked on the unit nearest the owner's cursor at launch.

    Its damage and speed grow every tick until a cap is reached.
    """

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
    ) -> None:
        super().__init__(
            game_core, id, unit_id, player_id, position, rotation, damage_scale, velocity
        )
        self.harmful = ROCKET_INITIAL_HARM
        self.player_locked = 0
        player = game_core.get_player(player_id)
        if player is None:
            raise LookupError(f"no player with id {player_id}")
        cursor = player.input_data.mouse_cursor_position
        candidates = [
            ((cursor - unit.position).length(), candidate_id)
            for candidate_id, unit in game_core.units.items()
            if candidate_id != unit_id
        ]
        if candidates:
            self.player_locked = min(candidates, key=lambda item: item[0])[1]

    def update(self) -> None:
        core = self.game_core
        target = core.get_unit(self.player_locked)
        if target is None:
            core.push_event_remove_bullet(self.id)
            return
        if self.harmful < ROCKET_MAX_HARM:
            self.harmful *= ROCKET_HARM_GROWTH

        offset = target.position - self.position
        distance = offset.length()
        if distance:
            self.velocity = offset * (ROCKET_SPEED_PER_HARM * self.harmful / distance)
        else:
            self.velocity = _ZERO
        should_die = self._advance()
        self.rotation = _heading(self.velocity)

        for unit_id, _ in _units_hit(self, self.unit_id):
            core.push_event_deal_damage(unit_id, self.id, self.damage_scale * self.harmful)
            should_die = True
        if should_die:
            core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class SmokeBomb(Bullet):
    """A bomb lobbed at a target that then releases a damaging smoke cloud.

    After landing it deals five pulses of decreasing damage to every unit in
    range; its own unit takes half.
    """

    def __init__(
        self,
        game_core: Any,
        id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        target: Vec2,
        radius: float,
        duration: float,
        damage_duration: float,
    ) -> None:
        super().__init__(game_core, id, unit_id, player_id, position, rotation, damage_scale)
        if duration <= 0:
            raise ValueError("flight duration must be positive")
        damage_ticks = int(damage_duration * TICKS_PER_SECOND + 0.5)
        if damage_ticks <= 0:
            raise ValueError("damage duration must last at least one tick")
        self.target = target
        self.velocity = (target - position) * (1.0 / duration)
        self.radius = radius
        self.duration = int(duration * TICKS_PER_SECOND + 0.5)
        self.damage_duration = damage_ticks
        self.current_time = 0

    def update(self) -> None:
        core = self.game_core
        self.current_time += 1
        if self.current_time < self.duration:
            self.position = self.position + self.velocity * SECONDS_PER_TICK
            self.rotation += SMOKE_BOMB_SPIN * SECONDS_PER_TICK
            return
        if self.current_time >= self.duration + self.damage_duration * SMOKE_BOMB_PULSES:
            core.push_event_remove_bullet(self.id)
            return

        self.position = self.target
        elapsed = self.current_time - self.duration
        if elapsed == 0:
            core.push_event_generate_particle(
                Smoke,
                self.target,
                self.rotation,
                Vec2(0.0, 0.0),
                self.radius,
                SMOKE_COLOR,
                TICKS_PER_SECOND / (self.damage_duration * 8.0),
            )
        if elapsed % self.damage_duration == 0:
            pulse = elapsed // self.damage_duration
            damage = self.damage_scale * (
                SMOKE_BOMB_BASE_DAMAGE - SMOKE_BOMB_DAMAGE_STEP * pulse
            )
            for unit_id, unit in list(core.units.items()):
                if (unit.position - self.position).length() <= self.radius:
                    if unit_id == self.unit_id:
                        core.push_event_deal_damage(
                            unit_id, self.id, damage * SMOKE_BOMB_SELF_DAMAGE_RATIO
                        )
                    else:
                        core.push_event_deal_damage(unit_id, self.id, damage)


class SweatySoybean(_MovingBullet):
    """A plain shot; units are skipped by comparing their id with the owner's player id."""

    def update(self) -> None:
        should_die = self._advance()
        for unit_id, _ in _units_hit(self, self.player_id):
            self.game_core.push_event_deal_damage(
                unit_id, self.id, self.damage_scale * SWEATY_SOYBEAN_DAMAGE
            )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class WarningLine(_MovingBullet):
    """A harmless tracer that vanishes on contact.

    Units are skipped by comparing their id with the owner's player id.
    """

    def update(self) -> None:
        should_die = self._advance()
        if any(True for _ in _units_hit(self, self.player_id)):
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)


class WaterDrop(_MovingBullet):
    """A shot that deals a unit's whole maximum health on contact.

    Units are skipped by comparing their id with the owner's player id.
    """

    def update(self) -> None:
        should_die = self._advance()
        for unit_id, unit in _units_hit(self, self.player_id):
            self.game_core.push_event_deal_damage(unit_id, self.id, unit.max_health())
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)