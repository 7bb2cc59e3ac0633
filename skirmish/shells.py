"""Straight-flying projectiles: cannon balls, coins, crit bullets, electric balls and mines."""

from __future__ import annotations

from typing import Any, Iterator, Tuple

from skirmish.bullet import Bullet
from skirmish.geometry import Vec2
from skirmish.objects import SECONDS_PER_TICK, TICKS_PER_SECOND
from skirmish.particles import BulletHole, Explosion, Smoke
from skirmish.unit import Unit

SMOKE_COLOR = (0.0, 0.0, 0.0, 1.0)
SMOKE_DECAY = 3.0
SMOKE_PUFFS = 5

CANNON_BALL_DAMAGE = 10.0
COIN_DAMAGE = 100.0
COIN_EXPLOSION_TICKS = 30
CRIT_BULLET_DAMAGE = 10.0
ELECTRIC_BALL_DAMAGE = 63.0
MINE_ARMING_TICKS = TICKS_PER_SECOND * 2


def _emit_smoke(bullet: Bullet, count: int, spread: float, size: float) -> None:
    core = bullet.game_core
    for _ in range(count):
        core.push_event_generate_particle(
            Smoke,
            bullet.position,
            bullet.rotation,
            core.random_in_circle() * spread,
            size,
            SMOKE_COLOR,
            SMOKE_DECAY,
        )


def _units_hit(bullet: Bullet, skip_id: int) -> Iterator[Tuple[int, Unit]]:
    """Units other than ``skip_id`` that the bullet's current position hits."""
    for unit_id, unit in list(bullet.game_core.units.items()):
        if unit_id == skip_id:
            continue
        if unit.is_hit(bullet.position):
            yield unit_id, unit


class _MovingBullet(Bullet):
    """A bullet travelling at a constant velocity."""

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
        super().__init__(game_core, id, unit_id, player_id, position, rotation, damage_scale)
        self.velocity = velocity

    def _advance(self) -> bool:
        """Move one tick; return whether the new position is blocked."""
        self.position = self.position + self.velocity * SECONDS_PER_TICK
        return self.game_core.is_blocked_by_obstacles(self.position)


class CannonBall(_MovingBullet):
    """A plain shot that damages the first units it touches."""

    def update(self) -> None:
        should_die = self._advance()
        for unit_id, _ in _units_hit(self, self.unit_id):
            self.game_core.push_event_deal_damage(
                unit_id, self.id, self.damage_scale * CANNON_BALL_DAMAGE
            )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class Coin(_MovingBullet):
    """A shot with a limited lifetime whose damage fades as it ages.

    It passes through the units it hits, leaving an explosion at each.
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
        life_time: int,
    ) -> None:
        super().__init__(
            game_core, id, unit_id, player_id, position, rotation, damage_scale, velocity
        )
        self.life_time = life_time
        self.total_time = life_time

    def update(self) -> None:
        should_die = False
        if self.life_time:
            self.life_time -= 1
            should_die = self._advance()
            for unit_id, unit in _units_hit(self, self.unit_id):
                damage = self.damage_scale * COIN_DAMAGE * self.life_time / self.total_time
                self.game_core.push_event_deal_damage(unit_id, self.id, damage)
                self.game_core.push_event_generate_particle(
                    Explosion, unit.position, 0.0, COIN_EXPLOSION_TICKS
                )
        else:
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class CritBullet(_MovingBullet):
    """A shot that may land a critical hit for extra damage.

    Units are skipped by comparing their id with the owner's player id.
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
        crit_chance: float,
        crit_damage: float,
    ) -> None:
        super().__init__(
            game_core, id, unit_id, player_id, position, rotation, damage_scale, velocity
        )
        self.crit_chance = crit_chance
        self.crit_damage = crit_damage

    def update(self) -> None:
        core = self.game_core
        should_die = self._advance()
        for unit_id, _ in _units_hit(self, self.player_id):
            base = self.damage_scale * CRIT_BULLET_DAMAGE
            if core.random_float() >= self.crit_chance:
                core.push_event_deal_damage(unit_id, self.id, base)
            else:
                core.push_event_deal_damage(unit_id, self.id, base * (1.0 + self.crit_damage))
                core.push_event_generate_particle(
                    BulletHole, self.position, self.rotation, TICKS_PER_SECOND
                )
            should_die = True
        if should_die:
            core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 2.0, 0.2)


class ElectricBall(_MovingBullet):
    """A large, heavy-hitting shot."""

    def update(self) -> None:
        should_die = self._advance()
        for unit_id, _ in _units_hit(self, self.unit_id):
            self.game_core.push_event_deal_damage(
                unit_id, self.id, self.damage_scale * ELECTRIC_BALL_DAMAGE
            )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 8.0, 0.8)


class Mine(_MovingBullet):
    """A stationary charge that arms after two seconds and destroys what touches it.

    Units are skipped by comparing their id with the owner's player id.
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
        self.ready_count_down = MINE_ARMING_TICKS

    def update(self) -> None:
        if self.ready_count_down:
            self.ready_count_down -= 1
            return
        should_die = False
        for unit_id, unit in _units_hit(self, self.player_id):
            self.game_core.push_event_deal_damage(unit_id, self.id, unit.max_health())
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_destroy(self) -> None:
        _emit_smoke(self, SMOKE_PUFFS, 5.0, 0.2)