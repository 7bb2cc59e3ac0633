"""The simulation core: owns every object, runs ticks and processes events."""

from __future__ import annotations

import math
import random
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from skirmish.bullet import Bullet
from skirmish.geometry import Vec2
from skirmish.obstacle import Obstacle
from skirmish.obstacles import Block, ReboundingBlock
from skirmish.particle import Particle
from skirmish.player import Player
from skirmish.unit import Unit

Color = Tuple[float, float, float, float]

NEUTRAL_COLOR: Color = (0.5, 1.0, 0.5, 1.0)
OWN_COLOR: Color = (1.0, 1.0, 1.0, 1.0)
ENEMY_COLOR: Color = (1.0, 0.5, 0.5, 1.0)

RANDOM_SEED = 0


class GameCore:
    """Holds the world state and advances it one tick at a time.

    Changes to the world made during a tick are queued as events and applied
    together at the end of the tick, so every object sees the same state.
    """

    def __init__(self) -> None:
        self._event_queue: Deque[Callable[[], None]] = deque()

        self.units: Dict[int, Unit] = {}
        self.bullets: Dict[int, Bullet] = {}
        self.particles: Dict[int, Particle] = {}
        self.obstacles: Dict[int, Obstacle] = {}
        self.players: Dict[int, Player] = {}
        self._unit_index = 1
        self._bullet_index = 1
        self._particle_index = 1
        self._obstacle_index = 1
        self._player_index = 1

        # Player id of the observer; 0 means a neutral view.
        self.render_perspective = 0

        self.camera_position = Vec2(0.0, 0.0)
        self.camera_rotation = 0.0

        self.boundary_low = Vec2(-10.0, -10.0)
        self.boundary_high = Vec2(10.0, 10.0)

        self._random = random.Random(RANDOM_SEED)

        self.respawn_points: List[Tuple[Vec2, float]] = []
        self._primary_unit_allocation_functions: List[Callable[[int], int]] = []
        self._selectable_unit_list: List[str] = []
        self.selectable_unit_list_skill: List[bool] = []

        self.set_scene()

    # Scene and unit selection

    def set_scene(self) -> None:
        """Place the default obstacles, respawn points and world boundary."""
        quarter_turn = math.pi / 4
        self.add_obstacle(Block, Vec2(-3.0, 4.0))
        self.add_obstacle(ReboundingBlock, Vec2(-10.0, -10.0), quarter_turn)
        self.add_obstacle(ReboundingBlock, Vec2(10.0, -10.0), quarter_turn)
        self.add_obstacle(ReboundingBlock, Vec2(10.0, 10.0), quarter_turn)
        self.add_obstacle(ReboundingBlock, Vec2(-10.0, 10.0), quarter_turn)
        self.respawn_points.append((Vec2(0.0, 0.0), 0.0))
        self.respawn_points.append((Vec2(3.0, 4.0), math.radians(90.0)))
        self.boundary_low = Vec2(-10.0, -10.0)
        self.boundary_high = Vec2(10.0, 10.0)

    def register_selectable_unit(self, unit_type: type, with_skill: bool = True) -> None:
        """Make ``unit_type`` available to players as a primary unit."""
        sample = unit_type(None, 0, 0)
        self.add_primary_unit_allocation_function(unit_type)
        self._selectable_unit_list.append(f"{sample.unit_name()} - By {sample.author()}")
        self.selectable_unit_list_skill.append(bool(with_skill))

    def add_primary_unit_allocation_function(self, unit_type: type, *args: Any) -> None:
        """Register a factory creating ``unit_type`` for a given player."""

        def allocate(player_id: int) -> int:
            return self.add_unit(unit_type, player_id, *args)

        self._primary_unit_allocation_functions.append(allocate)

    def allocate_primary_unit(self, player_id: int) -> int:
        """Create the player's selected unit at a random respawn point.

        Returns the new unit id, or 0 when the player does not exist.
        """
        player = self.get_player(player_id)
        if player is None:
            return 0
        if not 0 <= player.selected_unit < len(self._primary_unit_allocation_functions):
            raise IndexError(f"no selectable unit at index {player.selected_unit}")
        unit_id = self._primary_unit_allocation_functions[player.selected_unit](player_id)
        unit = self.units[unit_id]
        position, rotation = self.respawn_points[
            self.random_int(0, len(self.respawn_points) - 1)
        ]
        unit.set_position(position)
        unit.set_rotation(rotation)
        return unit_id

    def selectable_unit_list(self) -> List[str]:
        """Display names of the selectable units, in registration order."""
        return list(self._selectable_unit_list)

    # Simulation

    def update(self) -> None:
        """Advance one tick: players, obstacles, bullets, units, particles, events."""
        for player in list(self.players.values()):
            player.update()
        for obstacle in list(self.obstacles.values()):
            obstacle.update()
        for bullet_id, bullet in list(self.bullets.items()):
            if self.is_out_of_range(bullet.position):
                self.push_event_remove_bullet(bullet_id)
                continue
            bullet.update()
        for unit in list(self.units.values()):
            unit.update()
        for particle_id, particle in list(self.particles.items()):
            if self.is_out_of_range(particle.position):
                self.push_event_remove_particle(particle_id)
                continue
            particle.update()
        self.process_event_queue()

    # Creation

    def add_unit(self, unit_type: type, player_id: int, *args: Any) -> int:
        unit_id = self._unit_index
        self._unit_index += 1
        self.units[unit_id] = unit_type(self, unit_id, player_id, *args)
        return unit_id

    def add_obstacle(
        self, obstacle_type: type, position: Vec2, rotation: float = 0.0, *args: Any
    ) -> int:
        obstacle_id = self._obstacle_index
        self._obstacle_index += 1
        self.obstacles[obstacle_id] = obstacle_type(self, obstacle_id, position, rotation, *args)
        return obstacle_id

    def add_bullet(
        self,
        bullet_type: type,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float = 0.0,
        damage_scale: float = 1.0,
        *args: Any,
    ) -> int:
        """Create a bullet; returns 0 and creates nothing outside the world."""
        if self.is_out_of_range(position):
            return 0
        bullet_id = self._bullet_index
        self._bullet_index += 1
        self.bullets[bullet_id] = bullet_type(
            self, bullet_id, unit_id, player_id, position, rotation, damage_scale, *args
        )
        return bullet_id

    def add_particle(
        self, particle_type: type, position: Vec2, rotation: float = 0.0, *args: Any
    ) -> int:
        """Create a particle; returns 0 and creates nothing outside the world."""
        if self.is_out_of_range(position):
            return 0
        particle_id = self._particle_index
        self._particle_index += 1
        self.particles[particle_id] = particle_type(self, particle_id, position, rotation, *args)
        return particle_id

    def add_player(self) -> int:
        player_id = self._player_index
        self._player_index += 1
        self.players[player_id] = Player(self, player_id)
        return player_id

    # Lookup

    def get_unit(self, unit_id: int) -> Optional[Unit]:
        return self.units.get(unit_id)

    def get_bullet(self, bullet_id: int) -> Optional[Bullet]:
        return self.bullets.get(bullet_id)

    def get_particle(self, particle_id: int) -> Optional[Particle]:
        return self.particles.get(particle_id)

    def get_obstacle(self, obstacle_id: int) -> Optional[Obstacle]:
        return self.obstacles.get(obstacle_id)

    def get_player(self, player_id: int) -> Optional[Player]:
        return self.players.get(player_id)

    def player_color(self, player_id: int) -> Color:
        """Tint for a player's objects as seen from the render perspective."""
        if self.render_perspective == 0:
            return NEUTRAL_COLOR
        if self.render_perspective == player_id:
            return OWN_COLOR
        return ENEMY_COLOR

    # Geometry queries

    def is_out_of_range(self, p: Vec2) -> bool:
        return (
            p.x < self.boundary_low.x
            or p.x > self.boundary_high.x
            or p.y < self.boundary_low.y
            or p.y > self.boundary_high.y
        )

    def is_blocked_by_obstacles(self, p: Vec2) -> bool:
        """Whether ``p`` is outside the world or inside any obstacle."""
        if self.is_out_of_range(p):
            return True
        return any(obstacle.is_blocked(p) for obstacle in self.obstacles.values())

    def blocked_obstacle(self, p: Vec2) -> Optional[Obstacle]:
        """The first obstacle containing ``p``; None outside the world or in open space."""
        if self.is_out_of_range(p):
            return None
        return next((o for o in self.obstacles.values() if o.is_blocked(p)), None)

    # Events

    def push_event_move_unit(self, unit_id: int, new_position: Vec2) -> None:
        def event() -> None:
            unit = self.get_unit(unit_id)
            if unit is not None:
                unit.set_position(new_position)

        self._event_queue.append(event)

    def push_event_rotate_unit(self, unit_id: int, new_rotation: float) -> None:
        def event() -> None:
            unit = self.get_unit(unit_id)
            if unit is not None:
                unit.set_rotation(new_rotation)

        self._event_queue.append(event)

    def push_event_deal_damage(self, dst_unit_id: int, src_unit_id: int, damage: float) -> None:
        def event() -> None:
            unit = self.get_unit(dst_unit_id)
            if unit is None:
                return
            unit.health = unit.health - damage / unit.max_health()
            if unit.health <= 0.0:
                self.push_event_kill_unit(dst_unit_id, src_unit_id)

        self._event_queue.append(event)

    def push_event_kill_unit(self, dst_unit_id: int, src_unit_id: int) -> None:
        self._event_queue.append(lambda: self.push_event_remove_unit(dst_unit_id))

    def push_event_remove_obstacle(self, obstacle_id: int) -> None:
        self._event_queue.append(lambda: self.obstacles.pop(obstacle_id, None))

    def push_event_remove_bullet(self, bullet_id: int) -> None:
        def event() -> None:
            bullet = self.bullets.pop(bullet_id, None)
            if bullet is not None:
                bullet.on_destroy()

        self._event_queue.append(event)

    def push_event_remove_particle(self, particle_id: int) -> None:
        self._event_queue.append(lambda: self.particles.pop(particle_id, None))

    def push_event_remove_unit(self, unit_id: int) -> None:
        self._event_queue.append(lambda: self.units.pop(unit_id, None))

    def push_event_generate_bullet(
        self,
        bullet_type: type,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float = 0.0,
        damage_scale: float = 1.0,
        *args: Any,
    ) -> None:
        self._event_queue.append(
            lambda: self.add_bullet(
                bullet_type, unit_id, player_id, position, rotation, damage_scale, *args
            )
        )

    def push_event_generate_obstacle(
        self, obstacle_type: type, position: Vec2, rotation: float = 0.0, *args: Any
    ) -> None:
        self._event_queue.append(
            lambda: self.add_obstacle(obstacle_type, position, rotation, *args)
        )

    def push_event_generate_particle(
        self, particle_type: type, position: Vec2, rotation: float = 0.0, *args: Any
    ) -> None:
        self._event_queue.append(
            lambda: self.add_particle(particle_type, position, rotation, *args)
        )

    def process_event_queue(self) -> None:
        """Run queued events in order, including those queued while running."""
        while self._event_queue:
            self._event_queue.popleft()()

    # Camera and randomness

    def set_camera(self, position: Vec2, rotation: float = 0.0) -> None:
        self.camera_position = position
        self.camera_rotation = rotation

    def random_float(self) -> float:
        """A uniform random number in [0, 1)."""
        return self._random.random()

    def random_int(self, low_bound: int, high_bound: int) -> int:
        """A uniform random integer in [low_bound, high_bound]."""
        return self._random.randint(low_bound, high_bound)

    def random_on_circle(self) -> Vec2:
        theta = self.random_float() * math.pi * 2.0
        return Vec2(math.sin(theta), math.cos(theta))

    def random_in_circle(self) -> Vec2:
        theta = self.random_float() * math.pi * 2.0
        length = math.sqrt(self.random_float())
        return Vec2(math.sin(theta) * length, math.cos(theta) * length)