import math

import pytest

from skirmish.bullet import Bullet
from skirmish.game_core import GameCore
from skirmish.geometry import Vec2
from skirmish.obstacles import Block, ReboundingBlock
from skirmish.particles import BulletHole
from skirmish.unit import Unit


class Dummy(Unit):
    def __init__(self, game_core, id, player_id, radius=0.5):
        super().__init__(game_core, id, player_id)
        self.radius = radius
        self.updates = 0

    def is_hit(self, position):
        return (position - self.position).length() <= self.radius

    def update(self):
        self.updates += 1

    def unit_name(self):
        return "Dummy"

    def author(self):
        return "Tester"


class Probe(Bullet):
    def __init__(self, game_core, id, unit_id, player_id, position, rotation,
                 damage_scale, log=None):
        super().__init__(game_core, id, unit_id, player_id, position, rotation, damage_scale)
        self.log = log if log is not None else []
        self.updates = 0

    def update(self):
        self.updates += 1

    def on_destroy(self):
        self.log.append(self.id)


@pytest.fixture
def core():
    return GameCore()


def test_scene_obstacles(core):
    assert sorted(core.obstacles) == [1, 2, 3, 4, 5]
    assert isinstance(core.get_obstacle(1), Block)
    assert all(isinstance(core.get_obstacle(i), ReboundingBlock) for i in range(2, 6))
    assert core.get_obstacle(1).position == Vec2(-3.0, 4.0)
    assert len(core.respawn_points) == 2


def test_out_of_range(core):
    assert core.is_out_of_range(Vec2(11.0, 0.0))
    assert core.is_out_of_range(Vec2(0.0, -10.5))
    assert not core.is_out_of_range(Vec2(10.0, 10.0))
    assert not core.is_out_of_range(Vec2(0.0, 0.0))


def test_blocked_by_obstacles(core):
    assert core.is_blocked_by_obstacles(Vec2(20.0, 0.0))
    assert core.is_blocked_by_obstacles(Vec2(-3.0, 4.0))
    assert not core.is_blocked_by_obstacles(Vec2(0.0, 0.0))
    assert core.blocked_obstacle(Vec2(-3.0, 4.0)) is core.get_obstacle(1)
    assert core.blocked_obstacle(Vec2(20.0, 0.0)) is None
    assert core.blocked_obstacle(Vec2(0.0, 0.0)) is None


def test_players_and_colors(core):
    first = core.add_player()
    second = core.add_player()
    assert (first, second) == (1, 2)
    assert core.get_player(first).id == first
    assert core.get_player(99) is None
    assert core.player_color(first) == (0.5, 1.0, 0.5, 1.0)
    core.render_perspective = first
    assert core.player_color(first) == (1.0, 1.0, 1.0, 1.0)
    assert core.player_color(second) == (1.0, 0.5, 0.5, 1.0)


def test_add_unit_ids_increase(core):
    a = core.add_unit(Dummy, 1)
    b = core.add_unit(Dummy, 2, 2.0)
    assert (a, b) == (1, 2)
    assert core.get_unit(b).radius == 2.0
    assert core.get_unit(b).game_core is core
    assert core.get_unit(b).player_id == 2
    assert core.get_unit(42) is None


def test_add_bullet_out_of_range_returns_zero(core):
    assert core.add_bullet(Probe, 1, 1, Vec2(50.0, 0.0)) == 0
    assert core.bullets == {}
    bullet_id = core.add_bullet(Probe, 1, 1, Vec2(1.0, 1.0), 0.0, 2.0)
    assert core.get_bullet(bullet_id).damage_scale == 2.0


def test_add_particle_out_of_range_returns_zero(core):
    assert core.add_particle(BulletHole, Vec2(0.0, 30.0), 0.0, 10) == 0
    pid = core.add_particle(BulletHole, Vec2(0.0, 0.0), 0.0, 10)
    assert core.get_particle(pid).duration == 10


def test_partial_damage(core):
    uid = core.add_unit(Dummy, 1)
    unit = core.get_unit(uid)
    core.push_event_deal_damage(uid, 0, unit.max_health() / 4)
    assert unit.health == 1.0
    core.process_event_queue()
    assert unit.health == pytest.approx(0.75)
    assert core.get_unit(uid) is unit


def test_lethal_damage_removes_unit(core):
    uid = core.add_unit(Dummy, 1)
    core.push_event_deal_damage(uid, 0, core.get_unit(uid).max_health() * 2)
    core.process_event_queue()
    assert core.get_unit(uid) is None


def test_move_and_rotate_are_deferred(core):
    uid = core.add_unit(Dummy, 1)
    core.push_event_move_unit(uid, Vec2(2.0, 3.0))
    core.push_event_rotate_unit(uid, 1.5)
    assert core.get_unit(uid).position == Vec2(0.0, 0.0)
    core.process_event_queue()
    assert core.get_unit(uid).position == Vec2(2.0, 3.0)
    assert core.get_unit(uid).rotation == 1.5


def test_events_for_missing_unit_are_ignored(core):
    core.push_event_move_unit(7, Vec2(1.0, 1.0))
    core.push_event_deal_damage(7, 0, 10.0)
    core.process_event_queue()
    assert core.units == {}


def test_remove_bullet_calls_on_destroy(core):
    log = []
    bid = core.add_bullet(Probe, 1, 1, Vec2(0.0, 0.0), 0.0, 1.0, log)
    core.push_event_remove_bullet(bid)
    core.push_event_remove_bullet(bid)
    core.process_event_queue()
    assert core.get_bullet(bid) is None
    assert log == [bid]


def test_remove_particle_and_obstacle(core):
    pid = core.add_particle(BulletHole, Vec2(0.0, 0.0), 0.0, 5)
    core.push_event_remove_particle(pid)
    core.push_event_remove_obstacle(1)
    core.process_event_queue()
    assert core.get_particle(pid) is None
    assert core.get_obstacle(1) is None
    assert sorted(core.obstacles) == [2, 3, 4, 5]


def test_generate_events(core):
    core.push_event_generate_bullet(Probe, 3, 4, Vec2(1.0, 0.0), 0.5, 2.0)
    core.push_event_generate_obstacle(Block, Vec2(5.0, 5.0), 0.0)
    core.push_event_generate_particle(BulletHole, Vec2(1.0, 1.0), 0.0, 7)
    assert core.bullets == {} and core.particles == {}
    core.process_event_queue()
    (bullet,) = core.bullets.values()
    assert (bullet.unit_id, bullet.player_id, bullet.damage_scale) == (3, 4, 2.0)
    assert core.get_obstacle(6).position == Vec2(5.0, 5.0)
    (particle,) = core.particles.values()
    assert particle.duration == 7


def test_events_pushed_during_processing_run(core):
    uid = core.add_unit(Dummy, 1)
    core.push_event_kill_unit(uid, 0)
    core.process_event_queue()
    assert core.get_unit(uid) is None


def test_update_ticks_objects_and_prunes_out_of_range(core):
    uid = core.add_unit(Dummy, 1)
    inside = core.add_bullet(Probe, 0, 0, Vec2(0.0, 0.0))
    outside = core.add_bullet(Probe, 0, 0, Vec2(0.0, 0.0))
    core.get_bullet(outside).position = Vec2(30.0, 0.0)
    pid = core.add_particle(BulletHole, Vec2(0.0, 0.0), 0.0, 100)
    core.get_particle(pid).position = Vec2(0.0, -30.0)
    core.update()
    assert core.get_unit(uid).updates == 1
    assert core.get_bullet(inside).updates == 1
    assert core.get_bullet(outside) is None
    assert core.get_particle(pid) is None


def test_register_selectable_unit(core):
    core.register_selectable_unit(Dummy, True)
    core.register_selectable_unit(Dummy, False)
    assert core.selectable_unit_list() == ["Dummy - By Tester", "Dummy - By Tester"]
    assert core.selectable_unit_list_skill == [True, False]


def test_allocate_primary_unit(core):
    core.register_selectable_unit(Dummy, True)
    assert core.allocate_primary_unit(5) == 0
    pid = core.add_player()
    uid = core.allocate_primary_unit(pid)
    unit = core.get_unit(uid)
    assert unit.player_id == pid
    assert (unit.position, unit.rotation) in core.respawn_points


def test_allocate_without_selectable_units_raises(core):
    pid = core.add_player()
    with pytest.raises(IndexError):
        core.allocate_primary_unit(pid)


def test_player_respawns_on_update(core):
    core.add_primary_unit_allocation_function(Dummy, 0.25)
    pid = core.add_player()
    core.update()
    player = core.get_player(pid)
    unit = core.get_unit(player.primary_unit_id)
    assert unit.radius == 0.25
    assert unit.player_id == pid


def test_set_camera(core):
    core.set_camera(Vec2(1.0, 2.0))
    assert core.camera_position == Vec2(1.0, 2.0)
    assert core.camera_rotation == 0.0
    core.set_camera(Vec2(0.0, 0.0), 0.5)
    assert core.camera_rotation == 0.5


def test_random_values(core):
    for _ in range(200):
        assert 0.0 <= core.random_float() < 1.0
        assert 2 <= core.random_int(2, 5) <= 5
        assert core.random_on_circle().length() == pytest.approx(1.0)
        assert core.random_in_circle().length() <= 1.0 + 1e-12


def test_random_is_deterministic():
    a, b = GameCore(), GameCore()
    assert [a.random_float() for _ in range(5)] == [b.random_float() for _ in range(5)]
    assert a.random_in_circle() == b.random_in_circle()


def test_random_int_covers_range(core):
    seen = {core.random_int(0, 1) for _ in range(100)}
    assert seen == {0, 1}
    assert not math.isnan(core.random_float())