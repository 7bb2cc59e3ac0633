import pytest

from skirmish.geometry import Vec2
from skirmish.particle import Particle


class Drift(Particle):
    def update(self):
        self.position = self.position + Vec2(0.0, 1.0)


def test_particle_is_abstract():
    with pytest.raises(TypeError):
        Particle(None, 1, Vec2(0.0, 0.0))


def test_particle_keeps_placement():
    p = Drift(None, 4, Vec2(1.0, 2.0), 0.25)
    assert p.position == Vec2(1.0, 2.0)
    assert p.rotation == 0.25
    assert p.id == 4


def test_particle_default_rotation():
    assert Drift(None, 1, Vec2(0.0, 0.0)).rotation == 0.0


def test_subclass_update_runs():
    p = Drift(None, 1, Vec2(0.0, 0.0))
    p.update()
    p.update()
    assert p.position == Vec2(0.0, 2.0)