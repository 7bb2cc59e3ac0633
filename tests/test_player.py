import pytest

from skirmish.geometry import Vec2
from skirmish.objects import TICKS_PER_SECOND
from skirmish.player import InputData, Player


class FakeCore:
    def __init__(self):
        self.units = {}
        self.next_id = 1
        self.allocations = []

    def get_unit(self, unit_id):
        return self.units.get(unit_id)

    def allocate_primary_unit(self, player_id):
        unit_id = self.next_id
        self.next_id += 1
        self.units[unit_id] = object()
        self.allocations.append(player_id)
        return unit_id


def test_input_data_defaults_are_empty():
    data = InputData()
    assert data.key_down == frozenset()
    assert data.mouse_cursor_position == Vec2(0.0, 0.0)


def test_input_data_rejects_bad_key():
    with pytest.raises(ValueError):
        InputData(key_down=frozenset({-1}))


def test_input_data_rejects_bad_mouse_button():
    with pytest.raises(ValueError):
        InputData(mouse_button_clicked=frozenset({99}))


def test_input_data_keeps_keys():
    data = InputData(key_down=frozenset({65, 87}))
    assert 87 in data.key_down
    assert 66 not in data.key_down


def test_first_update_spawns_immediately():
    core = FakeCore()
    player = Player(core, 3)
    player.update()
    assert player.primary_unit_id == 1
    assert core.allocations == [3]


def test_living_unit_stops_countdown():
    core = FakeCore()
    player = Player(core, 1)
    player.update()
    before = player.resurrection_count_down
    player.update()
    player.update()
    assert player.resurrection_count_down == before
    assert core.allocations == [1]


def test_respawn_takes_five_seconds():
    core = FakeCore()
    player = Player(core, 2)
    player.update()
    core.units.clear()
    ticks = 0
    while len(core.allocations) < 2:
        player.update()
        ticks += 1
    assert ticks == TICKS_PER_SECOND * 5
    assert player.primary_unit_id == 2
    assert player.resurrection_count_down == 0


def test_selected_unit_is_mutable():
    player = Player(FakeCore(), 1)
    player.selected_unit = 4
    assert player.selected_unit == 4