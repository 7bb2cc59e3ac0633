# skirmish

The simulation core of a top-down 2D battle game. It runs at a fixed 60 ticks
per second (`TICKS_PER_SECOND` in `skirmish.objects`). `GameCore` holds the
players, units, bullets, obstacles and particles. It advances them one tick at a
time, and every change to the world goes through a deferred event queue.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `skirmish.geometry` | `Vec2`, an immutable 2D vector with `length`, `normalized`, `dot`, `cross`, `rotated` |
| `skirmish.objects` | `GameObject` base class, `Skill`, `SkillType`, tick constants |
| `skirmish.player` | `InputData`, `Player` |
| `skirmish.obstacle` | `Obstacle` base class |
| `skirmish.obstacles` | `Block`, `ReboundingBlock`, `SafetyDeclaration`, `segments_intersect` |
| `skirmish.particle` | `Particle` base class |
| `skirmish.particles` | `BulletHole`, `Explosion`, `Smoke`, `Thunderbolt` |
| `skirmish.bullet` | `Bullet` base class |
| `skirmish.shells` | `CannonBall`, `Coin`, `CritBullet`, `ElectricBall`, `Mine` |
| `skirmish.missile` | `Missile` |
| `skirmish.specials` | `ReboundingBall`, `Rocket`, `SmokeBomb`, `SweatySoybean`, `WarningLine`, `WaterDrop` |
| `skirmish.unit` | `Unit` base class |
| `skirmish.game_core` | `GameCore` |

## Concepts

- **`GameCore`** owns the world. `update()` advances one tick in this order:
  players, obstacles, bullets, units and particles, and then it drains the event
  queue. A bullet or particle outside the world boundary (from (-10, -10) to
  (10, 10)) is removed and does not update that tick. On construction the core
  places one `Block`, four `ReboundingBlock`s and two respawn points.
- **Events**: the world changes only when `process_event_queue()` runs. You ask
  for changes with `push_event_deal_damage`, `push_event_move_unit`,
  `push_event_remove_unit`, `push_event_generate_bullet` and the other
  `push_event_*` methods. An event may push further events, and those run in
  the same drain. Removing a bullet calls its `on_destroy()`. Most bullets leave
  smoke particles there.
- **`Unit`** is the base class for controllable units. A subclass must implement
  `is_hit(position)` and `update()`. It may override `unit_name()`, `author()`,
  `basic_max_health()` and the scale methods. `health` is a ratio that is
  clamped to `[0, 1]`, and damage is divided by `max_health()`. A unit whose
  health reaches 0 is removed.
- **`Player`** holds the current `InputData` and the index `selected_unit` into
  the registered unit types. When a player has no primary unit, it calls
  `GameCore.allocate_primary_unit`: on its first tick, and then five seconds
  after each loss. `allocate_primary_unit` raises `IndexError` if
  `selected_unit` does not name a registered type.
- **Unit selection**: `register_selectable_unit(unit_type, with_skill)` builds a
  throwaway instance as `unit_type(None, 0, 0)` to read its name and author.
  `selectable_unit_list()` returns `"<name> - By <author>"` entries.
- **Obstacles**: `ReboundingBlock.surface_normal(origin, terminus)` returns the
  world contact point and unit normal of the first edge that the segment
  crosses. `ReboundingBall` uses them to bounce. A `SafetyDeclaration` removes
  itself after three seconds.
- **Randomness**: `GameCore` uses its own `random.Random` seeded with 0. Runs
  that get the same calls give the same results.

## Example

```python
from skirmish.game_core import GameCore
from skirmish.unit import Unit


class Crate(Unit):
    def is_hit(self, position):
        return (position - self.position).length() < 0.5

    def update(self):
        pass

    def unit_name(self):
        return "Crate"


core = GameCore()
core.register_selectable_unit(Crate, True)
print(core.selectable_unit_list())  # ['Crate - By Unknown Author']

player_id = core.add_player()
core.update()  # the player's first tick allocates its unit

player = core.get_player(player_id)
unit = core.get_unit(player.primary_unit_id)
core.push_event_deal_damage(unit.id, 0, 25.0)
core.process_event_queue()
print(unit.health)  # 0.75
```

## What this package does not do

- It does not render, open windows or read the keyboard and mouse. `InputData`
  is filled in by the caller. Camera state (`set_camera`) and `player_color`
  are kept for a front end to use.
- It ships no concrete unit types, and `GameCore` registers none. Register your
  own `Unit` subclasses before a player's first tick.
- It has no command-line program, no networking and no saving of games.