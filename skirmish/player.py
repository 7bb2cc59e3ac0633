"""Players and the input they feed into the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, FrozenSet

from skirmish.geometry import Vec2
from skirmish.objects import TICKS_PER_SECOND

if TYPE_CHECKING:
    from skirmish.game_core import GameCore

KEY_RANGE = 349
MOUSE_BUTTON_RANGE = 8
RESPAWN_DELAY_TICKS = TICKS_PER_SECOND * 5


@dataclass(frozen=True)
class InputData:
    """One frame of player input: pressed keys and buttons, cursor in world space."""

    key_down: FrozenSet[int] = frozenset()
    mouse_button_down: FrozenSet[int] = frozenset()
    mouse_button_clicked: FrozenSet[int] = frozenset()
    mouse_cursor_position: Vec2 = field(default_factory=Vec2)

    def __post_init__(self) -> None:
        for key in self.key_down:
            if not 0 <= key < KEY_RANGE:
                raise ValueError(f"key code out of range: {key}")
        for button in self.mouse_button_down | self.mouse_button_clicked:
            if not 0 <= button < MOUSE_BUTTON_RANGE:
                raise ValueError(f"mouse button out of range: {button}")


@dataclass(eq=False)
class Player:
    """A participant who controls one primary unit and respawns it when lost."""

    game_core: Any
    id: int
    input_data: InputData = field(default_factory=InputData)
    primary_unit_id: int = 0
    resurrection_count_down: int = 1
    selected_unit: int = 0

    def update(self) -> None:
        """Tick the respawn countdown while the primary unit is missing."""
        core: "GameCore" = self.game_core
        if core.get_unit(self.primary_unit_id) is not None:
            return
        if not self.resurrection_count_down:
            self.resurrection_count_down = RESPAWN_DELAY_TICKS
        self.resurrection_count_down -= 1
        if not self.resurrection_count_down:
            self.primary_unit_id = core.allocate_primary_unit(self.id)