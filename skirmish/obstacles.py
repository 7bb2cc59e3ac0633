"""Concrete obstacles: plain blocks, reflective blocks and temporary shields."""

from __future__ import annotations

from typing import Any, Tuple

from skirmish.geometry import Vec2
from skirmish.objects import TICKS_PER_SECOND
from skirmish.obstacle import Obstacle

SAFETY_DECLARATION_TICKS = 3 * TICKS_PER_SECOND

_ZERO = Vec2(0.0, 0.0)


def _inside_box(local: Vec2, scale: Vec2) -> bool:
    return -scale.x <= local.x <= scale.x and -scale.y <= local.y <= scale.y


def segments_intersect(a: Vec2, b: Vec2, c: Vec2, d: Vec2) -> bool:
    """Whether segment ``ab`` touches or crosses segment ``cd``."""
    if (
        max(c.x, d.x) < min(a.x, b.x)
        or max(c.y, d.y) < min(a.y, b.y)
        or max(a.x, b.x) < min(c.x, d.x)
        or max(a.y, b.y) < min(c.y, d.y)
    ):
        return False
    if (a - d).cross(c - d) * (b - d).cross(c - d) > 0:
        return False
    if (c - a).cross(b - a) * (d - a).cross(b - a) > 0:
        return False
    return True


class Block(Obstacle):
    """A solid axis-aligned box in its own frame, half-extents ``scale``."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.scale = scale

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)


class ReboundingBlock(Obstacle):
    """A box whose edges reflect bullets that hit them."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.scale = scale

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)

    def surface_normal(self, origin: Vec2, terminus: Vec2) -> Tuple[Vec2, Vec2]:
        """World hit point and unit outward normal of the first edge crossed.

        Both are zero vectors when the segment crosses no edge.
        """
        start = self.world_to_local(origin)
        end = self.world_to_local(terminus)
        sx, sy = self.scale.x, self.scale.y
        delta = end - start

        def along_x(edge_x: float) -> Vec2:
            if delta.x == 0.0:
                return start
            return start + delta * ((edge_x - start.x) / delta.x)

        def along_y(edge_y: float) -> Vec2:
            if delta.y == 0.0:
                return start
            return start + delta * ((edge_y - start.y) / delta.y)

        edges = (
            (Vec2(-sx, -sy), Vec2(-sx, sy), lambda: along_x(-sx), Vec2(-1.0, 0.0)),
            (Vec2(sx, -sy), Vec2(sx, sy), lambda: along_x(sx), Vec2(1.0, 0.0)),
            (Vec2(-sx, -sy), Vec2(sx, -sy), lambda: along_y(-sy), Vec2(0.0, -1.0)),
            (Vec2(-sx, sy), Vec2(sx, sy), lambda: along_y(sy), Vec2(0.0, 1.0)),
        )
        for c, d, hit, local_normal in edges:
            if segments_intersect(start, end, c, d):
                intersection = hit()
                normal = (
                    self.local_to_world(intersection + local_normal)
                    - self.local_to_world(intersection)
                ).normalized()
                return self.local_to_world(intersection), normal
        return _ZERO, _ZERO


class SafetyDeclaration(Obstacle):
    """A temporary box that removes itself after three seconds."""

    def __init__(
        self,
        game_core: Any,
        id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(3.0, 3.0),
    ) -> None:
        super().__init__(game_core, id, position, rotation)
        self.scale = scale
        self.valid_time = SAFETY_DECLARATION_TICKS

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)

    def update(self) -> None:
        """Count down; once expired, ask the core to remove this obstacle."""
        if self.valid_time:
            self.valid_time -= 1
        else:
            self.game_core.push_event_remove_obstacle(self.id)