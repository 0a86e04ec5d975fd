"""Grid tiles: positions, tile types and the events they emit when stood on."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class Direction(Enum):
    """Unit movement vector as ``(dy, dx)``."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Parse ``up``/``down``/``left``/``right`` (case-insensitive)."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name!r}") from None


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def shifted(self, direction: Direction, steps: int = 1) -> Position:
        return Position(self.row + direction.dy * steps, self.col + direction.dx * steps)


class TileKind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    PUSH_BOX = "push_box"
    BUTTON = "button"
    DOOR = "door"
    GOAL_PAD = "goal_pad"


class Event(Enum):
    """What happens to the player standing on a tile."""

    NOTHING = "nothing"
    PRESS_BUTTON = "press_button"
    WIN = "win"


_GLYPHS = {
    TileKind.EMPTY: " ",
    TileKind.WALL: "B",
    TileKind.PUSH_BOX: "@",
    TileKind.BUTTON: "^",
    TileKind.DOOR: "D",
    TileKind.GOAL_PAD: "#",
}


@dataclass(frozen=True)
class TileType:
    """Semantic type of a tile.

    ``link_id`` groups buttons with the doors they open. A door without a
    ``link_id`` is unlinked and never toggled by buttons. ``is_open`` only
    means something for doors.
    """

    kind: TileKind
    link_id: Optional[int] = None
    is_open: bool = False

    def __post_init__(self) -> None:
        if self.kind is TileKind.BUTTON:
            if not isinstance(self.link_id, int) or isinstance(self.link_id, bool):
                raise ValueError("button tiles need an integer id")
        elif self.kind is TileKind.DOOR:
            if self.link_id is not None and (
                not isinstance(self.link_id, int) or isinstance(self.link_id, bool)
            ):
                raise ValueError("door id must be an integer or None")
        elif self.link_id is not None:
            raise ValueError(f"{self.kind.value} tiles cannot carry an id")
        if self.is_open and self.kind is not TileKind.DOOR:
            raise ValueError("only doors have an open flag")

    @classmethod
    def empty(cls) -> TileType:
        return cls(TileKind.EMPTY)

    @classmethod
    def wall(cls) -> TileType:
        return cls(TileKind.WALL)

    @classmethod
    def push_box(cls) -> TileType:
        return cls(TileKind.PUSH_BOX)

    @classmethod
    def button(cls, link_id: int) -> TileType:
        return cls(TileKind.BUTTON, link_id=link_id)

    @classmethod
    def door(cls, link_id: Optional[int] = None, is_open: bool = False) -> TileType:
        return cls(TileKind.DOOR, link_id=link_id, is_open=is_open)

    @classmethod
    def goal_pad(cls) -> TileType:
        return cls(TileKind.GOAL_PAD)

    @property
    def glyph(self) -> str:
        return _GLYPHS[self.kind]

    def is_solid(self) -> bool:
        """Walls always block; doors block while closed."""
        if self.kind is TileKind.WALL:
            return True
        return self.kind is TileKind.DOOR and not self.is_open

    def is_pushable(self) -> bool:
        return self.kind is TileKind.PUSH_BOX

    def stood_on_event(self) -> Event:
        if self.kind is TileKind.GOAL_PAD:
            return Event.WIN
        if self.kind is TileKind.BUTTON:
            return Event.PRESS_BUTTON
        return Event.NOTHING

    def with_open(self, is_open: bool) -> TileType:
        """Return this door type with its open flag replaced."""
        if self.kind is not TileKind.DOOR:
            raise ValueError(f"{self.kind.value} tiles cannot be opened")
        return replace(self, is_open=bool(is_open))


@dataclass
class Tile:
    """One grid cell. Several tiles may share a position (e.g. a box on a button)."""

    position: Position
    tile_type: TileType

    def move(self, direction: Direction) -> None:
        self.position = self.position.shifted(direction)


def wall_run(
    start: Position,
    direction: Direction,
    length: int,
    tile_type: Optional[TileType] = None,
) -> List[Tile]:
    """Build ``length`` tiles in a straight line from ``start`` (walls by default)."""
    tile_type = tile_type if tile_type is not None else TileType.wall()
    return [Tile(start.shifted(direction, i), tile_type) for i in range(max(0, length))]
