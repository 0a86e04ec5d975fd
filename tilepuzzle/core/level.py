from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from tilepuzzle.core.player import Player
from tilepuzzle.core.tiles import Direction, Position, Tile, TileKind, TileType

logger = logging.getLogger(__name__)


@dataclass
class ButtonDoorLinks:
    """Which button positions and door tiles share each link id."""

    buttons: Dict[int, List[Position]] = field(default_factory=dict)
    doors: Dict[int, List[Tile]] = field(default_factory=dict)

    @classmethod
    def from_tiles(cls, tiles: Sequence[Tile]) -> ButtonDoorLinks:
        links = cls()
        for tile in tiles:
            tile_type = tile.tile_type
            if tile_type.kind is TileKind.BUTTON:
                links.buttons.setdefault(tile_type.link_id, []).append(tile.position)
            elif tile_type.kind is TileKind.DOOR and tile_type.link_id is not None:
                links.doors.setdefault(tile_type.link_id, []).append(tile)
        return links


@dataclass
class Level:
    """All tiles of one level plus where the player starts.

    Tile positions are fixed at construction except for push boxes, and only
    doors change type (their open flag). The tile set itself is fixed after
    construction (stored as a tuple) because the button/door links are built
    once from it. Templates are never played directly: a session plays a
    ``clone()``.
    """

    tiles: Tuple[Tile, ...]
    player_spawn: Position
    flavor_text: Optional[str] = None
    key: str = ""
    _links: ButtonDoorLinks = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.tiles = tuple(self.tiles)
        self._links = ButtonDoorLinks.from_tiles(self.tiles)

    @property
    def links(self) -> ButtonDoorLinks:
        return self._links

    def clone(self) -> Level:
        """Return an independent working copy of this level."""
        return Level(
            tiles=[Tile(t.position, t.tile_type) for t in self.tiles],
            player_spawn=self.player_spawn,
            flavor_text=self.flavor_text,
            key=self.key,
        )

    def tile_count(self) -> int:
        return len(self.tiles)

    def tiles_at(self, pos: Position) -> List[Tile]:
        """Every live tile at ``pos``; callers may mutate them."""
        return [t for t in self.tiles if t.position == pos]

    def tile_types_at(self, pos: Position) -> Tuple[TileType, ...]:
        return tuple(t.tile_type for t in self.tiles if t.position == pos)

    def count_solid_or_pushable_at(self, pos: Position) -> int:
        return sum(
            1
            for t in self.tiles
            if t.position == pos and (t.tile_type.is_solid() or t.tile_type.is_pushable())
        )

    def resolve_move(self, player: Player, direction: Direction) -> bool:
        """Move the player one step, pushing a single box if there is room.

        Only the cell directly beyond the target is checked, so a box can never
        be pushed into another box. Returns True if the player moved.

        Tiles at the target are scanned in order. A solid tile aborts the whole
        move immediately. A blocked push only marks the player as stuck and
        scanning goes on, so a later solid tile still aborts the move. The room
        check is made once per move: boxes sharing the target cell all move or
        none do.
        """
        target = player.position.shifted(direction)
        beyond = target.shifted(direction)
        obstruction_count = self.count_solid_or_pushable_at(beyond)

        blocked = False
        for tile in self.tiles_at(target):
            if tile.tile_type.is_solid():
                logger.debug("Move %s into %s blocked by %s", direction.name, target, tile.tile_type.kind.value)
                return False
            if tile.tile_type.is_pushable():
                if obstruction_count == 0:
                    tile.move(direction)
                else:
                    blocked = True

        if blocked:
            logger.debug("Push %s at %s blocked beyond %s", direction.name, target, beyond)
            return False
        player.move(direction)
        return True

    def recompute_button_door_satisfaction(self, player: Player) -> Dict[int, bool]:
        """Open each linked door iff every button of its id is covered.

        A button is covered by the player or by a push box. Door flags are
        recomputed from scratch every call, so uncovering a button closes its
        doors again. Doors whose id has no buttons stay closed; unlinked doors
        are never touched.
        """
        covered = {t.position for t in self.tiles if t.tile_type.is_pushable()}
        covered.add(player.position)

        satisfied = {
            link_id: all(pos in covered for pos in positions)
            for link_id, positions in self._links.buttons.items()
        }
        for link_id, doors in self._links.doors.items():
            is_open = satisfied.get(link_id, False)
            for door in doors:
                if door.tile_type.is_open != is_open:
                    door.tile_type = door.tile_type.with_open(is_open)
        return satisfied
