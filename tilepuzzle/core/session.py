from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from tilepuzzle.core.level import Level
from tilepuzzle.core.player import Player
from tilepuzzle.core.tiles import Direction, Event, Position, TileType

logger = logging.getLogger(__name__)


class LevelNotFoundError(IndexError):
    """No level template exists at the requested index."""

    def __init__(self, index: int, level_count: int) -> None:
        super().__init__(f"No level at index {index} (have {level_count})")
        self.index = index
        self.level_count = level_count


class SessionState(Enum):
    NO_LEVEL_LOADED = "no_level_loaded"
    LEVEL_ACTIVE = "level_active"
    COMPLETED = "completed"


class Command(Enum):
    """Directional intents and controls handed over by the input adapter."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RELOAD = "reload"
    QUIT = "quit"
    NONE = "none"

    @property
    def direction(self) -> Optional[Direction]:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class RenderState:
    """Read-only view of a session for the presentation layer."""

    state: SessionState
    level_index: int
    level_count: int
    flavor_text: str
    tiles: Tuple[Tuple[Position, TileType], ...]
    player_position: Position
    player_glyph: str

    @property
    def header(self) -> str:
        return f"level {self.level_index}: {self.flavor_text}"


class GameSession:
    """Plays an ordered list of level templates with one player.

    The template at ``current_level_index`` is cloned into ``active_level``
    on every load; templates themselves are never mutated.
    """

    def __init__(
        self,
        levels: Sequence[Level],
        player: Optional[Player] = None,
        start_index: int = 0,
    ) -> None:
        self._levels: Tuple[Level, ...] = tuple(levels)
        self.player = player if player is not None else Player(Position(5, 5))
        self.active_level: Optional[Level] = None
        self._index = start_index
        self._state = SessionState.NO_LEVEL_LOADED

    @property
    def levels(self) -> Tuple[Level, ...]:
        return self._levels

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def current_level_index(self) -> int:
        return self._index

    @property
    def state(self) -> SessionState:
        return self._state

    def is_complete(self) -> bool:
        return self._state is SessionState.COMPLETED

    def has_next_level(self) -> bool:
        return self._index + 1 < len(self._levels)

    def load_current_level(self) -> None:
        """Replace the active level with a fresh copy and respawn the player."""
        self._load(self._index)

    def increment_level(self) -> None:
        self._load(self._index + 1)

    def decrement_level(self) -> None:
        self._load(self._index - 1)

    def _load(self, index: int) -> None:
        if not 0 <= index < len(self._levels):
            raise LevelNotFoundError(index, len(self._levels))
        level = self._levels[index].clone()
        self._index = index
        self.active_level = level
        self.player.position = level.player_spawn
        self._state = SessionState.LEVEL_ACTIVE
        logger.info("Loaded level %d (%s)", index, level.key or "unnamed")

    def player_movement(self, direction: Direction) -> bool:
        """Try to move the player; a no-op unless a level is being played."""
        if self.active_level is None or self._state is not SessionState.LEVEL_ACTIVE:
            logger.debug("Ignoring movement %s in state %s", direction.name, self._state.value)
            return False
        return self.active_level.resolve_move(self.player, direction)

    def collect_events(self) -> List[Event]:
        """Events of every tile under the player. Does not change any state."""
        if self.active_level is None:
            return []
        return [t.stood_on_event() for t in self.active_level.tile_types_at(self.player.position)]

    def update(self) -> List[Event]:
        """End-of-turn bookkeeping: advance on a win, then refresh doors."""
        events = self.collect_events()
        if Event.WIN in events and self._state is SessionState.LEVEL_ACTIVE:
            if self.has_next_level():
                self.increment_level()
            else:
                self._state = SessionState.COMPLETED
                logger.info("Final level %d cleared, game complete", self._index)
        if self.active_level is not None:
            self.active_level.recompute_button_door_satisfaction(self.player)
        return events

    def turn(self, command: Command) -> bool:
        """Run one turn for ``command``. Returns False when the player quits."""
        if command is Command.QUIT:
            return False
        if command is Command.RELOAD:
            self.load_current_level()
        elif command.direction is not None:
            self.player_movement(command.direction)
        self.update()
        return True

    def snapshot(self) -> RenderState:
        level = self.active_level
        return RenderState(
            state=self._state,
            level_index=self._index,
            level_count=len(self._levels),
            flavor_text=(level.flavor_text or "") if level is not None else "",
            tiles=tuple((t.position, t.tile_type) for t in level.tiles) if level is not None else (),
            player_position=self.player.position,
            player_glyph=self.player.glyph,
        )
