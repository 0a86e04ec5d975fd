from __future__ import annotations

from dataclasses import dataclass

from tilepuzzle.core.tiles import Direction, Position


@dataclass
class Player:
    """The single player token of a session."""

    position: Position
    glyph: str = "X"

    def move(self, direction: Direction) -> None:
        """Shift one cell. Use ``Level.resolve_move`` for collision-aware movement."""
        self.position = self.position.shifted(direction)
