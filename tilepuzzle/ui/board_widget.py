"""Board renderer: draws a session snapshot as a grid of glyphs."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import QWidget

from tilepuzzle.core.session import RenderState
from tilepuzzle.ui.colors import BoardColors, tile_style


class BoardWidget(QWidget):
    """Paints tiles then the player, one fixed-size cell per grid position."""

    CELL_SIZE = 18

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._state: Optional[RenderState] = None
        self.setMinimumSize(40 * self.CELL_SIZE, 18 * self.CELL_SIZE)
        self.setFocusPolicy(Qt.NoFocus)

    def set_state(self, state: RenderState) -> None:
        """Show a new snapshot and schedule a repaint."""
        self._state = state
        self.update()

    def paintEvent(self, event) -> None:
        """Paint the background, every tile glyph, then the player on top."""
        super().paintEvent(event)
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(BoardColors.BACKGROUND))
        state = self._state
        if state is None:
            return

        cell = self.CELL_SIZE
        font = QFont("monospace")
        font.setStyleHint(QFont.Monospace)
        font.setPixelSize(cell - 2)

        for position, tile_type in state.tiles:
            style = tile_style(tile_type)
            if not style.glyph.strip():
                continue
            x, y = position.col * cell, position.row * cell
            painter.fillRect(x, y, cell, cell, QColor(style.background))
            font.setBold(style.bold)
            painter.setFont(font)
            painter.setPen(QColor(style.foreground))
            painter.drawText(x, y, cell, cell, Qt.AlignCenter, style.glyph)

        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor(BoardColors.PLAYER))
        pos = state.player_position
        painter.drawText(pos.col * cell, pos.row * cell, cell, cell, Qt.AlignCenter, state.player_glyph)
