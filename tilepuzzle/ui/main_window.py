from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from tilepuzzle.core.session import GameSession, LevelNotFoundError
from tilepuzzle.ui.board_widget import BoardWidget
from tilepuzzle.ui.colors import BoardColors
from tilepuzzle.ui.input import command_for_key

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Header line plus board; every key press plays exactly one turn."""

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session
        self.setWindowTitle("Tile Puzzle")

        central = QWidget()
        central.setStyleSheet(f"background: {BoardColors.BACKGROUND};")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._header = QLabel()
        self._header.setStyleSheet(f"color: {BoardColors.HEADER_TEXT}; font-family: monospace; font-size: 14px;")
        layout.addWidget(self._header)

        self._board = BoardWidget()
        layout.addWidget(self._board, 1)

        self._footer = QLabel("arrows: move   r: reload   q: quit")
        self._footer.setStyleSheet(f"color: {BoardColors.HEADER_TEXT}; font-family: monospace; font-size: 12px;")
        layout.addWidget(self._footer)

        self.setCentralWidget(central)
        self._refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Map the key to a command and run one turn of the session."""
        command = command_for_key(event.key(), event.text())
        try:
            keep_running = self._session.turn(command)
        except LevelNotFoundError:
            logger.exception("Level load failed")
            self.close()
            return
        if not keep_running:
            self.close()
            return
        self._refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing at level %d", self._session.current_level_index)
        super().closeEvent(event)

    def _refresh(self) -> None:
        state = self._session.snapshot()
        if self._session.is_complete():
            self._header.setText(f"{state.header}   -- all levels cleared! (r to replay)")
            self._header.setStyleSheet(
                f"color: {BoardColors.COMPLETE_TEXT}; font-family: monospace; font-size: 14px;"
            )
        else:
            self._header.setText(state.header)
            self._header.setStyleSheet(f"color: {BoardColors.HEADER_TEXT}; font-family: monospace; font-size: 14px;")
        self._board.set_state(state)
