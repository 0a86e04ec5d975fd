"""Application entry point and setup for the tile puzzle."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from tilepuzzle.core.levels import LevelRepository, start_level_index
from tilepuzzle.core.session import GameSession
from tilepuzzle.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the levels, start a session and show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Tile Puzzle")
    app.setApplicationDisplayName("Tile Puzzle")

    levels = LevelRepository().all()
    session = GameSession(levels, start_index=start_level_index(len(levels)))
    session.load_current_level()
    logging.info(f"Starting at level {session.current_level_index} of {session.level_count}")

    window = MainWindow(session)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover
    run()
