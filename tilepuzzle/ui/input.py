"""Translate Qt key presses into session commands."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt

from tilepuzzle.core.session import Command


def _key_value(key: Any) -> int:
    # Qt.Key is an enum in recent PySide6 releases; QKeyEvent.key() may return a plain int.
    return int(getattr(key, "value", key))


_KEY_COMMANDS = {
    _key_value(Qt.Key.Key_Up): Command.MOVE_UP,
    _key_value(Qt.Key.Key_Down): Command.MOVE_DOWN,
    _key_value(Qt.Key.Key_Left): Command.MOVE_LEFT,
    _key_value(Qt.Key.Key_Right): Command.MOVE_RIGHT,
    _key_value(Qt.Key.Key_Escape): Command.QUIT,
}

_TEXT_COMMANDS = {
    "r": Command.RELOAD,
    "q": Command.QUIT,
}


def command_for_key(key: Any, text: str = "") -> Command:
    """Arrows move, ``r`` reloads, ``q``/Escape quits; anything else is ``NONE``."""
    command = _KEY_COMMANDS.get(_key_value(key))
    if command is not None:
        return command
    return _TEXT_COMMANDS.get((text or "").lower(), Command.NONE)
