"""Tests for tilepuzzle.ui.input – key press to command mapping."""

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt

from tilepuzzle.core.session import Command
from tilepuzzle.ui.input import command_for_key


class TestCommandForKey:
    @pytest.mark.parametrize(
        "key, expected",
        [
            (Qt.Key.Key_Up, Command.MOVE_UP),
            (Qt.Key.Key_Down, Command.MOVE_DOWN),
            (Qt.Key.Key_Left, Command.MOVE_LEFT),
            (Qt.Key.Key_Right, Command.MOVE_RIGHT),
            (Qt.Key.Key_Escape, Command.QUIT),
        ],
    )
    def test_special_keys(self, key, expected: Command):
        assert command_for_key(key) is expected

    def test_plain_int_key(self):
        assert command_for_key(int(Qt.Key.Key_Up.value)) is Command.MOVE_UP

    def test_reload(self):
        assert command_for_key(Qt.Key.Key_R, "r") is Command.RELOAD
        assert command_for_key(Qt.Key.Key_R, "R") is Command.RELOAD

    def test_quit(self):
        assert command_for_key(Qt.Key.Key_Q, "q") is Command.QUIT

    def test_other_keys_are_none(self):
        assert command_for_key(Qt.Key.Key_A, "a") is Command.NONE
        assert command_for_key(Qt.Key.Key_Space, " ") is Command.NONE
        assert command_for_key(Qt.Key.Key_Shift, "") is Command.NONE
