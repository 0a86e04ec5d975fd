"""Tests for tilepuzzle.ui.colors – color blending and tile styles."""

from __future__ import annotations

import pytest

from tilepuzzle.core.tiles import TileType
from tilepuzzle.ui.colors import DIM_BLEND, BoardColors, blend_hex, tile_style
from tilepuzzle.ui.models import TileStyle


# ===========================================================================
# BoardColors – constants exist
# ===========================================================================

class TestBoardColors:
    @pytest.mark.parametrize(
        "name",
        ["BACKGROUND", "WHITE", "RED", "YELLOW", "BLUE", "PLAYER", "HEADER_TEXT", "COMPLETE_TEXT"],
    )
    def test_is_hex(self, name: str):
        value = getattr(BoardColors, name)
        assert value.startswith("#")
        assert len(value) == 7


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_t_clamped(self):
        assert blend_hex("#000000", "#FFFFFF", 5.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_invalid_input_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"


# ===========================================================================
# tile_style – pure mapping
# ===========================================================================

class TestTileStyle:
    def test_wall(self):
        assert tile_style(TileType.wall()) == TileStyle("B", BoardColors.WHITE, BoardColors.BACKGROUND)

    def test_push_box_bold_yellow(self):
        style = tile_style(TileType.push_box())
        assert style.glyph == "@"
        assert style.foreground == BoardColors.YELLOW
        assert style.bold is True

    def test_button_red(self):
        style = tile_style(TileType.button(4))
        assert style.glyph == "^"
        assert style.foreground == BoardColors.RED

    def test_closed_door_bold(self):
        style = tile_style(TileType.door(0))
        assert style.glyph == "D"
        assert style.bold is True
        assert style.dim is False
        assert style.foreground == BoardColors.YELLOW

    def test_open_door_dim(self):
        style = tile_style(TileType.door(0, is_open=True))
        assert style.dim is True
        assert style.bold is False
        assert style.foreground == blend_hex(BoardColors.YELLOW, BoardColors.BACKGROUND, DIM_BLEND)

    def test_goal_pad_blue(self):
        style = tile_style(TileType.goal_pad())
        assert style.glyph == "#"
        assert style.foreground == BoardColors.BLUE

    def test_empty_is_blank(self):
        assert tile_style(TileType.empty()).glyph == " "

    def test_deterministic(self):
        assert tile_style(TileType.door(1)) == tile_style(TileType.door(1))
