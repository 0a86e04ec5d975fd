"""Board palette and the tile type to style mapping."""

from tilepuzzle.core.tiles import TileKind, TileType
from tilepuzzle.ui.models import TileStyle


class BoardColors:
    """Terminal-like dark palette."""

    BACKGROUND = "#000000"
    WHITE = "#E0E0E0"
    RED = "#E53935"
    YELLOW = "#FDD835"
    BLUE = "#1E88E5"

    PLAYER = "#69F0AE"
    HEADER_TEXT = "#B0BEC5"
    COMPLETE_TEXT = "#FFB74D"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


# Dim tiles fade halfway into the background.
DIM_BLEND = 0.5


def tile_style(tile_type: TileType) -> TileStyle:
    """Return the visual style for ``tile_type``. Pure, no shared state."""
    bg = BoardColors.BACKGROUND
    kind = tile_type.kind
    glyph = tile_type.glyph
    if kind is TileKind.WALL:
        return TileStyle(glyph, BoardColors.WHITE, bg)
    if kind is TileKind.PUSH_BOX:
        return TileStyle(glyph, BoardColors.YELLOW, bg, bold=True)
    if kind is TileKind.BUTTON:
        return TileStyle(glyph, BoardColors.RED, bg)
    if kind is TileKind.DOOR:
        if tile_type.is_open:
            return TileStyle(glyph, blend_hex(BoardColors.YELLOW, bg, DIM_BLEND), bg, dim=True)
        return TileStyle(glyph, BoardColors.YELLOW, bg, bold=True)
    if kind is TileKind.GOAL_PAD:
        return TileStyle(glyph, BoardColors.BLUE, bg)
    return TileStyle(glyph, BoardColors.WHITE, bg)
