"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TileStyle:
    """How one tile type is drawn: glyph, colors and weight."""

    glyph: str
    foreground: str
    background: str
    bold: bool = False
    dim: bool = False
