from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from tilepuzzle.core.level import Level
from tilepuzzle.core.tiles import Direction, Position, Tile, TileKind, TileType, wall_run

logger = logging.getLogger(__name__)

LEVELS_DIR_ENV = "TILEPUZZLE_LEVELS_DIR"
START_LEVEL_ENV = "TILEPUZZLE_START_LEVEL"


def default_levels_dir() -> Path:
    override = os.environ.get(LEVELS_DIR_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "data" / "levels"


def start_level_index(level_count: int) -> int:
    """Starting level from the environment, falling back to 0 on bad values."""
    raw = os.environ.get(START_LEVEL_ENV)
    if not raw:
        return 0
    try:
        index = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", START_LEVEL_ENV, raw)
        return 0
    if not 0 <= index < level_count:
        logger.warning("Ignoring %s=%d: only %d levels", START_LEVEL_ENV, index, level_count)
        return 0
    return index


def _position(value: Any, where: str) -> Position:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        raise ValueError(f"{where}: expected [row, col] integers, got {value!r}")
    return Position(value[0], value[1])


def _tile_type(entry: Dict[str, Any], where: str) -> TileType:
    raw_kind = entry.get("type")
    try:
        kind = TileKind(raw_kind)
    except ValueError:
        raise ValueError(f"{where}: unknown tile type {raw_kind!r}") from None
    is_open = entry.get("open", False)
    if not isinstance(is_open, bool):
        raise ValueError(f"{where}: 'open' must be true or false, got {is_open!r}")
    try:
        if kind is TileKind.BUTTON and "id" not in entry:
            raise ValueError("button needs an 'id'")
        return TileType(kind, link_id=entry.get("id"), is_open=is_open)
    except ValueError as e:
        raise ValueError(f"{where}: {e}") from None


def _parse_tiles(entry: Any, where: str) -> List[Tile]:
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a mapping")
    tile_type = _tile_type(entry, where)
    if "at" in entry:
        return [Tile(_position(entry["at"], where), tile_type)]
    if "from" in entry:
        start = _position(entry["from"], where)
        try:
            direction = Direction.from_name(entry.get("direction", ""))
        except ValueError as e:
            raise ValueError(f"{where}: {e}") from None
        length = entry.get("length")
        if not isinstance(length, int) or isinstance(length, bool) or length < 1:
            raise ValueError(f"{where}: 'length' must be a positive integer")
        return wall_run(start, direction, length, tile_type)
    raise ValueError(f"{where}: needs 'at' or 'from'")


def parse_level(key: str, raw: Any, source: str = "") -> Level:
    """Build a level template from one decoded YAML document."""
    name = source or key
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{name}: expected YAML with 'spawn' and 'tiles'")
    if "spawn" not in raw:
        raise ValueError(f"{name}: missing 'spawn'")
    spawn = _position(raw["spawn"], f"{name}: spawn")

    flavor_text = raw.get("flavor_text")
    if flavor_text is not None and not isinstance(flavor_text, str):
        raise ValueError(f"{name}: 'flavor_text' must be a string")

    entries = raw.get("tiles")
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"{name}: 'tiles' must be a non-empty list")
    tiles: List[Tile] = []
    for i, entry in enumerate(entries):
        tiles.extend(_parse_tiles(entry, f"{name}: tiles[{i}]"))

    return Level(
        tiles=tiles,
        player_spawn=spawn,
        flavor_text=flavor_text.strip() if flavor_text else None,
        key=key,
    )


class LevelRepository:
    """Level templates read from ``level<N>.yaml`` files, in numeric order."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else default_levels_dir()
        self._levels = self._load_levels()

    def all(self) -> List[Level]:
        return list(self._levels.values())

    def get(self, key: str) -> Level:
        return self._levels[key]

    def _load_levels(self) -> Dict[str, Level]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[str, Level] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            levels[level_path.stem] = parse_level(level_path.stem, raw, level_path.name)

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        logger.info("Loaded %d levels from %s", len(levels), base_dir)
        return levels
