"""Tiling generator holding the current parameters and produced tiles."""

from __future__ import annotations

import random
from enum import Enum

from .tiles import (
    Polygon,
    generate_dart_tile,
    generate_ghost_tile,
    generate_hat_tile,
    generate_kite_tile,
)

_DEFAULT_SIDE = 20
_PENROSE_LEVELS = 3
_MAX_REPLACEMENT_LEVEL = 5


class TilingType(Enum):
    PENROSE = 0
    HAT = 1
    GHOST = 2


class TilingGenerator:
    """Builds lists of tile polygons for the selected tiling type."""

    def __init__(
        self,
        side_length: int = 50,
        rotation_angle: int = 0,
        tile_count: int = 100,
        rng: random.Random | None = None,
    ) -> None:
        if not 1 <= side_length <= 100:
            raise ValueError("side_length must be between 1 and 100")
        if not 0 <= rotation_angle <= 360:
            raise ValueError("rotation_angle must be between 0 and 360")
        if tile_count < 0:
            raise ValueError("tile_count must not be negative")
        self.side_length = side_length
        self.rotation_angle = rotation_angle
        self.tile_count = tile_count
        self.rng = rng or random.Random()
        self.tiles: list[Polygon] = []
        self.replacement_level = 1
        self.tiling_type = TilingType.PENROSE
        self.color = "#ffffff"

    def generate_tiling(self) -> list[Polygon]:
        """Regenerate the tiles for the current tiling type and return them."""
        if self.tiling_type is TilingType.PENROSE:
            initial = [
                generate_kite_tile(self.side_length, self.rotation_angle),
                generate_dart_tile(self.side_length, self.rotation_angle),
            ]
            self.tiles = self.replace_penrose_tiles(initial, _PENROSE_LEVELS)
        elif self.tiling_type is TilingType.HAT:
            self.tiles = self.tile_hats(self.tile_count)
        else:
            self.tiles = self.tile_ghosts(self.tile_count)
        return list(self.tiles)

    def perform_replacement(self) -> int:
        """Raise the replacement level, stopping once it passes the maximum."""
        if self.replacement_level <= _MAX_REPLACEMENT_LEVEL:
            self.replacement_level += 1
        return self.replacement_level

    def change_tiling_type(self, index: int) -> TilingType:
        """Select the tiling type by index; unknown indices leave it unchanged."""
        try:
            self.tiling_type = TilingType(index)
        except ValueError:
            pass
        return self.tiling_type

    def replace_penrose_tiles(
        self, tiles: list[Polygon], level: int
    ) -> list[Polygon]:
        """Substitute every tile by a kite and a dart, ``level`` times."""
        if level < 0:
            raise ValueError("level must not be negative")
        for _ in range(level):
            tiles = [
                new_tile
                for _tile in tiles
                for new_tile in (
                    generate_kite_tile(_DEFAULT_SIDE, 0),
                    generate_dart_tile(_DEFAULT_SIDE, 0),
                )
            ]
        return list(tiles)

    def tile_hats(self, tile_count: int) -> list[Polygon]:
        """One upright hat followed by randomly rotated hats."""
        return self._tile_with(
            tile_count, lambda angle: generate_hat_tile(_DEFAULT_SIDE, angle)
        )

    def tile_ghosts(self, tile_count: int) -> list[Polygon]:
        """One upright left-handed ghost followed by randomly rotated ones."""
        return self._tile_with(
            tile_count,
            lambda angle: generate_ghost_tile(_DEFAULT_SIDE, angle, True),
        )

    def _tile_with(self, tile_count, make) -> list[Polygon]:
        tiles = [make(0)]
        tiles.extend(make(self.rng.randrange(360)) for _ in range(1, tile_count))
        return tiles