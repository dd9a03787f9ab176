"""Game constants and the map description shared by the other modules."""

from __future__ import annotations

from dataclasses import dataclass

FOV = 80
SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 800
TILE_SIZE = 600
MINIMAP_TILE_SIZE = 32
PLAYER_SIZE = 2

GAME_TITLE = "GAMI"

MINIMAP_WIDTH = 350
MINIMAP_HEIGHT = 250
MINIMAP_SCALE = 60
MINIMAP_PADDING = 10

Color = tuple[int, int, int]


class MapError(ValueError):
    """Raised when a scene description is invalid."""


@dataclass
class MapData:
    """A parsed scene: the grid, the spawn point, textures and colours.

    ``width`` and ``height`` default to the longest row and the row count.
    """

    grid: list[str]
    x_player: int = 0
    y_player: int = 0
    player_dir: str = "N"
    north_texture: str | None = None
    south_texture: str | None = None
    west_texture: str | None = None
    east_texture: str | None = None
    floor_color: Color = (0, 0, 0)
    ceiling_color: Color = (0, 0, 0)
    width: int | None = None
    height: int | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = max((len(row) for row in self.grid), default=0)
        if self.height is None:
            self.height = len(self.grid)


_DEFAULT_GRID = (
    "1111111111",
    "1000000001",
    "1000000001",
    "10000011111111",
    "10000000000001",
    "10000100011111",
    "10110110001",
    "1000010001",
    "1111111111",
)


def default_map() -> MapData:
    """Return the built-in demonstration map."""
    return MapData(
        grid=list(_DEFAULT_GRID),
        x_player=4,
        y_player=3,
        player_dir="E",
        width=14,
        height=8,
        ceiling_color=(135, 206, 235),
        floor_color=(255, 255, 255),
    )