"""Drawing of the 3D scene and the minimap into images."""

from __future__ import annotations

import math

from raycub.config import TILE_SIZE, MapData
from raycub.image import Image
from raycub.player import Player
from raycub.raycaster import WallHit

CEILING_COLOR = 0x5C94FCFF
FLOOR_COLOR = 0x00A000FF
WALL_COLORS = {
    0: 0xFF8C00FF,
    1: 0xFF8C50FF,
    2: 0xFFAF00FF,
    3: 0xFF0000FF,
}

MINIMAP_BACKGROUND = 0x000000FF
MINIMAP_WALL = 0x000000FF
MINIMAP_FLOOR = 0xFFFFFFFF
MARKER_COLOR = 0xFF0000FF
MINIMAP_ZOOM = 0.08
DIRECTION_LENGTH = 15
DIRECTION_STEPS = 10


def _rgba(color: int) -> bytes:
    return (color & 0xFFFFFFFF).to_bytes(4, "big")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _trunc_div(a: int, b: int) -> int:
    return -(-a // b) if a < 0 else a // b


def render_floor_cell(image: Image) -> None:
    """Paint the upper half with the ceiling colour and the lower with the floor."""
    half = image.height // 2
    split = half * image.width * 4
    image.pixels[:split] = _rgba(CEILING_COLOR) * (image.width * half)
    image.pixels[split:] = _rgba(FLOOR_COLOR) * (image.width * (image.height - half))


def wall_color(texture_id: int) -> int:
    """Return the flat colour used for a wall orientation."""
    try:
        return WALL_COLORS[texture_id]
    except KeyError:
        raise ValueError(f"unknown texture id: {texture_id}") from None


def _fill_column(image: Image, x: int, y0: int, y1: int, color: int) -> None:
    count = y1 - y0 + 1
    if count <= 0:
        return
    stride = image.width * 4
    base = (y0 * image.width + x) * 4
    for channel, value in enumerate(_rgba(color)):
        start = base + channel
        image.pixels[start:start + stride * (count - 1) + 1:stride] = bytes([value]) * count


def _column_span(distance: float, height: int) -> tuple[int, int]:
    if distance <= 0:
        return 0, height - 1
    line_h = TILE_SIZE * height / distance
    if math.isinf(line_h):
        return 0, height - 1
    size = _round_half_away(line_h)
    start = math.trunc((height - size) / 2)
    end = start + size
    return max(start, 0), min(end, height - 1)


def render_walls(image: Image, walls: list[WallHit]) -> None:
    """Draw the background and one flat-coloured wall column per wall slice."""
    render_floor_cell(image)
    for x, wall in enumerate(walls[:image.width]):
        start, end = _column_span(wall.distance, image.height)
        _fill_column(image, x, start, end, wall_color(wall.texture_id))


def _tile_index(world: float) -> int:
    return _trunc_div(int(world), TILE_SIZE)


def render_world_on_minimap(image: Image, map_data: MapData, player: Player) -> None:
    """Draw the map around the player, who sits at the image centre."""
    cx = image.width // 2
    cy = image.height // 2
    cols = [_tile_index(player.x + (sx - cx) / MINIMAP_ZOOM) for sx in range(image.width)]
    rows = [_tile_index(player.y + (sy - cy) / MINIMAP_ZOOM) for sy in range(image.height)]
    background = _rgba(MINIMAP_BACKGROUND)
    colors = {"1": _rgba(MINIMAP_WALL), "0": _rgba(MINIMAP_FLOOR)}
    stride = image.width * 4
    blank_row = background * image.width
    for sy, map_y in enumerate(rows):
        if 0 <= map_y < map_data.height and map_y < len(map_data.grid):
            row = map_data.grid[map_y]
            line = b"".join(
                colors.get(row[map_x], background)
                if 0 <= map_x < map_data.width and map_x < len(row)
                else background
                for map_x in cols
            )
        else:
            line = blank_row
        image.pixels[sy * stride:(sy + 1) * stride] = line


def _put_if_inside(image: Image, x: int, y: int, color: int) -> None:
    if 0 <= x < image.width and 0 <= y < image.height:
        image.put_pixel(x, y, color)


def draw_player_marker(image: Image) -> None:
    """Draw a 5x5 marker at the image centre."""
    cx = image.width // 2
    cy = image.height // 2
    for dy in range(-2, 3):
        for dx in range(-2, 3):
            _put_if_inside(image, cx + dx, cy + dy, MARKER_COLOR)


def draw_direction(image: Image, angle: float, cx: int, cy: int) -> None:
    """Draw a short dotted line from (cx, cy) in the viewing direction."""
    for i in range(DIRECTION_STEPS):
        x = math.trunc(cx + math.cos(angle) * DIRECTION_LENGTH * i / DIRECTION_STEPS)
        y = math.trunc(cy + math.sin(angle) * DIRECTION_LENGTH * i / DIRECTION_STEPS)
        _put_if_inside(image, x, y, MARKER_COLOR)


def render_minimap(image: Image, map_data: MapData, player: Player) -> None:
    """Redraw the whole minimap: map, player marker and direction."""
    image.fill(MINIMAP_BACKGROUND)
    render_world_on_minimap(image, map_data, player)
    draw_player_marker(image)
    draw_direction(image, player.angle, image.width // 2, image.height // 2)