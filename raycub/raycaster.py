"""Grid ray casting (DDA) and conversion of ray hits into wall slices."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycub.config import SCREEN_WIDTH, TILE_SIZE
from raycub.mathutil import normalize_angle
from raycub.player import Player


@dataclass
class Ray:
    """One cast ray: its direction, the wall cell it hit and where.

    ``distance`` is measured in tiles, ``hit_x``/``hit_y`` in world units and
    ``wall_x`` is the fractional position of the hit along the wall face.
    ``side_hit`` is 0 for a vertical grid line and 1 for a horizontal one.
    """

    angle: float
    dir_x: float
    dir_y: float
    distance: float
    side_hit: int
    map_x: int
    map_y: int
    hit_x: float
    hit_y: float
    wall_x: float


@dataclass
class WallHit:
    """A wall slice for one screen column.

    ``distance`` is fisheye-corrected and in world units. ``texture_id`` is
    0 for north, 1 for east, 2 for south and 3 for west.
    """

    distance: float
    side: int = 0
    texture_id: int = 0
    texture_x_coord: float = 0.0
    hit_x: float = 0.0
    hit_y: float = 0.0


def ray_angles(fov_rad: float, pov_angle: float) -> list[float]:
    """Return one normalized angle per screen column, spread across the view."""
    step = fov_rad / (SCREEN_WIDTH - 1)
    start = pov_angle - fov_rad / 2
    return [normalize_angle(start + i * step) for i in range(SCREEN_WIDTH)]


def _is_wall_cell(grid: list[str], col: int, row: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


def _delta(component: float) -> float:
    return abs(1 / component) if component else math.inf


def _initial_side(pos: float, cell: int, delta: float, negative: bool) -> float:
    if math.isinf(delta):
        return math.inf
    if negative:
        return (pos - cell) * delta
    return (cell + 1 - pos) * delta


def cast_ray(grid: list[str], px: float, py: float, angle: float) -> Ray:
    """Cast one ray from world point (px, py) until it enters a wall cell.

    Cells outside the grid count as walls.
    """
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    pos_x = px / TILE_SIZE
    pos_y = py / TILE_SIZE
    map_x = int(pos_x)
    map_y = int(pos_y)
    delta_x = _delta(dir_x)
    delta_y = _delta(dir_y)
    step_x = -1 if dir_x < 0 else 1
    step_y = -1 if dir_y < 0 else 1
    side_x = _initial_side(pos_x, map_x, delta_x, dir_x < 0)
    side_y = _initial_side(pos_y, map_y, delta_y, dir_y < 0)

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall_cell(grid, map_x, map_y):
            break

    if side == 0:
        distance = (map_x - pos_x + (1 - step_x) // 2) / dir_x
    else:
        distance = (map_y - pos_y + (1 - step_y) // 2) / dir_y
    distance = abs(distance)

    if side == 0:
        wall_x = pos_y + distance * dir_y
    else:
        wall_x = pos_x + distance * dir_x
    wall_x -= math.floor(wall_x)

    return Ray(
        angle=angle,
        dir_x=dir_x,
        dir_y=dir_y,
        distance=distance,
        side_hit=side,
        map_x=map_x,
        map_y=map_y,
        hit_x=px + dir_x * distance * TILE_SIZE,
        hit_y=py + dir_y * distance * TILE_SIZE,
        wall_x=wall_x,
    )


def cast_rays(grid: list[str], player: Player, fov_rad: float) -> list[Ray]:
    """Cast one ray per screen column from the player's position."""
    return [
        cast_ray(grid, player.x, player.y, angle)
        for angle in ray_angles(fov_rad, player.angle)
    ]


def _texture_id(ray: Ray) -> int:
    if ray.side_hit == 0:
        return 1 if ray.dir_x < 0 else 3
    return 2 if ray.dir_y < 0 else 0


def rays_to_walls(rays: list[Ray], player_angle: float) -> list[WallHit]:
    """Turn ray hits into corrected wall slices with texture information."""
    walls = []
    for ray in rays:
        corrected = ray.distance * math.cos(ray.angle - player_angle)
        texture_x = ray.wall_x
        if (ray.side_hit == 0 and ray.dir_x > 0) or (ray.side_hit == 1 and ray.dir_y < 0):
            texture_x = 1.0 - texture_x
        walls.append(
            WallHit(
                distance=corrected * TILE_SIZE,
                side=ray.side_hit,
                texture_id=_texture_id(ray),
                texture_x_coord=texture_x,
                hit_x=ray.hit_x,
                hit_y=ray.hit_y,
            )
        )
    return walls