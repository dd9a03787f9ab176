"""Player state, input handling and wall collision."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycub.config import PLAYER_SIZE, TILE_SIZE, MapData
from raycub.mathutil import deg_to_radian, normalize_angle

MOUSE_SENSITIVITY = 0.02
MOUSE_WARMUP_FRAMES = 2


@dataclass
class InputState:
    """The controls held down during one frame and the horizontal mouse offset."""

    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    mouse_dx: int = 0


@dataclass
class Player:
    """Player position in world units, view angle and movement state.

    Mouse input is ignored for the first ``mouse_warmup`` frames.
    """

    x: int
    y: int
    angle: float
    move_speed: float = 17.5
    rot_speed: float = 0.04
    size_minimap: int = 4
    forward_backward: int = 0
    left_right: int = 0
    remainder_x: float = 0.0
    remainder_y: float = 0.0
    mouse_warmup: int = MOUSE_WARMUP_FRAMES


def init_player(map_data: MapData) -> Player:
    """Create a player standing on the map's spawn tile, facing 90 degrees."""
    return Player(
        x=map_data.x_player * TILE_SIZE,
        y=map_data.y_player * TILE_SIZE,
        angle=deg_to_radian(90),
    )


def is_wall(grid: list[str], x: int, y: int) -> bool:
    """Return True if world point (x, y) lies in a wall or outside the grid."""
    row, col = y // TILE_SIZE, x // TILE_SIZE
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


def check_collision(grid: list[str], x: int, y: int) -> bool:
    """Return True if any corner of the player's box at (x, y) touches a wall."""
    far_x = x + PLAYER_SIZE - 1
    far_y = y + PLAYER_SIZE - 1
    return any(
        is_wall(grid, cx, cy) for cx, cy in ((x, y), (far_x, y), (x, far_y), (far_x, far_y))
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _apply_inputs(player: Player, inputs: InputState) -> None:
    player.forward_backward = 0
    player.left_right = 0
    mouse_dx = 0
    if player.mouse_warmup > 0:
        player.mouse_warmup -= 1
    else:
        mouse_dx = inputs.mouse_dx
    player.angle += mouse_dx * player.rot_speed * MOUSE_SENSITIVITY
    speed = int(player.move_speed)
    if inputs.forward:
        player.forward_backward = speed
    if inputs.backward:
        player.forward_backward = -speed
    if inputs.strafe_right:
        player.left_right = speed
    if inputs.strafe_left:
        player.left_right = -speed
    if inputs.turn_left:
        player.angle -= player.rot_speed
    if inputs.turn_right:
        player.angle += player.rot_speed
    player.angle = normalize_angle(player.angle)


def update_player(player: Player, grid: list[str], inputs: InputState) -> None:
    """Turn and move the player for one frame, sliding along walls."""
    _apply_inputs(player, inputs)
    angle = player.angle
    side = angle + math.pi / 2
    total_x = (
        math.cos(angle) * player.forward_backward
        + math.cos(side) * player.left_right
        + player.remainder_x
    )
    total_y = (
        math.sin(angle) * player.forward_backward
        + math.sin(side) * player.left_right
        + player.remainder_y
    )
    move_x = _round_half_away(total_x)
    move_y = _round_half_away(total_y)
    target_x = player.x + move_x
    target_y = player.y + move_y
    if not check_collision(grid, target_x, player.y):
        player.x = target_x
        player.remainder_x = total_x - move_x
    else:
        player.remainder_x = 0.0
    if not check_collision(grid, player.x, target_y):
        player.y = target_y
        player.remainder_y = total_y - move_y
    else:
        player.remainder_y = 0.0