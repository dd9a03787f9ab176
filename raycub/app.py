"""Game state, the per-frame update and the window loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from raycub.config import (
    FOV,
    GAME_TITLE,
    MINIMAP_HEIGHT,
    MINIMAP_PADDING,
    MINIMAP_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    MapData,
    MapError,
)
from raycub.image import Image
from raycub.mapfile import has_cub_extension, parse_map_file
from raycub.mathutil import deg_to_radian
from raycub.player import InputState, Player, init_player, update_player
from raycub.raycaster import Ray, WallHit, cast_rays, rays_to_walls
from raycub.render import render_minimap, render_walls

FRAME_RATE = 60


@dataclass
class Game:
    """Everything one running game needs: map, player, view and images."""

    map_data: MapData
    player: Player
    fov_rad: float
    scene: Image
    minimap: Image
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    rays: list[Ray] = field(default_factory=list)
    walls: list[WallHit] = field(default_factory=list)

    def frame(self, inputs: InputState) -> None:
        """Advance one frame: move the player, cast rays and redraw both images."""
        update_player(self.player, self.map_data.grid, inputs)
        self.rays = cast_rays(self.map_data.grid, self.player, self.fov_rad)
        self.walls = rays_to_walls(self.rays, self.player.angle)
        render_walls(self.scene, self.walls)
        render_minimap(self.minimap, self.map_data, self.player)


def init_game(map_data: MapData) -> Game:
    """Create the game state for a parsed map."""
    return Game(
        map_data=map_data,
        player=init_player(map_data),
        fov_rad=deg_to_radian(FOV),
        scene=Image(SCREEN_WIDTH, SCREEN_HEIGHT),
        minimap=Image(MINIMAP_WIDTH, MINIMAP_HEIGHT),
    )


def _to_surface(pygame, image: Image):
    return pygame.image.frombuffer(bytes(image.pixels), (image.width, image.height), "RGBA")


def run(game: Game) -> None:
    """Open the window and run frames until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.screen_width, game.screen_height))
        pygame.display.set_caption(GAME_TITLE)
        pygame.mouse.set_visible(False)
        center = (game.screen_width // 2, game.screen_height // 2)
        pygame.mouse.set_pos(center)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            keys = pygame.key.get_pressed()
            if keys[pygame.K_ESCAPE]:
                running = False
            mouse_x, _ = pygame.mouse.get_pos()
            pygame.mouse.set_pos(center)
            inputs = InputState(
                forward=bool(keys[pygame.K_w] or keys[pygame.K_UP]),
                backward=bool(keys[pygame.K_s] or keys[pygame.K_DOWN]),
                strafe_right=bool(keys[pygame.K_d]),
                strafe_left=bool(keys[pygame.K_a]),
                turn_left=bool(keys[pygame.K_LEFT]),
                turn_right=bool(keys[pygame.K_RIGHT]),
                mouse_dx=mouse_x - center[0],
            )
            game.frame(inputs)
            screen.blit(_to_surface(pygame, game.scene), (0, 0))
            screen.blit(_to_surface(pygame, game.minimap), (MINIMAP_PADDING, MINIMAP_PADDING))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or not has_cub_extension(args[0]):
        print("usage: raycub <scene.cub>", file=sys.stderr)
        return 1
    try:
        map_data = parse_map_file(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    run(init_game(map_data))
    return 0