"""The endless-runner game: a pancake jumps and slides across scrolling tiles."""

from __future__ import annotations

import argparse
import enum
import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from pancake_run.game_node import (
    WINNAME,
    WINSIZE_X,
    WINSIZE_Y,
    WINSTART_X,
    WINSTART_Y,
    GameNode,
)
from pancake_run.geometry import intersect_rect, rect_make, rect_make_center
from pancake_run.image_manager import ImageManager
from pancake_run.keys import KeyManager
from pancake_run.rng import RandomFunction

MAGENTA = (255, 0, 255)
WHITE = (255, 255, 255)
DEBUG_COLOR = (255, 0, 0)

JUMP_POWER = 18.0
GRAVITY = 0.97
LANDING_TIME = 0.1
TICK_SECONDS = 1.0 / 60.0
TILE_SPEED = -8
TILE_WIDTH = 129
TILE_HEIGHT = 50
TILE_Y = WINSIZE_Y - 100
RUN_HEIGHT = 144


class PlayerState(enum.Enum):
    RUNNING = enum.auto()
    SLIDING = enum.auto()
    JUMPING = enum.auto()
    DOUBLE_JUMPING = enum.auto()
    LANDING = enum.auto()


@dataclass(frozen=True)
class _Layer:
    key: str
    path: str
    speed: float
    transparent: bool


@dataclass(frozen=True)
class _Sprite:
    key: str
    path: str
    width: int
    height: int
    frames: int


_LAYERS = (
    _Layer("background", "Images/BackGround/BackGround.bmp", 2.0, False),
    _Layer("background_object1", "Images/BackGround/BackGroundObject1.bmp", 3.0, True),
    _Layer("background_object2", "Images/BackGround/BackGroundObject2.bmp", 4.0, True),
    _Layer("background_object3", "Images/BackGround/BackGroundObject3.bmp", 8.0, True),
)

_SPRITES = {
    PlayerState.RUNNING: _Sprite("run", "Images/Object/PanCakeRun.bmp", 181 * 4, 144, 4),
    PlayerState.SLIDING: _Sprite("slide", "Images/Object/PanCakeSlide.bmp", 324, 108, 2),
    PlayerState.JUMPING: _Sprite("jump", "Images/Object/PanCakeJump.bmp", 334, 140, 2),
    PlayerState.DOUBLE_JUMPING: _Sprite("double_jump", "Images/Object/PanCakeDoubleJump.bmp", 1062, 146, 6),
    PlayerState.LANDING: _Sprite("landing", "Images/Object/PanCakeLanding.bmp", 150, 126, 1),
}

_TILE_KEY = "tile"
_TILE_PATH = "Images/Object/tile.bmp"

# (ticks per frame, frame count) for the animated states.
_ANIMATION = {
    PlayerState.RUNNING: (5, 4),
    PlayerState.SLIDING: (5, 2),
    PlayerState.JUMPING: (5, 2),
    PlayerState.DOUBLE_JUMPING: (4, 6),
}

RESOURCE_FILES = (
    tuple(layer.path for layer in _LAYERS)
    + tuple(sprite.path for sprite in _SPRITES.values())
    + (_TILE_PATH,)
)


class MainGame(GameNode):
    """Scrolling background, procedurally placed tiles and a jumping player."""

    def __init__(self, keys: KeyManager | None = None, rng: RandomFunction | None = None,
                 images: ImageManager | None = None, resource_dir="Resources") -> None:
        super().__init__(keys, rng)
        self.images = images if images is not None else ImageManager()
        self.resource_dir = Path(resource_dir)
        self.pan_cake_x = 0
        self.pan_cake_y = 0.0
        self.frame_x = 0
        self.frame_count = 0
        self.layer_offsets = [0.0 for _ in _LAYERS]
        self.player_hitbox = pygame.Rect(0, 0, 0, 0)
        self.tiles: list[pygame.Rect] = []
        self.map_pos_x = 0.0
        self.is_debug = False
        self.state = PlayerState.RUNNING
        self.jump_power = 0.0
        self.gravity = 0.0
        self.velocity_y = 0.0
        self.can_double_jump = False
        self.landing_time = 0.0
        self.landing_timer = 0.0

    def init(self) -> None:
        """Load every image and place the player and the first row of tiles."""
        super().init()
        for layer in _LAYERS:
            self.images.add_image(layer.key, self.resource_dir / layer.path, WINSIZE_X, WINSIZE_Y,
                                  layer.transparent, MAGENTA)
        for sprite in _SPRITES.values():
            self.images.add_frame_image(sprite.key, self.resource_dir / sprite.path, sprite.width,
                                        sprite.height, sprite.frames, 1, True, MAGENTA)
        self.images.add_image(_TILE_KEY, self.resource_dir / _TILE_PATH, TILE_WIDTH, TILE_HEIGHT,
                              True, MAGENTA)

        self.pan_cake_x = 130
        self.pan_cake_y = float(WINSIZE_Y - 250)
        self.layer_offsets = [0.0 for _ in _LAYERS]

        self.state = PlayerState.RUNNING
        self.jump_power = JUMP_POWER
        self.gravity = GRAVITY
        self.velocity_y = 0.0
        self.can_double_jump = False
        self.landing_time = LANDING_TIME
        self.landing_timer = 0.0

        self.frame_x = 0
        self.frame_count = 0
        self.is_debug = True

        self.map_pos_x = 0.0
        self.tiles = [rect_make(i * TILE_WIDTH, TILE_Y, TILE_WIDTH, TILE_HEIGHT) for i in range(10)]

    def release(self) -> None:
        """Free the back buffer and every image."""
        super().release()
        self.images.release()

    def _shift_held(self) -> bool:
        return any(self.keys.is_stay_key_down(key) for key in (pygame.K_LSHIFT, pygame.K_RSHIFT))

    def _restart_animation(self) -> None:
        self.frame_x = 0
        self.frame_count = 0

    def _update_hitbox(self) -> None:
        y = int(self.pan_cake_y)
        if self.state is PlayerState.SLIDING:
            self.player_hitbox = rect_make_center(self.pan_cake_x + 100, y + 100, 100, 80)
        else:
            self.player_hitbox = rect_make_center(self.pan_cake_x + 100, y + 76, 100, 130)

    def _scroll_tiles(self) -> None:
        self.map_pos_x = float(TILE_SPEED)
        shift = int(self.map_pos_x)
        moved = (tile.move(shift, 0) for tile in self.tiles)
        self.tiles = [tile for tile in moved if tile.right >= 0]

        if self.tiles and self.tiles[-1].right < WINSIZE_X + 100:
            new_x = self.tiles[-1].right
            if self.rng.get_int(5) >= 4:
                new_x += self.rng.get_from_int_to(150, 300)
            self.tiles.append(rect_make(new_x, TILE_Y, TILE_WIDTH, TILE_HEIGHT))

    def _handle_jump(self) -> None:
        if not self.keys.is_once_key_down(pygame.K_SPACE):
            return
        if self.state in (PlayerState.RUNNING, PlayerState.SLIDING, PlayerState.LANDING):
            self.state = PlayerState.JUMPING
            self.velocity_y = -self.jump_power
            self.can_double_jump = True
            self._restart_animation()
        elif self.state is PlayerState.JUMPING and self.can_double_jump:
            self.state = PlayerState.DOUBLE_JUMPING
            self.velocity_y = -self.jump_power
            self.can_double_jump = False
            self._restart_animation()

    def _collide(self) -> bool:
        hitbox = self.player_hitbox
        for tile in self.tiles:
            feet = rect_make(hitbox.left + 10, hitbox.bottom - 10, hitbox.width - 20, 10)
            if self.velocity_y > 0 and intersect_rect(feet, tile) is not None:
                self.pan_cake_y -= hitbox.bottom - tile.top
                self.velocity_y = 0.0
                if self.state in (PlayerState.JUMPING, PlayerState.DOUBLE_JUMPING):
                    self.state = PlayerState.LANDING
                    self.landing_timer = self.landing_time
                elif self.state is PlayerState.LANDING and self._shift_held():
                    self.state = PlayerState.SLIDING
                return True
        return False

    def _ground_state(self, on_ground: bool) -> None:
        if self.state is PlayerState.LANDING:
            self.landing_timer -= TICK_SECONDS
            if self.landing_timer <= 0:
                self.state = PlayerState.RUNNING
        elif on_ground:
            if self._shift_held():
                if self.state is PlayerState.RUNNING:
                    self.state = PlayerState.SLIDING
                    self._restart_animation()
            elif self.state is PlayerState.SLIDING:
                self.state = PlayerState.RUNNING
                self._restart_animation()

    def _animate(self) -> None:
        self.frame_count += 1
        step = _ANIMATION.get(self.state)
        if step is None:
            self.frame_x = 0
            return
        ticks, frames = step
        if self.frame_count % ticks == 0:
            self.frame_x = (self.frame_x + 1) % frames

    def update(self) -> None:
        """Advance the game by one tick."""
        super().update()
        self._update_hitbox()
        self._scroll_tiles()
        self._handle_jump()

        self.velocity_y += self.gravity
        self.pan_cake_y += self.velocity_y

        on_ground = self._collide()
        self._ground_state(on_ground)

        self.layer_offsets = [offset + layer.speed for offset, layer in zip(self.layer_offsets, _LAYERS)]
        self._animate()

    def render(self, surface: pygame.Surface) -> None:
        """Compose the scene in the back buffer and copy it onto ``surface``."""
        back_buffer = self.back_buffer
        if back_buffer is None:
            raise RuntimeError("game is not initialised")
        mem = back_buffer.mem_dc
        mem.fill(WHITE)

        area = rect_make(0, 0, WINSIZE_X, WINSIZE_Y)
        for layer, offset in zip(_LAYERS, self.layer_offsets):
            self.images.find_image(layer.key).loop_render(mem, area, int(offset), 0)

        tile_image = self.images.find_image(_TILE_KEY)
        for tile in self.tiles:
            tile_image.render(mem, tile.left, tile.top)

        sprite = _SPRITES[self.state]
        self.images.frame_render(sprite.key, mem, self.pan_cake_x,
                                 int(self.pan_cake_y) + RUN_HEIGHT - sprite.height, self.frame_x, 0)

        if self.is_debug:
            pygame.draw.rect(mem, DEBUG_COLOR, self.player_hitbox, 2)
            for tile in self.tiles:
                pygame.draw.rect(mem, DEBUG_COLOR, tile, 2)

        back_buffer.render(surface, 0, 0)


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pancake_run", description="Run the pancake runner game.")
    parser.add_argument("--resources", default="Resources", help="directory holding the Images folder")
    args = parser.parse_args(argv)

    os.environ.setdefault("SDL_VIDEO_WINDOW_POS", f"{WINSTART_X},{WINSTART_Y}")
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINSIZE_X, WINSIZE_Y))
        pygame.display.set_caption(WINNAME)
        game = MainGame(resource_dir=args.resources)
        game.init()
        try:
            while game.running:
                for event in [pygame.event.wait(), *pygame.event.get()]:
                    game.handle_event(event)
                if game.needs_redraw and game.running:
                    game.render(screen)
                    pygame.display.flip()
                    game.needs_redraw = False
        finally:
            game.release()
    finally:
        pygame.quit()
    return 0