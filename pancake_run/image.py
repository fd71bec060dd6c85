"""Bitmap images with transparent, framed and tiled rendering."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

import pygame

Color = tuple[int, int, int]
BLACK: Color = (0, 0, 0)


class LoadKind(enum.IntEnum):
    """Where an image's pixels came from."""

    RESOURCE = 0
    FILE = 1
    EMPTY = 2


@dataclass
class ImageInfo:
    """Pixels and frame layout of a loaded image."""

    surface: pygame.Surface
    width: int
    height: int
    load_type: LoadKind = LoadKind.RESOURCE
    res_id: int = 0
    max_frame_x: int = 0
    max_frame_y: int = 0
    current_frame_x: int = 0
    current_frame_y: int = 0
    frame_width: int = 0
    frame_height: int = 0


class ImageLoadError(Exception):
    """An image could not be created or loaded."""


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _loop_spans(length: int, offset: int, size: int):
    """Yield ``(position, source_start, span)`` covering ``length`` with a wrapping source."""
    position = 0
    while position < length:
        start = (position + offset) % size
        span = min(size - start, length - position)
        yield position, start, span
        position += span


class GImage:
    """An image that can be drawn whole, by frame, or tiled across an area."""

    def __init__(self) -> None:
        self.info: ImageInfo | None = None
        self.file_name: str | None = None
        self.is_trans = False
        self.trans_color: Color = BLACK

    def init_empty(self, width: int, height: int) -> None:
        """Create a blank image of the given size."""
        self.release()
        try:
            surface = pygame.Surface((width, height))
        except (pygame.error, ValueError, TypeError) as exc:
            raise ImageLoadError(f"cannot create a {width}x{height} image") from exc
        self.info = ImageInfo(surface, width, height, LoadKind.EMPTY)
        self.file_name = None
        self.is_trans = False
        self.trans_color = BLACK

    def _load_file(self, file_name, width: int, height: int) -> ImageInfo:
        path = os.fspath(file_name)
        try:
            surface = pygame.image.load(path)
            if width > 0 and height > 0 and surface.get_size() != (width, height):
                surface = pygame.transform.scale(surface, (width, height))
        except (pygame.error, OSError, ValueError) as exc:
            raise ImageLoadError(f"cannot load image {path!r}") from exc
        self.file_name = path
        return ImageInfo(surface, surface.get_width(), surface.get_height(), LoadKind.FILE)

    def load(self, file_name, width: int, height: int, is_trans: bool = False,
             trans_color: Color = BLACK) -> None:
        """Load a bitmap file, stretched to ``width`` by ``height``."""
        self.release()
        self.info = self._load_file(file_name, width, height)
        self.is_trans = is_trans
        self.trans_color = tuple(trans_color)

    def load_frames(self, file_name, width: int, height: int, max_frame_x: int, max_frame_y: int,
                    is_trans: bool = False, trans_color: Color = BLACK) -> None:
        """Load a sprite sheet split into ``max_frame_x`` by ``max_frame_y`` frames."""
        if max_frame_x < 1 or max_frame_y < 1:
            raise ValueError(f"frame counts must be positive, got {max_frame_x}x{max_frame_y}")
        self.release()
        info = self._load_file(file_name, width, height)
        info.current_frame_x = 0
        info.current_frame_y = 0
        info.max_frame_x = max_frame_x - 1
        info.max_frame_y = max_frame_y - 1
        info.frame_width = info.width // max_frame_x
        info.frame_height = info.height // max_frame_y
        self.info = info
        self.is_trans = is_trans
        self.trans_color = tuple(trans_color)

    def set_trans_color(self, is_trans: bool, trans_color: Color) -> None:
        """Choose whether ``trans_color`` pixels are skipped when drawing."""
        self.is_trans = is_trans
        self.trans_color = tuple(trans_color)

    def release(self) -> None:
        """Drop the pixels and reset the transparency settings."""
        if self.info is not None:
            self.info = None
            self.file_name = None
            self.is_trans = False
            self.trans_color = BLACK

    def _require_info(self) -> ImageInfo:
        if self.info is None:
            raise RuntimeError("image is not loaded")
        return self.info

    def render(self, surface: pygame.Surface, dest_x: int = 0, dest_y: int = 0, sour_x: int = 0,
               sour_y: int = 0, sour_width: int | None = None, sour_height: int | None = None) -> None:
        """Copy a region of the image (all of it by default) onto ``surface``."""
        info = self._require_info()
        width = info.width if sour_width is None else sour_width
        height = info.height if sour_height is None else sour_height
        if width <= 0 or height <= 0:
            return
        source = info.surface
        source.set_colorkey(self.trans_color if self.is_trans else None)
        surface.blit(source, (dest_x, dest_y), pygame.Rect(sour_x, sour_y, width, height))

    def frame_render(self, surface: pygame.Surface, dest_x: int, dest_y: int,
                     current_frame_x: int, current_frame_y: int) -> None:
        """Draw one frame of the sprite sheet and remember it as current."""
        info = self._require_info()
        info.current_frame_x = current_frame_x
        info.current_frame_y = current_frame_y
        self.render(
            surface,
            dest_x,
            dest_y,
            info.frame_width * current_frame_x,
            info.frame_height * current_frame_y,
            info.frame_width,
            info.frame_height,
        )

    def loop_render(self, surface: pygame.Surface, draw_area, offset_x: int, offset_y: int) -> None:
        """Tile the image over ``draw_area``, scrolled by the given offsets."""
        info = self._require_info()
        if offset_x < 0:
            offset_x = info.width + _trunc_mod(offset_x, info.width)
        if offset_y < 0:
            offset_y = info.height + _trunc_mod(offset_y, info.height)

        area_w = draw_area.right - draw_area.left
        area_h = draw_area.bottom - draw_area.top
        for y, sour_y, sour_height in _loop_spans(area_h, offset_y, info.height):
            for x, sour_x, sour_width in _loop_spans(area_w, offset_x, info.width):
                self.render(surface, draw_area.left + x, draw_area.top + y,
                            sour_x, sour_y, sour_width, sour_height)

    @property
    def mem_dc(self) -> pygame.Surface:
        """The surface that holds the image's pixels."""
        return self._require_info().surface

    @property
    def max_frame_x(self) -> int:
        """Index of the last frame along the x axis."""
        return self._require_info().max_frame_x