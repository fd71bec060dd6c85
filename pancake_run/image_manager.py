"""A keyed collection of loaded images."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

from pancake_run.image import BLACK, Color, GImage


class ImageManager:
    """Loads images once and hands them out by name."""

    def __init__(self) -> None:
        self._images: dict[str, GImage] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._images

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[str]:
        return iter(self._images)

    def add_image(self, key: str, file_name, width: int, height: int,
                  is_trans: bool = False, trans_color: Color = BLACK) -> GImage:
        """Load an image under ``key``, or return the one already stored there.

        Raises ImageLoadError when the file cannot be loaded; nothing is stored then.
        """
        image = self.find_image(key)
        if image is not None:
            return image
        image = GImage()
        image.load(file_name, width, height, is_trans, trans_color)
        self._images[key] = image
        return image

    def add_frame_image(self, key: str, file_name, width: int, height: int,
                        max_frame_x: int, max_frame_y: int,
                        is_trans: bool = False, trans_color: Color = BLACK) -> GImage:
        """Load a sprite sheet under ``key``, or return the one already stored there."""
        image = self.find_image(key)
        if image is not None:
            return image
        image = GImage()
        image.load_frames(file_name, width, height, max_frame_x, max_frame_y, is_trans, trans_color)
        self._images[key] = image
        return image

    def find_image(self, key: str) -> GImage | None:
        """Return the image stored under ``key``, or None."""
        return self._images.get(key)

    def delete_all(self) -> None:
        """Release and forget every stored image."""
        for image in self._images.values():
            image.release()
        self._images.clear()

    def release(self) -> None:
        """Release every stored image."""
        self.delete_all()

    def frame_render(self, key: str, surface: pygame.Surface, dest_x: int, dest_y: int,
                     current_frame_x: int, current_frame_y: int) -> None:
        """Draw one frame of the image under ``key``; unknown keys draw nothing."""
        image = self.find_image(key)
        if image is not None:
            image.frame_render(surface, dest_x, dest_y, current_frame_x, current_frame_y)

    def loop_render(self, key: str, surface: pygame.Surface, draw_area,
                    offset_x: int, offset_y: int) -> None:
        """Tile the image under ``key`` over ``draw_area``; unknown keys draw nothing."""
        image = self.find_image(key)
        if image is not None:
            image.loop_render(surface, draw_area, offset_x, offset_y)