"""Rectangle helpers and simple outline-and-fill drawing primitives."""

from __future__ import annotations

import pygame

PEN_COLOR = (0, 0, 0)
BRUSH_COLOR = (255, 255, 255)


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    half = abs(value) // 2
    return -half if value < 0 else half


def _from_edges(left: int, top: int, right: int, bottom: int) -> pygame.Rect:
    return pygame.Rect(left, top, right - left, bottom - top)


def point_make(x: int, y: int) -> tuple[int, int]:
    """Return the point ``(x, y)``."""
    return int(x), int(y)


def rect_make(x: int, y: int, width: int, height: int) -> pygame.Rect:
    """Return a rectangle whose top-left corner is ``(x, y)``."""
    return pygame.Rect(int(x), int(y), int(width), int(height))


def rect_make_center(x: int, y: int, width: int, height: int) -> pygame.Rect:
    """Return a rectangle centred on ``(x, y)``; odd sizes lose a pixel."""
    x, y, half_w, half_h = int(x), int(y), _half(int(width)), _half(int(height))
    return _from_edges(x - half_w, y - half_h, x + half_w, y + half_h)


def intersect_rect(a: pygame.Rect, b: pygame.Rect) -> pygame.Rect | None:
    """Return the overlap of two rectangles, or None when it is empty."""
    if a.right <= a.left or a.bottom <= a.top:
        return None
    if b.right <= b.left or b.bottom <= b.top:
        return None
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    right = min(a.right, b.right)
    bottom = min(a.bottom, b.bottom)
    if left >= right or top >= bottom:
        return None
    return _from_edges(left, top, right, bottom)


def draw_line(surface: pygame.Surface, start_x: int, start_y: int, end_x: int, end_y: int) -> None:
    """Draw a one-pixel line with the default pen."""
    pygame.draw.line(surface, PEN_COLOR, (start_x, start_y), (end_x, end_y))


def draw_rect(surface: pygame.Surface, rect: pygame.Rect) -> None:
    """Fill ``rect`` with the default brush and outline it with the default pen."""
    area = pygame.Rect(rect).normalize() or pygame.Rect(rect)
    area = pygame.Rect(rect)
    area.normalize()
    pygame.draw.rect(surface, BRUSH_COLOR, area)
    pygame.draw.rect(surface, PEN_COLOR, area, 1)


def rectangle_make(surface: pygame.Surface, x: int, y: int, width: int, height: int) -> None:
    """Draw a filled, outlined rectangle with its top-left corner at ``(x, y)``."""
    draw_rect(surface, rect_make(x, y, width, height))


def _draw_ellipse(surface: pygame.Surface, area: pygame.Rect) -> None:
    area.normalize()
    if area.width <= 0 or area.height <= 0:
        return
    pygame.draw.ellipse(surface, BRUSH_COLOR, area)
    pygame.draw.ellipse(surface, PEN_COLOR, area, 1)


def ellipse_make(surface: pygame.Surface, x: int, y: int, width: int, height: int) -> None:
    """Draw an ellipse inside the box whose top-left corner is ``(x, y)``."""
    _draw_ellipse(surface, rect_make(x, y, width, height))


def ellipse_make_center(surface: pygame.Surface, x: int, y: int, width: int, height: int) -> None:
    """Draw an ellipse around ``(x, y)``; the top edge is offset by half the width."""
    half_w, half_h = _half(int(width)), _half(int(height))
    _draw_ellipse(surface, _from_edges(x - half_w, y - half_w, x + half_w, y + half_h))