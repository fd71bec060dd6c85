import pygame
import pytest

from pancake_run.image import ImageLoadError
from pancake_run.image_manager import ImageManager

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def _save(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def _save_sheet(path):
    sheet = pygame.Surface((8, 4))
    sheet.fill(RED, pygame.Rect(0, 0, 4, 4))
    sheet.fill(BLUE, pygame.Rect(4, 0, 4, 4))
    pygame.image.save(sheet, str(path))
    return path


def test_add_image_then_find_returns_same_object(tmp_path):
    manager = ImageManager()
    path = _save(tmp_path / "a.bmp", (4, 4), RED)
    image = manager.add_image("a", path, 4, 4)
    assert manager.find_image("a") is image
    assert "a" in manager
    assert len(manager) == 1


def test_add_image_twice_keeps_first(tmp_path):
    manager = ImageManager()
    first = manager.add_image("a", _save(tmp_path / "a.bmp", (4, 4), RED), 4, 4)
    second = manager.add_image("a", _save(tmp_path / "b.bmp", (6, 6), BLUE), 6, 6)
    assert second is first
    assert second.info.width == 4


def test_missing_file_raises_and_is_not_stored(tmp_path):
    manager = ImageManager()
    with pytest.raises(ImageLoadError):
        manager.add_image("gone", tmp_path / "missing.bmp", 4, 4)
    assert manager.find_image("gone") is None


def test_add_frame_image_sets_frame_layout(tmp_path):
    manager = ImageManager()
    image = manager.add_frame_image("sheet", _save_sheet(tmp_path / "s.bmp"), 8, 4, 2, 1)
    assert image.max_frame_x == 1
    assert image.info.frame_width == 4


def test_find_unknown_key_returns_none():
    assert ImageManager().find_image("nothing") is None


def test_delete_all_releases_images(tmp_path):
    manager = ImageManager()
    image = manager.add_image("a", _save(tmp_path / "a.bmp", (4, 4), RED), 4, 4)
    manager.delete_all()
    assert manager.find_image("a") is None
    assert image.info is None
    assert len(manager) == 0


def test_release_empties_manager(tmp_path):
    manager = ImageManager()
    manager.add_image("a", _save(tmp_path / "a.bmp", (4, 4), RED), 4, 4)
    manager.release()
    assert list(manager) == []


def test_frame_render_draws_requested_frame(tmp_path):
    manager = ImageManager()
    manager.add_frame_image("sheet", _save_sheet(tmp_path / "s.bmp"), 8, 4, 2, 1)
    target = pygame.Surface((4, 4))
    target.fill(WHITE)
    manager.frame_render("sheet", target, 0, 0, 1, 0)
    assert target.get_at((0, 0))[:3] == BLUE
    assert target.get_at((3, 3))[:3] == BLUE


def test_frame_render_unknown_key_draws_nothing():
    target = pygame.Surface((4, 4))
    target.fill(WHITE)
    ImageManager().frame_render("missing", target, 0, 0, 0, 0)
    assert target.get_at((1, 1))[:3] == WHITE


def test_loop_render_covers_draw_area(tmp_path):
    manager = ImageManager()
    manager.add_image("tile", _save(tmp_path / "t.bmp", (3, 3), RED), 3, 3)
    target = pygame.Surface((10, 10))
    target.fill(WHITE)
    area = pygame.Rect(1, 1, 7, 5)
    manager.loop_render("tile", target, area, 2, -1)
    inside = {target.get_at((x, y))[:3] for x in range(1, 8) for y in range(1, 6)}
    assert inside == {RED}
    assert target.get_at((0, 0))[:3] == WHITE
    assert target.get_at((8, 6))[:3] == WHITE


def test_loop_render_unknown_key_draws_nothing():
    target = pygame.Surface((4, 4))
    target.fill(WHITE)
    ImageManager().loop_render("missing", target, pygame.Rect(0, 0, 4, 4), 0, 0)
    assert target.get_at((2, 2))[:3] == WHITE