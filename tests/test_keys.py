import pytest

from pancake_run.keys import KeyManager

SPACE = 32
SHIFT = 16


class FakeKeyboard:
    def __init__(self):
        self.held = set()
        self.toggled = set()

    def pressed(self, key):
        return key in self.held

    def is_toggled(self, key):
        return key in self.toggled


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def manager(keyboard):
    return KeyManager(keyboard.pressed, keyboard.is_toggled)


def test_once_key_down_fires_once_per_press(keyboard, manager):
    assert manager.is_once_key_down(SPACE) is False
    keyboard.held.add(SPACE)
    assert manager.is_once_key_down(SPACE) is True
    assert manager.is_once_key_down(SPACE) is False
    keyboard.held.clear()
    assert manager.is_once_key_down(SPACE) is False
    keyboard.held.add(SPACE)
    assert manager.is_once_key_down(SPACE) is True


def test_once_key_up_fires_after_release(keyboard, manager):
    assert manager.is_once_key_up(SPACE) is False
    keyboard.held.add(SPACE)
    assert manager.is_once_key_up(SPACE) is False
    keyboard.held.clear()
    assert manager.is_once_key_up(SPACE) is True
    assert manager.is_once_key_up(SPACE) is False


def test_keys_are_tracked_independently(keyboard, manager):
    keyboard.held.add(SPACE)
    assert manager.is_once_key_down(SPACE) is True
    keyboard.held.add(SHIFT)
    assert manager.is_once_key_down(SHIFT) is True
    assert manager.is_once_key_down(SPACE) is False


def test_reset_forgets_held_keys(keyboard, manager):
    keyboard.held.add(SPACE)
    assert manager.is_once_key_down(SPACE) is True
    manager.reset()
    assert manager.is_once_key_down(SPACE) is True


def test_stay_key_down_follows_state(keyboard, manager):
    assert manager.is_stay_key_down(SHIFT) is False
    keyboard.held.add(SHIFT)
    assert manager.is_stay_key_down(SHIFT) is True
    assert manager.is_stay_key_down(SHIFT) is True


def test_toggle_key_follows_toggle_state(keyboard, manager):
    assert manager.is_toggle_key(SPACE) is False
    keyboard.toggled.add(SPACE)
    assert manager.is_toggle_key(SPACE) is True