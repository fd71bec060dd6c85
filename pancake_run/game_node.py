"""Base game object: window constants, back buffer and event handling."""

from __future__ import annotations

import time

import pygame

from pancake_run.image import GImage
from pancake_run.keys import KeyManager
from pancake_run.rng import RandomFunction

WINNAME = "Pancake Run"
WINSTART_X = 100
WINSTART_Y = 1
WINSIZE_X = 1067
WINSIZE_Y = 600

TIMER_EVENT = pygame.USEREVENT + 1
TIMER_INTERVAL_MS = 10

_TEXT_COLOR = (0, 0, 0)
_FONT_SIZE = 20


class GameNode:
    """Owns the back buffer and turns window events into update calls."""

    def __init__(self, keys: KeyManager | None = None, rng: RandomFunction | None = None) -> None:
        self.keys = keys if keys is not None else KeyManager()
        self.rng = rng if rng is not None else RandomFunction()
        self._back_buffer: GImage | None = None
        self._font: pygame.font.Font | None = None
        self._started = time.monotonic()
        self.mouse: tuple[int, int] = (0, 0)
        self.running = True
        self.needs_redraw = False

    def init(self) -> None:
        """Start the frame timer, reset key state and create the back buffer."""
        if pygame.display.get_init():
            pygame.time.set_timer(TIMER_EVENT, TIMER_INTERVAL_MS)
        self.keys.reset()
        back_buffer = GImage()
        back_buffer.init_empty(WINSIZE_X, WINSIZE_Y)
        self._back_buffer = back_buffer
        self.running = True

    def release(self) -> None:
        """Stop the frame timer and drop the back buffer."""
        if pygame.display.get_init():
            pygame.time.set_timer(TIMER_EVENT, 0)
        self.keys.reset()
        if self._back_buffer is not None:
            self._back_buffer.release()
            self._back_buffer = None

    def update(self) -> None:
        """Advance one tick and ask for the window to be redrawn."""
        self.needs_redraw = True

    def render(self, surface: pygame.Surface) -> None:
        """Draw the number of seconds since the node was created."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        seconds = int(time.monotonic() - self._started)
        text = self._font.render(str(seconds), True, _TEXT_COLOR)
        surface.blit(text, (10, 10))

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == TIMER_EVENT:
            self.update()
        elif event.type == pygame.MOUSEMOTION:
            self.mouse = tuple(event.pos)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
        elif event.type == pygame.QUIT:
            self.running = False

    @property
    def back_buffer(self) -> GImage | None:
        """The off-screen image drawn into before presenting."""
        return self._back_buffer