import os
import random

import pytest
from mini_arcade_core.backend.keys import Key

from solo_bounce.entities import Court, Paddle


class FakeSurface:
    """Surface that records what the engine asked it to do."""

    def __init__(self, rect=(3, 76, 20, 3)):
        self.rect = rect
        self.cells = {}
        self.calls = []
        self.lives = []
        self.times = []
        self.court = None
        self.flushes = 0

    def draw_char(self, row, col, symbol):
        self.calls.append(("draw", row, col, symbol))
        self.cells[(row, col)] = symbol

    def erase_cell(self, row, col):
        self.calls.append(("erase", row, col))
        self.cells.pop((row, col), None)

    def playable_rect(self):
        return self.rect

    def draw_court(self, court):
        self.court = court

    def report_lives(self, lives):
        self.lives.append(lives)

    def report_elapsed_time(self, minutes, seconds):
        self.times.append((minutes, seconds))

    def flush(self):
        self.flushes += 1


@pytest.fixture()
def court():
    # an 80x24 terminal with the default border
    return Court(top=3, right=76, bottom=20, left=3)


@pytest.fixture()
def paddle(court):
    # rows 10..14 on column 76
    return Paddle.create(court)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def surface():
    return FakeSurface()


BYTE_KEYS = {b"k": Key.UP, b"m": Key.DOWN, b"Q": Key.ESCAPE}


class PipeKeyboard:
    """Keyboard fed through an OS pipe so the loop can watch a real fd."""

    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        os.set_blocking(self.read_fd, False)

    def press(self, data: bytes):
        os.write(self.write_fd, data)

    def fileno(self):
        return self.read_fd

    def read_keys(self):
        try:
            data = os.read(self.read_fd, 64)
        except BlockingIOError:
            return []
        return [BYTE_KEYS[bytes([b])] for b in data if bytes([b]) in BYTE_KEYS]

    def close(self):
        os.close(self.read_fd)
        os.close(self.write_fd)


class ScriptedScene:
    """Scene that records events and finishes after a set count."""

    def __init__(self, stop_after_ticks=None, stop_after_keys=None):
        self.events = []
        self.stop_after_ticks = stop_after_ticks
        self.stop_after_keys = stop_after_keys

    @property
    def ticks(self):
        return self.events.count("tick")

    @property
    def keys(self):
        return [event for event in self.events if event != "tick"]

    @property
    def finished(self):
        if self.stop_after_ticks is not None and self.ticks >= self.stop_after_ticks:
            return True
        if self.stop_after_keys is not None and len(self.keys) >= self.stop_after_keys:
            return True
        return False

    def tick(self):
        self.events.append("tick")

    def handle_key(self, key):
        self.events.append(key)


@pytest.fixture()
def keyboard():
    keyboard = PipeKeyboard()
    yield keyboard
    keyboard.close()


@pytest.fixture()
def scripted_scene():
    return ScriptedScene
