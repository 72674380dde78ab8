import random

import pytest


class RecordingCanvas:
    """Stands in for Canvas and records every draw call."""

    def __init__(self, width: int = 64, height: int = 192):
        self._width = width
        self._height = height
        self.calls = []
        self.shown = 0

    def width(self):
        return self._width

    def height(self):
        return self._height

    @staticmethod
    def color(r, g, b):
        return (r, g, b)

    def __getattr__(self, name):
        if not name.startswith(("fill_", "draw_")):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))
        return record

    def show(self):
        self.shown += 1

    def of(self, name):
        return [args for call, args in self.calls if call == name]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def canvas():
    return RecordingCanvas()
