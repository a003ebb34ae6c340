"""
Shared fakes for the rain tests.
"""

import io
import random

import pytest
from rich.console import Console


class RecordingSurface:
    """Terminal stand-in that remembers every paint/erase in order."""

    def __init__(self, cols=1, rows=5):
        self.cols = cols
        self.rows = rows
        self.ops = []

    def size(self):
        return self.cols, self.rows

    def paint(self, col, row, color, glyph):
        self.ops.append(("paint", col, row, color, glyph))

    def erase(self, col, row):
        self.ops.append(("erase", col, row))

    def take(self):
        ops, self.ops = self.ops, []
        return ops


class LowestRng:
    """Always answers with the lower bound of the requested range."""

    def randrange(self, start, stop=None):
        if stop is None:
            return 0
        return start

    def randint(self, a, b):
        return a

    def uniform(self, a, b):
        return a


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def string_console():
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="truecolor",
        width=10,
        height=5,
        highlight=False,
    )
