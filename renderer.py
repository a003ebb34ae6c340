import random

from config import BASE_COLOR, GLYPH_START, GLYPH_END
from droplet import spawn, initial_spawn


def random_glyph(rng=random):
    """One half-width katakana, picked anew for every painted cell."""
    return chr(rng.randrange(GLYPH_START, GLYPH_END))

def color_gradient(length, distance):
    """
    Linear fade from the head (distance 0, full BASE_COLOR) to the tail
    (distance == length, black).
    """
    scale = (length - distance) / length
    return tuple(int(channel * scale) for channel in BASE_COLOR)

def initial_droplets(cols, rows, rng=random):
    """One full-length droplet per column, scattered over the whole screen."""
    return [initial_spawn(rows, rng) for _ in range(cols)]


class FrameRenderer:
    """
    Owns one Droplet per terminal column and paints only the cells
    that change on each tick.

    surface needs paint(col, row, color, glyph) and erase(col, row).
    """
    def __init__(self, surface, cols, rows, rng=random, droplets=None):
        self.surface = surface
        self.cols = cols
        self.rows = rows
        self.rng = rng
        if droplets is None:
            droplets = initial_droplets(cols, rows, rng)
        if len(droplets) != cols:
            raise ValueError(f"expected {cols} droplets, got {len(droplets)}")
        self.droplets = droplets

    def draw_next_frame(self):
        """Advance every column by one tick and paint the delta."""
        for col in range(self.cols):
            self._draw_column(col)

    def _draw_column(self, col):
        droplet = self.droplets[col]
        if not droplet.advance():
            return

        if droplet.is_exhausted(self.rows):
            # Replacement stays invisible until its own first step
            self.droplets[col] = spawn(self.rows, self.rng)
            return

        # Whole trail is repainted with fresh glyphs: the flicker is the effect
        for distance in range(droplet.len + 1):
            if droplet.row >= distance and droplet.row - distance < self.rows:
                self.surface.paint(
                    col,
                    droplet.row - distance,
                    color_gradient(droplet.len, distance),
                    random_glyph(self.rng),
                )

        if droplet.row > droplet.len - 1:
            self.surface.erase(col, droplet.row - droplet.len)
