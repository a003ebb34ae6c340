import random

from config import DROPLET_MIN_LENGTH, DROPLET_MAX_LENGTH, DROPLET_MIN_SPEED, DROPLET_MAX_SPEED


class Droplet:
    """
    Fall state of one column.

    row:     head row, keeps growing past the bottom edge until replaced
    len:     visible trail length, grows by one per row step up to max_len
    max_len: target trail length
    frame:   fractional tick accumulator, 1.0 -> step on next advance
    speed:   rows per tick, (0.0, 1.0]
    """
    __slots__ = ("row", "len", "max_len", "frame", "speed")

    def __init__(self, row, len, max_len, frame, speed):
        self.row = row
        self.len = len
        self.max_len = max_len
        self.frame = frame
        self.speed = speed

    def __repr__(self):
        return (f"Droplet(row={self.row}, len={self.len}, max_len={self.max_len}, "
                f"frame={self.frame:.2f}, speed={self.speed:.2f})")

    def __eq__(self, other):
        if not isinstance(other, Droplet):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self):
        return (self.row, self.len, self.max_len, self.frame, self.speed)

    def advance(self):
        """
        Accumulate one tick of speed.
        Returns True when the head moved down one row, False while resting.
        At most one row per call, whatever the accumulated overshoot.
        """
        self.frame += self.speed
        if self.frame < 1.0:
            return False
        self.frame -= 1.0
        self.row += 1
        self.len = min(self.len + 1, self.max_len)
        return True

    def is_exhausted(self, rows):
        """Head and whole trail are below the last visible row."""
        return self.row >= rows + self.len


def _random_length(rng):
    return rng.randint(DROPLET_MIN_LENGTH, DROPLET_MAX_LENGTH)

def _random_speed(rng):
    return rng.uniform(DROPLET_MIN_SPEED, DROPLET_MAX_SPEED)

def spawn(rows, rng=random):
    """New droplet near the top quarter of the screen, one cell long."""
    top = max(rows // 4, 1)
    return Droplet(
        row=rng.randrange(0, top),
        len=1,
        max_len=_random_length(rng),
        frame=1.0,
        speed=_random_speed(rng),
    )

def initial_spawn(rows, rng=random):
    """Startup droplet anywhere on screen, already at its full length."""
    length = _random_length(rng)
    return Droplet(
        row=rng.randrange(0, max(rows, 1)),
        len=length,
        max_len=length,
        frame=1.0,
        speed=_random_speed(rng),
    )
