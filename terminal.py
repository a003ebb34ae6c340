import os
import sys
import termios
import threading
import tty
from contextlib import contextmanager

from rich.color import Color
from rich.console import Console
from rich.control import Control
from rich.style import Style

from config import QUIT_KEY, BACKGROUND_COLOR

RESET = "\033[0m"


class TerminalError(Exception):
    """Any failed terminal operation. Always fatal for the animation."""


@contextmanager
def _terminal_io(action):
    try:
        yield
    except (OSError, termios.error) as e:
        raise TerminalError(f"{action} failed: {e}") from e


class TerminalSurface:
    """
    Cell-level drawing on top of a rich Console, over a black background.
    Coordinates are 0-based (column, row).
    """
    BACKGROUND = Color.from_rgb(*BACKGROUND_COLOR)
    ERASE_STYLE = Style(color="default", bgcolor=BACKGROUND)

    def __init__(self, console=None):
        self.console = console or Console(highlight=False)

    def size(self):
        with _terminal_io("terminal size query"):
            width, height = self.console.size
        return width, height

    def enter(self):
        """Alternate screen, hidden cursor, every cell blanked on black."""
        with _terminal_io("entering alternate screen"):
            width, height = self.console.size
            with self.console:
                self.console.set_alt_screen(True)
                self.console.show_cursor(False)
                self.console.clear()
                for row in range(height):
                    self.console.control(Control.move_to(0, row))
                    self.console.out(" " * width, style=self.ERASE_STYLE, end="")
                self.console.control(Control.home())

    def leave_alt_screen(self):
        with _terminal_io("leaving alternate screen"):
            self.console.set_alt_screen(False)

    def reset_color(self):
        if not self.console.is_terminal:
            return
        with _terminal_io("resetting color"):
            self.console.file.write(RESET)
            self.console.file.flush()

    def show_cursor(self):
        with _terminal_io("showing cursor"):
            self.console.show_cursor(True)

    @contextmanager
    def frame(self):
        """Buffer every write of one frame and flush it in a single burst."""
        with _terminal_io("frame write"):
            with self.console:
                yield

    def paint(self, col, row, color, glyph):
        style = Style(color=Color.from_rgb(*color), bgcolor=self.BACKGROUND)
        with _terminal_io("styled write"):
            self.console.control(Control.move_to(col, row))
            self.console.out(glyph, style=style, end="")

    def erase(self, col, row):
        with _terminal_io("erase"):
            self.console.control(Control.move_to(col, row))
            self.console.out(" ", style=self.ERASE_STYLE, end="")


class InputMode:
    """
    Switches stdin to cbreak mode (no echo, no line buffering) and back.
    Does nothing when the stream is not a TTY.
    """
    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = None
        self.old_settings = None

    def enable(self):
        if not self.stream.isatty():
            return False
        self.fd = self.stream.fileno()
        with _terminal_io("reading terminal attributes"):
            self.old_settings = termios.tcgetattr(self.fd)
        with _terminal_io("enabling cbreak mode"):
            tty.setcbreak(self.fd)
        return True

    def restore(self):
        if self.old_settings is None:
            return
        with _terminal_io("restoring terminal attributes"):
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        self.old_settings = None
        # Drop keys typed during the animation so they don't reach the shell
        try:
            termios.tcflush(self.fd, termios.TCIFLUSH)
        except termios.error:
            pass


class QuitWatcher:
    """
    Background thread blocking on single byte reads from a file descriptor.
    Sets stop_event once the quit key arrives; every other key is ignored.
    Reads go straight to the fd so no buffered stream lock is held while blocked;
    the read is never cancelled, the daemon thread dies with the process.
    """
    def __init__(self, fd=None, quit_key=QUIT_KEY, stop_event=None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.quit_key = quit_key.encode()
        self.stop_event = stop_event or threading.Event()
        self.error = None
        self._thread = None

    def start(self):
        self._thread = threading.Thread(target=self._watch, name="quit-watcher", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)

    def poll(self):
        return self.stop_event.is_set()

    def _watch(self):
        while not self.stop_event.is_set():
            try:
                key = os.read(self.fd, 1)
            except OSError as e:
                # Hand the failure to the render loop instead of dying silently
                self.error = TerminalError(f"key read failed: {e}")
                self.error.__cause__ = e
                self.stop_event.set()
                return
            if not key:
                return  # EOF: no more keys will ever come
            if key == self.quit_key:
                self.stop_event.set()
