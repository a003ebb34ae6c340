import random
import sys
import time

from rich.console import Console

from log import log, set_log_fn
from config import FRAME_SLEEP, QUIT_KEY
from renderer import FrameRenderer
from terminal import TerminalError, TerminalSurface, InputMode, QuitWatcher

# Logs go to stderr so they never mix with the frames on stdout
console = Console(stderr=True)

def restore_terminal(surface, input_mode):
    """
    Undo every setup step, attempting each one even when an earlier one fails.
    Returns the failures in order.
    """
    errors = []
    for step in (surface.leave_alt_screen, surface.reset_color, surface.show_cursor,
                 input_mode.restore):
        try:
            step()
        except TerminalError as e:
            errors.append(e)
    return errors

def run(surface, input_mode, watcher, rng=random, sleep=time.sleep):
    """
    Set up the terminal, animate until the watcher reports the quit key,
    then restore the terminal. Returns the number of frames drawn.
    """
    try:
        input_mode.enable()
        cols, rows = surface.size()
        log(f"[dim]Terminal {cols}x{rows}, press {QUIT_KEY!r} to quit.[/]")
        surface.enter()
        renderer = FrameRenderer(surface, cols, rows, rng)
        watcher.start()

        frames = 0
        while not watcher.poll():
            with surface.frame():
                renderer.draw_next_frame()
            frames += 1
            sleep(FRAME_SLEEP)

        if watcher.error is not None:
            raise watcher.error
    except BaseException:
        for e in restore_terminal(surface, input_mode):
            log(f"[yellow]⚠️ Teardown: {e}[/]")
        raise

    errors = restore_terminal(surface, input_mode)
    if errors:
        raise errors[0]
    return frames

def main():
    set_log_fn(console.print)

    surface = TerminalSurface()
    input_mode = InputMode()
    watcher = QuitWatcher()

    try:
        frames = run(surface, input_mode, watcher)
    except KeyboardInterrupt:
        log("[yellow]Interrupted.[/]")
        return 0
    except TerminalError as e:
        log(f"[red]CRITICAL ERROR: {e}[/]")
        return 1

    log(f"[dim]{frames} frames drawn.[/]")
    return 0

if __name__ == "__main__":
    sys.exit(main())
