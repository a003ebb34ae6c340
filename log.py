import sys

def _default_log_fn(data, **kwargs):
    """Default sink: drop everything."""
    pass

# Module attribute so every importer shares the same sink
_module = sys.modules[__name__]

_module._log_fn = _default_log_fn

def log(data, **kwargs):
    """
    Send a message to the current sink.

    Supports:
    - log("message")
    - log("[bold red]message[/]")  # rich markup, when the sink is console.print
    """
    _module._log_fn(data, **kwargs)

def set_log_fn(fn):
    """
    Install the output function, e.g. console.print or print.
    """
    if not callable(fn):
        raise TypeError("log function must be callable")

    _module._log_fn = fn

def reset_log_fn():
    _module._log_fn = _default_log_fn
