# config.py
import logging
import os
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_TRUTHY = ("1", "true", "yes", "on")


class Config:
    """Process-wide interpreter settings."""

    def __init__(self):
        self.enable_debug_logs = False
        self.log_level = "warning"
        # Set by the CLI; file flags then no longer change settings
        self.locked = False
        self.load_environment()

    def load_environment(self, environ=None):
        environ = os.environ if environ is None else environ
        raw = environ.get("CRIMSON_DEBUG", "")
        if raw.strip().lower() in _TRUTHY:
            self.enable_debug(True)

    def enable_debug(self, enabled=True):
        self.enable_debug_logs = bool(enabled)
        self.log_level = "debug" if enabled else "warning"

    def apply_flags(self, flags):
        """Apply inline file flags; unknown keys are ignored."""
        if self.locked:
            return
        if "debug" in flags:
            self.enable_debug(bool(flags["debug"]))

    def should_log(self, level="debug"):
        return _LEVELS.get(level, logging.DEBUG) >= _LEVELS.get(self.log_level, logging.WARNING)

    @contextmanager
    def scoped(self, flags):
        """Apply file flags until the block exits, then restore the previous settings."""
        saved = (self.enable_debug_logs, self.log_level)
        self.apply_flags(flags)
        configure_logging(self)
        try:
            yield self
        finally:
            self.enable_debug_logs, self.log_level = saved
            configure_logging(self)

    def reset(self):
        self.enable_debug_logs = False
        self.log_level = "warning"
        self.locked = False


config = Config()

_handler = None


def configure_logging(cfg=None):
    """Install (once) a rich handler on the ``crimson`` logger and set its level."""
    global _handler
    cfg = cfg or config
    logger = logging.getLogger("crimson")
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(_handler)
        logger.propagate = False
    logger.setLevel(_LEVELS.get(cfg.log_level, logging.WARNING))
    return logger
