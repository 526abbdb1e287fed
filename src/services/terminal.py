"""
Terminal session handling.

Switches stdin to cbreak mode (keys arrive one at a time, unechoed) and hides
the cursor for the length of a game session, restoring both on every exit
path.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from rich.console import Console

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - Windows has no termios
    termios = None
    tty = None

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Context manager owning the terminal's input mode for one session.

    Raises:
        OSError: the terminal mode could not be changed or restored.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console()
        self.stdin = stdin or sys.stdin
        self.fd: Optional[int] = None
        self.saved_attrs = None

    def _is_tty(self) -> bool:
        return os.name != "nt" and termios is not None and self.stdin.isatty()

    def __enter__(self):
        if self._is_tty():
            self.fd = self.stdin.fileno()
            try:
                self.saved_attrs = termios.tcgetattr(self.fd)
                tty.setcbreak(self.fd)
            except termios.error as e:
                raise OSError(f"Could not switch terminal to cbreak mode: {e}") from e
            logger.debug("Terminal switched to cbreak mode")
        else:
            logger.info("stdin is not a terminal, leaving input mode untouched")

        self.console.show_cursor(False)
        self.clear()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.console.show_cursor(True)
        if self.saved_attrs is not None:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.saved_attrs)
            except termios.error as e:
                raise OSError(f"Could not restore terminal mode: {e}") from e
            finally:
                self.saved_attrs = None
            logger.debug("Terminal mode restored")

    def clear(self):
        self.console.clear()
