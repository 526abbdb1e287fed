"""
Keyboard player - reads key presses from the terminal.
"""

import readchar

from domain.constants import KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_QUIT
from .base import Player


ARROW_KEYS = {
    readchar.key.UP: KEY_UP,
    readchar.key.DOWN: KEY_DOWN,
    readchar.key.LEFT: KEY_LEFT,
    readchar.key.RIGHT: KEY_RIGHT,
}


def normalize_key(raw: str) -> str:
    """Translate readchar key codes into the names used by the game loop."""
    return ARROW_KEYS.get(raw, raw)


class KeyboardPlayer(Player):
    """
    Reads one key at a time from stdin using readchar.

    Ctrl+C arrives as KeyboardInterrupt inside the reading thread, where it
    would only end that thread, so it is reported as the quit key instead.
    """

    def read_key(self) -> str:
        try:
            raw = readchar.readkey()
        except KeyboardInterrupt:
            return KEY_QUIT
        return normalize_key(raw)
