"""
Player input for terminal snake.

This module contains the key source abstraction, the terminal keyboard
implementation, and the listener thread that feeds keys to the game loop.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, normalize_key
from .listener import InputListener, KeyChannel

__all__ = [
    'Player',
    'KeyboardPlayer',
    'normalize_key',
    'InputListener',
    'KeyChannel',
]
