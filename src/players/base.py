"""
Base key source interface for the game engine.
"""


class Player:
    """
    Base class/interface for player input.

    A player supplies raw key presses; the input listener forwards them to
    the game loop.
    """

    def read_key(self) -> str:
        """
        Block until the next key press and return it.

        Returns:
            One of "up", "down", "left", "right" for arrow keys, otherwise the
            typed character. An empty string means the input is exhausted.

        Raises:
            UnicodeDecodeError, ValueError: the key could not be decoded.
        """
        raise NotImplementedError
