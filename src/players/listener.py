"""
Input listener - forwards key presses from a player to the game loop.

The listener owns the only blocking read in the program. It runs on its own
daemon thread and talks to the game loop through a KeyChannel, a FIFO queue
that the game loop polls without blocking.
"""

import logging
import queue
import threading
from typing import Optional

from domain.constants import KEY_QUIT
from .base import Player


logger = logging.getLogger(__name__)


class KeyChannel:
    """
    Unbounded single-producer/single-consumer channel of key names.

    Closing the channel is how the receiving side signals it is gone:
    send() returns False from then on.
    """

    def __init__(self):
        self._queue: "queue.Queue[str]" = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, key: str) -> bool:
        if self.closed:
            return False
        self._queue.put(key)
        return True

    def try_receive(self) -> Optional[str]:
        """Return the oldest pending key, or None if nothing is waiting."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def pending(self) -> int:
        return self._queue.qsize()

    def close(self):
        self._closed.set()


class InputListener(threading.Thread):
    """
    Reads keys from a player and sends them on a channel until the quit key
    has been sent or the channel is closed.
    """

    def __init__(self, player: Player, channel: KeyChannel):
        super().__init__(name="input-listener", daemon=True)
        self.player = player
        self.channel = channel

    def run(self):
        logger.debug("Input listener started")
        while True:
            try:
                key = self.player.read_key()
            except (UnicodeDecodeError, ValueError) as e:
                logger.debug(f"Dropping undecodable key event: {e}")
                continue

            if key == "":
                logger.warning("Input exhausted, listener stopping")
                return
            if not self.channel.send(key):
                logger.debug("Channel closed, listener stopping")
                return
            if key == KEY_QUIT:
                logger.debug("Quit key forwarded, listener stopping")
                return
