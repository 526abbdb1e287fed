#!/usr/bin/env python3
"""
Terminal snake game loop.

Usage:
    python snake_game.py
    python snake_game.py --tick-ms 150 --seed 7 --log-file snake.log
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv
from rich.console import Console

from config import ConfigError, GameConfig, configure_logging
from domain.constants import KEY_QUIT, KEY_TO_DIRECTION
from domain.food import BoardFullError, Food
from domain.game_state import GameState
from domain.snake import CollisionError, Snake
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from players.listener import InputListener, KeyChannel
from services.renderer import Renderer
from services.terminal import TerminalSession

logger = logging.getLogger(__name__)

# Loop states
RUNNING = "RUNNING"
DONE = "DONE"


class SnakeGame:
    """
    Manages:
      - The snake and the food (owned by the game loop thread only)
      - Tick cadence
      - Applying at most one queued key per tick
      - Handing snapshots to the renderer
    """

    def __init__(
        self,
        renderer,
        terminal,
        channel: KeyChannel,
        snake: Optional[Snake] = None,
        food: Optional[Food] = None,
        rng: Optional[random.Random] = None,
        tick_seconds: float = 0.1,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.renderer = renderer
        self.terminal = terminal
        self.channel = channel
        self.snake = snake if snake is not None else Snake()
        self.food = food if food is not None else Food.spawn(self.snake, rng)
        self.tick_seconds = tick_seconds
        self.sleep = sleep
        self.status = RUNNING
        self.ticks = 0

    def get_current_state(self) -> GameState:
        """Return a snapshot of the current board as a GameState."""
        return self.snake.snapshot(self.food)

    def advance(self):
        """Move the snake one step, freezing it if the move ends the game."""
        try:
            self.snake.update(self.food)
        except CollisionError:
            self.snake.stop()
            logger.info(f"Game over: collision at tick {self.ticks}, final score {self.snake.score}")
            self.log_final_board()
        except BoardFullError as e:
            self.snake.stop()
            logger.info(f"Game over: {e}, final score {self.snake.score}")
            self.log_final_board()

    def log_final_board(self):
        logger.debug(f"Final board:\n{self.get_current_state().print_board()}")

    def handle_event(self) -> str:
        """
        Apply at most one pending key.

        Returns:
            DONE if the quit key was read, RUNNING otherwise.
        """
        key = self.channel.try_receive()
        if key is None:
            return RUNNING

        if key == KEY_QUIT:
            self.terminal.clear()
            logger.info(
                f"Quit after {self.ticks} ticks with score {self.snake.score}, "
                f"{self.channel.pending()} keys unread"
            )
            return DONE

        direction = KEY_TO_DIRECTION.get(key)
        if direction is not None and self.snake.turn(direction):
            logger.debug(f"Heading changed to {direction}")
        return RUNNING

    def run_tick(self) -> str:
        """
        Execute one tick:
          1) Advance the snake
          2) Sleep for the tick interval
          3) Render the snapshot
          4) Apply one pending key
        """
        self.advance()
        self.sleep(self.tick_seconds)
        self.renderer.draw(self.get_current_state())
        self.status = self.handle_event()
        self.ticks += 1
        return self.status

    def run(self):
        logger.info(f"Game started, food at {self.food.position.as_tuple()}")
        while self.run_tick() != DONE:
            pass


def run_game(config: GameConfig, player: Optional[Player] = None, console: Optional[Console] = None):
    """
    Run one session: take over the terminal, start the input listener and
    play until the quit key arrives.

    Raises:
        OSError: a terminal operation failed.
    """
    console = console or Console()
    rng = random.Random(config.seed) if config.seed is not None else None
    channel = KeyChannel()
    listener = InputListener(player or KeyboardPlayer(), channel)

    with TerminalSession(console) as terminal, Renderer(console) as renderer:
        listener.start()
        game = SnakeGame(
            renderer=renderer,
            terminal=terminal,
            channel=channel,
            rng=rng,
            tick_seconds=config.tick_seconds,
        )
        try:
            game.run()
        finally:
            channel.close()


def main(argv=None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Play snake in the terminal.")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 100)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (default: SNAKE_SEED or random)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (default: SNAKE_LOG_FILE or no logs)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    try:
        config = GameConfig.from_env().override(
            tick_ms=args.tick_ms,
            seed=args.seed,
            log_file=args.log_file,
            log_level=args.log_level,
        )
    except ConfigError as e:
        parser.error(str(e))

    configure_logging(config)

    try:
        run_game(config)
    except OSError:
        logger.exception("Terminal failure, ending session")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
