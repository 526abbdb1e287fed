"""
Terminal Renderer for Snake Game Frames

This service draws one frame of the game into the terminal using rich:
1. The play field (70% of the width), a canvas spanning [-BOUND, BOUND]
   on both axes with the snake and the food drawn as UNIT-sized squares
2. The help panel (30% of the width) with the controls and the score

The renderer only ever sees GameState snapshots and never touches the
snake or the food directly.
"""

import math
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from domain.constants import BOUND, UNIT, RANGE
from domain.game_state import GameState

CELL_CHAR = "█"
EMPTY_CHAR = " "

HELP_LINES = [
    "",
    "Welcome to the game",
    "This is how to play the game",
    "",
    "Move up: up",
    "Move down: down",
    "Move left: left",
    "Move right: right",
    "",
    "Quit the game: q",
    "",
]


class ColorScheme:
    """Styles for the frame"""

    SNAKE = "red"
    FOOD = "green"
    FIELD_BORDER = "white"
    HELP_BORDER = "white"


def cell_span(start: float, size: int) -> Tuple[int, int]:
    """
    Map the interval [start, start + UNIT) of board coordinates measured from
    the canvas edge onto character cells of a canvas `size` characters long.

    Returns:
        (first, last) character index, both inclusive and clamped to the canvas.
    """
    span = 2 * BOUND
    first = int(math.floor(start * size / span))
    last = int(math.ceil((start + UNIT) * size / span)) - 1
    last = max(first, last)
    return max(0, min(first, size - 1)), max(0, min(last, size - 1))


class BoardCanvas:
    """
    Rich renderable drawing the board scaled to whatever space it is given.
    """

    def __init__(self, state: GameState):
        self.state = state

    def paint(self, width: int, height: int) -> List[List[Optional[str]]]:
        """Return a height x width grid of styles (None = empty), top row first."""
        grid: List[List[Optional[str]]] = [[None] * width for _ in range(height)]

        def fill(point, style):
            x, y = point
            first_col, last_col = cell_span(x + BOUND, width)
            # Rows grow downwards, so measure from the top edge.
            first_row, last_row = cell_span(BOUND - y - UNIT, height)
            for row in range(first_row, last_row + 1):
                for col in range(first_col, last_col + 1):
                    grid[row][col] = style

        for segment in self.state.segments:
            fill(segment, ColorScheme.SNAKE)
        fill(self.state.food, ColorScheme.FOOD)
        return grid

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        height = options.height or 2 * RANGE
        grid = self.paint(width, height)

        lines = []
        for row in grid:
            line = Text(no_wrap=True, overflow="crop")
            run_style = row[0]
            run_length = 0
            for style in row:
                if style == run_style:
                    run_length += 1
                    continue
                self._append_run(line, run_style, run_length)
                run_style, run_length = style, 1
            self._append_run(line, run_style, run_length)
            lines.append(line)

        yield Text("\n").join(lines)

    @staticmethod
    def _append_run(line: Text, style: Optional[str], length: int):
        if length == 0:
            return
        if style is None:
            line.append(EMPTY_CHAR * length)
        else:
            line.append(CELL_CHAR * length, style=style)


class Renderer:
    """
    Draws GameState snapshots into the terminal.

    Use as a context manager: entering starts a rich Live display on the
    alternate screen, leaving stops it.
    """

    def __init__(self, console: Optional[Console] = None, screen: bool = True):
        self.console = console or Console()
        self.live = Live(
            console=self.console,
            screen=screen,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )

    def __enter__(self):
        self.live.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.live.stop()

    def render_frame(self, state: GameState) -> Layout:
        """Build the full frame for a snapshot"""
        layout = Layout(name="root")
        layout.split_row(
            Layout(name="field", ratio=7),
            Layout(name="help", ratio=3),
        )
        layout["field"].update(self._draw_game_canvas(state))
        layout["help"].update(self._draw_help_panel(state))
        return layout

    def draw(self, state: GameState):
        self.live.update(self.render_frame(state), refresh=True)

    def _draw_game_canvas(self, state: GameState) -> Panel:
        return Panel(
            BoardCanvas(state),
            box=box.DOUBLE,
            border_style=ColorScheme.FIELD_BORDER,
            padding=0,
        )

    def _draw_help_panel(self, state: GameState) -> Panel:
        text = Text("\n".join(HELP_LINES + [f"Score: {state.score}"]))
        return Panel(
            text,
            title="How to play",
            title_align="left",
            border_style=ColorScheme.HELP_BORDER,
        )
