"""
Game constants for terminal snake.
"""

# Grid geometry. Every coordinate is a multiple of UNIT inside [-BOUND, BOUND).
UNIT = 5.0
RANGE = 20
BOUND = UNIT * RANGE

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
STOPPED = "STOPPED"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Keys as delivered by the input listener
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_QUIT = "q"

KEY_TO_DIRECTION = {
    KEY_UP: UP,
    KEY_DOWN: DOWN,
    KEY_LEFT: LEFT,
    KEY_RIGHT: RIGHT,
}

# Game settings
POINTS_PER_FOOD = 10
TICK_INTERVAL_MS = 100
INITIAL_LENGTH = 5
MAX_PLACEMENT_ATTEMPTS = 1000
