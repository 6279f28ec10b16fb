"""
Game constants for gridsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit step per direction; y grows upwards
DIRECTION_DELTAS = {
    UP:    (0, 1),
    DOWN:  (0, -1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Level text characters
EMPTY_CHAR = " "
WALL_CHAR = "w"

# Level text separators
COORD_SEPARATOR = ","
SNAKE_SEPARATOR = ";"
