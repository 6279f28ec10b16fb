"""
Level parser: turns level text into a SnakeGame.

Level format (empty lines are skipped anywhere)
-----------------------------------------------
    9,8            <- width,height
    wwwwwwwww      <- exactly `height` grid rows, ' ' empty, 'w' wall;
    w       w         characters past `width` are ignored
    ...
    wwwwwwwww
    4,4            <- food x,y
    2,2;2,1        <- snake: head first, then body from neck to tail

Row 0 of the grid is the first grid line and y grows with the line number,
so a move UP walks towards later lines. Only the empty string counts as a
blank line; a row made of spaces is a valid row of empty cells.
"""

import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from .domain.constants import COORD_SEPARATOR, SNAKE_SEPARATOR
from .domain.grid import Grid
from .domain.primitives import CellField, Position
from .engine import SnakeGame
from .errors import ParseError

logger = logging.getLogger(__name__)


def _content_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, line) for every non-empty line, 1-based."""
    for number, line in enumerate(text.splitlines(), start=1):
        if line == "":
            continue
        yield number, line


def _next_line(lines: Iterator[Tuple[int, str]], what: str, last_line: int) -> Tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise ParseError(f"unexpected end of level, expected {what}", last_line) from None


def _parse_int(raw: str, what: str, line: int) -> int:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(f"{what} must be a non-negative integer, got {raw!r}", line)
    return int(raw)


def _parse_pair(raw: str, what: str, line: int) -> Tuple[int, int]:
    parts = raw.split(COORD_SEPARATOR)
    if len(parts) != 2:
        raise ParseError(f"{what} must look like 'x,y', got {raw.strip()!r}", line)
    return _parse_int(parts[0], what, line), _parse_int(parts[1], what, line)


def _parse_row(line_text: str, width: int, line: int) -> List[CellField]:
    if len(line_text) < width:
        raise ParseError(
            f"grid row has {len(line_text)} characters, expected at least {width}", line
        )

    cells = []
    for char in line_text[:width]:
        try:
            cells.append(CellField.from_char(char))
        except ValueError:
            raise ParseError(f"unexpected char {char!r} in grid row", line) from None
    return cells


def _check_placement(grid: Grid, position: Position, what: str, line: int) -> None:
    if not grid.in_bounds(position):
        raise ParseError(f"{what} {position} is outside the {grid.width}x{grid.height} grid", line)
    if grid.on_walls(position):
        raise ParseError(f"{what} {position} is on a wall", line)


def _check_snake(grid: Grid, snake: List[Position], food: Position, line: int) -> None:
    for index, segment in enumerate(snake):
        _check_placement(grid, segment, "head" if index == 0 else "body segment", line)

    if len(set(snake)) != len(snake):
        raise ParseError("snake segments overlap", line)

    for previous, segment in zip(snake, snake[1:]):
        if not previous.is_adjacent(segment):
            raise ParseError(f"snake is not contiguous between {previous} and {segment}", line)

    if food in snake:
        raise ParseError(f"food {food} is on the snake", line)


def parse_level(text: str) -> Tuple[Grid, Position, List[Position], Position]:
    """
    Parse level text into its parts.

    Returns:
        (grid, head, body, food) with body ordered neck to tail.

    Raises:
        ParseError: On any malformed line, wrong row/column count, invalid
            cell character, or a snake/food placement that breaks the board
            rules (off-grid, on a wall, overlapping, not contiguous).
    """
    lines = _content_lines(text)

    line, raw = _next_line(lines, "'width,height'", 0)
    width, height = _parse_pair(raw, "dimension", line)
    if width == 0 or height == 0:
        raise ParseError(f"dimension must be positive, got {width}x{height}", line)

    rows = []
    for _ in range(height):
        line, raw = _next_line(lines, f"{height} grid rows, found {len(rows)}", line)
        rows.append(_parse_row(raw, width, line))
    grid = Grid(rows)

    line, raw = _next_line(lines, "'food_x,food_y'", line)
    food = Position(*_parse_pair(raw, "food", line))
    _check_placement(grid, food, "food", line)

    line, raw = _next_line(lines, "the snake positions", line)
    snake = [
        Position(*_parse_pair(chunk, "snake position", line))
        for chunk in raw.split(SNAKE_SEPARATOR)
    ]
    _check_snake(grid, snake, food, line)

    extra = next(lines, None)
    if extra is not None:
        raise ParseError(f"unexpected content after the snake: {extra[1]!r}", extra[0])

    return grid, snake[0], snake[1:], food


def parse(
    text: str,
    rng: Optional[random.Random] = None,
    latch_game_over: bool = False,
) -> SnakeGame:
    """
    Build a SnakeGame from level text. The snake starts heading UP.

    Args:
        text: level description
        rng: random source for food placement (seed it for reproducible games)
        latch_game_over: make play() raise GameOver after a terminal error

    Raises:
        ParseError: If the text is not a valid level. No game is built.
    """
    grid, head, body, food = parse_level(text)
    logger.debug("parsed %r with head %s, %d body segments, food %s", grid, head, len(body), food)
    return SnakeGame(
        grid=grid,
        head=head,
        body=body,
        food=food,
        rng=rng,
        latch_game_over=latch_game_over,
    )


def load_level(path: Union[str, Path], **kwargs) -> SnakeGame:
    """Read a level file (UTF-8) and parse it. Keyword args go to parse()."""
    text = Path(path).read_text(encoding="utf-8")
    return parse(text, **kwargs)


def format_level(game: SnakeGame) -> str:
    """
    Write the game's grid, food and snake back as level text.

    Parsing the result gives a game with the same snapshot.
    """
    width, height = game.dimension()
    snapshot = game.snapshot()
    lines = [f"{width},{height}"]
    lines.extend(game.grid.to_lines())
    lines.append(f"{snapshot.food.x},{snapshot.food.y}")
    lines.append(SNAKE_SEPARATOR.join(f"{p.x},{p.y}" for p in snapshot.snake))
    return "\n".join(lines) + "\n"
