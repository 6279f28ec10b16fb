"""
Tests for level_parser.py - level text to SnakeGame.
"""

import pytest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import CellField, Direction, Position
from gridsnake.engine import SnakeGame
from gridsnake.errors import ParseError
from gridsnake.level_parser import format_level, load_level, parse, parse_level
from gridsnake.levels import BOX, LEVELS, get_level


class TestParseWellFormed:
    """Parsing valid level text."""

    def test_snapshot_reproduces_declared_snake_and_food(self):
        """snapshot() right after parsing gives the declared head, body and food."""
        game = parse(BOX)
        snapshot = game.snapshot()

        assert snapshot.snake == (Position(2, 2), Position(2, 1))
        assert snapshot.food == Position(4, 4)
        assert snapshot.food_ate is False

    def test_initial_state(self):
        """A parsed game heads UP with no pending growth."""
        game = parse(BOX)

        assert isinstance(game, SnakeGame)
        assert game.direction is Direction.UP
        assert game.growth == 0
        assert game.dimension() == (9, 8)

    def test_body_order_is_kept(self):
        text = "5,5\n     \n     \n     \n     \n     \n4,4\n1,1;1,2;2,2;3,2\n"
        game = parse(text)
        assert game.snapshot().snake == (
            Position(1, 1), Position(1, 2), Position(2, 2), Position(3, 2),
        )

    def test_walls_follow_the_rows(self):
        """Row index is y, column index is x."""
        grid, _, _, _ = parse_level(BOX)

        assert grid.cell(Position(0, 3)) is CellField.WALL
        assert grid.cell(Position(8, 3)) is CellField.WALL
        assert grid.cell(Position(3, 0)) is CellField.WALL
        assert grid.cell(Position(3, 7)) is CellField.WALL
        assert grid.cell(Position(3, 3)) is CellField.EMPTY

    def test_blank_lines_are_ignored(self):
        text = "\n\n3,3\n\nw  \n   \n\n   \n\n2,2\n\n1,1;1,0\n\n"
        game = parse(text)
        assert game.snapshot().snake == (Position(1, 1), Position(1, 0))

    def test_rows_of_spaces_are_rows(self):
        """A row made only of spaces is a row of empty cells, not a blank line."""
        grid, head, body, food = parse_level("3,2\n   \n   \n2,1\n0,0;0,1\n")

        assert grid.dimension() == (3, 2)
        assert list(grid.free_cells()) == [
            Position(0, 0), Position(1, 0), Position(2, 0),
            Position(0, 1), Position(1, 1), Position(2, 1),
        ]
        assert head == Position(0, 0)
        assert body == [Position(0, 1)]
        assert food == Position(2, 1)

    def test_extra_trailing_characters_are_ignored(self):
        """Characters past the declared width are not validated."""
        grid, _, _, _ = parse_level("3,2\nw  extra!\n   ???\n2,1\n1,1\n")
        assert grid.to_lines() == ["w  ", "   "]

    def test_crlf_line_endings(self):
        text = BOX.replace("\n", "\r\n")
        assert parse(text).snapshot() == parse(BOX).snapshot()

    def test_spaces_around_numbers(self):
        game = parse("3,3\n   \n   \n   \n 2 , 2 \n1, 1 ; 1,0\n")
        assert game.snapshot().snake == (Position(1, 1), Position(1, 0))
        assert game.snapshot().food == Position(2, 2)

    def test_head_only_snake(self):
        game = parse("3,1\n   \n2,0\n0,0\n")
        assert game.snapshot().snake == (Position(0, 0),)

    def test_builtin_levels_parse(self):
        for name, text in LEVELS.items():
            game = parse(text)
            assert game.snapshot().length >= 1, name


class TestParseErrors:
    """Malformed level text raises ParseError and builds no game."""

    @pytest.mark.parametrize("text", [
        "",
        "3",
        "3,x\n   \n",
        "3,3,3\n",
        "-3,3\n",
        "0,3\n",
        "3,0\n",
    ])
    def test_bad_dimension_line(self, text):
        with pytest.raises(ParseError):
            parse(text)

    def test_invalid_cell_character(self):
        with pytest.raises(ParseError, match="unexpected char 'x'"):
            parse("3,2\n x \n   \n2,1\n0,0\n")

    def test_row_too_short(self):
        with pytest.raises(ParseError, match="expected at least 3"):
            parse("3,2\n  \n   \n2,1\n0,0\n")

    def test_missing_rows(self):
        with pytest.raises(ParseError):
            parse("3,3\n   \n   \n")

    def test_missing_food_line(self):
        with pytest.raises(ParseError, match="food"):
            parse("3,1\n   \n")

    def test_missing_snake_line(self):
        with pytest.raises(ParseError, match="snake"):
            parse("3,1\n   \n2,0\n")

    def test_content_after_snake(self):
        with pytest.raises(ParseError, match="after the snake"):
            parse("3,1\n   \n2,0\n0,0\n1,1\n")

    @pytest.mark.parametrize("snake", ["0,0;", "0;0", "a,b", "0,0;1"])
    def test_malformed_snake_pairs(self, snake):
        with pytest.raises(ParseError):
            parse(f"3,1\n   \n2,0\n{snake}\n")

    def test_error_carries_line_number(self):
        with pytest.raises(ParseError) as exc_info:
            parse("2,2\n  \n x\n1,1\n0,0\n")

        assert exc_info.value.line == 3
        assert str(exc_info.value).startswith("line 3:")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("nonsense")


class TestParsePlacementRules:
    """Snake and food must sit on free, in-bounds cells."""

    def test_food_on_wall(self):
        with pytest.raises(ParseError, match="food .* wall"):
            parse(BOX.replace("\n4,4\n", "\n0,4\n"))

    def test_food_out_of_bounds(self):
        with pytest.raises(ParseError, match="outside"):
            parse("3,1\n   \n5,0\n0,0\n")

    def test_head_on_wall(self):
        with pytest.raises(ParseError, match="head .* wall"):
            parse("3,1\nw  \n2,0\n0,0\n")

    def test_body_out_of_bounds(self):
        with pytest.raises(ParseError, match="body segment"):
            parse("3,1\n   \n2,0\n0,0;0,1\n")

    def test_snake_not_contiguous(self):
        with pytest.raises(ParseError, match="contiguous"):
            parse("3,3\n   \n   \n   \n2,2\n0,0;0,2\n")

    def test_snake_overlaps_itself(self):
        with pytest.raises(ParseError, match="overlap"):
            parse("3,3\n   \n   \n   \n2,2\n0,0;0,1;0,0\n")

    def test_food_on_snake(self):
        with pytest.raises(ParseError, match="on the snake"):
            parse("3,3\n   \n   \n   \n0,1\n0,0;0,1\n")


class TestLoadAndFormat:
    """Level files and writing games back to text."""

    def test_load_level_reads_file(self, tmp_path):
        path = tmp_path / "box.level"
        path.write_text(BOX, encoding="utf-8")

        game = load_level(path, latch_game_over=True)

        assert game.snapshot() == parse(BOX).snapshot()
        assert game.latch_game_over is True

    def test_load_level_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_level(tmp_path / "missing.level")

    def test_format_level_after_moves(self):
        """A game written out mid-play parses back to the same snapshot."""
        game = parse(BOX)
        game.play(Direction.UP)
        game.play(Direction.RIGHT)

        text = format_level(game)

        assert text.splitlines()[0] == "9,8"
        assert parse(text).snapshot() == game.snapshot()


class TestBuiltinLevels:
    """Tests for the levels registry."""

    def test_get_level_is_case_insensitive(self):
        assert get_level("BOX") == BOX

    def test_get_level_unknown(self):
        with pytest.raises(ValueError, match="Available levels"):
            get_level("nope")
