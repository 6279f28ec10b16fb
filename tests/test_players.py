"""
Tests for the players package.
"""

import random
import pytest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import Direction
from gridsnake.level_parser import parse
from gridsnake.levels import BOX
from gridsnake.players import Player, RandomPlayer, ScriptedPlayer

# 7x7 with a wall ring, 5x5 playable
OPEN_7X7 = """
7,7
wwwwwww
w     w
w     w
w     w
w     w
w     w
wwwwwww
5,5
{snake}
"""


class TestPlayer:
    """Tests for the base Player interface."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(parse(BOX))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_returns_valid_move(self):
        player = RandomPlayer(random.Random(0))
        move = player.get_move(parse(BOX))
        assert move in set(Direction)

    def test_avoids_walls_and_body_in_corner(self):
        """In the bottom-left corner with the body to the right only UP is safe."""
        game = parse(OPEN_7X7.format(snake="1,1;2,1;3,1"))
        player = RandomPlayer(random.Random(1))

        for _ in range(20):
            assert player.get_move(game) is Direction.UP

    def test_never_requests_reversal(self):
        game = parse(BOX)
        player = RandomPlayer(random.Random(2))

        for _ in range(50):
            assert player.get_move(game) is not Direction.DOWN

    def test_tail_cell_counts_as_free(self):
        """The tail leaves its cell during the tick, so moving there is safe."""
        game = parse(OPEN_7X7.format(snake="1,1;1,2;2,2;2,1"))
        game.direction = Direction.DOWN
        player = RandomPlayer(random.Random(3))

        for _ in range(20):
            assert player.get_move(game) is Direction.RIGHT

    def test_trapped_keeps_current_direction(self):
        game = parse("6,3\nwwwwww\nw    w\nwwwwww\n4,1\n1,1;2,1;3,1\n")

        assert RandomPlayer(random.Random(4)).get_move(game) is Direction.UP

    def test_same_seed_same_moves(self):
        game = parse(BOX)
        a = RandomPlayer(random.Random(9))
        b = RandomPlayer(random.Random(9))

        assert [a.get_move(game) for _ in range(10)] == [b.get_move(game) for _ in range(10)]


class TestScriptedPlayer:
    """Tests for the ScriptedPlayer class."""

    def test_plays_moves_in_order(self):
        game = parse(BOX)
        player = ScriptedPlayer([Direction.UP, Direction.RIGHT])

        assert player.get_move(game) is Direction.UP
        assert player.get_move(game) is Direction.RIGHT
        assert player.exhausted is True

    def test_keeps_last_move_when_exhausted(self):
        game = parse(BOX)
        player = ScriptedPlayer([Direction.LEFT])
        player.get_move(game)

        assert player.get_move(game) is Direction.LEFT
        assert player.get_move(game) is Direction.LEFT

    def test_empty_script_follows_game_direction(self):
        game = parse(BOX)
        assert ScriptedPlayer([]).get_move(game) is Direction.UP
