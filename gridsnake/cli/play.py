#!/usr/bin/env python3
"""Run a gridsnake session from the command line.

Loads a built-in level (or a level file), drives it with a scripted or a
random player and writes one JSON object per line to stdout:

- the initial snapshot (tick 0),
- the snapshot after every tick,
- a final summary line with ticks, score, length and outcome.

Logs go to stderr. Defaults come from GRIDSNAKE_* environment variables
(see gridsnake.config); flags override them.

Examples:
    gridsnake --level box --moves U,U,R,R,R
    gridsnake --level classic --seed 7 --max-ticks 200
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional, Tuple

from gridsnake.config import Settings
from gridsnake.domain.primitives import Direction
from gridsnake.domain.snapshot import Snapshot
from gridsnake.errors import ParseError
from gridsnake.level_parser import load_level, parse
from gridsnake.levels import LEVELS, get_level
from gridsnake.players import Player, RandomPlayer, ScriptedPlayer
from gridsnake.session import GameSession

logger = logging.getLogger(__name__)


def parse_moves(raw: str) -> List[Direction]:
    """
    Parse a comma separated move list such as "U,U,RIGHT".

    Raises:
        argparse.ArgumentTypeError: If a move is not a direction.
    """
    moves = []
    for chunk in raw.split(","):
        if not chunk.strip():
            continue
        try:
            moves.append(Direction.from_str(chunk))
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from None
    return moves


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Run a single-snake grid game and print snapshots as JSON lines.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--level", type=str, default=None,
                        help=f"Built-in level name (default: {settings.level})")
    source.add_argument("--level-file", type=str, default=None,
                        help="Path to a level text file (default: GRIDSNAKE_LEVEL_PATH)")
    parser.add_argument("--moves", type=parse_moves, default=None,
                        help="Comma separated moves, e.g. 'U,U,R' (implies --player scripted)")
    parser.add_argument("--player", choices=["random", "scripted"], default=None,
                        help="Who picks directions (default: scripted with --moves, else random)")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food placement and the random player")
    parser.add_argument("--max-ticks", type=int, default=settings.max_ticks,
                        help=f"Maximum number of ticks (default: {settings.max_ticks})")
    parser.add_argument("--tick-seconds", type=float, default=settings.tick_seconds,
                        help="Pause between ticks in seconds (default: no pause)")
    parser.add_argument("--latch", action=argparse.BooleanOptionalAction,
                        default=settings.latch_game_over,
                        help="Latch the game over state inside the engine. The session "
                             "stops at the first error either way, so output is unchanged")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        help=f"Log level (default: {settings.log_level})")
    parser.add_argument("--list-levels", action="store_true",
                        help="List built-in levels and exit")
    return parser


def _emit(tick: int, snapshot: Snapshot) -> None:
    data = {"tick": tick}
    data.update(snapshot.to_dict())
    print(json.dumps(data), flush=True)


def _resolve_level(args: argparse.Namespace, settings: Settings) -> Tuple[Optional[str], Optional[str]]:
    """
    Pick the level source as (path, name); exactly one of them is set.

    An explicit flag wins over the environment, and a level path from the
    environment wins over a level name from the environment.
    """
    if args.level_file:
        return args.level_file, None
    if args.level:
        return None, args.level
    if settings.level_path:
        return settings.level_path, None
    return None, settings.level


def _build_player(args: argparse.Namespace, rng: random.Random) -> Player:
    player = args.player or ("scripted" if args.moves is not None else "random")
    if player == "scripted":
        return ScriptedPlayer(args.moves or [])
    return RandomPlayer(rng)


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_levels:
        for name in sorted(LEVELS):
            print(name)
        return 0

    # Food placement and the random player draw from separate streams.
    food_rng = random.Random(args.seed)
    player_rng = random.Random(None if args.seed is None else args.seed + 1)

    level_path, level_name = _resolve_level(args, settings)
    try:
        if level_path:
            game = load_level(level_path, rng=food_rng, latch_game_over=args.latch)
        else:
            game = parse(get_level(level_name), rng=food_rng, latch_game_over=args.latch)
    except (ParseError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info("Loaded %r", game)

    session = GameSession(game, tick_seconds=args.tick_seconds)
    _emit(0, session.history[0])
    result = session.run(
        max_ticks=args.max_ticks,
        player=_build_player(args, player_rng),
        on_tick=lambda snapshot: _emit(session.ticks, snapshot),
    )

    summary = {"summary": True}
    summary.update(result.to_dict())
    print(json.dumps(summary), flush=True)
    logger.info("Finished: %s", result.outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
