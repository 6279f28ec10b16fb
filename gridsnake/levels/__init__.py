"""
Built-in level texts.

Each level is a plain string in the level format read by
gridsnake.level_parser. To add a level, write the text here and register
it in LEVELS.
"""

from typing import Dict

# 9x8 walled box, 7x6 playable interior
BOX = """
9,8
wwwwwwwww
w       w
w       w
w       w
w       w
w       w
w       w
wwwwwwwww
4,4
2,2;2,1
"""

# 20x15 walled board with a three-segment snake
CLASSIC = """
20,15
wwwwwwwwwwwwwwwwwwww
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
w                  w
wwwwwwwwwwwwwwwwwwww
14,10
5,4;5,3;5,2
"""

# 16x12 board with two inner wall bars to steer around
PILLARS = """
16,12
wwwwwwwwwwwwwwww
w              w
w              w
w   w      w   w
w   w      w   w
w   w      w   w
w   w      w   w
w   w      w   w
w   w      w   w
w              w
w              w
wwwwwwwwwwwwwwww
12,9
7,3;7,2;7,1
"""

LEVELS: Dict[str, str] = {
    "box": BOX,
    "classic": CLASSIC,
    "pillars": PILLARS,
}


def get_level(name: str) -> str:
    """
    Return the text of a built-in level.

    Raises:
        ValueError: If *name* is not a built-in level.
    """
    key = (name or "").strip().lower()
    if key not in LEVELS:
        available = ", ".join(sorted(LEVELS))
        raise ValueError(f"Unknown level '{name}'. Available levels: {available}")
    return LEVELS[key]
