"""Theme definitions for the prompt selector.

Central place for style ids, their curses color-pair assignments and the
box-drawing characters used by the renderer.
"""

import curses
from typing import Dict, Tuple

# Named style / color-pair ids
FRAME: int = 1
TITLE: int = 2
HEADER: int = 3
NORMAL: int = 4
DIM: int = 5
SELECTED: int = 6
CARD: int = 7
CARD_SELECTED: int = 8
PROMPT_SELECTED: int = 9
KEY_HINT: int = 10
SUCCESS: int = 11
ERROR: int = 12

# Default theme: style id -> (fg_color, bg_color, extra attributes)
DEFAULT_THEME: Dict[int, Tuple[int, int, int]] = {
    FRAME: (curses.COLOR_CYAN, -1, curses.A_NORMAL),
    TITLE: (curses.COLOR_MAGENTA, -1, curses.A_BOLD),
    HEADER: (curses.COLOR_WHITE, -1, curses.A_BOLD),
    NORMAL: (-1, -1, curses.A_NORMAL),
    DIM: (-1, -1, curses.A_DIM),
    SELECTED: (curses.COLOR_YELLOW, -1, curses.A_BOLD),
    CARD: (curses.COLOR_BLUE, -1, curses.A_NORMAL),
    CARD_SELECTED: (curses.COLOR_MAGENTA, -1, curses.A_BOLD),
    PROMPT_SELECTED: (curses.COLOR_GREEN, -1, curses.A_BOLD),
    KEY_HINT: (-1, -1, curses.A_BOLD),
    SUCCESS: (curses.COLOR_GREEN, -1, curses.A_BOLD),
    ERROR: (curses.COLOR_RED, -1, curses.A_BOLD),
}

__all__ = [
    "FRAME",
    "TITLE",
    "HEADER",
    "NORMAL",
    "DIM",
    "SELECTED",
    "CARD",
    "CARD_SELECTED",
    "PROMPT_SELECTED",
    "KEY_HINT",
    "SUCCESS",
    "ERROR",
    "DEFAULT_THEME",
]

# Outer frame (double line)
D_TL = "╔"
D_TR = "╗"
D_BL = "╚"
D_BR = "╝"
D_ML = "╠"
D_MR = "╣"
D_HOR = "═"
D_VERT = "║"

# Prompt cards (rounded)
R_TL = "╭"
R_TR = "╮"
R_BL = "╰"
R_BR = "╯"
HOR = "─"
VERT = "│"

# Selection marker
POINTER = "▶ "

__all__.extend(
    ["D_TL", "D_TR", "D_BL", "D_BR", "D_ML", "D_MR", "D_HOR", "D_VERT"]
    + ["R_TL", "R_TR", "R_BL", "R_BR", "HOR", "VERT", "POINTER"]
)
