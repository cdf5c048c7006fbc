#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Terminal palette matching and curses color-pair setup."""

import curses
import logging

from .argb import to_rgb

logger = logging.getLogger(__name__)

# --- xterm-256 palette matching ---

# The 6x6x6 color cube occupies indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _nearest_cube_val(v):
    return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""
    ri, gi, bi = _nearest_cube_val(r), _nearest_cube_val(g), _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


def init_colors(config, stroke_color, bg_color=None):
    """
    Initialize curses color pairs for the cube stroke and background.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - 256+ colors: nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - no color
    Colors are packed ARGB ints. Returns (stroke_pair, bg_pair); 0 means
    "terminal default".
    """
    if not config.use_color:
        return 0, 0

    try:
        if not curses.has_colors():
            return 0, 0
        curses.start_color()

        default_bg = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            default_bg = -1
        except curses.error:
            pass

        fg_rgb = to_rgb(stroke_color)
        bg_rgb = to_rgb(bg_color) if bg_color is not None else None
        num_colors = getattr(curses, 'COLORS', 8)

        if curses.can_change_color() and num_colors >= 256:
            mode = 'truecolor'
            # Slots 16 and 17 to avoid clobbering ANSI 0-15
            curses.init_color(16, *(v * 1000 // 255 for v in fg_rgb))
            fg_slot = 16
            bg_slot = default_bg
            if bg_rgb is not None:
                curses.init_color(17, *(v * 1000 // 255 for v in bg_rgb))
                bg_slot = 17
        elif num_colors >= 256:
            mode = 'xterm256'
            fg_slot = rgb_to_nearest_xterm(*fg_rgb)
            bg_slot = rgb_to_nearest_xterm(*bg_rgb) if bg_rgb is not None else default_bg
        elif num_colors >= 8:
            mode = 'ansi8'
            fg_slot = rgb_to_nearest_ansi8(*fg_rgb)
            bg_slot = rgb_to_nearest_ansi8(*bg_rgb) if bg_rgb is not None else default_bg
        else:
            return 0, 0

        curses.init_pair(1, fg_slot, bg_slot)
        bg_pair = 0
        if bg_rgb is not None:
            curses.init_pair(2, 7 if bg_slot != 7 else 0, bg_slot)
            bg_pair = 2
        logger.debug("color mode %s: stroke slot %s, bg slot %s", mode, fg_slot, bg_slot)
        return 1, bg_pair

    except curses.error as e:
        logger.warning("Falling back to monochrome: %s", e)
        return 0, 0
