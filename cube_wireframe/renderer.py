#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses

from .canvas import render_cell_ascii, render_cell_braille
from .color import init_colors
from .config import RenderConfig
from .cube import Cube
from .rasterizer import rasterize_cube


class Renderer:
    """
    Wireframe renderer for a single Cube.

    render(stdscr, cube, config) draws one frame to the curses screen.
    Line 0 is left free for a HUD, so the canvas starts on line 1.
    """

    def __init__(self):
        self.stroke_pair = 0
        self.bg_pair = 0

    def init_colors(self, config: RenderConfig, cube: Cube):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.stroke_pair, self.bg_pair = init_colors(config, cube.color, config.bg_color)

    def render(self, stdscr, cube: Cube, config: RenderConfig):
        """
        Render one frame and output to curses screen.

        Does NOT call stdscr.refresh(); the caller does that after
        optional HUD drawing.
        """
        th, tw = stdscr.getmaxyx()
        W = (tw - 1) * 2
        H = (th - 2) * 4
        if W <= 0 or H <= 0:
            return

        canv = rasterize_cube(cube, W, H)

        stdscr.erase()
        if config.use_color and self.bg_pair:
            stdscr.bkgd(' ', curses.color_pair(self.bg_pair))

        attr = curses.color_pair(self.stroke_pair if config.use_color else 0)
        render_cell = render_cell_braille if config.use_braille else render_cell_ascii

        for y in range(min(th - 2, len(canv.grid))):
            row = canv.grid[y]
            for x in range(min(tw - 1, len(row))):
                mask = row[x]
                if mask:
                    try:
                        stdscr.addstr(y + 1, x, render_cell(mask), attr)
                    except curses.error:
                        # Writing the bottom-right cell moves the cursor off screen
                        pass
