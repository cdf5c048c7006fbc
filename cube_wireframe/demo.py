#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .config import CubeSetup, RenderConfig
from .renderer import Renderer

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Interactive viewer: builds the cube once from a CubeSetup, then
    redraws it until 'q' is pressed.
    """

    def __init__(self, stdscr, setup: CubeSetup, config: RenderConfig,
                 frame_delay: float = 0.05):
        self.stdscr = stdscr
        self.config = config
        self.frame_delay = frame_delay
        self.running = True

        curses.curs_set(0)
        stdscr.nodelay(True)

        self.cube = setup.build()
        logger.info("cube ready: %r", self.cube)

        renderer = Renderer()
        renderer.init_colors(config, self.cube)
        self.renderer = renderer

    def handle_input(self):
        key = self.stdscr.getch()
        if key == -1:
            return

        config = self.config
        if key == ord('q'):
            self.running = False
        elif key == ord('c'):
            config.use_color = not config.use_color
        elif key == ord('b'):
            config.use_braille = not config.use_braille

    def draw_hud(self):
        th, tw = self.stdscr.getmaxyx()
        xs = [v.x for v in self.cube.vertices]
        ys = [v.y for v in self.cube.vertices]
        modestr = (f"{'COL' if self.config.use_color else 'MON'} "
                   f"{'BRA' if self.config.use_braille else 'ASC'}")
        hdr = (f" V:8 E:12"
               f" | X:{min(xs):.0f}..{max(xs):.0f}"
               f" Y:{min(ys):.0f}..{max(ys):.0f}"
               f" | VIEW:{(tw - 1) * 2}x{(th - 2) * 4}"
               f" | [{modestr}] q:quit ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:max(0, tw - 1)],
                               curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        while self.running:
            self.handle_input()
            self.renderer.render(self.stdscr, self.cube, self.config)
            if self.config.show_hud:
                self.draw_hud()
            self.stdscr.refresh()
            time.sleep(self.frame_delay)


def main(stdscr, setup, config):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, setup, config)
    app.run()
