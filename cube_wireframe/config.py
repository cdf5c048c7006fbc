#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .argb import MAGENTA
from .cube import Cube


@dataclass
class RenderConfig:
    """Configuration for the terminal renderer."""
    use_color: bool = True
    use_braille: bool = True
    show_hud: bool = True
    bg_color: Optional[int] = None  # packed ARGB; None keeps the terminal background

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection needs curses initialised; this is a
        # pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )


@dataclass
class CubeSetup:
    """
    One-shot cube configuration: color plus the setup transforms.

    The defaults reproduce the reference scene: a magenta cube moved by
    (12, 2, 2) and then scaled by 40, which puts it at x 440-520,
    y 40-120 in pixel space.
    """
    color: int = MAGENTA
    translation: Tuple[float, float, float] = (12.0, 2.0, 2.0)
    scaling: Tuple[float, float, float] = (40.0, 40.0, 40.0)
    rotation_angle: Optional[float] = None
    rotation_axis: Tuple[float, float, float] = (0.0, 0.0, 1.0)

    def build(self) -> Cube:
        """Construct the cube and apply translate, scale, then rotate."""
        cube = Cube(self.color)
        cube.translate(*self.translation)
        cube.scale(*self.scaling)
        if self.rotation_angle is not None:
            cube.rotate(self.rotation_angle, self.rotation_axis)
        return cube
