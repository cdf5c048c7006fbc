#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .coordinate import Coordinate
from .matrix import Mat4, identity
from .transform import (apply, axis_angle_quaternion, build_rotation,
                        build_scaling, build_translation)
from .cube import Cube, CORNERS, EDGES
from .paint import Paint
from .argb import argb, to_rgb, parse_hex_color
from .config import RenderConfig, CubeSetup
