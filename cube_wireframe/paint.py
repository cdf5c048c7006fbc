#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/paint.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass

STROKE = 'stroke'


@dataclass(frozen=True)
class Paint:
    """Stroke style for drawing cube edges.

    Only the color varies between cubes; the other fields are the fixed
    wireframe style (2 px anti-aliased outline).
    """
    color: int
    stroke_width: float = 2.0
    style: str = STROKE
    anti_alias: bool = True
