#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .canvas import Canvas


def clip_segment(x1, y1, x2, y2, x_max, y_max):
    """
    Liang-Barsky clip of a segment to the box [0, x_max] x [0, y_max].
    Returns the clipped (x1, y1, x2, y2), or None if nothing is inside.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, x_max - x1), (-dy, y1), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy)


def draw_line_dda(canvas: Canvas, p1, p2):
    """
    Draws a line between two (x, y) points using the DDA algorithm.
    The segment is clipped to the canvas first, so the loop only walks
    visible pixels however far the endpoints lie off screen.
    """
    if not all(math.isfinite(v) for v in (*p1, *p2)):
        # NaN/inf vertices from degenerate transforms have no pixels
        return

    clipped = clip_segment(p1[0], p1[1], p2[0], p2[1], canvas.w - 1, canvas.h - 1)
    if clipped is None:
        return
    x1, y1, x2, y2 = (int(round(v)) for v in clipped)

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def rasterize_cube(cube, w, h) -> Canvas:
    """Draw the cube's 12 edges onto a fresh w x h canvas.

    Vertex x and y are used directly as pixel coordinates; z is ignored.
    """
    canv = Canvas(w, h)
    for p1, p2 in cube.segments():
        draw_line_dda(canv, p1, p2)
    return canv
