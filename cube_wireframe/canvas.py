#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Canvas:
    """Monochrome pixel grid packed into 2x4 terminal cells."""
    __slots__ = ['w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return
        # Bits 0-3 are the left column of the cell, 4-7 the right
        self.grid[y >> 2][x >> 1] |= (1 << ((y & 3) + (x & 1) * 4))

    def get_pixel(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    chars = " .:-=+*#%@"
    density = bin(mask).count('1')
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
