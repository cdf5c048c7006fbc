#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/argb.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Packed 0xAARRGGBB color values. No terminal dependency."""

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
MAGENTA = 0xFFFF00FF


def argb(r, g, b, a=255):
    """Pack 0-255 channel values into a 32-bit 0xAARRGGBB int."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def to_rgb(color):
    """Unpack a 0xAARRGGBB int to an (r, g, b) tuple, dropping alpha."""
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        return None
