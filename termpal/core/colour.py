"""Colour primitives shared by every pipeline stage.

Hex parsing/formatting, perceptual luminance, HSV saturation/vibrancy/hue,
circular hue distance and per-channel brightness scaling.

All RGB values are 0-255 ints. Hex strings are always written lowercase.
"""

import re

RGB = tuple[int, int, int]

HEX_RE = re.compile(r'^#[0-9a-f]{6}$')
_HEX_DIGITS_RE = re.compile(r'^[0-9a-fA-F]{6}$')


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse '#rrggbb' or '#rgb' (case-insensitive, '#' optional).

    Raises ValueError for anything else.
    """
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if not _HEX_DIGITS_RE.match(h):
        raise ValueError(f'Invalid hex colour: {hex_str!r}')
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{_clamp(r):02x}{_clamp(g):02x}{_clamp(b):02x}'


def is_hex(value: str) -> bool:
    return isinstance(value, str) and HEX_RE.match(value) is not None


def _clamp(c: float) -> int:
    return max(0, min(255, int(c)))


def round_half_up(x: float) -> int:
    """Round .5 upwards (Python's round() is banker's rounding)."""
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


def luminance(rgb: RGB) -> float:
    """Perceptual brightness 0.299R + 0.587G + 0.114B, range [0, 255]."""
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def saturation(rgb: RGB) -> float:
    """HSV saturation in [0, 1]; 0 for black."""
    mx = max(rgb)
    if mx == 0:
        return 0.0
    return (mx - min(rgb)) / mx


def vibrancy(rgb: RGB) -> float:
    """Saturated AND bright: saturation * value, in [0, 1]."""
    return saturation(rgb) * (max(rgb) / 255.0)


def hue(rgb: RGB) -> float:
    """HSV hue in degrees [0, 360). Achromatic colours report 0."""
    r, g, b = rgb
    mx = max(rgb)
    delta = mx - min(rgb)
    if delta == 0:
        return 0.0
    if mx == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif mx == g:
        h = 60.0 * (((b - r) / delta) + 2)
    else:
        h = 60.0 * (((r - g) / delta) + 4)
    return h % 360.0


def hue_distance(a: float, b: float) -> float:
    """Circular distance between two hues in degrees, range [0, 180]."""
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


def scale(rgb: RGB, factor: float) -> RGB:
    """Multiply every channel by factor, round half up, clamp to [0, 255]."""
    return tuple(max(0, min(255, round_half_up(c * factor))) for c in rgb)  # type: ignore[return-value]


def scale_hex(hex_str: str, factor: float) -> str:
    return rgb_to_hex(*scale(hex_to_rgb(hex_str), factor))
