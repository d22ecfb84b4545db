"""ANSI slot assignment.

The six hue roles are searched twice over the diverse candidates:

  dark pool    luminance < 180  (dark < 100 plus mid 100..179), base colours
  bright pool  luminance >= 100 (mid plus bright >= 180), bright variants

candidate = hue_score * 50 + vibrancy * k * 30 + saturation * 20
hue_score = 1 - hue_distance / 180, k = 2 for the dark search, 0.5 otherwise.

black/bright_black, white/bright_white, cursor and selection are derived
from background and foreground rather than searched.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from termpal.core.colour import hue_distance, scale_hex
from termpal.core.contrast import adjust_for_contrast
from termpal.core.types import ColourSample, Palette

DARK_MAX = 100.0
BRIGHT_MIN = 180.0

HUE_WEIGHT = 50.0
VIBRANCY_WEIGHT = 30.0
SATURATION_WEIGHT = 20.0
DARK_VIBRANCY_BOOST = 2.0
BRIGHT_VIBRANCY_BOOST = 0.5

SELECTION_FACTOR = 1.8
BRIGHT_BLACK_FACTOR = 2.5
BRIGHT_WHITE_FACTOR = 1.05


@dataclass(frozen=True)
class HueRole:
    name: str
    target: float
    dark_fallback: str
    bright_fallback: str


# magenta targets 320 (pink accents), not the HSV 300
HUE_ROLES: tuple[HueRole, ...] = (
    HueRole('red', 0.0, '#cc6666', '#ff8888'),
    HueRole('yellow', 60.0, '#ccaa66', '#ffcc88'),
    HueRole('green', 120.0, '#88aa66', '#aacc88'),
    HueRole('cyan', 180.0, '#66cccc', '#88ffff'),
    HueRole('blue', 240.0, '#6688cc', '#88aaff'),
    HueRole('magenta', 320.0, '#cc66cc', '#ff88ff'),
)


def split_pools(candidates: Sequence[ColourSample]) -> tuple[list[ColourSample], list[ColourSample]]:
    """(dark pool, bright pool). Mid-luminance colours land in both."""
    dark = [c for c in candidates if c.luminance < BRIGHT_MIN]
    bright = [c for c in candidates if c.luminance >= DARK_MAX]
    return dark, bright


def candidate_score(sample: ColourSample, target: float, vibrancy_boost: float) -> float:
    hue_score = 1.0 - hue_distance(sample.hue, target) / 180.0
    return (
        hue_score * HUE_WEIGHT
        + sample.vibrancy * vibrancy_boost * VIBRANCY_WEIGHT
        + sample.saturation * SATURATION_WEIGHT
    )


def find_by_hue(pool: Sequence[ColourSample], target: float, vibrancy_boost: float, fallback: str) -> str:
    """Hex of the best candidate for `target`, or `fallback` for an empty pool."""
    if not pool:
        return fallback
    best = max(pool, key=lambda s: candidate_score(s, target, vibrancy_boost))
    return best.hex


def assign_hue_slots(candidates: Sequence[ColourSample]) -> dict[str, str]:
    """{'red': hex, ..., 'bright_magenta': hex} for the twelve searched slots."""
    dark, bright = split_pools(candidates)
    slots: dict[str, str] = {}
    for role in HUE_ROLES:
        slots[role.name] = find_by_hue(dark, role.target, DARK_VIBRANCY_BOOST, role.dark_fallback)
        slots[f'bright_{role.name}'] = find_by_hue(bright, role.target, BRIGHT_VIBRANCY_BOOST, role.bright_fallback)
    return slots


def build_palette(
    background: str,
    foreground: str,
    candidates: Sequence[ColourSample],
    min_contrast: float = 4.5,
    bright_white_contrast: float = 3.0,
    adjust: Callable[[str, str, float], str] = adjust_for_contrast,
) -> Palette:
    """Assemble the 20-slot palette from the chosen background/foreground."""
    fg = adjust(foreground, background, min_contrast)
    bright_white = adjust(scale_hex(fg, BRIGHT_WHITE_FACTOR), background, bright_white_contrast)
    return Palette(
        background=background,
        foreground=fg,
        cursor=fg,
        selection=scale_hex(background, SELECTION_FACTOR),
        black=background,
        white=fg,
        bright_black=scale_hex(background, BRIGHT_BLACK_FACTOR),
        bright_white=bright_white,
        **assign_hue_slots(candidates),
    )
