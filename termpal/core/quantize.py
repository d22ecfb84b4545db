"""Sampler/quantiser: pixel buffer -> histogram of quantised colours.

Each channel is snapped to the nearest multiple of `quant_step`
(round half up) and clamped to [0, 255]. Every pixel is counted once.
"""

from __future__ import annotations

import numpy as np

from termpal.core.colour import RGB
from termpal.core.types import PixelBuffer

BufferLike = bytes | bytearray | memoryview | np.ndarray | PixelBuffer


def _as_array(buffer: BufferLike) -> np.ndarray:
    if isinstance(buffer, PixelBuffer):
        buffer = buffer.data
    if isinstance(buffer, np.ndarray):
        arr = buffer.astype(np.uint8, copy=False).reshape(-1)
    else:
        arr = np.frombuffer(bytes(buffer), dtype=np.uint8)
    if arr.size % 3 != 0:
        raise ValueError(f'Pixel buffer length must be a multiple of 3, got {arr.size}')
    return arr.reshape(-1, 3)


def quantize(buffer: BufferLike, quant_step: int) -> dict[RGB, int]:
    """Return {quantised (r, g, b): count}, ordered lexicographically by RGB."""
    if quant_step < 1:
        raise ValueError(f'quant_step must be a positive integer, got {quant_step}')

    pixels = _as_array(buffer)
    if len(pixels) == 0:
        return {}

    # int32 so the rounding step cannot overflow uint8
    snapped = np.floor(pixels.astype(np.int32) / quant_step + 0.5).astype(np.int32) * quant_step
    snapped = np.clip(snapped, 0, 255)

    unique, counts = np.unique(snapped, axis=0, return_counts=True)
    return {(int(r), int(g), int(b)): int(n) for (r, g, b), n in zip(unique, counts)}
