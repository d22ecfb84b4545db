"""Image decoding collaborator: file -> cover-fit RGB PixelBuffer.

Converts any Pillow-readable image to RGB (alpha is dropped) and resizes
it to a size x size square with a centred "cover" crop before sampling.
"""

import os

from PIL import Image, ImageOps, UnidentifiedImageError

from termpal.core.types import PixelBuffer

DEFAULT_SIZE = 150


class DecodeError(Exception):
    """The image could not be found or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f'Cannot decode image {path}: {reason}')
        self.path = path
        self.reason = reason


def pixels_from_image(image: Image.Image, size: int = DEFAULT_SIZE) -> PixelBuffer:
    """Cover-fit an in-memory image to size x size and return its RGB bytes."""
    rgb = image.convert('RGB')
    if rgb.width == 0 or rgb.height == 0:
        return PixelBuffer(width=0, height=0, data=b'')
    fitted = ImageOps.fit(rgb, (size, size), method=Image.Resampling.LANCZOS)
    return PixelBuffer(width=fitted.width, height=fitted.height, data=fitted.tobytes())


def load_pixels(path: str, size: int = DEFAULT_SIZE) -> PixelBuffer:
    """Open `path` and return its cover-fit pixels. Raises DecodeError."""
    if not os.path.isfile(path):
        raise DecodeError(path, 'file not found')
    try:
        with Image.open(path) as image:
            return pixels_from_image(image, size)
    except UnidentifiedImageError:
        raise DecodeError(path, 'unrecognised image format') from None
    except OSError as e:
        raise DecodeError(path, str(e)) from e
