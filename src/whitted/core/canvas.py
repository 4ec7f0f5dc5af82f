"""Canvas: the 2-D color buffer produced by rendering.

Pixels are addressed as (x, y) with x running left to right and y top to
bottom. Storage is a NumPy array of shape (height, width, 3) holding linear
RGB values, the same layout the export helpers consume.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import Tuple, color


class Canvas:
    """A width x height grid of colors, initially black.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
        substituted_pixels: Number of pixels the renderer filled with the
            background color after a geometric failure.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)
        self.substituted_pixels = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self._width}x{self._height}"
            )

    def write_pixel(self, x: int, y: int, c: Tuple) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = (c.x, c.y, c.z)

    def pixel_at(self, x: int, y: int) -> Tuple:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x].tolist()
        return color(r, g, b)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the buffer as an (H, W, 3) array."""
        return self._pixels.copy()

    @classmethod
    def from_numpy(cls, image: npt.NDArray[np.floating]) -> Canvas:
        """Build a canvas from an (H, W, 3) array of linear RGB values."""
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {image.shape}")
        canvas = cls(image.shape[1], image.shape[0])
        canvas._pixels[...] = image
        return canvas
