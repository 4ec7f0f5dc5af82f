"""Image export utilities for rendered canvases.

Supported formats:
    - PNG (8-bit via Pillow)
    - PPM (plain-text P3 on write; any Netpbm RGB or grayscale image on read,
      decoded by Pillow)

Channel values are clamped to [0, 1], optionally gamma corrected, and scaled
to 0..255 with rounding.

Example:
    >>> from src.whitted.preview.export import save_png, save_ppm
    >>> save_png(canvas, "output.png")
    >>> save_ppm(canvas, "output.ppm")
"""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.whitted.core.canvas import Canvas

PPM_MAX_COLOR = 255
# Plain PPM readers are only required to accept lines up to 70 characters
PPM_LINE_LIMIT = 70


def canvas_to_uint8(canvas: Canvas, *, gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit (H, W, 3) array.

    Args:
        canvas: The canvas to convert.
        gamma: Gamma correction value (1.0 keeps values linear).

    Returns:
        8-bit image array of shape (H, W, 3).

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    image = np.clip(canvas.to_numpy(), 0.0, 1.0)
    if gamma != 1.0:
        image = np.power(image, 1.0 / gamma)
    return np.round(image * PPM_MAX_COLOR).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> None:
    """Save a canvas as an 8-bit RGB PNG file."""
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas, gamma=gamma))
    pil_image.save(filepath)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain-text PPM (P3).

    Each pixel row starts a new line; long rows are wrapped so that no line
    exceeds 70 characters. The text ends with a newline.
    """
    image = canvas_to_uint8(canvas)
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_COLOR)]
    for row in image:
        current = ""
        for value in row.reshape(-1).tolist():
            token = str(value)
            if current and len(current) + 1 + len(token) > PPM_LINE_LIMIT:
                lines.append(current)
                current = token
            else:
                current = f"{current} {token}" if current else token
        lines.append(current)
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    Path(filepath).write_text(canvas_to_ppm(canvas))


def ppm_to_canvas(data: bytes | str) -> Canvas:
    """Decode a PPM image into a canvas.

    Pillow parses the header and pixel data, including comments and maximum
    color values other than 255, and rescales channels to 0..255. The result
    is divided by 255 so channels land in [0, 1].

    Raises:
        ValueError: If the data is not a well-formed PPM image.
    """
    if isinstance(data, str):
        data = data.encode("ascii")
    try:
        with PILImage.open(io.BytesIO(data), formats=["PPM"]) as pil_image:
            image = np.asarray(pil_image.convert("RGB"), dtype=np.float64)
    except (OSError, SyntaxError, ValueError) as exc:
        raise ValueError(f"Malformed PPM data: {exc}") from exc
    return Canvas.from_numpy(image / PPM_MAX_COLOR)


def load_ppm(filepath: str | Path) -> Canvas:
    return ppm_to_canvas(Path(filepath).read_bytes())
