"""
PNG image sink for PySineNoise.

Encodes uint8 pixel buffers with Pillow and writes them to disk. Grayscale
buffers are 2D and saved as 8-bit "L" images, terrain buffers are
(height, width, 3) and saved as RGB. Every encode or write failure is raised
as a RenderError naming the destination.

Author: B.G.
"""

import numpy as np
from PIL import Image

from ..colormap import colorize


class RenderError(OSError):
    """Writing an output image failed."""

    def __init__(self, output, cause):
        self.output = str(output)
        self.cause = cause
        super().__init__(f"render failed for output '{self.output}': {cause}")


def write_png(pixels: np.ndarray, path) -> None:
    """
    Write a pixel buffer as a PNG file.

    Args:
        pixels: uint8 array of shape (height, width) or (height, width, 3)
        path: Destination file path

    Raises:
        ValueError: if the buffer does not have a supported shape or dtype
        RenderError: if the image cannot be encoded or written
    """
    pixels = np.asarray(pixels)
    if pixels.dtype != np.uint8:
        raise ValueError(f"pixels must be uint8, got {pixels.dtype}")
    if not (pixels.ndim == 2 or (pixels.ndim == 3 and pixels.shape[2] == 3)):
        raise ValueError(f"pixels must have shape (H, W) or (H, W, 3), got {pixels.shape}")

    try:
        img = Image.fromarray(np.ascontiguousarray(pixels))
        img.save(path, format="PNG")
    except (OSError, ValueError) as e:
        raise RenderError(path, e) from e


def render(width: int, height: int, pixel_fn, path) -> None:
    """
    Build an image from a per-pixel colour producer and write it as PNG.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        pixel_fn: Callable (x, y) -> colour tuple of 1 or 3 channels
        path: Destination file path

    Raises:
        ValueError: if the producer returns colours of another size
        RenderError: if the image cannot be written

    Example:
        render(grid.shape[1], grid.shape[0],
               lambda x, y: terracolor(grid[y, x]), "terrain.png")
    """
    pixels = np.array(
        [[pixel_fn(x, y) for x in range(width)] for y in range(height)],
        dtype=np.uint8,
    )
    if pixels.ndim != 3 or pixels.shape[2] not in (1, 3):
        raise ValueError("pixel_fn must return colours of 1 or 3 channels")
    if pixels.shape[2] == 1:
        pixels = pixels[:, :, 0]
    write_png(pixels, path)


def render_grid(grid: np.ndarray, colormap, path) -> None:
    """
    Colour a normalized grid and write it as PNG.

    Args:
        grid: 2D array of values in [0, 1]
        colormap: "grayscale" or "terracolor"
        path: Destination file path
    """
    write_png(colorize(grid, colormap), path)
