# renderer/image_io.py
import os
import sys
from typing import Iterator, Optional, TextIO, Tuple

import numpy as np
from PIL import Image


def iter_pixels(image: np.ndarray) -> Iterator[Tuple[int, int, int]]:
    """
    Yields (r, g, b) triples in output order: highest row index first,
    columns left to right within a row.
    """
    height, width, _ = image.shape
    for row in range(height - 1, -1, -1):
        for column in range(width):
            r, g, b = image[row, column]
            yield int(r), int(g), int(b)


def write_ppm(image: np.ndarray, stream: Optional[TextIO] = None) -> None:
    """
    Writes a plain-text P3 image, one "r g b" line per pixel.
    """
    if stream is None:
        stream = sys.stdout
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in iter_pixels(image):
        stream.write(f"{r} {g} {b}\n")


def save_image(image: np.ndarray, path: str) -> None:
    """
    Saves the image to path. .ppm paths get the plain-text writer; every
    other extension goes through Pillow.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if path.lower().endswith(".ppm"):
        with open(path, "w") as f:
            write_ppm(image, f)
        return
    # Pillow wants the top row first
    Image.fromarray(np.ascontiguousarray(np.flipud(image))).save(path)
