# renderer/tone_mapping.py
import numpy as np


def gamma2_encode(linear: np.ndarray) -> np.ndarray:
    """
    Gamma-2 encode averaged linear colors and quantize them to 8 bits per
    channel. Works on any array whose last axis is (r, g, b); rounds half
    away from zero and saturates into the byte range.
    """
    encoded = np.sqrt(np.maximum(linear, 0.0)) * 255.0
    return np.clip(np.floor(encoded + 0.5), 0, 255).astype(np.uint8)
