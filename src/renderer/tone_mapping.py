# renderer/tone_mapping.py
import os

import numpy as np
from numba import njit
from PIL import Image

@njit(cache=True)
def _gamma_encode_kernel(radiance, inv_gamma, output):
    height, width, channels = radiance.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = radiance[y, x, c]
                # NaN fails this test too.
                if not value > 0.0:
                    output[y, x, c] = 0
                    continue
                encoded = value ** inv_gamma
                output[y, x, c] = 255 if encoded >= 255.0 else int(encoded)

def gamma_encode(radiance: np.ndarray, gamma: float = 2.2) -> np.ndarray:
    """
    Encode a linear radiance image to 8-bit: value^(1/gamma), truncated and
    clamped to [0, 255].
    """
    if radiance.ndim != 3 or radiance.shape[2] != 3:
        raise ValueError(f"expected an (height, width, 3) image, got shape {radiance.shape}")
    output = np.empty(radiance.shape, dtype=np.uint8)
    _gamma_encode_kernel(np.ascontiguousarray(radiance, dtype=np.float64), 1.0 / gamma, output)
    return output

def save_image(pixels: np.ndarray, path: str) -> str:
    """
    Write an 8-bit RGB image. The format follows the file extension.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != np.uint8:
        raise ValueError("expected a uint8 array of shape (height, width, 3)")
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(pixels).save(path)
    return path
