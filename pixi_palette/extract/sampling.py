import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

MAX_SAMPLES = 25000
MAX_IMAGE_DIMENSION = 800
MIN_ALPHA = 200  # anything below is treated as transparent
DARK_CUTOFF = 10  # every channel below this counts as black
LIGHT_CUTOFF = 245  # every channel above this counts as white


def load_rgba_pixels(image_path, max_dimension=MAX_IMAGE_DIMENSION):
    """Decode an image into an (N, 4) uint8 array of RGBA pixels.

    Large images are scaled down so the longer side is at most ``max_dimension``.
    """
    with Image.open(image_path) as img:
        img = img.convert("RGBA")
        img.thumbnail((max_dimension, max_dimension))
        logger.debug("Loaded %s at %dx%d", image_path, img.width, img.height)
        return np.asarray(img, dtype=np.uint8).reshape(-1, 4)


def sample_pixels(rgba, max_samples=MAX_SAMPLES):
    """Subsample RGBA pixels and drop the ones that carry no color information.

    Args:
        rgba: Flat sequence of r, g, b, a values, or an array shaped (..., 4)
        max_samples: Stride is chosen so roughly this many pixels are visited

    Returns:
        (M, 3) integer array of RGB pixels
    """
    pixels = np.asarray(rgba, dtype=np.int64).reshape(-1, 4)
    if len(pixels) == 0:
        return np.empty((0, 3), dtype=np.int64)

    skip_factor = max(1, len(pixels) // max_samples)
    pixels = pixels[::skip_factor]

    rgb = pixels[:, :3]
    opaque = pixels[:, 3] >= MIN_ALPHA
    near_black = np.all(rgb < DARK_CUTOFF, axis=1)
    near_white = np.all(rgb > LIGHT_CUTOFF, axis=1)

    sampled = rgb[opaque & ~near_black & ~near_white]
    logger.debug(
        "Sampled %d of %d pixels (skip factor %d)", len(sampled), len(pixels) * skip_factor, skip_factor
    )
    return sampled
