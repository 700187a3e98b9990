# filters/blur.py
import logging

import numpy as np

from filters.codec import pack, unpack
from filters.image import PackedImage
from filters.kernels import application_radius, check_sigma, gaussian_kernel

log = logging.getLogger(__name__)

DEFAULT_WINDOW = "full"


def _pad_edge(arr: np.ndarray, pad: int) -> np.ndarray:
    if pad == 0:
        return arr
    return np.pad(arr, ((0, 0), (pad, pad)), mode="edge")


def _conv1d_rows(chan: np.ndarray, kernel: np.ndarray, radius: int) -> np.ndarray:
    """1-D pass along each row, clamp-to-edge. Reads kernel[0 .. 2*radius]."""
    W = chan.shape[1]
    p = _pad_edge(chan, radius)
    acc = np.zeros(chan.shape, dtype=np.float64)
    for k in range(-radius, radius + 1):
        acc += kernel[k + radius] * p[:, (radius + k):(radius + k + W)]
    return acc


def _pass(grid: np.ndarray, kernel: np.ndarray, radius: int) -> np.ndarray:
    """Convolve each channel of a packed HxW grid along rows, re-pack (truncating)."""
    sums = [_conv1d_rows(c, kernel, radius) for c in unpack(grid)]
    return pack(*sums)


def apply_blur(image: PackedImage, sigma: float, window: str = DEFAULT_WINDOW) -> PackedImage:
    """
    Separable Gaussian blur, horizontal then vertical, edge replication on both.
    Channels are quantized to ints between the passes.

    window: 'full' uses the whole generated kernel,
            'legacy' reads only floor(sigma)*3 taps per side from the kernel start.
    """
    sigma = check_sigma(sigma)
    kernel = gaussian_kernel(sigma)
    radius = application_radius(sigma, window)
    log.debug("blur %dx%d sigma=%s window=%s radius=%d",
              image.width, image.height, sigma, window, radius)

    if image.width == 0 or image.height == 0:
        return image

    grid = image.as_grid()
    horiz = _pass(grid, kernel, radius)
    # transpose to reuse the row pass for columns
    vert = _pass(horiz.T, kernel, radius).T

    image.pixels[:] = vert.reshape(-1)
    return image
