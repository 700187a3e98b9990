# filters/kernels.py
import logging
import math

import numpy as np

from filters.errors import InvalidParameterError

log = logging.getLogger(__name__)

WINDOWS = ("full", "legacy")


def check_sigma(sigma) -> float:
    try:
        s = float(sigma)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"sigma must be a number, got {sigma!r}") from None
    if not math.isfinite(s) or s <= 0:
        raise InvalidParameterError(f"sigma must be a positive finite number, got {sigma!r}")
    return s


def half_length(sigma: float) -> int:
    return int(math.ceil(5.0 * sigma + 1.0))


def gaussian_kernel(sigma: float) -> np.ndarray:
    """
    Discrete 1-D Gaussian, truncated at ~5 sigma and NOT renormalized.
    Length is 2*half_length - 1, symmetric, lowest offset first.
    """
    sigma = check_sigma(sigma)
    n = half_length(sigma)
    i = np.arange(n, dtype=np.float64)
    # one-sided profile: temp[0] is the peak
    temp = (1.0 / math.sqrt(2.0 * math.pi * sigma * sigma)) * np.exp(-(i * i) / (2.0 * sigma * sigma))
    kernel = np.concatenate([temp[:0:-1], temp])
    log.debug("gaussian kernel sigma=%s len=%d sum=%.6f", sigma, kernel.size, kernel.sum())
    return kernel


def application_radius(sigma: float, window: str = "full") -> int:
    """
    Taps read on each side of the window start.
      full   -> half_length - 1, the whole generated kernel
      legacy -> floor(sigma) * 3, independent of the kernel's extent
    """
    sigma = check_sigma(sigma)
    if window == "full":
        return half_length(sigma) - 1
    if window == "legacy":
        return int(math.floor(sigma)) * 3
    raise InvalidParameterError(f"Unknown blur window {window!r}, expected one of {WINDOWS}")
