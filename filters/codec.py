# filters/codec.py
import numpy as np

R_SHIFT, G_SHIFT = 16, 8
CHANNEL_MASK = 0xFF


def unpack(pixel):
    """
    pixel: packed int (or int array) -> (r, g, b)
    Top 8 bits are ignored.
    """
    r = (pixel >> R_SHIFT) & CHANNEL_MASK
    g = (pixel >> G_SHIFT) & CHANNEL_MASK
    b = pixel & CHANNEL_MASK
    return r, g, b


def _trunc(x):
    # toward zero, not floor
    if isinstance(x, np.ndarray):
        return x.astype(np.int64)
    return int(x)


def pack(r, g, b):
    """
    Re-assemble three channel sums into one packed value.
    Sums are truncated, never clamped: out-of-range values bleed into
    neighbouring channels.
    """
    return (_trunc(r) << R_SHIFT) | (_trunc(g) << G_SHIFT) | _trunc(b)
