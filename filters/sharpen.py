# filters/sharpen.py
import numpy as np

from filters.codec import pack, unpack
from filters.image import PackedImage

SHARPEN_KERNEL = np.array([[ 0, -1,  0],
                           [-1,  5, -1],
                           [ 0, -1,  0]], dtype=np.float64)


def _conv3x3_interior(chan: np.ndarray, k: np.ndarray) -> np.ndarray:
    """Weighted 3x3 sums for interior cells only -> (H-2)x(W-2)."""
    H, W = chan.shape
    acc = np.zeros((H - 2, W - 2), dtype=np.float64)
    for dy in range(3):
        for dx in range(3):
            acc += k[dy, dx] * chan[dy:dy + H - 2, dx:dx + W - 2]
    return acc


def apply_sharpen(image: PackedImage) -> PackedImage:
    """
    Fixed 3x3 sharpen. The 1px border is never written, so it comes out as 0
    (black); images narrower or shorter than 3px become all black.
    """
    H, W = image.height, image.width
    out = PackedImage.filled(W, H, 0).as_grid()

    if H >= 3 and W >= 3:
        grid = image.as_grid()
        sums = [_conv3x3_interior(c, SHARPEN_KERNEL) for c in unpack(grid)]
        out[1:-1, 1:-1] = pack(*sums)

    image.pixels[:] = out.reshape(-1)
    return image
