# filters/image.py
from dataclasses import dataclass

import numpy as np

from filters.errors import MalformedImageError


@dataclass
class PackedImage:
    """
    width x height raster, pixels stored row-major as packed 0xRRGGBB ints.
    Filters mutate `pixels` in place.
    """
    width: int
    height: int
    pixels: np.ndarray  # shape (width*height,), int64

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise MalformedImageError(f"Negative size {self.width}x{self.height}")
        self.pixels = np.asarray(self.pixels, dtype=np.int64).reshape(-1)
        if self.pixels.size != self.width * self.height:
            raise MalformedImageError(
                f"Expected {self.width * self.height} pixels for "
                f"{self.width}x{self.height}, got {self.pixels.size}"
            )

    @classmethod
    def filled(cls, width: int, height: int, value: int) -> "PackedImage":
        return cls(width, height, np.full(width * height, value, dtype=np.int64))

    def as_grid(self) -> np.ndarray:
        """HxW view onto `pixels` (writes go through)."""
        return self.pixels.reshape(self.height, self.width)
