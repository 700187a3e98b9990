import io
import numpy as np
from PIL import Image

from filters.codec import pack, unpack
from filters.image import PackedImage

def allowed(filename: str, allowed_exts: set) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in allowed_exts

def parse_sigma(text) -> float:
    """Text field -> float. Raises ValueError on anything that doesn't parse."""
    if text is None:
        raise ValueError("sigma is missing")
    return float(str(text).strip())

def pil_to_bytes(pil_img: Image.Image, fmt="PNG") -> io.BytesIO:
    buf = io.BytesIO()
    pil_img.save(buf, format=fmt)
    buf.seek(0)
    return buf

def from_pil(pil_img: Image.Image) -> PackedImage:
    """Any PIL image -> packed 0xRRGGBB, alpha dropped."""
    if pil_img.mode != "RGB":
        pil_img = pil_img.convert("RGB")
    rgb = np.array(pil_img, dtype=np.int64)
    H, W = rgb.shape[:2]
    pixels = pack(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    return PackedImage(W, H, pixels.reshape(-1))

def to_pil(image: PackedImage) -> Image.Image:
    # each channel masked to 8 bits, top byte ignored
    r, g, b = unpack(image.as_grid())
    rgb = np.stack([r, g, b], axis=-1).astype(np.uint8)
    return Image.fromarray(rgb)
