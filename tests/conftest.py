import io

import numpy as np
import pytest
from PIL import Image

from app import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "RESULT_DIR": str(tmp_path / "results"),
        "LOG_LEVEL": "DEBUG",
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def png_bytes(rgb: np.ndarray) -> io.BytesIO:
    buf = io.BytesIO()
    Image.fromarray(rgb.astype(np.uint8)).save(buf, format="PNG")
    buf.seek(0)
    return buf


@pytest.fixture
def uploaded(client):
    """Uploads a 5x5 mid-gray PNG and returns its stored filename."""
    rgb = np.full((5, 5, 3), 127, dtype=np.uint8)
    res = client.post(
        "/upload",
        data={"image": (png_bytes(rgb), "gray.png")},
        content_type="multipart/form-data",
    )
    assert res.status_code == 200
    return res.get_json()["filename"]
