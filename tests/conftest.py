import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a solid-color test image and returning its path"""

    def _make(name="source.png", size=(64, 64), color=(200, 30, 30, 255), mode="RGBA", fmt=None):
        path = tmp_path / name
        Image.new(mode, size, color if mode == "RGBA" else color[:3]).save(path, fmt)
        return str(path)

    return _make


@pytest.fixture
def source_png(make_image):
    return make_image()


@pytest.fixture
def wide_jpeg(make_image):
    """400x200 opaque JPEG"""
    return make_image("wide.jpg", size=(400, 200), mode="RGB", fmt="JPEG")


@pytest.fixture
def corrupt_image(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"this is not an image")
    return str(path)
