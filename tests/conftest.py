import pytest
from PIL import Image

from rim.logging import set_enabled


@pytest.fixture(autouse=True)
def quiet_log():
    set_enabled(False)
    yield
    set_enabled(True)


@pytest.fixture
def make_image():
    """Write a small real image file and return its path as a string."""
    def _make(path, size=(8, 6)):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, (40, 80, 120)).save(path, format="PNG")
        return str(path)
    return _make
