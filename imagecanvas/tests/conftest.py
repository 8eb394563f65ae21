import pytest

from imagecanvas.tests.helpers import create_test_image


@pytest.fixture
def png_bytes() -> bytes:
    return create_test_image(size=(80, 40), color=(255, 0, 0), format="PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return create_test_image(size=(80, 40), color=(255, 0, 0), format="JPEG")


@pytest.fixture
def rgba_png_bytes() -> bytes:
    return create_test_image(size=(40, 80), color=(0, 0, 255, 128), mode="RGBA", format="PNG")
