import io

from PIL import Image


def create_test_image(
    size: tuple[int, int] = (100, 100),
    color: tuple[int, ...] | str = (255, 0, 0),
    mode: str = "RGB",
    format: str = "PNG",
) -> bytes:
    img = Image.new(mode, size, color)
    buf = io.BytesIO()
    img.save(buf, format=format)
    return buf.getvalue()


def open_image(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img
