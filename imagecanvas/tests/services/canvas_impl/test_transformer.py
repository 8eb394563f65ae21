import logging
from unittest.mock import MagicMock

import pytest

from imagecanvas.services.canvas_impl.background import resolve_background
from imagecanvas.services.canvas_impl.codec import PillowCodec
from imagecanvas.services.canvas_impl.formats import OutputFormat
from imagecanvas.services.canvas_impl.naming import FilenameGenerator
from imagecanvas.services.canvas_impl.planner import ResizeTarget
from imagecanvas.services.canvas_impl.schemas import SourceImage
from imagecanvas.services.canvas_impl.transformer import CanvasTransformer
from imagecanvas.services.exceptions import DecodeError
from imagecanvas.tests.helpers import create_test_image, open_image


@pytest.fixture
def transformer():
    return CanvasTransformer(codec=PillowCodec(), filename_generator=FilenameGenerator(clock=lambda: 1.0, token_factory=lambda: "ffffff"))


def test_transform_jpeg_on_white(transformer, caplog):
    caplog.set_level(logging.INFO)
    source = SourceImage(create_test_image(size=(800, 400), format="JPEG"), name="shoe.jpg", declared_mime_type="image/jpeg")

    result = transformer.transform(source, resolve_background(None), ResizeTarget(1000))

    assert result.success is True
    assert result.index == 0
    assert result.output_format is OutputFormat.JPEG
    assert result.original_dimensions == (800, 400)
    assert result.original_name == "shoe.jpg"
    assert result.box_size == 1000
    assert result.filename == "shoe_resized_1000_0_ffffff.jpeg"
    assert result.content_type == "image/jpeg"
    with open_image(result.encoded_bytes) as out:
        assert out.size == (1000, 1000)
        assert all(c >= 250 for c in out.getpixel((500, 100)))
    assert "shoe.jpg 800x400 -> 1000x1000 jpeg" in caplog.text


def test_transform_transparent_background_outputs_png(transformer):
    source = SourceImage(create_test_image(size=(50, 100), format="JPEG"), name="tall.jpg", declared_mime_type="image/jpeg")

    result = transformer.transform(source, resolve_background("transparent"), ResizeTarget(100), index=2)

    assert result.output_format is OutputFormat.PNG
    assert result.index == 2
    assert result.filename.endswith("_2_ffffff.png")
    with open_image(result.encoded_bytes) as out:
        assert out.mode == "RGBA"
        assert out.getpixel((0, 50))[3] == 0


def test_transform_png_source_stays_png(transformer, png_bytes):
    source = SourceImage(png_bytes, name="logo.png", declared_mime_type="image/png")

    result = transformer.transform(source, resolve_background("#336699"), ResizeTarget(200))

    assert result.output_format is OutputFormat.PNG
    with open_image(result.encoded_bytes) as out:
        assert out.getpixel((0, 0))[:3] == (51, 102, 153)


def test_transform_alpha_source_outputs_png(transformer, rgba_png_bytes):
    source = SourceImage(rgba_png_bytes, name="overlay", declared_mime_type="application/octet-stream")

    result = transformer.transform(source, resolve_background("ffffff"), ResizeTarget(80))

    assert result.output_format is OutputFormat.PNG
    assert result.original_dimensions == (40, 80)


def test_transform_corrupt_source_raises(transformer):
    with pytest.raises(DecodeError):
        transformer.transform(SourceImage(b"not an image", name="bad.png"), resolve_background(None), ResizeTarget(10))


def test_transform_uses_injected_compositor():
    codec = PillowCodec()
    compositor = MagicMock()
    compositor.composite.return_value = b"encoded"
    transformer = CanvasTransformer(codec=codec, compositor=compositor)

    result = transformer.transform(SourceImage(create_test_image(size=(10, 20))), resolve_background(None), ResizeTarget(40))

    assert result.encoded_bytes == b"encoded"
    _, plan, _, output_format = compositor.composite.call_args.args
    assert plan.scaled_size == (20, 40)
    assert plan.offset == (10, 0)
    assert output_format is OutputFormat.JPEG
