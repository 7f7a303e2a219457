from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from pdf_rasterizer.encoders import (
    JpegEncoder,
    PngEncoder,
    get_encoder,
    normalize_format,
    to_pil_image,
)
from pdf_rasterizer.exceptions import (
    EncodeError,
    ImageConstructionError,
    UnsupportedFormatError,
)
from pdf_rasterizer.types import CanonicalImage


def _solid(width: int, height: int, rgb: tuple) -> CanonicalImage:
    return CanonicalImage(data=bytes(rgb) * (width * height), width=width, height=height)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("png", "png"), ("PNG", "png"), ("jpeg", "jpeg"), ("jpg", "jpeg"), (" JPG ", "jpeg")],
)
def test_normalize_format(raw: str, expected: str) -> None:
    assert normalize_format(raw) == expected


@pytest.mark.parametrize("raw", ["gif", "tiff", "", "jp"])
def test_normalize_format_rejects_unknown(raw: str) -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        normalize_format(raw)
    assert "Only png or jpeg are supported" in str(excinfo.value)


def test_get_encoder_dispatch() -> None:
    assert isinstance(get_encoder("png"), PngEncoder)
    encoder = get_encoder("jpeg", jpeg_quality=80)
    assert isinstance(encoder, JpegEncoder)
    assert encoder.quality == 80
    assert encoder.extension == "jpeg"


def test_get_encoder_refuses_unnormalized_alias() -> None:
    with pytest.raises(UnsupportedFormatError):
        get_encoder("jpg")


def test_jpeg_quality_bounds() -> None:
    with pytest.raises(ValueError):
        JpegEncoder(quality=0)


def test_png_encoder_writes_exact_pixels(tmp_path: Path) -> None:
    image = CanonicalImage(data=bytes([255, 0, 0, 0, 255, 0]), width=2, height=1)
    destination = PngEncoder().encode(image, tmp_path / "out.png", page_number=1)

    assert destination.exists()
    with Image.open(destination) as written:
        assert written.format == "PNG"
        assert written.mode == "RGB"
        assert written.size == (2, 1)
        assert written.getpixel((0, 0)) == (255, 0, 0)
        assert written.getpixel((1, 0)) == (0, 255, 0)


def test_jpeg_encoder_writes_jpeg(tmp_path: Path) -> None:
    destination = JpegEncoder().encode(_solid(8, 4, (0, 0, 255)), tmp_path / "out.jpeg")

    with Image.open(destination) as written:
        assert written.format == "JPEG"
        assert written.size == (8, 4)


def test_image_construction_error_on_short_buffer() -> None:
    image = CanonicalImage(data=b"\x00" * 5, width=2, height=2)
    with pytest.raises(ImageConstructionError) as excinfo:
        to_pil_image(image, page_number=3)
    assert excinfo.value.page_number == 3
    assert "page 3" in str(excinfo.value)


def test_encode_error_when_directory_missing(tmp_path: Path) -> None:
    destination = tmp_path / "missing" / "out.png"
    with pytest.raises(EncodeError) as excinfo:
        PngEncoder().encode(_solid(1, 1, (1, 2, 3)), destination, page_number=2)
    assert excinfo.value.page_number == 2
    assert excinfo.value.stage == "encode"
    assert "Failed to save PNG file" in str(excinfo.value)
