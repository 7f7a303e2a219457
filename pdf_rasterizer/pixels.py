"""Normalization of raw renderer buffers into canonical RGB pixel data."""

from __future__ import annotations

from typing import Optional, Union

from .exceptions import PixelFormatError
from .types import CanonicalImage, RasterBuffer

BufferLike = Union[bytes, bytearray, memoryview]

BGRA_CHANNELS = 4
RGB_CHANNELS = 3


def bgra_to_rgb(raw: BufferLike) -> bytes:
    """Drop alpha and reverse channel order for every 4-byte BGRA group."""

    source = bytes(raw)
    rgb = bytearray(len(source) // BGRA_CHANNELS * RGB_CHANNELS)
    rgb[0::3] = source[2::4]
    rgb[1::3] = source[1::4]
    rgb[2::3] = source[0::4]
    return bytes(rgb)


def normalize(
    raw: BufferLike,
    width: int,
    height: int,
    page_number: Optional[int] = None,
) -> CanonicalImage:
    """
    Convert a BGRA or RGB buffer into a :class:`CanonicalImage`.

    Args:
        raw: Pixel data, either 4 bytes (B, G, R, A) or 3 bytes (R, G, B) per pixel
        width: Pixel width the buffer was rendered at
        height: Pixel height the buffer was rendered at
        page_number: 1-based page number, used in error messages

    Returns:
        CanonicalImage whose data holds exactly ``width * height * 3`` bytes

    Raises:
        PixelFormatError: If the buffer length matches neither layout
    """
    buffer = RasterBuffer(data=bytes(raw), width=width, height=height)
    return normalize_buffer(buffer, page_number=page_number)


def normalize_buffer(buffer: RasterBuffer, page_number: Optional[int] = None) -> CanonicalImage:
    """Normalize a renderer result using its own reported dimensions."""

    channels = buffer.channels
    if channels == BGRA_CHANNELS:
        data = bgra_to_rgb(buffer.data)
    elif channels == RGB_CHANNELS:
        data = buffer.data
    else:
        pixel_count = buffer.width * buffer.height
        rgb_length = pixel_count * RGB_CHANNELS
        bgra_length = pixel_count * BGRA_CHANNELS
        actual = len(buffer.data)
        page = f"page {page_number}" if page_number is not None else "page"
        raise PixelFormatError(
            f"Unsupported pixel format ({page}): expected {rgb_length} or "
            f"{bgra_length} bytes, got {actual} bytes",
            page_number=page_number,
            expected_lengths=(rgb_length, bgra_length),
            actual_length=actual,
        )

    return CanonicalImage(data=data, width=buffer.width, height=buffer.height)


__all__ = ["bgra_to_rgb", "normalize", "normalize_buffer"]
