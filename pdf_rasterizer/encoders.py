"""Image encoders that write canonical RGB buffers to disk using Pillow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from PIL import Image

from .exceptions import EncodeError, ImageConstructionError, UnsupportedFormatError
from .types import CanonicalImage

LOGGER = logging.getLogger(__name__)

DEFAULT_FORMAT = "png"
DEFAULT_JPEG_QUALITY = 95

SUPPORTED_FORMATS = ("png", "jpeg", "jpg")

_FORMAT_ALIASES = {"jpg": "jpeg"}


def normalize_format(output_format: str) -> str:
    """Lower-case ``output_format`` and map ``jpg`` to ``jpeg``."""

    fmt = (output_format or "").strip().lower()
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported output format: {output_format}. Only png or jpeg are supported."
        )
    return _FORMAT_ALIASES.get(fmt, fmt)


def to_pil_image(image: CanonicalImage, page_number: Optional[int] = None) -> Image.Image:
    try:
        return Image.frombytes("RGB", (image.width, image.height), image.data)
    except (ValueError, TypeError) as exc:
        raise ImageConstructionError(
            f"Failed to create image (page {page_number}): {exc}",
            page_number=page_number,
        ) from exc


class ImageEncoder(Protocol):
    """Protocol for writers that persist a canonical image to ``destination``."""

    extension: str

    def encode(
        self,
        image: CanonicalImage,
        destination: Union[str, Path],
        *,
        page_number: Optional[int] = None,
    ) -> Path:
        """Write ``image`` and return the written path."""


class PillowEncoder:
    """Base class for Pillow-backed encoders."""

    extension = ""
    pil_format = ""
    label = ""

    def save_options(self) -> Dict[str, object]:
        return {}

    def encode(
        self,
        image: CanonicalImage,
        destination: Union[str, Path],
        *,
        page_number: Optional[int] = None,
    ) -> Path:
        path = Path(destination)
        pil_image = to_pil_image(image, page_number=page_number)
        try:
            pil_image.save(path, format=self.pil_format, **self.save_options())
        except (OSError, ValueError) as exc:
            raise EncodeError(
                f"Failed to save {self.label} file {path}: {exc}",
                page_number=page_number,
            ) from exc
        finally:
            pil_image.close()

        LOGGER.debug("Wrote %s (%dx%d)", path, image.width, image.height)
        return path


class PngEncoder(PillowEncoder):
    extension = "png"
    pil_format = "PNG"
    label = "PNG"


class JpegEncoder(PillowEncoder):
    extension = "jpeg"
    pil_format = "JPEG"
    label = "JPEG"

    def __init__(self, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        if not 1 <= quality <= 100:
            raise ValueError(f"JPEG quality must be between 1 and 100, got {quality}")
        self.quality = quality

    def save_options(self) -> Dict[str, object]:
        return {"quality": self.quality}


def get_encoder(extension: str, *, jpeg_quality: int = DEFAULT_JPEG_QUALITY) -> ImageEncoder:
    """Return the encoder for a normalized extension (``png`` or ``jpeg``)."""

    if extension == "png":
        return PngEncoder()
    if extension == "jpeg":
        return JpegEncoder(quality=jpeg_quality)
    raise UnsupportedFormatError(f"Unsupported format: {extension}")


__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_JPEG_QUALITY",
    "SUPPORTED_FORMATS",
    "ImageEncoder",
    "JpegEncoder",
    "PngEncoder",
    "get_encoder",
    "normalize_format",
    "to_pil_image",
]
