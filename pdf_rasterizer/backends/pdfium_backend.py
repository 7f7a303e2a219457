"""pypdfium2 backend implementation for PDF Rasterizer."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pypdfium2 as pdfium
import pypdfium2.raw as pdfium_c

from ..exceptions import InvalidPDFError, PageOutOfBoundsError
from ..types import RasterBuffer
from .base import BackendDocument, BackendPage, RasterBackend

LOGGER = logging.getLogger(__name__)


def fit_scale(
    width_points: float,
    height_points: float,
    target_width: int,
    max_height: int,
) -> float:
    """Largest scale whose rendered bitmap fits within ``target_width`` x ``max_height``.

    pypdfium2 sizes the bitmap as ``ceil(points * scale)``, so a scale that is
    exact on paper can still overshoot by one pixel through float error. The
    scale is stepped down one ulp at a time until both dimensions fit.
    """

    scale = min(target_width / width_points, max_height / height_points)
    while scale > 0 and (
        math.ceil(width_points * scale) > target_width
        or math.ceil(height_points * scale) > max_height
    ):
        scale = math.nextafter(scale, 0.0)
    return scale


def _bitmap_bytes(bitmap: Any) -> bytes:
    """Copy bitmap pixels, dropping any per-row stride padding."""

    raw = bytes(bitmap.buffer)
    row_length = bitmap.width * bitmap.n_channels
    if bitmap.stride == row_length:
        return raw[: row_length * bitmap.height]
    return b"".join(
        raw[row * bitmap.stride : row * bitmap.stride + row_length]
        for row in range(bitmap.height)
    )


class PdfiumPage(BackendPage):
    def __init__(self, page: pdfium.PdfPage) -> None:
        self._page = page

    @property
    def width_points(self) -> float:
        return float(self._page.get_width())

    @property
    def height_points(self) -> float:
        return float(self._page.get_height())

    def render(self, target_width: int, max_height: int) -> RasterBuffer:
        if target_width <= 0 or max_height <= 0:
            raise ValueError(
                f"Cannot render at {target_width}x{max_height} pixels; page size is "
                f"{self.width_points:.2f}x{self.height_points:.2f} points."
            )

        scale = fit_scale(self.width_points, self.height_points, target_width, max_height)
        bitmap = self._page.render(
            scale=scale,
            force_bitmap_format=pdfium_c.FPDFBitmap_BGRA,
        )
        try:
            data = _bitmap_bytes(bitmap)
            width, height = bitmap.width, bitmap.height
        finally:
            bitmap.close()

        if (width, height) != (target_width, max_height):
            LOGGER.debug(
                "Requested %dx%d, renderer produced %dx%d",
                target_width,
                max_height,
                width,
                height,
            )
        return RasterBuffer(data=data, width=width, height=height)

    def close(self) -> None:
        self._page.close()


@dataclass
class PdfiumDocument(BackendDocument):
    pdf: pdfium.PdfDocument

    def get_page(self, index: int) -> PdfiumPage:
        if index < 0 or index >= self.num_pages:
            raise PageOutOfBoundsError(
                f"Page index {index} is out of bounds. PDF has {self.num_pages} pages."
            )
        return PdfiumPage(self.pdf[index])

    def close(self) -> None:
        self.pdf.close()


class PdfiumBackend(RasterBackend):
    """Backend implementation that uses `pypdfium2` under the hood."""

    def load(self, pdf_path: str) -> PdfiumDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file does not exist: {pdf_path}")

        try:
            pdf = pdfium.PdfDocument(str(path))
        except pdfium.PdfiumError as exc:
            raise InvalidPDFError(f"Failed to open PDF file: {pdf_path}. Error: {exc}") from exc
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        num_pages = len(pdf)
        if num_pages == 0:
            pdf.close()
            raise InvalidPDFError(f"PDF has no pages: {pdf_path}")

        return PdfiumDocument(num_pages=num_pages, file_size=path.stat().st_size, pdf=pdf)
