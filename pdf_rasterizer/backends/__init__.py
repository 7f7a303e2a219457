"""Backend abstractions for PDF Rasterizer."""

from .base import BackendDocument, BackendPage, RasterBackend
from .pdfium_backend import PdfiumBackend

__all__ = [
    "BackendDocument",
    "BackendPage",
    "RasterBackend",
    "PdfiumBackend",
]
