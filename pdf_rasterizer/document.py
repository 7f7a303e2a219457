"""Adapter utilities for interacting with PDF files via pluggable backends."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .backends import BackendDocument, BackendPage, PdfiumBackend
from .backends.base import RasterBackend
from .exceptions import OutputDirectoryError, PageOutOfBoundsError


class PDFDocumentAdapter:
    """High level helper around a backend-specific PDF document."""

    def __init__(
        self,
        pdf_path: Union[str, Path],
        *,
        backend: Optional[RasterBackend] = None,
    ) -> None:
        self.path = Path(pdf_path)
        self.backend: RasterBackend = backend or PdfiumBackend()
        self._document: BackendDocument = self.backend.load(str(pdf_path))
        self._closed = False

    def __enter__(self) -> "PDFDocumentAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Basic document information helpers
    # ------------------------------------------------------------------
    @property
    def document(self) -> BackendDocument:
        return self._document

    @property
    def num_pages(self) -> int:
        return self._document.num_pages

    @property
    def file_size(self) -> int:
        return self._document.file_size

    @property
    def stem(self) -> str:
        return self.path.stem

    # ------------------------------------------------------------------
    # Interaction helpers
    # ------------------------------------------------------------------
    def get_page(self, page_number_zero_indexed: int) -> BackendPage:
        if not 0 <= page_number_zero_indexed < self.num_pages:
            raise PageOutOfBoundsError(
                f"Page {page_number_zero_indexed + 1} is out of bounds. "
                f"PDF has {self.num_pages} pages."
            )
        return self._document.get_page(page_number_zero_indexed)

    def close(self) -> None:
        if not self._closed:
            self._document.close()
            self._closed = True

    # ------------------------------------------------------------------
    @staticmethod
    def ensure_directory_writable(directory: Union[str, Path]) -> Path:
        path = Path(directory)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"Failed to create output directory {directory}: {exc}"
            ) from exc

        probe = path / ".pdf_rasterizer_probe"
        try:
            with probe.open("wb") as handle:
                handle.write(b"0")
            probe.unlink(missing_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"Cannot write to directory: {directory}. Error: {exc}"
            ) from exc

        return path


__all__ = ["PDFDocumentAdapter"]
