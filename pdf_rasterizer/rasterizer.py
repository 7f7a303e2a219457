"""Page range to raster image conversion built around :class:`PDFDocumentAdapter`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

from .backends.base import RasterBackend
from .document import PDFDocumentAdapter
from .encoders import (
    DEFAULT_FORMAT,
    DEFAULT_JPEG_QUALITY,
    ImageEncoder,
    get_encoder,
    normalize_format,
)
from .exceptions import (
    PageConversionError,
    PageOutOfBoundsError,
    EncodeError,
    RenderError,
)
from .geometry import measure_page
from .pixels import normalize_buffer
from .ranges import parse_range
from .types import ConversionResult, OutputTarget, PageRange
from .utils import resolve_output_dir, time_block

LOGGER = logging.getLogger(__name__)

DEFAULT_DPI = 150

PageNumbers = Union[PageRange, Sequence[int]]
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RasterOptions:
    """Options controlling PDF to image conversion."""

    dpi: int = DEFAULT_DPI
    output_format: str = DEFAULT_FORMAT
    jpeg_quality: int = DEFAULT_JPEG_QUALITY

    def __post_init__(self) -> None:
        if self.dpi < 1:
            raise ValueError(f"DPI must be >= 1, got {self.dpi}")
        object.__setattr__(self, "output_format", normalize_format(self.output_format))


def check_page_bounds(page_numbers: PageNumbers, total_pages: int) -> None:
    """Fail before anything is rendered if the range runs past the document end.

    Only the maximum is compared; a single-interval range cannot have gaps.
    """

    if not page_numbers:
        return
    max_page = max(page_numbers)
    if max_page > total_pages:
        raise PageOutOfBoundsError(
            f"Page range exceeds total pages in PDF: max page {max_page}, "
            f"total pages {total_pages}"
        )


def convert_page(
    document: PDFDocumentAdapter,
    page_number: int,
    *,
    dpi: int,
    target: OutputTarget,
    encoder: ImageEncoder,
) -> Path:
    """Render, normalize and encode a single 1-based page."""

    try:
        page = document.get_page(page_number - 1)
    except Exception as exc:
        raise RenderError(
            f"Failed to get page {page_number}: {exc}",
            page_number=page_number,
            stage="geometry",
        ) from exc

    try:
        try:
            geometry = measure_page(page.width_points, page.height_points, dpi)
        except Exception as exc:
            raise RenderError(
                f"Failed to read size of page {page_number}: {exc}",
                page_number=page_number,
                stage="geometry",
            ) from exc

        if geometry.width_pixels <= 0 or geometry.height_pixels <= 0:
            raise RenderError(
                f"Failed to render page {page_number}: page size "
                f"{geometry.width_points:.2f}x{geometry.height_points:.2f} points gives "
                f"{geometry.width_pixels}x{geometry.height_pixels} pixels at {dpi} DPI",
                page_number=page_number,
            )

        try:
            buffer = page.render(geometry.width_pixels, geometry.height_pixels)
        except Exception as exc:
            raise RenderError(
                f"Failed to render page {page_number}: {exc}",
                page_number=page_number,
            ) from exc
    finally:
        page.close()

    image = normalize_buffer(buffer, page_number=page_number)

    destination = target.path_for(page_number, encoder.extension)
    try:
        return encoder.encode(image, destination, page_number=page_number)
    except PageConversionError:
        raise
    except Exception as exc:
        raise EncodeError(
            f"Unexpected error writing file: {destination}. Error: {exc}",
            page_number=page_number,
        ) from exc


def rasterize_pages(
    document: PDFDocumentAdapter,
    page_numbers: PageNumbers,
    dpi: int,
    output_format: str,
    output_naming: OutputTarget,
    *,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
    progress_callback: Optional[ProgressCallback] = None,
) -> List[Path]:
    """Convert ``page_numbers`` in ascending order, stopping at the first failure."""

    extension = normalize_format(output_format)
    check_page_bounds(page_numbers, document.num_pages)
    encoder = get_encoder(extension, jpeg_quality=jpeg_quality)

    PDFDocumentAdapter.ensure_directory_writable(output_naming.directory)

    total = len(page_numbers)
    created: List[Path] = []
    for index, page_number in enumerate(page_numbers, start=1):
        LOGGER.info("Converting page %d (%d/%d)", page_number, index, total)
        with time_block(LOGGER, f"Page {page_number}"):
            path = convert_page(
                document,
                page_number,
                dpi=dpi,
                target=output_naming,
                encoder=encoder,
            )
        created.append(path)

        if progress_callback:
            progress_callback(index, total)

    return created


def convert(
    document: PDFDocumentAdapter,
    page_numbers: PageNumbers,
    dpi: int,
    output_format: str,
    output_naming: OutputTarget,
    *,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
    progress_callback: Optional[ProgressCallback] = None,
) -> int:
    """Convert pages and return how many were written."""

    created = rasterize_pages(
        document,
        page_numbers,
        dpi,
        output_format,
        output_naming,
        jpeg_quality=jpeg_quality,
        progress_callback=progress_callback,
    )
    return len(created)


class PDFRasterizer:
    """High-level PDF to image operations."""

    def __init__(
        self,
        input_path: Union[str, Path],
        *,
        backend: Optional[RasterBackend] = None,
    ) -> None:
        self.input_path = str(input_path)
        self._adapter = PDFDocumentAdapter(input_path, backend=backend)
        self.num_pages = self._adapter.num_pages

    def __enter__(self) -> "PDFRasterizer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._adapter.close()

    def get_page_count(self) -> int:
        return self.num_pages

    @staticmethod
    def _resolve_pages(pages: Union[str, PageRange, Iterable[int]]) -> PageNumbers:
        if isinstance(pages, str):
            return parse_range(pages)
        if isinstance(pages, PageRange):
            return pages

        page_list = sorted(set(pages))
        for page_num in page_list:
            if page_num < 1:
                raise PageOutOfBoundsError(
                    f"Invalid page number: {page_num}. Page numbers must be >= 1."
                )
        return page_list

    def output_target(self, output_dir: Optional[Union[str, Path]] = None) -> OutputTarget:
        directory = resolve_output_dir(self.input_path, output_dir)
        return OutputTarget(directory=directory, stem=Path(self.input_path).stem)

    def convert_pages(
        self,
        pages: Union[str, PageRange, Iterable[int]],
        output_dir: Optional[Union[str, Path]] = None,
        options: Optional[RasterOptions] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[str]:
        options = options or RasterOptions()
        created = rasterize_pages(
            self._adapter,
            self._resolve_pages(pages),
            options.dpi,
            options.output_format,
            self.output_target(output_dir),
            jpeg_quality=options.jpeg_quality,
            progress_callback=progress_callback,
        )
        return [str(path) for path in created]

    def convert_pages_with_result(
        self,
        pages: Union[str, PageRange, Iterable[int]],
        output_dir: Optional[Union[str, Path]] = None,
        options: Optional[RasterOptions] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        options = options or RasterOptions()
        files = self.convert_pages(
            pages,
            output_dir=output_dir,
            options=options,
            progress_callback=progress_callback,
        )
        return ConversionResult(
            success=True,
            source_file=self.input_path,
            output_dir=str(self.output_target(output_dir).directory),
            output_format=options.output_format,
            dpi=options.dpi,
            files_created=files,
            total_files=len(files),
        )


__all__ = [
    "DEFAULT_DPI",
    "PDFRasterizer",
    "RasterOptions",
    "check_page_bounds",
    "convert",
    "convert_page",
    "rasterize_pages",
]
