"""
Type definitions and dataclasses for PDF Rasterizer.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class PageRange:
    """
    Inclusive interval of 1-based page numbers.

    Attributes:
        start: First page of the range (>= 1)
        end: Last page of the range (>= start)
    """
    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1

    @property
    def pages(self) -> List[int]:
        return list(self)

    @property
    def max_page(self) -> int:
        return self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class PageGeometry:
    """
    Physical page size in points and the pixel size derived from a DPI.

    Attributes:
        width_points: Page width in PDF points (1/72 inch)
        height_points: Page height in PDF points
        dpi: Rendering density the pixel size was computed for
        width_pixels: Target pixel width
        height_pixels: Target pixel height
    """
    width_points: float
    height_points: float
    dpi: int
    width_pixels: int
    height_pixels: int


@dataclass(frozen=True)
class RasterBuffer:
    """Raw pixel data returned by a renderer, in BGRA or RGB layout."""

    data: bytes
    width: int
    height: int

    @property
    def channels(self) -> Optional[int]:
        pixel_count = self.width * self.height
        for channels in (4, 3):
            if len(self.data) == pixel_count * channels:
                return channels
        return None


@dataclass(frozen=True)
class CanonicalImage:
    """Three bytes per pixel, red-green-blue, ready for encoding."""

    data: bytes
    width: int
    height: int

    @property
    def size(self) -> tuple:
        return (self.width, self.height)


@dataclass(frozen=True)
class OutputTarget:
    """Output directory plus the naming scheme for per-page image files."""

    directory: Path
    stem: str

    def filename_for(self, page_number: int, extension: str) -> str:
        return f"{self.stem}_page_{page_number}.{extension}"

    def path_for(self, page_number: int, extension: str) -> Path:
        return self.directory / self.filename_for(page_number, extension)


@dataclass
class PDFInfo:
    """
    PDF document information and metadata.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        creator: PDF creator application
        producer: PDF producer application
        is_encrypted: Whether the PDF is encrypted
    """
    num_pages: int
    file_size: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    is_encrypted: bool = False


@dataclass
class ConversionResult:
    """
    Result of a PDF rasterization.

    Attributes:
        success: Whether the operation was successful
        files_created: List of created image paths, in page order
        total_files: Total number of files created
        source_file: Path to source PDF file
        output_dir: Directory the images were written to
        output_format: Normalized extension (png or jpeg)
        dpi: Rendering density used
    """
    success: bool
    source_file: str
    output_dir: str
    output_format: str
    dpi: int
    files_created: List[str] = field(default_factory=list)
    total_files: int = 0

    def __str__(self) -> str:
        """String representation of the result."""
        return f"ConversionResult(success={self.success}, files={self.total_files})"
