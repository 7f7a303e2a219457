"""
PDF Rasterizer - Convert a page range of a PDF into PNG or JPEG images.

This library renders a contiguous range of PDF pages to one raster image per
page at a configurable DPI, writing ``{stem}_page_{N}.{png|jpeg}`` files.

Quick Start:
    >>> from pdf_rasterizer import PDFRasterizer
    >>> with PDFRasterizer('input.pdf') as rasterizer:
    ...     files = rasterizer.convert_pages('1-5', 'output/')

Main Classes:
    - PDFRasterizer: Main class for converting pages
    - RasterOptions: DPI, output format and JPEG quality

Data Classes:
    - PageRange: Parsed inclusive page range
    - PDFInfo: PDF metadata and information
    - ConversionResult: Result of a conversion

Exceptions:
    - PDFRasterizerException: Base exception
    - InvalidRangeError: Invalid page range (RangeFormatError, RangeValueError, RangeOrderError)
    - InvalidPDFError: Missing, invalid or corrupted PDF
    - PageOutOfBoundsError: Page number out of bounds
    - PageConversionError: A page failed (RenderError, PixelFormatError, ImageConstructionError, EncodeError)

For CLI usage, use the 'pdf-rasterizer' command after installation.
"""

# Core classes and pipeline
from pdf_rasterizer.rasterizer import PDFRasterizer, RasterOptions, convert, DEFAULT_DPI
from pdf_rasterizer.ranges import parse_range
from pdf_rasterizer.geometry import compute_pixels
from pdf_rasterizer.pixels import normalize
from pdf_rasterizer.encoders import normalize_format

# Data types
from pdf_rasterizer.types import (
    PageRange,
    PageGeometry,
    RasterBuffer,
    CanonicalImage,
    OutputTarget,
    PDFInfo,
    ConversionResult,
)

# Exceptions
from pdf_rasterizer.exceptions import (
    PDFRasterizerException,
    InvalidRangeError,
    RangeFormatError,
    RangeValueError,
    RangeOrderError,
    InvalidPDFError,
    PageOutOfBoundsError,
    UnsupportedFormatError,
    OutputDirectoryError,
    PageConversionError,
    RenderError,
    PixelFormatError,
    ImageConstructionError,
    EncodeError,
)

# Utility functions
from pdf_rasterizer.utils import get_pdf_info, validate_pdf, format_file_size, resolve_output_dir

__version__ = "1.0.0"
__author__ = "PDF Rasterizer CLI Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes and pipeline
    "PDFRasterizer",
    "RasterOptions",
    "convert",
    "parse_range",
    "compute_pixels",
    "normalize",
    "normalize_format",
    "DEFAULT_DPI",
    # Data types
    "PageRange",
    "PageGeometry",
    "RasterBuffer",
    "CanonicalImage",
    "OutputTarget",
    "PDFInfo",
    "ConversionResult",
    # Exceptions
    "PDFRasterizerException",
    "InvalidRangeError",
    "RangeFormatError",
    "RangeValueError",
    "RangeOrderError",
    "InvalidPDFError",
    "PageOutOfBoundsError",
    "UnsupportedFormatError",
    "OutputDirectoryError",
    "PageConversionError",
    "RenderError",
    "PixelFormatError",
    "ImageConstructionError",
    "EncodeError",
    # Utility functions
    "get_pdf_info",
    "validate_pdf",
    "format_file_size",
    "resolve_output_dir",
    # Version info
    "__version__",
]
