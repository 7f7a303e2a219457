"""
Custom exceptions for PDF Rasterizer.

This module defines all custom exceptions used throughout the library.
"""

from typing import Optional, Tuple


class PDFRasterizerException(Exception):
    """Base exception for all PDF Rasterizer errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF rasterizer error occurred."


class InvalidRangeError(PDFRasterizerException):
    """Raised when page range specification is invalid."""

    @property
    def default_message(self) -> str:
        return "Invalid page range specification."


class RangeFormatError(InvalidRangeError):
    """Raised when a range lacks a separator or does not split into two parts."""

    @property
    def default_message(self) -> str:
        return "Invalid page range format. Use 1-5 or 1..5."


class RangeValueError(InvalidRangeError):
    """Raised when a range endpoint is not a positive integer."""

    @property
    def default_message(self) -> str:
        return "Invalid page number. Page numbers must be greater than 0."


class RangeOrderError(InvalidRangeError):
    """Raised when the start page is greater than the end page."""

    @property
    def default_message(self) -> str:
        return "Invalid page range. The start page must not be greater than the end page."


class InvalidPDFError(PDFRasterizerException):
    """Raised when PDF file is missing, invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class PageOutOfBoundsError(PDFRasterizerException):
    """Raised when requested page number is out of bounds."""

    @property
    def default_message(self) -> str:
        return "Requested page number is out of bounds."


class UnsupportedFormatError(PDFRasterizerException):
    """Raised when the requested output format is not supported."""

    @property
    def default_message(self) -> str:
        return "Unsupported output format. Only png or jpeg are supported."


class OutputDirectoryError(PDFRasterizerException):
    """Raised when the output directory cannot be created or written to."""

    @property
    def default_message(self) -> str:
        return "Output directory is not writable."


class PageConversionError(PDFRasterizerException):
    """
    Raised when a single page fails somewhere in the conversion pipeline.

    Attributes:
        page_number: 1-based page number that failed
        stage: Pipeline stage that failed (geometry, render, normalize, encode)
    """

    stage_name = "convert"

    def __init__(
        self,
        message: str = "",
        *,
        page_number: Optional[int] = None,
        stage: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.page_number = page_number
        self.stage = stage or self.stage_name

    @property
    def default_message(self) -> str:
        return "Failed to convert page."


class RenderError(PageConversionError):
    """Raised when the renderer fails for a page."""

    stage_name = "render"

    @property
    def default_message(self) -> str:
        return "Failed to render page."


class PixelFormatError(PageConversionError):
    """Raised when a raw pixel buffer matches neither supported layout."""

    stage_name = "normalize"

    def __init__(
        self,
        message: str = "",
        *,
        page_number: Optional[int] = None,
        expected_lengths: Tuple[int, ...] = (),
        actual_length: Optional[int] = None,
    ) -> None:
        super().__init__(message, page_number=page_number)
        self.expected_lengths = expected_lengths
        self.actual_length = actual_length

    @property
    def default_message(self) -> str:
        return "Unsupported pixel format."


class ImageConstructionError(PageConversionError):
    """Raised when a canonical buffer cannot be assembled into an image."""

    stage_name = "encode"

    @property
    def default_message(self) -> str:
        return "Failed to create image from pixel data."


class EncodeError(PageConversionError):
    """Raised when an encoder fails to write the output file."""

    stage_name = "encode"

    @property
    def default_message(self) -> str:
        return "Failed to save image file."
