"""Utility functions for PDF operations."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .document import PDFDocumentAdapter
from .exceptions import InvalidPDFError, PDFRasterizerException
from .types import PDFInfo

PathLike = Union[str, os.PathLike[str]]


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = time.perf_counter()
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.info("%s completed in %.2fs", message, elapsed)


def resolve_output_dir(pdf_path: PathLike, override: Optional[PathLike] = None) -> Path:
    """Return ``override`` if given, else ``<pdf parent>/<pdf stem>``."""

    if override:
        return Path(override)
    source = Path(pdf_path)
    return source.parent / source.stem


def get_pdf_info(pdf_path: PathLike) -> PDFInfo:
    """Return page count, size and document metadata read with pypdf."""

    path = Path(pdf_path)
    if not path.is_file():
        raise InvalidPDFError(f"PDF file does not exist: {pdf_path}")

    try:
        reader = PdfReader(str(path))
        is_encrypted = reader.is_encrypted
        if is_encrypted:
            reader.decrypt("")
        num_pages = len(reader.pages)
        metadata = reader.metadata
    except PdfReadError as exc:
        raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

    return PDFInfo(
        num_pages=num_pages,
        file_size=path.stat().st_size,
        title=getattr(metadata, "title", None),
        author=getattr(metadata, "author", None),
        subject=getattr(metadata, "subject", None),
        creator=getattr(metadata, "creator", None),
        producer=getattr(metadata, "producer", None),
        is_encrypted=is_encrypted,
    )


def validate_pdf(pdf_path: PathLike) -> Tuple[bool, str]:
    """Perform lightweight validation of a PDF file."""

    pdf_path = os.fspath(pdf_path)

    if not os.path.exists(pdf_path):
        return False, f"PDF file does not exist: {pdf_path}"

    if not os.path.isfile(pdf_path):
        return False, f"Path is not a file: {pdf_path}"

    if not pdf_path.lower().endswith(".pdf"):
        return False, f"File does not have .pdf extension: {pdf_path}"

    if not os.access(pdf_path, os.R_OK):
        return False, f"Cannot read file (permission denied): {pdf_path}"

    try:
        with PDFDocumentAdapter(pdf_path):
            pass
        return True, ""
    except PDFRasterizerException as exc:
        return False, str(exc)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
