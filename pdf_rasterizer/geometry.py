"""Pixel dimensions from page size in points and a rendering DPI."""

from __future__ import annotations

from typing import Tuple

from .types import PageGeometry

# PDF user space unit: 1 point = 1/72 inch.
POINTS_PER_INCH = 72.0


def compute_pixels(width_points: float, height_points: float, dpi: int) -> Tuple[int, int]:
    """Return ``(width_pixels, height_pixels)`` truncated toward zero.

    No clamping is applied, so degenerate pages may yield a zero dimension.
    """

    scale = dpi / POINTS_PER_INCH
    return int(width_points * scale), int(height_points * scale)


def measure_page(width_points: float, height_points: float, dpi: int) -> PageGeometry:
    width_pixels, height_pixels = compute_pixels(width_points, height_points, dpi)
    return PageGeometry(
        width_points=width_points,
        height_points=height_points,
        dpi=dpi,
        width_pixels=width_pixels,
        height_pixels=height_pixels,
    )


__all__ = ["POINTS_PER_INCH", "compute_pixels", "measure_page"]
