"""Backend protocol for loading and rendering PDF pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..types import RasterBuffer


class BackendPage:
    """A single page handle exposing its physical size and a renderer."""

    @property
    def width_points(self) -> float:
        raise NotImplementedError

    @property
    def height_points(self) -> float:
        raise NotImplementedError

    def render(self, target_width: int, max_height: int) -> RasterBuffer:
        """Render into a buffer no wider than ``target_width`` and no taller than ``max_height``.

        The returned buffer carries the dimensions actually produced, which
        may differ from the requested ones when the aspect ratio is preserved.
        """
        raise NotImplementedError

    def close(self) -> None:
        pass


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int
    file_size: int

    def get_page(self, index: int) -> BackendPage:
        raise NotImplementedError

    def close(self) -> None:
        pass


class RasterBackend(Protocol):
    """Protocol defining backend operations for PDF loading."""

    def load(self, pdf_path: str) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""
