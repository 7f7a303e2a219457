from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_rasterizer.backends.base import BackendDocument, BackendPage  # noqa: E402
from pdf_rasterizer.types import RasterBuffer  # noqa: E402


def bgra_pattern(width: int, height: int) -> bytes:
    """Deterministic BGRA pixels: B=x, G=y, R=x+y, A=255 (mod 256)."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes((x % 256, y % 256, (x + y) % 256, 255))
    return bytes(data)


class FakePage(BackendPage):
    def __init__(
        self,
        document: "FakeDocument",
        index: int,
        size: Tuple[float, float],
    ) -> None:
        self.document = document
        self.index = index
        self.size = size

    @property
    def width_points(self) -> float:
        return self.size[0]

    @property
    def height_points(self) -> float:
        return self.size[1]

    def render(self, target_width: int, max_height: int) -> RasterBuffer:
        self.document.render_calls.append((self.index, target_width, max_height))
        if self.index in self.document.failing_pages:
            raise RuntimeError("renderer crashed")

        width, height = target_width, max_height
        if self.document.shrink_height:
            height -= 1
        if self.index in self.document.garbage_pages:
            return RasterBuffer(data=b"\x00" * 10, width=width, height=height)
        if self.document.channels == 3:
            rgb = bytearray()
            for y in range(height):
                for x in range(width):
                    rgb += bytes(((x + y) % 256, y % 256, x % 256))
            return RasterBuffer(data=bytes(rgb), width=width, height=height)
        return RasterBuffer(data=bgra_pattern(width, height), width=width, height=height)

    def close(self) -> None:
        self.document.closed_pages.append(self.index)


@dataclass
class FakeDocument(BackendDocument):
    page_sizes: List[Tuple[float, float]] = field(default_factory=list)
    failing_pages: set = field(default_factory=set)
    garbage_pages: set = field(default_factory=set)
    channels: int = 4
    shrink_height: bool = False
    render_calls: List[Tuple[int, int, int]] = field(default_factory=list)
    closed_pages: List[int] = field(default_factory=list)
    closed: bool = False

    def get_page(self, index: int) -> FakePage:
        return FakePage(self, index, self.page_sizes[index])

    def close(self) -> None:
        self.closed = True


class FakeBackend:
    """In-memory backend returning synthetic pages of a fixed size."""

    def __init__(
        self,
        num_pages: int = 10,
        page_size: Tuple[float, float] = (36.0, 24.0),
        **options,
    ) -> None:
        self.document = FakeDocument(
            num_pages=num_pages,
            file_size=1024,
            page_sizes=[page_size] * num_pages,
            **options,
        )
        self.loaded_paths: List[str] = []

    def load(self, pdf_path: str) -> FakeDocument:
        self.loaded_paths.append(pdf_path)
        return self.document


@pytest.fixture()
def fake_backend_factory() -> Callable[..., FakeBackend]:
    return FakeBackend


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        pages: int = 1,
        width: float = 72,
        height: float = 144,
        title: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=width, height=height)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", pages=10, title="Sample")


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path
