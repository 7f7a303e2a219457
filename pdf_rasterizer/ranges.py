"""Parsing of page range expressions such as ``1-5`` or ``1..5``."""

from __future__ import annotations

import re

from .exceptions import RangeFormatError, RangeOrderError, RangeValueError
from .types import PageRange

RANGE_SEPARATORS = ("..", "-")
MAX_PAGE_NUMBER = 2**32 - 1

_PAGE_NUMBER_RE = re.compile(r"^\+?[0-9]+$")


def _parse_page_number(token: str, range_str: str) -> int:
    if not _PAGE_NUMBER_RE.match(token):
        raise RangeValueError(
            f"Invalid page number '{token}' in range '{range_str}'. "
            "Page numbers must be positive integers."
        )

    value = int(token)
    if value > MAX_PAGE_NUMBER:
        raise RangeValueError(
            f"Invalid page number '{token}' in range '{range_str}': value too large."
        )
    if value == 0:
        raise RangeValueError(
            f"Invalid page number in range '{range_str}'. Page numbers must be greater than 0."
        )
    return value


def parse_range(range_str: str) -> PageRange:
    """Parse ``start-end`` or ``start..end`` into an inclusive :class:`PageRange`.

    ``..`` is looked for first, so ``1..5`` is never split on a dash.
    """

    text = (range_str or "").strip()

    separator = next((sep for sep in RANGE_SEPARATORS if sep in text), None)
    if separator is None:
        raise RangeFormatError(
            f"Invalid page range format: '{text}'. Use 1-5 or 1..5."
        )

    parts = [part.strip() for part in text.split(separator)]
    if len(parts) != 2 or not all(parts):
        raise RangeFormatError(
            f"Invalid page range format: '{text}'. Expected exactly one "
            f"'{separator}' between two page numbers."
        )

    start = _parse_page_number(parts[0], text)
    end = _parse_page_number(parts[1], text)

    if start > end:
        raise RangeOrderError(
            f"Invalid page range '{text}': start page ({start}) must be <= end page ({end})."
        )

    return PageRange(start=start, end=end)


__all__ = ["parse_range", "RANGE_SEPARATORS", "MAX_PAGE_NUMBER"]
