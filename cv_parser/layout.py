"""Greedy word wrapping and pagination for plain paragraph text.

Character widths are approximated as ``FONT_SIZE * CHAR_WIDTH_RATIO`` points
for every glyph, so the line budget is a character count rather than a
measured width.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from .utils import split_ascii_whitespace, strip_ascii_whitespace

__all__ = [
    "PAGE_WIDTH",
    "PAGE_HEIGHT",
    "LEFT_MARGIN",
    "RIGHT_MARGIN",
    "TOP_MARGIN",
    "BOTTOM_MARGIN",
    "FONT_SIZE",
    "LINE_HEIGHT",
    "CHAR_WIDTH_RATIO",
    "max_chars_per_line",
    "lines_per_page",
    "wrap_line",
    "paragraph_lines",
    "layout_lines",
    "paginate",
    "layout_pages",
]

LOGGER = logging.getLogger(__name__)

# US Letter in points
PAGE_WIDTH = 612
PAGE_HEIGHT = 792

LEFT_MARGIN = 50
RIGHT_MARGIN = 50
TOP_MARGIN = 770  # baseline of the first line
BOTTOM_MARGIN = 50

FONT_SIZE = 12
LINE_HEIGHT = FONT_SIZE * 1.2
CHAR_WIDTH_RATIO = 0.5


def max_chars_per_line() -> int:
    """Number of characters that fit between the left and right margins."""
    usable_width = PAGE_WIDTH - LEFT_MARGIN - RIGHT_MARGIN
    return math.floor(usable_width / (FONT_SIZE * CHAR_WIDTH_RATIO))


def lines_per_page() -> int:
    """Number of baselines between the top and bottom margins, inclusive."""
    vertical_space = TOP_MARGIN - BOTTOM_MARGIN
    return math.floor(vertical_space / LINE_HEIGHT) + 1


def _chunk_word(word: str, max_chars: int) -> list[str]:
    return [word[start:start + max_chars] for start in range(0, len(word), max_chars)]


def wrap_line(text: str, max_chars: int) -> list[str]:
    """Wrap ``text`` into lines of at most ``max_chars`` characters.

    Text that already fits is returned untouched as a single line. Otherwise
    words are packed greedily, separated by single spaces, and a word longer
    than ``max_chars`` is cut into ``max_chars`` sized pieces on lines of their
    own.
    """
    if len(text) <= max_chars:
        return [text]

    lines: list[str] = []
    current = ""
    for word in split_ascii_whitespace(text):
        if current and len(current) + 1 + len(word) <= max_chars:
            current = f"{current} {word}"
            continue
        if current:
            lines.append(current)
        if len(word) <= max_chars:
            current = word
        else:
            lines.extend(_chunk_word(word, max_chars))
            current = ""

    if current:
        lines.append(current)
    return lines


def paragraph_lines(paragraph: str, max_chars: int) -> list[str]:
    """Lay out one paragraph, honouring its explicit line breaks.

    Whitespace-only segments become a single blank line. An empty paragraph
    produces no lines at all.
    """
    if not paragraph:
        return []

    lines: list[str] = []
    for segment in paragraph.split("\n"):
        if not strip_ascii_whitespace(segment):
            lines.append("")
        else:
            lines.extend(wrap_line(segment, max_chars))
    return lines


def layout_lines(paragraphs: Iterable[str], max_chars: int | None = None) -> list[str]:
    """Flatten ``paragraphs`` into one wrapped line sequence."""
    limit = max_chars_per_line() if max_chars is None else max_chars
    lines: list[str] = []
    for paragraph in paragraphs:
        lines.extend(paragraph_lines(paragraph, limit))
    return lines


def paginate(lines: Sequence[str], per_page: int | None = None) -> list[list[str]]:
    """Slice ``lines`` into consecutive pages of ``per_page`` lines."""
    size = lines_per_page() if per_page is None else per_page
    if size <= 0:
        raise ValueError("per_page must be a positive integer")
    return [list(lines[start:start + size]) for start in range(0, len(lines), size)]


def layout_pages(paragraphs: Iterable[str]) -> list[list[str]]:
    """Wrap and paginate ``paragraphs`` with the default page geometry."""
    lines = layout_lines(paragraphs)
    pages = paginate(lines)
    LOGGER.debug("Laid out %d lines on %d pages", len(lines), len(pages))
    return pages
