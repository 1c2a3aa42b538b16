"""Direct serialization of laid-out text pages into a PDF 1.4 file.

Object numbering is fixed: the catalog is object 1, the page tree object 2
and the shared Helvetica font object 3. Page ``i`` (zero based) is object
``4 + 2 * i`` and its content stream object ``5 + 2 * i``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .layout import FONT_SIZE, LEFT_MARGIN, PAGE_HEIGHT, PAGE_WIDTH, TOP_MARGIN

__all__ = [
    "PDF_HEADER",
    "PdfObject",
    "XrefEntry",
    "PdfAssembler",
    "escape_pdf_text",
    "build_content_stream",
    "build_pdf",
    "page_object_number",
    "content_object_number",
]

LOGGER = logging.getLogger(__name__)

PDF_VERSION = "1.4"
# The second line carries four bytes above 0x7F so transfer tools treat the
# file as binary.
PDF_HEADER = b"%PDF-" + PDF_VERSION.encode("ascii") + b"\n%\xe2\xe3\xcf\xd3\n"
PDF_EOF = b"%%EOF\n"

CATALOG_NUMBER = 1
PAGES_NUMBER = 2
FONT_NUMBER = 3
FIRST_PAGE_NUMBER = 4

FONT_RESOURCE = "F1"
TEXT_ENCODING = "cp1252"


def page_object_number(index: int) -> int:
    return FIRST_PAGE_NUMBER + 2 * index


def content_object_number(index: int) -> int:
    return FIRST_PAGE_NUMBER + 1 + 2 * index


@dataclass(frozen=True, slots=True)
class PdfObject:
    """An indirect object ready to be written."""

    number: int
    body: bytes

    def serialize(self) -> bytes:
        return b"%d 0 obj\n%s\nendobj\n" % (self.number, self.body)


@dataclass(frozen=True, slots=True)
class XrefEntry:
    """Byte offset at which an indirect object starts."""

    number: int
    offset: int

    def serialize(self) -> bytes:
        # Each entry is exactly 20 bytes including the two-byte EOL.
        return b"%010d 00000 n \n" % self.offset


@dataclass
class PdfAssembler:
    """Accumulates the file body and records offsets as objects are appended."""

    buffer: bytearray = field(default_factory=lambda: bytearray(PDF_HEADER))
    entries: list[XrefEntry] = field(default_factory=list)

    def add(self, obj: PdfObject) -> XrefEntry:
        expected = len(self.entries) + 1
        if obj.number != expected:
            raise ValueError(f"PDF object {obj.number} appended out of order, expected {expected}")
        entry = XrefEntry(obj.number, len(self.buffer))
        self.buffer += obj.serialize()
        self.entries.append(entry)
        return entry

    def finish(self, root: int = CATALOG_NUMBER) -> bytes:
        xref_offset = len(self.buffer)
        size = len(self.entries) + 1
        self.buffer += b"xref\n0 %d\n" % size
        self.buffer += b"0000000000 65535 f \n"
        for entry in self.entries:
            self.buffer += entry.serialize()
        self.buffer += b"trailer\n<< /Size %d /Root %d 0 R >>\n" % (size, root)
        self.buffer += b"startxref\n%d\n" % xref_offset
        self.buffer += PDF_EOF
        return bytes(self.buffer)


def escape_pdf_text(text: str) -> str:
    """Escape backslashes and parentheses for a PDF literal string."""
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_content_stream(lines: Sequence[str]) -> str:
    """Return the text-showing operators that draw ``lines`` top to bottom."""
    if not lines:
        return ""

    operators = [
        "BT",
        f"/{FONT_RESOURCE} {FONT_SIZE} Tf",
        f"{LEFT_MARGIN} {TOP_MARGIN} Td",
    ]
    for index, line in enumerate(lines):
        if not line:
            operators.append("T*")
            continue
        if index:
            operators.append("T*")
        operators.append(f"({escape_pdf_text(line)}) Tj")
    operators.append("ET")
    return "\n".join(operators) + "\n"


def _encode_text(text: str) -> bytes:
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError:
        unsupported = sorted({char for char in text if not _is_encodable(char)})
        LOGGER.warning(
            "Replacing %d character(s) outside %s with '?': %s",
            len(unsupported),
            TEXT_ENCODING,
            "".join(unsupported),
        )
        return text.encode(TEXT_ENCODING, errors="replace")


def _is_encodable(char: str) -> bool:
    try:
        char.encode(TEXT_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def _page_body(content_number: int) -> bytes:
    return (
        b"<< /Type /Page /Parent %d 0 R\n"
        b"   /MediaBox [0 0 %d %d]\n"
        b"   /Resources << /Font << /%s %d 0 R >> >>\n"
        b"   /Contents %d 0 R\n"
        b">>"
    ) % (PAGES_NUMBER, PAGE_WIDTH, PAGE_HEIGHT, FONT_RESOURCE.encode("ascii"), FONT_NUMBER, content_number)


def _content_body(stream: bytes) -> bytes:
    return b"<< /Length %d >>\nstream\n%sendstream" % (len(stream), stream)


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    """Serialize ``pages`` of text lines into a complete PDF document."""
    kids = " ".join(f"{page_object_number(index)} 0 R" for index in range(len(pages)))

    assembler = PdfAssembler()
    assembler.add(PdfObject(CATALOG_NUMBER, b"<< /Type /Catalog /Pages %d 0 R >>" % PAGES_NUMBER))
    assembler.add(
        PdfObject(
            PAGES_NUMBER,
            b"<< /Type /Pages /Count %d /Kids [%s] >>" % (len(pages), kids.encode("ascii")),
        )
    )
    assembler.add(
        PdfObject(
            FONT_NUMBER,
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
        )
    )
    for index, lines in enumerate(pages):
        content_number = content_object_number(index)
        assembler.add(PdfObject(page_object_number(index), _page_body(content_number)))
        stream = _encode_text(build_content_stream(lines))
        assembler.add(PdfObject(content_number, _content_body(stream)))

    data = assembler.finish()
    LOGGER.debug("Built PDF with %d pages and %d objects (%d bytes)", len(pages), len(assembler.entries), len(data))
    return data
