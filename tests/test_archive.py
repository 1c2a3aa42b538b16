from __future__ import annotations

import io
import struct
import zipfile
import zlib
from pathlib import Path

import pytest

from cv_parser.archive import (
    DOCUMENT_XML_ENTRY,
    LOCAL_FILE_HEADER_SIGNATURE,
    ArchiveEntry,
    extract_named_entry,
    read_document_xml,
)
from cv_parser.exceptions import (
    ArchiveError,
    CorruptArchiveError,
    EntryNotFoundError,
    UnsupportedCompressionError,
)


def _local_entry(name: bytes, payload: bytes, method: int = 0, extra: bytes = b"") -> bytes:
    header = struct.pack(
        "<IHHHHHIIIHH",
        LOCAL_FILE_HEADER_SIGNATURE,
        20,
        0,
        method,
        0,
        0,
        zlib.crc32(payload),
        len(payload),
        len(payload),
        len(name),
        len(extra),
    )
    return header + name + extra + payload


def test_extract_deflated_entry(docx_factory) -> None:
    path = docx_factory(["Hello"])
    with path.open("rb") as handle:
        data = extract_named_entry(handle, DOCUMENT_XML_ENTRY)
    assert b"<w:t xml:space=\"preserve\">Hello</w:t>" in data


def test_extract_stored_entry(docx_factory) -> None:
    path = docx_factory(["Stored text"], compression=zipfile.ZIP_STORED)
    assert "Stored text" in read_document_xml(path)


def test_extract_skips_extra_field_and_other_entries() -> None:
    stream = io.BytesIO(
        _local_entry(b"docProps/app.xml", b"<app/>")
        + _local_entry(b"word/document.xml", b"<doc/>", extra=b"\x01\x02\x03\x04")
    )
    assert extract_named_entry(stream, "word/document.xml") == b"<doc/>"


def test_extract_resynchronises_after_leading_junk(docx_factory) -> None:
    path = docx_factory(["After junk"], prefix=b"\x00PK\x03junk-bytes")
    assert "After junk" in read_document_xml(path)


def test_missing_entry_raises_not_found(docx_factory) -> None:
    path = docx_factory(include_document=False)
    with pytest.raises(EntryNotFoundError) as excinfo:
        read_document_xml(path)
    assert excinfo.value.entry_name == DOCUMENT_XML_ENTRY
    assert "word/document.xml not found" in str(excinfo.value)


def test_empty_stream_raises_not_found() -> None:
    with pytest.raises(EntryNotFoundError):
        extract_named_entry(io.BytesIO(b""), DOCUMENT_XML_ENTRY)


def test_unsupported_compression_method(docx_factory) -> None:
    path = docx_factory(["Compressed"], compression=zipfile.ZIP_BZIP2)
    with pytest.raises(UnsupportedCompressionError) as excinfo:
        read_document_xml(path)
    assert excinfo.value.method == zipfile.ZIP_BZIP2
    assert isinstance(excinfo.value, ArchiveError)


def test_truncated_payload_is_reported() -> None:
    data = _local_entry(b"word/document.xml", b"<document/>")[:-4]
    with pytest.raises(CorruptArchiveError):
        extract_named_entry(io.BytesIO(data), DOCUMENT_XML_ENTRY)


def test_invalid_deflate_stream_is_reported() -> None:
    entry = ArchiveEntry(
        compression_method=8,
        compressed_size=4,
        filename=b"word/document.xml",
        compressed_bytes=b"\xff\xff\xff\xff",
    )
    with pytest.raises(CorruptArchiveError):
        entry.decompress()


def test_read_document_xml_from_word_package(sample_docx: Path) -> None:
    xml = read_document_xml(sample_docx)
    assert "Jane Doe" in xml
    assert xml.lstrip().startswith("<?xml")
