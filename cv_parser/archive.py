"""Forward-scanning reader for the ZIP container that wraps a DOCX package.

Only local file headers are consulted: the file is scanned front to back for
the local header signature and the central directory at the end of the
archive is never read. This is enough for packages written in a single pass
by Word, LibreOffice or :mod:`zipfile`, but entries that defer their sizes to
a trailing data descriptor (general purpose flag bit 3) are not supported.
"""
from __future__ import annotations

import logging
import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO

from .exceptions import CorruptArchiveError, EntryNotFoundError, UnsupportedCompressionError
from .utils import PathLike, to_path

__all__ = [
    "ArchiveEntry",
    "DOCUMENT_XML_ENTRY",
    "LOCAL_FILE_HEADER_SIGNATURE",
    "extract_named_entry",
    "read_document_xml",
]

LOGGER = logging.getLogger(__name__)

LOCAL_FILE_HEADER_SIGNATURE = 0x04034B50
DOCUMENT_XML_ENTRY = "word/document.xml"

STORED = 0
DEFLATED = 8

_SIGNATURE = struct.Struct("<I")
# version, flags, method, mod time, mod date, crc32, compressed size,
# uncompressed size, filename length, extra field length
_LOCAL_HEADER = struct.Struct("<HHHHHIIIHH")


@dataclass(frozen=True)
class ArchiveEntry:
    """A member record decoded from one local file header."""

    compression_method: int
    compressed_size: int
    filename: bytes
    compressed_bytes: bytes

    @property
    def name(self) -> str:
        return self.filename.decode("utf-8", errors="replace")

    def decompress(self) -> bytes:
        if self.compression_method == STORED:
            return self.compressed_bytes
        if self.compression_method == DEFLATED:
            try:
                return zlib.decompress(self.compressed_bytes, -zlib.MAX_WBITS)
            except zlib.error as exc:
                raise CorruptArchiveError(f"Unable to inflate {self.name}: {exc}") from exc
        raise UnsupportedCompressionError(self.compression_method)


def _read_exact(handle: BinaryIO, size: int, what: str) -> bytes:
    data = handle.read(size)
    if len(data) < size:
        raise CorruptArchiveError(f"Truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def _read_entry(handle: BinaryIO) -> ArchiveEntry:
    """Decode the local header following an already consumed signature."""

    fields = _LOCAL_HEADER.unpack(_read_exact(handle, _LOCAL_HEADER.size, "local file header"))
    compression = fields[2]
    compressed_size = fields[6]
    name_length, extra_length = fields[8], fields[9]

    filename = _read_exact(handle, name_length, "entry name")
    handle.seek(extra_length, 1)
    payload = _read_exact(handle, compressed_size, "entry payload")
    return ArchiveEntry(
        compression_method=compression,
        compressed_size=compressed_size,
        filename=filename,
        compressed_bytes=payload,
    )


def extract_named_entry(handle: BinaryIO, target_name: str) -> bytes:
    """Return the decompressed bytes of ``target_name`` from a ZIP stream.

    The stream is scanned four bytes at a time. When the bytes do not form a
    local header signature the position is moved back three bytes, so a
    signature starting at any offset is found.

    Raises:
        EntryNotFoundError: the end of the stream is reached without a match.
        UnsupportedCompressionError: the entry is neither stored nor DEFLATE.
        CorruptArchiveError: a header or payload is truncated or undecodable.
    """
    target = target_name.encode("utf-8")
    while True:
        chunk = handle.read(_SIGNATURE.size)
        if len(chunk) < _SIGNATURE.size:
            break

        (signature,) = _SIGNATURE.unpack(chunk)
        if signature != LOCAL_FILE_HEADER_SIGNATURE:
            handle.seek(1 - _SIGNATURE.size, 1)
            continue

        entry = _read_entry(handle)
        LOGGER.debug(
            "Found archive entry %s (method=%d, size=%d)",
            entry.name,
            entry.compression_method,
            entry.compressed_size,
        )
        if entry.filename == target:
            return entry.decompress()

    raise EntryNotFoundError(target_name)


def read_document_xml(path: PathLike, entry_name: str = DOCUMENT_XML_ENTRY) -> str:
    """Read the main document part of the DOCX at ``path`` as text."""

    source = to_path(path)
    LOGGER.debug("Reading %s from %s", entry_name, source)
    with source.open("rb") as handle:
        data = extract_named_entry(handle, entry_name)
    return data.decode("utf-8")
