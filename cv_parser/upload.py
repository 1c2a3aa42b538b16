"""Helpers that turn a CV on disk into something an LLM provider accepts.

Provider upload endpoints take PDFs but not Word documents, so DOCX inputs are
converted to a temporary PDF next to the source file for the duration of the
upload.
"""
from __future__ import annotations

import logging
import mimetypes
import os
import secrets
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .archive import LOCAL_FILE_HEADER_SIGNATURE
from .converter import convert
from .exceptions import DocumentNotFoundError, FileNotReadableError
from .utils import PathLike

__all__ = [
    "DOCX_MIME_TYPE",
    "PDF_MIME_TYPE",
    "detect_mime_type",
    "guess_mime_type",
    "validate_source_file",
    "prepared_upload",
]

LOGGER = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ZIP_MIME_TYPE = "application/zip"
TEXT_MIME_TYPE = "text/plain"
DEFAULT_MIME_TYPE = "application/octet-stream"

_ZIP_MAGIC = LOCAL_FILE_HEADER_SIGNATURE.to_bytes(4, "little")
SNIFF_SIZE = 8192


def detect_mime_type(data: bytes) -> str:
    """Guess a MIME type from the leading bytes of a file."""
    if data.startswith(b"%PDF-"):
        return PDF_MIME_TYPE
    if data.startswith(_ZIP_MAGIC):
        return DOCX_MIME_TYPE if b"word/" in data else ZIP_MIME_TYPE
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return DEFAULT_MIME_TYPE
    return TEXT_MIME_TYPE


def guess_mime_type(path: PathLike) -> str:
    """Return the MIME type for ``path`` from its name, or from its content."""
    source = Path(path)
    mime_type, _ = mimetypes.guess_type(source.name)
    if mime_type:
        return mime_type
    with source.open("rb") as handle:
        return detect_mime_type(handle.read(SNIFF_SIZE))


def validate_source_file(path: PathLike) -> Path:
    """Ensure ``path`` exists and is readable."""
    source = Path(path)
    if not source.exists():
        raise DocumentNotFoundError(f"File not found: {source}")
    if not os.access(source, os.R_OK):
        raise FileNotReadableError(f"File not readable: {source}")
    return source


def _converted_path(source: Path) -> Path:
    return source.with_name(f"{source.stem}_converted_{secrets.token_hex(8)}.pdf")


@contextmanager
def prepared_upload(path: PathLike) -> Iterator[Path]:
    """Yield a path suitable for upload, converting DOCX input to PDF first.

    The temporary PDF is removed when the block exits; a failure to remove it
    is logged and does not mask the block's own outcome.
    """
    source = validate_source_file(path)
    if source.suffix.lower() != ".docx":
        yield source
        return

    target = _converted_path(source)
    LOGGER.debug("Converting %s to temporary PDF %s", source, target)
    convert(source, target)
    try:
        yield target
    finally:
        try:
            target.unlink(missing_ok=True)
        except OSError as exc:
            LOGGER.warning("Failed to clean up temporary file %s: %s", target, exc)
