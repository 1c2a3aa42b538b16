"""Validation routines for cv-parser."""
from __future__ import annotations

import logging
from pathlib import Path

from pypdf import PdfReader

from .exceptions import InvalidInputError, OutputValidationError
from .utils import PathLike, to_path

LOGGER = logging.getLogger(__name__)

DOCX_SUFFIX = ".docx"


def validate_docx_input(input_path: PathLike) -> Path:
    """Ensure ``input_path`` names an existing file with a .docx extension."""
    path = Path(input_path)
    LOGGER.debug("Validating DOCX input %s", path)
    if not path.exists() or path.suffix.lower() != DOCX_SUFFIX:
        raise InvalidInputError()
    return path


def validate_pdf_output(output_path: PathLike, expected_pages: int | None = None) -> int:
    """Reopen a generated PDF with pypdf and return its page count."""
    path = to_path(output_path)
    LOGGER.debug("Validating PDF output %s", path)
    try:
        reader = PdfReader(str(path))
        page_count = len(reader.pages)
    except Exception as exc:
        raise OutputValidationError(f"PDF validation failed: {path}") from exc

    if expected_pages is not None and page_count != expected_pages:
        raise OutputValidationError(
            f"PDF page count mismatch for {path}: expected {expected_pages}, found {page_count}"
        )
    return page_count
