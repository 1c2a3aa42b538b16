"""DOCX to PDF conversion engine for cv-parser."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .archive import DOCUMENT_XML_ENTRY, read_document_xml
from .docx_xml import parse_paragraphs
from .layout import layout_pages
from .pdf_builder import build_pdf
from .utils import PathLike, ensure_parent_directory, time_block
from .validators import validate_docx_input, validate_pdf_output

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionOptions:
    """Options controlling DOCX to PDF conversion."""

    entry_name: str = DOCUMENT_XML_ENTRY
    validate_output: bool = False


def write_pdf(output_path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``output_path``, creating its immediate parent directory."""
    path = Path(output_path)
    ensure_parent_directory(path)
    path.write_bytes(data)


def convert(
    input_path: PathLike,
    output_path: PathLike,
    options: Optional[ConversionOptions] = None,
) -> PathLike:
    """Convert a .docx file into a text-only multi-page PDF.

    Returns ``output_path`` unchanged so calls can be chained.

    Raises:
        InvalidInputError: ``input_path`` is missing or not a .docx file.
        ArchiveError: the document part is absent or cannot be decompressed.
        xml.etree.ElementTree.ParseError: the document part is not well-formed.
        OSError: the PDF cannot be written.
    """
    options = options or ConversionOptions()
    source = validate_docx_input(input_path)

    LOGGER.info("Starting conversion: %s -> %s", source, output_path)
    with time_block(LOGGER, "DOCX to PDF conversion"):
        xml_text = read_document_xml(source, options.entry_name)
        paragraphs = parse_paragraphs(xml_text)
        pages = layout_pages(paragraphs)
        data = build_pdf(pages)
        write_pdf(output_path, data)

    if options.validate_output:
        validate_pdf_output(output_path, expected_pages=len(pages))
    LOGGER.info("Conversion completed: %s (%d pages)", output_path, len(pages))
    return output_path


convert_docx_to_pdf = convert
