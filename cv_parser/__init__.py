"""
cv-parser - Prepare CV/resume documents for LLM-based extraction.

LLM provider upload endpoints accept PDFs but not Word documents. This
package converts a .docx CV into a minimal text-only PDF without any
external PDF or archive library, and offers helpers for handing files to
a provider.

Quick Start:
    >>> from cv_parser import convert
    >>> convert('resume.docx', 'out/resume.pdf')
    'out/resume.pdf'

Pipeline:
    - archive: locate and decompress word/document.xml in the DOCX container
    - docx_xml: paragraph text with explicit line breaks
    - layout: word wrapping and pagination
    - pdf_builder: PDF 1.4 serialization

For CLI usage, use the 'cv-parser' command after installation.
"""

__version__ = "1.0.0"

# Conversion
from cv_parser.converter import ConversionOptions, convert, convert_docx_to_pdf

# Pipeline stages
from cv_parser.archive import extract_named_entry, read_document_xml
from cv_parser.docx_xml import parse_paragraphs
from cv_parser.layout import lines_per_page, max_chars_per_line, paginate, wrap_line
from cv_parser.pdf_builder import build_pdf, escape_pdf_text

# Upload helpers
from cv_parser.upload import detect_mime_type, guess_mime_type, prepared_upload

# Exceptions
from cv_parser.exceptions import (
    CvParserError,
    InvalidInputError,
    ArchiveError,
    EntryNotFoundError,
    UnsupportedCompressionError,
    CorruptArchiveError,
    OutputValidationError,
    DocumentNotFoundError,
    FileNotReadableError,
)

__all__ = [
    # Conversion
    "ConversionOptions",
    "convert",
    "convert_docx_to_pdf",
    # Pipeline stages
    "extract_named_entry",
    "read_document_xml",
    "parse_paragraphs",
    "wrap_line",
    "paginate",
    "max_chars_per_line",
    "lines_per_page",
    "build_pdf",
    "escape_pdf_text",
    # Upload helpers
    "detect_mime_type",
    "guess_mime_type",
    "prepared_upload",
    # Exceptions
    "CvParserError",
    "InvalidInputError",
    "ArchiveError",
    "EntryNotFoundError",
    "UnsupportedCompressionError",
    "CorruptArchiveError",
    "OutputValidationError",
    "DocumentNotFoundError",
    "FileNotReadableError",
    # Version info
    "__version__",
]
