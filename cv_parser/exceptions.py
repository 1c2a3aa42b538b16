"""
Custom exceptions for cv-parser.

This module defines all custom exceptions raised by the DOCX to PDF
conversion core and the upload helpers built on top of it.
"""


class CvParserError(Exception):
    """Base exception for all cv-parser errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown cv-parser error occurred."


class InvalidInputError(CvParserError, ValueError):
    """Raised when the conversion input is missing or is not a .docx file."""

    @property
    def default_message(self) -> str:
        return "Input must be an existing .docx file"


class ArchiveError(CvParserError):
    """Raised when the DOCX container cannot be read."""

    @property
    def default_message(self) -> str:
        return "Unable to read DOCX archive."


class EntryNotFoundError(ArchiveError):
    """Raised when the requested member is absent from the archive."""

    def __init__(self, entry_name: str = "", message: str = "") -> None:
        self.entry_name = entry_name
        if not message and entry_name:
            message = f"{entry_name} not found in DOCX"
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Archive entry not found."


class UnsupportedCompressionError(ArchiveError):
    """Raised when an entry uses a compression method other than stored or DEFLATE."""

    def __init__(self, method: int | None = None, message: str = "") -> None:
        self.method = method
        if not message and method is not None:
            message = f"Unsupported compression method: {method}"
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Unsupported compression method."


class CorruptArchiveError(ArchiveError):
    """Raised when a local file header or its payload is truncated or undecodable."""

    @property
    def default_message(self) -> str:
        return "Corrupted DOCX archive."


class OutputValidationError(CvParserError):
    """Raised when a generated PDF cannot be read back."""

    @property
    def default_message(self) -> str:
        return "Generated PDF failed validation."


class DocumentNotFoundError(CvParserError, FileNotFoundError):
    """Raised when a file handed to the upload helpers does not exist."""

    @property
    def default_message(self) -> str:
        return "File not found."


class FileNotReadableError(CvParserError, PermissionError):
    """Raised when a file handed to the upload helpers cannot be read."""

    @property
    def default_message(self) -> str:
        return "File not readable."
