"""Utility helpers for cv-parser."""
from __future__ import annotations

import logging
import os
import re
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, os.PathLike[str]]

# Only ASCII whitespace separates words; U+00A0 and other Unicode spaces do not.
ASCII_WHITESPACE = " \t\r\n\f\v"
_ASCII_WHITESPACE_RUN = re.compile(r"[ \t\r\n\f\v]+")


def split_ascii_whitespace(text: str) -> list[str]:
    """Split ``text`` on runs of ASCII whitespace, dropping empty tokens."""
    return [token for token in _ASCII_WHITESPACE_RUN.split(text) if token]


def strip_ascii_whitespace(text: str) -> str:
    """Strip ASCII whitespace and NUL from both ends of ``text``."""
    return text.strip(ASCII_WHITESPACE + "\0")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def to_path(path: PathLike) -> Path:
    """Normalize an input path to :class:`Path`."""
    return Path(path).expanduser().resolve()


def ensure_parent_directory(path: Path) -> None:
    """Create the immediate parent directory of ``path`` when it is missing.

    Only a single level is created; a missing grandparent surfaces as the
    usual :class:`FileNotFoundError` from the filesystem.
    """
    parent = path.parent
    if not parent.exists():
        parent.mkdir()


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 B")
    """
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
