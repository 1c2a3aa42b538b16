"""Paragraph text extraction from WordprocessingML ``document.xml``."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from .utils import strip_ascii_whitespace

__all__ = ["local_name", "parse_paragraphs", "paragraph_text"]

LOGGER = logging.getLogger(__name__)

PARAGRAPH_TAG = "p"
BREAK_TAG = "br"


def local_name(tag: str) -> str:
    """Return ``tag`` without its ``{namespace}`` or ``prefix:`` qualifier."""

    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    return tag.rsplit(":", 1)[-1]


def paragraph_text(element: ET.Element) -> str:
    """Concatenate the text below ``element``, mapping ``<w:br/>`` to ``"\\n"``."""

    parts: list[str] = []
    if element.text:
        parts.append(element.text)
    for child in element:
        if local_name(child.tag) == BREAK_TAG:
            parts.append("\n")
        else:
            parts.append(paragraph_text(child))
        if child.tail:
            parts.append(child.tail)
    return "".join(parts)


def parse_paragraphs(xml_text: str | bytes) -> list[str]:
    """Return the stripped text of every ``p`` element in document order.

    Nested paragraphs (for instance inside text boxes) are reported both as
    part of their enclosing paragraph and on their own. Malformed XML raises
    :class:`xml.etree.ElementTree.ParseError`.
    """

    root = ET.fromstring(xml_text)
    paragraphs = [
        strip_ascii_whitespace(paragraph_text(element))
        for element in root.iter()
        if local_name(element.tag) == PARAGRAPH_TAG
    ]
    LOGGER.debug("Parsed %d paragraphs", len(paragraphs))
    return paragraphs
