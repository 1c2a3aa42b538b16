from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
from xml.sax.saxutils import escape
import sys
import zipfile

import pytest
from docx import Document

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def document_xml(paragraphs: Sequence[str]) -> str:
    """Build a WordprocessingML body; ``\\n`` inside a paragraph becomes ``<w:br/>``."""

    body = []
    for paragraph in paragraphs:
        runs = "<w:r><w:br/></w:r>".join(
            f'<w:r><w:t xml:space="preserve">{escape(part)}</w:t></w:r>' for part in paragraph.split("\n")
        )
        body.append(f"<w:p>{runs}</w:p>")
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{"".join(body)}</w:body></w:document>'
    )


@pytest.fixture()
def docx_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a minimal DOCX package with :mod:`zipfile`."""

    def _create(
        paragraphs: Sequence[str] = ("Jane Doe",),
        *,
        filename: str = "resume.docx",
        compression: int = zipfile.ZIP_DEFLATED,
        xml: str | None = None,
        prefix: bytes = b"",
        include_document: bool = True,
    ) -> Path:
        path = tmp_path / filename
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("[Content_Types].xml", CONTENT_TYPES_XML, compress_type=zipfile.ZIP_DEFLATED)
            if include_document:
                payload = xml if xml is not None else document_xml(paragraphs)
                archive.writestr("word/document.xml", payload, compress_type=compression)
        if prefix:
            path.write_bytes(prefix + path.read_bytes())
        return path

    return _create


@pytest.fixture()
def sample_docx(tmp_path: Path) -> Path:
    """A Word package produced by python-docx, as a real CV would be."""

    path = tmp_path / "cv_example.docx"
    document = Document()
    document.add_heading("Jane Doe", level=1)
    document.add_paragraph("Senior Software Engineer (Python) at Example Corp")
    contact = document.add_paragraph("jane@example.com")
    contact.add_run().add_break()
    contact.add_run("+44 20 7946 0000")
    document.add_paragraph("")
    document.add_paragraph(
        "Built data pipelines and internal tooling for a team of forty engineers, "
        "owning ingestion, validation and reporting across several product lines."
    )
    document.save(str(path))
    return path
