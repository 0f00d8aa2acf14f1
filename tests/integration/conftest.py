"""
Fixtures that generate small, real PDF files.

The documents are written by hand (one Helvetica font, one content stream per
page, optional URI link annotations) so extraction runs against the actual
PyPDF2/pdfplumber stack without checked-in binary fixtures.
"""

from typing import Dict, List, Sequence, Tuple

import pytest

PAGE_WIDTH = 612
PAGE_HEIGHT = 792

# (x, y, text) with a bottom-left origin, as in PDF user space
TextRun = Tuple[float, float, str]
# ((x1, y1, x2, y2), url)
LinkSpec = Tuple[Tuple[float, float, float, float], str]


def _pdf_string(text: str) -> bytes:
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    return escaped.encode("latin-1")


def _content_stream(runs: Sequence[TextRun]) -> bytes:
    lines = [b"BT /F1 10 Tf %d %d Td (%s) Tj ET" % (x, y, _pdf_string(text)) for x, y, text in runs]
    return b"\n".join(lines)


def _link_annotation(rect: Tuple[float, float, float, float], url: str) -> bytes:
    x1, y1, x2, y2 = rect
    return (
        b"<< /Type /Annot /Subtype /Link /Rect [%d %d %d %d] /Border [0 0 0] "
        b"/A << /Type /Action /S /URI /URI (%s) >> >>" % (x1, y1, x2, y2, _pdf_string(url))
    )


def build_pdf(pages: List[Dict]) -> bytes:
    """
    Assemble a PDF from page specs.

    Args:
        pages: One dict per page with optional "text" (list of TextRun) and
               "links" (list of LinkSpec) keys

    Returns:
        Complete PDF bytes with a valid cross-reference table
    """
    # Objects 1-3 are fixed: catalog, page tree, font
    objects: List[bytes] = [b"", b"", b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"]

    def add(body: bytes) -> int:
        objects.append(body)
        return len(objects)

    kids = []
    for page in pages:
        stream = _content_stream(page.get("text", []))
        content_ref = add(b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream))
        annot_refs = [add(_link_annotation(rect, url)) for rect, url in page.get("links", [])]
        annots = b""
        if annot_refs:
            annots = b" /Annots [%s]" % b" ".join(b"%d 0 R" % ref for ref in annot_refs)
        kids.append(
            add(
                b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 %d %d] "
                b"/Resources << /Font << /F1 3 0 R >> >> /Contents %d 0 R%s >>"
                % (PAGE_WIDTH, PAGE_HEIGHT, content_ref, annots)
            )
        )

    objects[0] = b"<< /Type /Catalog /Pages 2 0 R >>"
    objects[1] = b"<< /Type /Pages /Kids [%s] /Count %d >>" % (
        b" ".join(b"%d 0 R" % kid for kid in kids),
        len(kids),
    )

    output = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(output))
        output += b"%d 0 obj\n%s\nendobj\n" % (number, body)

    xref_offset = len(output)
    output += b"xref\n0 %d\n" % (len(objects) + 1)
    output += b"0000000000 65535 f \n"
    for offset in offsets:
        output += b"%010d 00000 n \n" % offset
    output += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_offset,
    )
    return bytes(output)


@pytest.fixture
def single_column_pdf() -> bytes:
    """One-page resume with a header, two sections and a GitHub link."""
    return build_pdf(
        [
            {
                "text": [
                    (72, 720, "Jane Doe"),
                    (72, 700, "Backend Engineer"),
                    (72, 660, "Experience"),
                    (72, 640, "Senior Engineer at Acme GmbH"),
                    (72, 600, "GitHub"),
                ],
                "links": [((70, 596, 110, 612), "https://github.com/jane")],
            }
        ]
    )


@pytest.fixture
def two_column_pdf() -> bytes:
    """Sidebar layout: eleven short lines left of the margin band and eleven right of it."""
    left = [(40, 720 - i * 20, f"Sidebar {i}") for i in range(11)]
    right = [(400, 720 - i * 20, f"Main {i}") for i in range(11)]
    return build_pdf([{"text": left + right}])


@pytest.fixture
def two_page_pdf() -> bytes:
    return build_pdf(
        [
            {"text": [(72, 720, "First page text")]},
            {"text": [(72, 720, "Second page text")]},
        ]
    )


@pytest.fixture
def empty_pdf() -> bytes:
    return build_pdf([])


@pytest.fixture
def resume_pdf_path(tmp_path, single_column_pdf):
    path = tmp_path / "resume.pdf"
    path.write_bytes(single_column_pdf)
    return path
