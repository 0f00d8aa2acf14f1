"""
PDF access utilities: positioned text fragments and link annotations.

This module is the only place that talks to the PDF libraries. Everything it
returns is plain data in PDF user space (origin bottom-left, y grows upward), so
layout code never sees a pdfplumber object.

Main entry points:
    load_pdf_bytes: Read a PDF from a path or bytes.
    preflight: Cheap PyPDF2 checks (corrupt, password-protected, zero pages).
    iter_pages: Yield PageContent for each page, in page order.

Library errors are translated into ExtractionError here.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from PyPDF2 import PdfReader
from PyPDF2.errors import DependencyError, PdfReadError

from folioflow.exceptions import ExtractionError

PdfSource = Union[str, Path, bytes]

INVALID_PDF_HINT = "Invalid PDF file. Please upload a valid PDF document."
PASSWORD_HINT = "This PDF is password-protected. Please upload an unprotected PDF."
EMPTY_HINT = "PDF has no pages. Please upload a valid resume."
IO_HINT = "Failed to read the PDF file. The file may be corrupted or unreadable."
ENGINE_HINT = "PDF engine not available. Install pdfplumber to enable resume extraction."


@dataclass
class TextFragment:
    """A run of text at a page position (x = left edge, y = baseline)."""

    text: str
    x: float
    y: float
    height: float = 0.0
    width: float = 0.0


@dataclass
class LinkAnnotation:
    """A link annotation rectangle (x1, y1, x2, y2) and its target."""

    rect: Tuple[float, float, float, float]
    url: Optional[str]
    subtype: str = "Link"

    @property
    def center(self) -> Tuple[float, float]:
        x1, y1, x2, y2 = self.rect
        return (x1 + x2) / 2, (y1 + y2) / 2

    @property
    def is_uri_link(self) -> bool:
        """True for a "Link" annotation that carries a URL."""
        return self.subtype == "Link" and bool(self.url)


@dataclass
class PageContent:
    """Everything layout processing needs from one page."""

    page_number: int
    width: float
    height: float
    fragments: List[TextFragment] = field(default_factory=list)
    links: List[LinkAnnotation] = field(default_factory=list)


def load_pdf_bytes(source: PdfSource) -> bytes:
    """Return raw PDF bytes from a path or bytes, mapping I/O failures to ExtractionError."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise ExtractionError(ExtractionError.IO_ERROR, IO_HINT, original_error=e) from e


def preflight(data: bytes) -> int:
    """
    Run PyPDF2 sanity checks and return the page count.

    Raises:
        ExtractionError: corrupt file, password protection, or zero pages
    """
    try:
        reader = PdfReader(BytesIO(data))
        if reader.is_encrypted:
            try:
                # Encrypted with an empty user password still opens normally
                if not reader.decrypt(""):
                    raise ExtractionError(ExtractionError.PASSWORD_PROTECTED, PASSWORD_HINT)
            except DependencyError:
                # AES needs an optional crypto backend; let pdfplumber decide
                return -1
        num_pages = len(reader.pages)
    except ExtractionError:
        raise
    except (PdfReadError, ValueError, KeyError, TypeError) as e:
        raise ExtractionError(ExtractionError.INVALID_PDF, INVALID_PDF_HINT, original_error=e) from e

    if num_pages == 0:
        raise ExtractionError(ExtractionError.EMPTY_DOCUMENT, EMPTY_HINT)

    return num_pages


def _literal_name(value) -> str:
    """Decode a pdfminer name/literal (e.g. /Link) into a plain string."""
    name = getattr(value, "name", value)
    if isinstance(name, bytes):
        name = name.decode("latin-1")
    return str(name) if name is not None else ""


def _decode_uri(uri) -> Optional[str]:
    if uri is None:
        return None
    if isinstance(uri, bytes):
        uri = uri.decode("utf-8", errors="replace")
    uri = str(uri).strip()
    return uri or None


def _classify_engine_error(error: Exception) -> ExtractionError:
    """Map a pdfplumber/pdfminer exception (possibly wrapped) to ExtractionError."""
    from pdfminer.pdfdocument import PDFEncryptionError, PDFPasswordIncorrect
    from pdfminer.pdfparser import PDFSyntaxError
    from pdfminer.psparser import PSException

    # pdfplumber wraps pdfminer failures in PdfminerException(original)
    candidates = [error, error.__cause__, *getattr(error, "args", ())]
    for candidate in candidates:
        if isinstance(candidate, (PDFPasswordIncorrect, PDFEncryptionError)):
            return ExtractionError(
                ExtractionError.PASSWORD_PROTECTED, PASSWORD_HINT, original_error=error
            )
        if isinstance(candidate, (PDFSyntaxError, PSException)):
            return ExtractionError(
                ExtractionError.INVALID_PDF, INVALID_PDF_HINT, original_error=error
            )

    return ExtractionError(
        ExtractionError.INVALID_PDF, f"Failed to load PDF: {error}", original_error=error
    )


@contextmanager
def open_pdf(data: bytes):
    """
    Open PDF bytes with pdfplumber, translating engine errors.

    Yields:
        pdfplumber.PDF
    """
    try:
        import pdfplumber
    except ImportError as e:
        raise ExtractionError(
            ExtractionError.ENGINE_UNAVAILABLE, ENGINE_HINT, original_error=e
        ) from e

    try:
        pdf = pdfplumber.open(BytesIO(data))
    except Exception as e:
        raise _classify_engine_error(e) from e

    try:
        # pdfminer walks the page tree lazily on first access to .pages
        pdf.pages
    except Exception as e:
        pdf.close()
        raise _classify_engine_error(e) from e

    try:
        yield pdf
    finally:
        pdf.close()


def read_fragments(page) -> List[TextFragment]:
    """
    Extract text runs from a pdfplumber page.

    Blank characters are kept inside words so a fragment is a run of text
    (closer to how a viewer groups glyphs) rather than a single token.
    """
    page_height = float(page.height)
    fragments = []
    for word in page.extract_words(keep_blank_chars=True):
        text = word["text"].strip()
        if not text:
            continue
        fragments.append(
            TextFragment(
                text=text,
                x=float(word["x0"]),
                y=page_height - float(word["bottom"]),
                height=float(word["bottom"]) - float(word["top"]),
                width=float(word["x1"]) - float(word["x0"]),
            )
        )
    return fragments


def read_link_annotations(page) -> List[LinkAnnotation]:
    """Extract annotations from a pdfplumber page, converted to bottom-left coordinates."""
    page_height = float(page.height)
    links = []
    for annot in page.annots:
        data = annot.get("data") or {}
        subtype = _literal_name(data.get("Subtype")) if isinstance(data, dict) else ""
        rect = (
            float(annot["x0"]),
            page_height - float(annot["bottom"]),
            float(annot["x1"]),
            page_height - float(annot["top"]),
        )
        links.append(LinkAnnotation(rect=rect, url=_decode_uri(annot.get("uri")), subtype=subtype))
    return links


def iter_pages(pdf) -> Iterator[PageContent]:
    """
    Yield page contents strictly in page order.

    Each page is fully read (text and annotations) before the next one starts.
    """
    for page_number, page in enumerate(pdf.pages, start=1):
        try:
            fragments = read_fragments(page)
            links = read_link_annotations(page)
            width, height = float(page.width), float(page.height)
        except Exception as e:
            raise _classify_engine_error(e) from e

        yield PageContent(
            page_number=page_number,
            width=width,
            height=height,
            fragments=fragments,
            links=links,
        )
