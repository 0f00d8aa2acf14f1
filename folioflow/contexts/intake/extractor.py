"""
Layout-aware resume text extraction.

Turns a PDF into a text blob for the language model: per page, reading-ordered
text (split into [LEFT COLUMN]/[RIGHT COLUMN] blocks for sidebar layouts) followed
by the page's hyperlinks, each attributed to the text it sits on.

Output format:
    --- PAGE 1 TEXT ---
    Jane Doe Software Engineer ...

    --- PAGE 1 ATTRIBUTED LINKS ---
    [LINK: context="GitHub" url="https://github.com/jane"]

Pages are processed strictly in order; nothing carries over between pages.
"""

import asyncio
import time
from typing import Optional

from folioflow.contexts.intake.layout import LayoutSettings, detect_columns, render_page
from folioflow.contexts.intake.logger import (
    _log_error,
    _log_info,
    _log_warning,
    log_extraction_result,
    log_page_layout,
)
from folioflow.exceptions import ExtractionError
from folioflow.utils.pdf_processing import (
    EMPTY_HINT,
    PdfSource,
    iter_pages,
    load_pdf_bytes,
    open_pdf,
    preflight,
)
from folioflow.utils.settings import config_section


def default_layout_settings() -> LayoutSettings:
    """Layout thresholds from the `layout:` configuration block."""
    return LayoutSettings.from_config(config_section("layout"))


def extract_text(source: PdfSource, settings: Optional[LayoutSettings] = None) -> str:
    """
    Extract reading-ordered text and attributed links from a PDF.

    Args:
        source: Path to a PDF or its raw bytes
        settings: Layout thresholds (defaults to configuration)

    Returns:
        Marked-up text for all pages, stripped

    Raises:
        ExtractionError: engine unavailable, invalid/corrupt or password-protected
            PDF, zero pages, or I/O failure
    """
    settings = settings or default_layout_settings()
    start_time = time.time()

    try:
        data = load_pdf_bytes(source)
        preflight(data)

        chunks = []
        with open_pdf(data) as pdf:
            if len(pdf.pages) == 0:
                raise ExtractionError(ExtractionError.EMPTY_DOCUMENT, EMPTY_HINT)

            for page in iter_pages(pdf):
                if not page.fragments:
                    _log_warning(f"Page {page.page_number} has no text layer (scanned image?)")
                log_page_layout(
                    page.page_number,
                    len(page.fragments),
                    detect_columns(page.fragments, page.width, settings) is not None,
                    sum(1 for link in page.links if link.is_uri_link),
                )
                chunks.append(render_page(page, settings))
    except ExtractionError as e:
        _log_error(f"Extraction failed ({e.reason}): {e.message}")
        raise

    full_text = "".join(chunks).strip()
    log_extraction_result(len(chunks), len(full_text), time.time() - start_time)
    return full_text


async def extract_text_async(source: PdfSource, settings: Optional[LayoutSettings] = None) -> str:
    """Run extract_text in a worker thread so an event loop stays responsive."""
    _log_info("Scheduling extraction off the event loop")
    return await asyncio.to_thread(extract_text, source, settings)
