"""
Standalone portfolio export.

Wraps a rendered portfolio fragment into one self-contained HTML document. The
online variant pulls Tailwind, FontAwesome and the Outfit font from CDNs; the
offline variant inlines static/offline.css instead so the file renders without a
network connection.
"""

import re
from pathlib import Path
from typing import Optional

from markupsafe import Markup

from folioflow.contexts.rendering.logger import _log_success
from folioflow.contexts.rendering.renderer import PortfolioRenderer, get_renderer
from folioflow.contexts.structuring.resume_data_structure import CanonicalResume

OFFLINE_CSS_PATH = Path(__file__).resolve().parent / "static" / "offline.css"
STANDALONE_TEMPLATE = "standalone.html.jinja"

DEFAULT_NAME = "My Portfolio"
DEFAULT_TITLE = "Professional Portfolio"


def load_offline_css() -> str:
    return OFFLINE_CSS_PATH.read_text(encoding="utf-8")


def export_filename(full_name: str, offline: bool = False) -> str:
    """
    Download file name for a portfolio.

    Whitespace runs become hyphens; characters unsafe in file names are dropped.

    Examples:
        >>> export_filename("Ada Lovelace")
        'ada-lovelace-portfolio.html'
        >>> export_filename("", offline=True)
        'my-portfolio-portfolio-offline.html'
    """
    slug = re.sub(r"\s+", "-", (full_name or DEFAULT_NAME).strip().lower())
    slug = re.sub(r"[^\w.-]", "", slug) or "my-portfolio"
    return f"{slug}-portfolio{'-offline' if offline else ''}.html"


def build_standalone_html(
    resume: CanonicalResume,
    template: Optional[str] = None,
    accent: Optional[str] = None,
    offline: bool = False,
    renderer: Optional[PortfolioRenderer] = None,
) -> str:
    """
    Render a complete, self-contained HTML document for the portfolio.

    Args:
        resume: Data to render
        template: Portfolio template name (defaults to configured default)
        accent: Accent name (defaults to configured default)
        offline: Inline the stylesheet instead of referencing CDNs
        renderer: Renderer to use (defaults to the shared one)

    Returns:
        HTML document as a string
    """
    renderer = renderer or get_renderer()
    body = renderer.render(resume, template=template, accent=accent)

    document = renderer.env.get_template(STANDALONE_TEMPLATE)
    return document.render(
        full_name=resume.full_name or DEFAULT_NAME,
        title=resume.title or DEFAULT_TITLE,
        offline=offline,
        offline_css=Markup(load_offline_css()) if offline else "",
        body=Markup(body),
    )


def write_portfolio(
    resume: CanonicalResume,
    output_dir: Path,
    template: Optional[str] = None,
    accent: Optional[str] = None,
    offline: bool = False,
) -> Path:
    """
    Export the portfolio into output_dir under its standard file name.

    Returns:
        Path to the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export_filename(resume.full_name, offline=offline)
    output_path.write_text(
        build_standalone_html(resume, template=template, accent=accent, offline=offline),
        encoding="utf-8",
    )
    _log_success(f"Portfolio exported{' (offline version)' if offline else ''}: {output_path}")
    return output_path
