"""
Portfolio template rendering.

Turns a CanonicalResume into a themed HTML fragment using Jinja2 templates stored
in folioflow/contexts/rendering/templates/{template}.html.jinja. The fragment is
what a preview pane shows; exporter.py wraps it into a standalone document.

Templates:
    modern: Centered single column with sticky navigation
    minimal: Card grid on a muted background
    bold: Dark two-column layout with large type

Accents (violet, blue, emerald, rose) come from the `accents` block of the
configuration and are applied through CSS custom properties, so the same markup
works with or without the Tailwind CDN.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from folioflow.contexts.rendering.logger import _log_debug
from folioflow.contexts.structuring.resume_data_structure import CanonicalResume, CustomSection
from folioflow.exceptions import ValidationError
from folioflow.utils.dates import normalize_duration
from folioflow.utils.settings import config_section, get_config

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
TEMPLATE_NAMES = ("modern", "minimal", "bold")

# Strings in custom sections that look like links are rendered as anchors
_LINK_SUFFIX_HINTS = (".com", ".io")


# ============================================================================
# Template Filters
# ============================================================================


def slugify(value: str) -> str:
    """Lowercase and hyphenate whitespace ("Open Source" -> "open-source")."""
    return re.sub(r"\s+", "-", (value or "").strip().lower())


def split_technologies(value: str) -> List[str]:
    """Split a comma-separated technology string into trimmed, non-empty tags."""
    return [tech.strip() for tech in (value or "").split(",") if tech.strip()]


# ============================================================================
# View Preparation
# ============================================================================


def _looks_like_link(text: str) -> bool:
    return text.startswith("http") or any(hint in text for hint in _LINK_SUFFIX_HINTS)


def _custom_item_view(item: Any) -> Dict[str, Any]:
    """Flatten a verbatim custom-section item into fields the templates can rely on."""
    if isinstance(item, dict):
        return {
            "kind": "entry",
            "title": str(item.get("title") or item.get("name") or ""),
            "organization": str(item.get("organization") or item.get("issuer") or ""),
            "duration": str(item.get("duration") or item.get("date") or ""),
            "description": str(item.get("description") or ""),
            "link": str(item.get("link") or ""),
        }
    text = str(item) if item is not None else ""
    return {
        "kind": "link" if _looks_like_link(text) else "text",
        "text": text,
    }


def custom_section_view(section: CustomSection) -> Dict[str, Any]:
    items = section.items if isinstance(section.items, list) else []
    return {
        "name": section.name,
        "anchor": slugify(section.name),
        "items": [_custom_item_view(item) for item in items],
    }


def resolve_accent(accent: Optional[str] = None) -> Dict[str, str]:
    """
    Look up an accent palette by name.

    Raises:
        ValidationError: Unknown accent name
    """
    accents = config_section("accents")
    accent = accent or get_config().rendering.default_accent
    if accent not in accents:
        raise ValidationError(
            f"Unknown accent '{accent}'. Choose one of: {', '.join(accents)}", field="accent"
        )
    return {"name": accent, **accents[accent]}


def build_context(resume: CanonicalResume, accent: Dict[str, str]) -> Dict[str, Any]:
    contact = resume.contact
    return {
        "resume": resume,
        "contact": contact,
        "accent": accent,
        "initials": resume.initials or "ME",
        "custom_sections": [custom_section_view(s) for s in resume.custom_sections],
        "has_contact": any([contact.email, contact.phone, contact.linkedin, contact.github]),
    }


# ============================================================================
# Renderer
# ============================================================================


class PortfolioRenderer:
    """
    Loads, caches and renders portfolio templates.

    Autoescaping is on: every resume string is untrusted text from a PDF and a
    language model.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Args:
            templates_path: Directory holding {name}.html.jinja files
                            (defaults to the packaged templates)
        """
        self.templates_path = templates_path or TEMPLATES_PATH
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["duration"] = normalize_duration
        self.env.filters["slugify"] = slugify
        self.env.filters["technologies"] = split_technologies

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Raises:
            ValidationError: Unknown template name
            TemplateNotFound: Known name but the file is missing
        """
        if name not in TEMPLATE_NAMES:
            raise ValidationError(
                f"Unknown template '{name}'. Choose one of: {', '.join(TEMPLATE_NAMES)}",
                field="template",
            )
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.html.jinja"
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(
        self,
        resume: CanonicalResume,
        template: Optional[str] = None,
        accent: Optional[str] = None,
    ) -> str:
        """
        Render the portfolio body fragment.

        Args:
            resume: Data to render (not modified)
            template: modern, minimal or bold (defaults to rendering.default_template)
            accent: Accent name (defaults to rendering.default_accent)

        Returns:
            HTML fragment for the document body
        """
        template = template or get_config().rendering.default_template
        palette = resolve_accent(accent)
        html = self.get_template(template).render(**build_context(resume, palette))
        _log_debug(f"Rendered '{template}' template with {palette['name']} accent ({len(html)} chars)")
        return html

    def clear_cache(self) -> None:
        self._cache.clear()


_default_renderer: Optional[PortfolioRenderer] = None


def get_renderer() -> PortfolioRenderer:
    """Shared renderer using the packaged templates."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = PortfolioRenderer()
    return _default_renderer


def render_portfolio(
    resume: CanonicalResume, template: Optional[str] = None, accent: Optional[str] = None
) -> str:
    """Render with the shared renderer. See PortfolioRenderer.render()."""
    return get_renderer().render(resume, template=template, accent=accent)
