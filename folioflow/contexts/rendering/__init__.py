"""
Rendering Context

Responsibilities:
- Renders the canonical resume through themed Jinja2 templates (modern, minimal, bold)
- Applies accent palettes from configuration
- Normalizes durations for display
- Exports standalone HTML, online (CDN assets) or offline (inlined stylesheet)

Owns: Portfolio HTML generation and export
Never: Modifies resume content
"""

from folioflow.contexts.rendering.exporter import (
    build_standalone_html,
    export_filename,
    write_portfolio,
)
from folioflow.contexts.rendering.renderer import (
    TEMPLATE_NAMES,
    PortfolioRenderer,
    render_portfolio,
    resolve_accent,
)

__all__ = [
    "PortfolioRenderer",
    "render_portfolio",
    "resolve_accent",
    "TEMPLATE_NAMES",
    "build_standalone_html",
    "export_filename",
    "write_portfolio",
]
