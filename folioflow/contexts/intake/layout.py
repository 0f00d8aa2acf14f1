"""
Layout analysis for one PDF page: column detection, reading order, link attribution.

All functions here are pure and operate on TextFragment/LinkAnnotation values, so
they can be tested with synthetic pages. The thresholds are empirical tuning knobs
collected in LayoutSettings.

Main functions:
    detect_columns: Split a page's fragments into left/right columns, or None.
    order_single_column: Tolerant top-to-bottom, left-to-right ordering.
    attribute_links: Pair link annotations with their nearest visible text.
    render_page_text: Produce the marked-up text block for one page.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from folioflow.utils.pdf_processing import LinkAnnotation, PageContent, TextFragment

LEFT_COLUMN_MARKER = "[LEFT COLUMN]"
RIGHT_COLUMN_MARKER = "[RIGHT COLUMN]"
DEFAULT_LINK_CONTEXT = "Link"


@dataclass(frozen=True)
class LayoutSettings:
    """
    Heuristic thresholds for layout analysis.

    Attributes:
        column_margin_ratio: Half-width of the band around the page midpoint that
            belongs to neither column, as a fraction of page width
        min_column_fragments: Each side needs strictly more fragments than this
            for the page to be treated as two-column
        line_tolerance: Fragments closer than this in y share a line (single column)
        link_y_tolerance: Max |y - link center y| for a fragment to give link context
        link_context_size: Number of nearest fragments joined into a link's context
    """

    column_margin_ratio: float = 0.1
    min_column_fragments: int = 10
    line_tolerance: float = 5.0
    link_y_tolerance: float = 15.0
    link_context_size: int = 5

    @classmethod
    def from_config(cls, values: Dict[str, Any]) -> "LayoutSettings":
        """Build settings from a config mapping, ignoring unknown keys."""
        known = {k: v for k, v in values.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class AttributedLink:
    """A link URL paired with the text it visually belongs to."""

    context: str
    url: str

    def format(self) -> str:
        return f'[LINK: context="{self.context}" url="{self.url}"]'


def detect_columns(
    fragments: List[TextFragment], page_width: float, settings: LayoutSettings = LayoutSettings()
) -> Optional[Tuple[List[TextFragment], List[TextFragment]]]:
    """
    Classify a page as two-column or not.

    Fragments strictly left of (midpoint - margin) form the left set; fragments
    strictly right of (midpoint + margin) form the right set. A handful of
    right-aligned dates is not enough: both sets must exceed min_column_fragments.

    Returns:
        (left, right) fragment lists for a two-column page, else None
    """
    midpoint = page_width / 2
    margin = page_width * settings.column_margin_ratio

    left = [f for f in fragments if f.x < midpoint - margin]
    right = [f for f in fragments if f.x > midpoint + margin]

    if len(left) > settings.min_column_fragments and len(right) > settings.min_column_fragments:
        return left, right
    return None


def _top_down_key(fragment: TextFragment) -> Tuple[float, float]:
    return (-fragment.y, fragment.x)


def order_column(fragments: List[TextFragment]) -> List[TextFragment]:
    """Sort one column by descending y, then ascending x."""
    return sorted(fragments, key=_top_down_key)


def order_single_column(
    fragments: List[TextFragment], settings: LayoutSettings = LayoutSettings()
) -> List[TextFragment]:
    """
    Sort fragments into reading order with a tolerant line comparison.

    Fragments whose y differs by less than line_tolerance count as one line and
    are ordered left to right; otherwise higher fragments come first. Fragments
    are grouped into lines anchored at the first (highest) fragment of each line,
    which keeps the ordering a proper total order.
    """
    lines: List[List[TextFragment]] = []
    line_y: Optional[float] = None

    for fragment in sorted(fragments, key=_top_down_key):
        if line_y is not None and abs(line_y - fragment.y) < settings.line_tolerance:
            lines[-1].append(fragment)
        else:
            lines.append([fragment])
            line_y = fragment.y

    ordered = []
    for line in lines:
        ordered.extend(sorted(line, key=lambda f: f.x))
    return ordered


def join_fragments(fragments: List[TextFragment]) -> str:
    return " ".join(f.text for f in fragments)


def attribute_links(
    fragments: List[TextFragment],
    links: List[LinkAnnotation],
    settings: LayoutSettings = LayoutSettings(),
) -> List[AttributedLink]:
    """
    Pair each URL link annotation with the text nearest its rectangle center.

    Only annotations with subtype "Link" and a URL are considered. Candidates are
    fragments within link_y_tolerance of the center's y, ranked by horizontal
    distance to the center; the closest link_context_size are joined.
    """
    attributed = []
    for link in links:
        if not link.is_uri_link:
            continue

        center_x, center_y = link.center
        nearby = [f for f in fragments if abs(f.y - center_y) < settings.link_y_tolerance]
        nearby.sort(key=lambda f: abs(f.x - center_x))

        context = join_fragments(nearby[: settings.link_context_size]).strip()
        attributed.append(AttributedLink(context=context or DEFAULT_LINK_CONTEXT, url=link.url))

    return attributed


def render_page_text(page: PageContent, settings: LayoutSettings = LayoutSettings()) -> str:
    """Order one page's fragments and return its text (with column markers if split)."""
    columns = detect_columns(page.fragments, page.width, settings)

    if columns is not None:
        left, right = columns
        left_text = join_fragments(order_column(left))
        right_text = join_fragments(order_column(right))
        return f"{LEFT_COLUMN_MARKER}\n{left_text}\n\n{RIGHT_COLUMN_MARKER}\n{right_text}"

    return join_fragments(order_single_column(page.fragments, settings))


def render_page(page: PageContent, settings: LayoutSettings = LayoutSettings()) -> str:
    """
    Produce the full output block for one page: text section, then links section.

    The links section is omitted when the page has no attributable links.
    """
    output = f"--- PAGE {page.page_number} TEXT ---\n{render_page_text(page, settings)}\n\n"

    links = attribute_links(page.fragments, page.links, settings)
    if links:
        link_lines = "\n".join(link.format() for link in links)
        output += f"--- PAGE {page.page_number} ATTRIBUTED LINKS ---\n{link_lines}\n\n"

    return output
