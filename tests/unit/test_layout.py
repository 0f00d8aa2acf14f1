"""Unit tests for column detection, reading order and link attribution on synthetic pages."""

import pytest

from folioflow.contexts.intake.layout import (
    AttributedLink,
    LayoutSettings,
    attribute_links,
    detect_columns,
    order_single_column,
    render_page,
    render_page_text,
)
from folioflow.utils.pdf_processing import LinkAnnotation, PageContent, TextFragment

PAGE_WIDTH = 600.0


def _column(x, count, prefix, top=700.0, step=20.0):
    return [TextFragment(text=f"{prefix}{i}", x=x, y=top - i * step) for i in range(count)]


# ============================================================================
# Column Detection
# ============================================================================


@pytest.mark.unit
def test_detect_columns_two_column_page():
    left = _column(50, 11, "L")
    right = _column(400, 11, "R")

    columns = detect_columns(left + right, PAGE_WIDTH)

    assert columns is not None
    assert [f.text for f in columns[0]] == [f.text for f in left]
    assert [f.text for f in columns[1]] == [f.text for f in right]


@pytest.mark.unit
@pytest.mark.parametrize("per_side, two_column", [(15, True), (5, False)])
def test_detect_columns_fragment_counts(per_side, two_column):
    fragments = _column(50, per_side, "L") + _column(400, per_side, "R")
    assert (detect_columns(fragments, PAGE_WIDTH) is not None) is two_column


@pytest.mark.unit
def test_detect_columns_needs_more_than_threshold_on_both_sides():
    """Exactly min_column_fragments on one side is still single-column."""
    fragments = _column(50, 30, "L") + _column(400, 10, "R")
    assert detect_columns(fragments, PAGE_WIDTH) is None


@pytest.mark.unit
def test_detect_columns_ignores_right_aligned_dates():
    """A few right-aligned dates next to a full-width body do not make two columns."""
    body = _column(50, 25, "Body")
    dates = _column(480, 4, "2020-")
    assert detect_columns(body + dates, PAGE_WIDTH) is None


@pytest.mark.unit
def test_detect_columns_margin_band_belongs_to_neither_side():
    # Band is 240..360 for a 600-wide page with the default 10% margin
    band = _column(300, 20, "Mid")
    fragments = _column(50, 11, "L") + band + _column(250, 11, "Near")
    assert detect_columns(fragments, PAGE_WIDTH) is None


@pytest.mark.unit
def test_detect_columns_custom_settings():
    settings = LayoutSettings(min_column_fragments=2)
    fragments = _column(50, 3, "L") + _column(400, 3, "R")
    assert detect_columns(fragments, PAGE_WIDTH, settings) is not None


# ============================================================================
# Reading Order
# ============================================================================


@pytest.mark.unit
def test_order_single_column_tolerates_baseline_jitter():
    """Fragments a couple of points apart vertically are one line, read left to right."""
    fragments = [
        TextFragment(text="Doe", x=120, y=699),
        TextFragment(text="Jane", x=50, y=701),
        TextFragment(text="Engineer", x=50, y=680),
        TextFragment(text="Berlin", x=300, y=683),
    ]

    ordered = order_single_column(fragments)

    assert [f.text for f in ordered] == ["Jane", "Doe", "Engineer", "Berlin"]


@pytest.mark.unit
def test_order_single_column_lines_do_not_chain():
    """Lines anchor at their first fragment, so a slow drift starts a new line."""
    fragments = [
        TextFragment(text="a", x=300, y=700),
        TextFragment(text="b", x=200, y=696),
        TextFragment(text="c", x=100, y=692),
    ]

    ordered = order_single_column(fragments)

    assert [f.text for f in ordered] == ["b", "a", "c"]


@pytest.mark.unit
def test_render_page_text_two_column_markers():
    page = PageContent(
        page_number=1,
        width=PAGE_WIDTH,
        height=800,
        fragments=_column(400, 11, "R") + _column(50, 11, "L") + [TextFragment("Center", 300, 500)],
    )

    text = render_page_text(page)

    assert text.startswith("[LEFT COLUMN]\nL0 L1")
    assert "\n\n[RIGHT COLUMN]\nR0 R1" in text
    assert "Center" not in text


@pytest.mark.unit
def test_render_page_text_single_column():
    page = PageContent(
        page_number=1,
        width=PAGE_WIDTH,
        height=800,
        fragments=[TextFragment("Skills", 50, 600), TextFragment("Jane Doe", 50, 750)],
    )
    assert render_page_text(page) == "Jane Doe Skills"


# ============================================================================
# Link Attribution
# ============================================================================


@pytest.mark.unit
def test_attribute_links_uses_nearest_text_on_the_same_line():
    fragments = [
        TextFragment("GitHub", 60, 500),
        TextFragment("LinkedIn", 300, 500),
        TextFragment("Far below", 60, 400),
    ]
    links = [LinkAnnotation(rect=(55, 495, 100, 510), url="https://github.com/jane")]

    attributed = attribute_links(fragments, links)

    assert attributed[0].url == "https://github.com/jane"
    assert attributed[0].context.startswith("GitHub")
    assert "Far below" not in attributed[0].context


@pytest.mark.unit
def test_attribute_links_single_fragment_in_window():
    fragments = [TextFragment("Portfolio", 120, 300), TextFragment("Other line", 120, 250)]
    links = [LinkAnnotation(rect=(110, 295, 190, 311), url="https://jane.dev")]

    attributed = attribute_links(fragments, links)

    assert attributed == [AttributedLink(context="Portfolio", url="https://jane.dev")]


@pytest.mark.unit
def test_attribute_links_limits_context_size():
    fragments = [TextFragment(f"w{i}", 50 + i * 10, 500) for i in range(8)]
    links = [LinkAnnotation(rect=(40, 495, 60, 505), url="https://example.com")]

    attributed = attribute_links(fragments, links, LayoutSettings(link_context_size=3))

    assert attributed[0].context == "w0 w1 w2"


@pytest.mark.unit
def test_attribute_links_default_context_and_filters():
    links = [
        LinkAnnotation(rect=(0, 0, 10, 10), url="https://lonely.example"),
        LinkAnnotation(rect=(0, 0, 10, 10), url=None),
        LinkAnnotation(rect=(0, 0, 10, 10), url="https://note.example", subtype="Text"),
    ]

    attributed = attribute_links([TextFragment("Top", 50, 700)], links)

    assert attributed == [AttributedLink(context="Link", url="https://lonely.example")]


@pytest.mark.unit
@pytest.mark.parametrize(
    "link, expected",
    [
        (LinkAnnotation(rect=(0, 0, 1, 1), url="https://jane.dev"), True),
        (LinkAnnotation(rect=(0, 0, 1, 1), url=None), False),
        (LinkAnnotation(rect=(0, 0, 1, 1), url=""), False),
        (LinkAnnotation(rect=(0, 0, 1, 1), url="https://note.example", subtype="Text"), False),
    ],
)
def test_link_annotation_is_uri_link(link, expected):
    assert link.is_uri_link is expected


@pytest.mark.unit
def test_attributed_link_format():
    link = AttributedLink(context="Portfolio", url="https://jane.dev")
    assert link.format() == '[LINK: context="Portfolio" url="https://jane.dev"]'


@pytest.mark.unit
def test_render_page_appends_links_block_only_when_present():
    fragments = [TextFragment("GitHub", 60, 500)]
    with_link = PageContent(
        page_number=2,
        width=PAGE_WIDTH,
        height=800,
        fragments=fragments,
        links=[LinkAnnotation(rect=(55, 495, 100, 510), url="https://github.com/jane")],
    )
    without_link = PageContent(page_number=3, width=PAGE_WIDTH, height=800, fragments=fragments)

    assert render_page(with_link) == (
        "--- PAGE 2 TEXT ---\nGitHub\n\n"
        "--- PAGE 2 ATTRIBUTED LINKS ---\n"
        '[LINK: context="GitHub" url="https://github.com/jane"]\n\n'
    )
    assert render_page(without_link) == "--- PAGE 3 TEXT ---\nGitHub\n\n"


@pytest.mark.unit
def test_layout_settings_from_config_ignores_unknown_keys():
    settings = LayoutSettings.from_config({"line_tolerance": 3.0, "unknown": 1})
    assert settings.line_tolerance == 3.0
    assert settings.min_column_fragments == 10
