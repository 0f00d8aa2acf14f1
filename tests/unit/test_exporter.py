"""Unit tests for standalone HTML export."""

import pytest

from folioflow.contexts.rendering.exporter import (
    build_standalone_html,
    export_filename,
    load_offline_css,
    write_portfolio,
)
from folioflow.contexts.structuring import CanonicalResume


@pytest.mark.unit
@pytest.mark.parametrize(
    "full_name,offline,expected",
    [
        ("Jane Doe", False, "jane-doe-portfolio.html"),
        ("Jane   Doe", True, "jane-doe-portfolio-offline.html"),
        ("José O'Neil / Dev", False, "josé-oneil--dev-portfolio.html"),
        ("", False, "my-portfolio-portfolio.html"),
    ],
)
def test_export_filename(full_name, offline, expected):
    assert export_filename(full_name, offline=offline) == expected


@pytest.mark.unit
def test_online_document_references_cdn_assets(resume):
    html = build_standalone_html(resume, template="modern")

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Jane Doe - Backend Engineer</title>" in html
    assert "https://cdn.tailwindcss.com" in html
    assert "font-awesome/6.4.0" in html
    assert 'data-template="modern"' in html


@pytest.mark.unit
def test_offline_document_inlines_stylesheet(resume):
    html = build_standalone_html(resume, template="bold", offline=True)

    assert "cdn.tailwindcss.com" not in html
    assert "fonts.googleapis.com" not in html
    assert load_offline_css().strip()[:40] in html
    assert 'data-template="bold"' in html


@pytest.mark.unit
def test_document_defaults_for_empty_resume():
    html = build_standalone_html(CanonicalResume())
    assert "<title>My Portfolio - Professional Portfolio</title>" in html


@pytest.mark.unit
def test_body_markup_is_not_double_escaped(resume):
    html = build_standalone_html(resume)
    assert "&lt;div" not in html
    assert '<div class="folioflow-portfolio' in html


@pytest.mark.unit
def test_write_portfolio(tmp_path, resume):
    output_path = write_portfolio(resume, tmp_path / "exports", template="minimal", accent="blue", offline=True)

    assert output_path == tmp_path / "exports" / "jane-doe-portfolio-offline.html"
    content = output_path.read_text(encoding="utf-8")
    assert "--ff-accent: #2563eb;" in content
    assert 'data-template="minimal"' in content
