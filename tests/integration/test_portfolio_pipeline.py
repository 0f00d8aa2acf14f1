"""
Integration test for the full portfolio pipeline.
Tests: PDF -> extracted text -> model JSON (faked) -> CanonicalResume -> edits -> HTML export.
"""

import json

import pytest

from folioflow.api.prompts import RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt
from folioflow.contexts.editing import PortfolioStore
from folioflow.contexts.intake import extract_text, validate_resume_text
from folioflow.contexts.rendering import write_portfolio
from folioflow.contexts.structuring import reconcile
from folioflow.utils.llm import parse_json_response


@pytest.mark.integration
def test_pdf_to_exported_portfolio(tmp_path, single_column_pdf, fake_provider_factory, model_output):
    text = validate_resume_text(extract_text(single_column_pdf))
    provider = fake_provider_factory(json.dumps(model_output))

    response = provider.generate(RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt(text))
    resume = reconcile(parse_json_response(response.content))

    store = PortfolioStore(resume=resume)
    store.update("title", "Staff Engineer")
    store.add_item("projects", {"name": "folio-cli", "technologies": "Python, Typer"})
    store.undo()

    output_path = write_portfolio(store.data, tmp_path, template="modern", accent="emerald")
    html = output_path.read_text(encoding="utf-8")

    assert output_path.name == "jane-doe-portfolio.html"
    assert "GitHub" in provider.calls[0][2]
    assert "Staff Engineer" in html
    assert "folio-cli" not in html
    assert "Jan 2021 – Present" in html
    assert 'href="https://linkedin.com/in/jane"' in html
    assert "--ff-accent: #059669;" in html
