"""Shared fixtures for FolioFlow tests."""

from typing import List, Optional, Union

import pytest

from folioflow.contexts.structuring import reconcile
from folioflow.utils.llm import LLMProvider, LLMResponse, RateLimited


class FakeProvider(LLMProvider):
    """
    Scripted provider: each _call_api() pops the next reply.

    A reply is either content for an LLMResponse or an exception to raise.
    Calls are recorded as (model, system_prompt, user_prompt).
    """

    _provider_prefix = "fake"

    def __init__(self, replies: List[Union[str, Exception]], fallback_model: Optional[str] = "fake-small"):
        self.replies = list(replies)
        self.calls = []
        self.fallback_model = fallback_model
        self.update_model("fake-large")

    def _call_api(self, model: str, system_prompt: str, user_prompt: str) -> LLMResponse:
        self.calls.append((model, system_prompt, user_prompt))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(content=reply, model=model, input_tokens=120, output_tokens=80)


@pytest.fixture
def fake_provider_factory():
    """Build a FakeProvider from a list of scripted replies."""

    def _factory(*replies, fallback_model="fake-small") -> FakeProvider:
        return FakeProvider(list(replies), fallback_model=fallback_model)

    return _factory


@pytest.fixture
def rate_limited():
    return RateLimited("Rate limit reached for model")


@pytest.fixture
def model_output():
    """A typical language-model answer for a two-page resume."""
    return {
        "fullName": "Jane Doe",
        "title": "Backend Engineer",
        "location": "Berlin, Germany",
        "bio": "Engineer focused on data pipelines.",
        "contact": {
            "email": "jane@example.com",
            "phone": "+49 30 1234567",
            "linkedin": "",
            "github": "",
        },
        "sections": [
            {"name": "Skills", "type": "skills", "items": ["Python", "SQL", " ", "Docker"]},
            {
                "name": "Professional Experience",
                "type": "work",
                "items": [
                    {
                        "title": "Senior Engineer",
                        "organization": "Acme GmbH",
                        "duration": "Jan 2021 - Present",
                        "location": "Berlin",
                        "description": "Built ingestion services.",
                    },
                    {
                        "role": "Engineer",
                        "company": "Initech",
                        "date": "2018 to 2020",
                        "description": "Maintained reporting.",
                    },
                ],
            },
            {
                "name": "Education",
                "type": "education",
                "items": [
                    {
                        "title": "BSc Computer Science",
                        "organization": "TU Berlin",
                        "year": "2018",
                        "gpa": "1.7",
                    }
                ],
            },
            {
                "name": "Projects",
                "type": "projects",
                "items": [
                    {
                        "title": "pipewatch",
                        "description": "Pipeline monitor.",
                        "technologies": "Python, FastAPI , ,Redis",
                        "github": "https://github.com/jane/pipewatch",
                    }
                ],
            },
            {"name": "Certifications", "type": "custom", "items": ["AWS Solutions Architect"]},
            {"name": "Languages", "type": "custom", "items": ["German", {"name": "English", "level": "C2"}]},
            {"name": "Honors & Awards", "type": "custom", "items": [{"title": "Hackathon Winner", "issuer": "PyCon", "year": "2019"}]},
            {
                "name": "Profiles",
                "type": "custom",
                "items": [
                    {"title": "GitHub", "link": "https://github.com/jane"},
                    {"title": "LinkedIn", "link": "https://linkedin.com/in/jane"},
                    "janedoe.dev",
                ],
            },
            {"name": "Volunteering", "type": "custom", "items": ["Code club mentor", "https://codeclub.org"]},
        ],
    }


@pytest.fixture
def resume(model_output):
    return reconcile(model_output)
