"""Shared dependencies for API routes."""

from typing import Callable

from folioflow.utils.llm import LLMProvider, get_provider


def get_provider_factory() -> Callable[[], LLMProvider]:
    """
    Return the callable that builds the language-model provider.

    Routes call the factory only after validating their input, so a missing
    credential (LLMConfigurationError, a 500) never masks a bad request (a 400).
    Tests override this dependency to inject a fake provider.
    """
    return get_provider
