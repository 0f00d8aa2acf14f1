"""
LLM provider abstraction and response parsing utilities.

Provides a provider-agnostic interface for chat-completion calls with a single
fallback-model retry on rate limiting, and a parser that turns model output into
JSON. The default provider is Groq through its OpenAI-compatible endpoint.
"""

import json
import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import openai
from dotenv import load_dotenv
from loguru import logger

from folioflow.exceptions import LLMConfigurationError, UpstreamError

load_dotenv()

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "openai/gpt-oss-120b"
DEFAULT_FALLBACK_MODEL = "llama-3.1-8b-instant"

TEMPERATURE = 0.1
MAX_TOKENS = 8000

MISSING_KEY_MESSAGE = "Server API key not configured. Please set GROQ_API_KEY in .env file."
EMPTY_RESPONSE_MESSAGE = "No response from AI model"
INVALID_JSON_MESSAGE = "Failed to parse AI response as JSON"


class RateLimited(Exception):
    """Raised by _call_api when the provider answers 429; triggers the fallback model."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# --- LLM Provider Classes ---


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses must:
    - Set _provider_prefix class attribute (e.g., "groq")
    - Implement _call_api() for the actual API call, raising RateLimited on 429
      and UpstreamError on any other provider failure
    - Call update_model(model) in __init__ to set model and name
    """

    _provider_prefix: str

    name: str
    model: str
    fallback_model: Optional[str] = None

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, model: str, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Make a single API call (no retries). Implemented by subclasses."""
        pass

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """
        Generate a response, retrying once with the fallback model if rate limited.

        Raises:
            UpstreamError: Provider failure (status passed through), or 429 when the
                fallback is also rate limited or no fallback is configured
        """
        logger.info(f"Calling {self.name}")
        try:
            return self._call_api(self.model, system_prompt, user_prompt)
        except RateLimited as primary_error:
            if not self.fallback_model:
                raise UpstreamError(primary_error.message, status_code=429) from primary_error
            logger.warning(
                f"Primary model {self.model} rate limited, switching to fallback ({self.fallback_model})"
            )

        try:
            return self._call_api(self.fallback_model, system_prompt, user_prompt)
        except RateLimited as fallback_error:
            raise UpstreamError(fallback_error.message, status_code=429) from fallback_error


class GroqProvider(LLMProvider):
    """Groq chat completions through the OpenAI-compatible API."""

    _provider_prefix = "groq"

    def __init__(
        self,
        model: Optional[str] = None,
        fallback_model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Any = None,
    ):
        """
        Args:
            model: Primary model (default: MODEL_NAME env var, then openai/gpt-oss-120b)
            fallback_model: Model used once on 429 (default: FALLBACK_MODEL env var)
            api_key: Credential (default: GROQ_API_KEY env var)
            base_url: Endpoint (default: LLM_BASE_URL env var, then Groq)
            client: Pre-built OpenAI-compatible client (tests inject a fake here)

        Raises:
            LLMConfigurationError: No API key and no client supplied
        """
        if client is None:
            api_key = api_key or os.getenv("GROQ_API_KEY")
            if not api_key:
                raise LLMConfigurationError(MISSING_KEY_MESSAGE)
            client = openai.OpenAI(
                api_key=api_key,
                base_url=base_url or os.getenv("LLM_BASE_URL", DEFAULT_BASE_URL),
            )

        self.client = client
        self.fallback_model = fallback_model or os.getenv("FALLBACK_MODEL", DEFAULT_FALLBACK_MODEL)
        self.update_model(model or os.getenv("MODEL_NAME", DEFAULT_MODEL))

    def _call_api(self, model: str, system_prompt: str, user_prompt: str) -> LLMResponse:
        try:
            response = self.client.chat.completions.create(
                model=model,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.RateLimitError as e:
            raise RateLimited(e.message or "AI API error: 429") from e
        except openai.APIStatusError as e:
            logger.error(f"AI API error from {model}: {e.status_code} {e.message}")
            raise UpstreamError(
                e.message or f"AI API error: {e.status_code}", status_code=e.status_code
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"AI API unreachable: {e}")
            raise UpstreamError(f"AI API unreachable: {e}", status_code=502) from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            raise UpstreamError(EMPTY_RESPONSE_MESSAGE, status_code=500)

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=content,
            model=model,
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
        )


# --- Provider Factory ---


def get_provider(model: str = None, fallback_model: str = None) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        model: Model name (default: MODEL_NAME env var)
        fallback_model: Rate-limit fallback (default: FALLBACK_MODEL env var)

    Returns:
        LLMProvider instance
    """
    return GroqProvider(model=model, fallback_model=fallback_model)


# --- Response Parsing Utilities ---

_FENCE_PATTERN = re.compile(r"```\w*\n?")


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fences around model output.

    Examples:
        >>> strip_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    text = text.strip()
    if "```json" in text:
        return text.split("```json", 1)[1].split("```", 1)[0].strip()
    if text.startswith("```"):
        return _FENCE_PATTERN.sub("", text).strip()
    return text


def parse_json_response(text: str) -> Any:
    """
    Parse JSON from an LLM response.

    Tries the fence-stripped text directly, then the span from the first "{" to
    the last "}" (models sometimes wrap JSON in prose).

    Raises:
        UpstreamError: Nothing parseable (status 500)
    """
    cleaned = strip_code_fences(text or "")

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        pass

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError:
            pass

    logger.error(f"JSON parse error. Raw content: {cleaned[:500]}")
    raise UpstreamError(INVALID_JSON_MESSAGE, status_code=500)
