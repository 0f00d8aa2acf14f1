"""
Error taxonomy shared by all FolioFlow contexts.

ExtractionError: PDF could not be turned into text (always carries a remediation hint).
ValidationError: Input rejected before any expensive work starts.
UpstreamError: The language-model provider failed or returned something unusable.
LLMConfigurationError: The server has no provider credential configured.

The structuring context deliberately has no error type: malformed model output
degrades to empty defaults instead of failing.
"""

from typing import Optional


class ExtractionError(Exception):
    """
    Exception raised when a PDF cannot be extracted.

    Attributes:
        reason: Machine-readable cause (one of the REASON_* constants)
        message: Human-readable description including a remediation hint
        original_error: The library exception that triggered this error, if any
    """

    ENGINE_UNAVAILABLE = "engine_unavailable"
    INVALID_PDF = "invalid_pdf"
    PASSWORD_PROTECTED = "password_protected"
    EMPTY_DOCUMENT = "empty_document"
    IO_ERROR = "io_error"

    def __init__(self, reason: str, message: str, original_error: Optional[Exception] = None):
        self.reason = reason
        self.message = message
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"\nOriginal error: {original_error}")

        super().__init__("\n".join(parts))


class ValidationError(ValueError):
    """
    Exception raised when user input is rejected up front.

    Covers wrong file types, oversized images, and text too short to be a resume.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class UpstreamError(Exception):
    """
    Exception raised when the language-model provider call fails.

    Attributes:
        status_code: HTTP status to surface to the client (provider status when known)
        message: Description suitable for the client
    """

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{status_code}] {message}")


class LLMConfigurationError(RuntimeError):
    """Raised when no provider credential is configured on the server."""
