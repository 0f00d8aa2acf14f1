"""
Up-front validation of user uploads.

Everything here runs before any expensive work (PDF parsing, LLM calls) so bad
input is rejected early with a ValidationError.
"""

import base64
from typing import Optional

from folioflow.exceptions import ValidationError
from folioflow.utils.settings import config_section

PDF_MIME_TYPE = "application/pdf"


def _uploads_config() -> dict:
    return config_section("uploads")


def validate_pdf_upload(mime_type: Optional[str], filename: str = "") -> None:
    """Reject anything that is not declared as a PDF."""
    if (mime_type or "").split(";")[0].strip().lower() != PDF_MIME_TYPE:
        raise ValidationError(
            f"Please upload a PDF file (got {mime_type or 'unknown type'}"
            f"{f' for {filename}' if filename else ''}).",
            field="file",
        )


def validate_resume_text(text, min_length: Optional[int] = None) -> str:
    """
    Check extracted text is long enough to plausibly be a resume.

    Returns:
        The text unchanged
    """
    if min_length is None:
        min_length = _uploads_config()["min_resume_text_length"]

    if not text or not isinstance(text, str):
        raise ValidationError("resumeText is required and must be a string", field="resumeText")
    if len(text) < min_length:
        raise ValidationError(
            "Resume text is too short. PDF might be image-based.", field="resumeText"
        )
    return text


def encode_profile_photo(data: bytes, mime_type: Optional[str], max_bytes: Optional[int] = None) -> str:
    """
    Validate a profile photo upload and encode it as a data URL.

    Args:
        data: Raw image bytes
        mime_type: Declared MIME type (any image/* is accepted)
        max_bytes: Size cap (defaults to uploads.max_photo_bytes, 5 MB)

    Returns:
        "data:<mime>;base64,<payload>" string for in-memory use
    """
    if max_bytes is None:
        max_bytes = _uploads_config()["max_photo_bytes"]

    mime_type = (mime_type or "").strip().lower()
    if not mime_type.startswith("image/"):
        raise ValidationError("Please upload an image file (JPG, PNG, etc.)", field="profilePhoto")
    if len(data) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise ValidationError(
            f"Image too large. Please use an image under {limit_mb:g}MB.", field="profilePhoto"
        )

    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"
