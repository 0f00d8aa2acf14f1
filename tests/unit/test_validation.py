"""Unit tests for upload validation."""

import base64

import pytest

from folioflow.contexts.intake.validation import (
    encode_profile_photo,
    validate_pdf_upload,
    validate_resume_text,
)
from folioflow.exceptions import ValidationError


@pytest.mark.unit
@pytest.mark.parametrize("mime_type", ["application/pdf", "APPLICATION/PDF", "application/pdf; charset=binary"])
def test_validate_pdf_upload_accepts_pdf(mime_type):
    validate_pdf_upload(mime_type, "resume.pdf")


@pytest.mark.unit
@pytest.mark.parametrize("mime_type", ["image/png", "text/plain", "", None])
def test_validate_pdf_upload_rejects_other_types(mime_type):
    with pytest.raises(ValidationError) as excinfo:
        validate_pdf_upload(mime_type, "resume.docx")

    assert "Please upload a PDF file" in excinfo.value.message
    assert excinfo.value.field == "file"


@pytest.mark.unit
def test_validate_resume_text_returns_text():
    text = "x" * 50
    assert validate_resume_text(text) is text


@pytest.mark.unit
def test_validate_resume_text_too_short():
    with pytest.raises(ValidationError, match="too short"):
        validate_resume_text("x" * 49)


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", 12345, ["text"]])
def test_validate_resume_text_missing_or_not_string(value):
    with pytest.raises(ValidationError, match="resumeText is required"):
        validate_resume_text(value)


@pytest.mark.unit
def test_validate_resume_text_custom_minimum():
    assert validate_resume_text("short", min_length=5) == "short"


@pytest.mark.unit
def test_encode_profile_photo_data_url():
    data = b"\x89PNG\r\n\x1a\nfake"

    data_url = encode_profile_photo(data, "image/png")

    prefix, payload = data_url.split(",", 1)
    assert prefix == "data:image/png;base64"
    assert base64.b64decode(payload) == data


@pytest.mark.unit
@pytest.mark.parametrize("mime_type", ["application/pdf", "", None])
def test_encode_profile_photo_rejects_non_images(mime_type):
    with pytest.raises(ValidationError, match="Please upload an image file"):
        encode_profile_photo(b"data", mime_type)


@pytest.mark.unit
def test_encode_profile_photo_size_limit():
    encode_profile_photo(b"x" * 1024, "image/jpeg", max_bytes=1024)

    with pytest.raises(ValidationError, match="Image too large"):
        encode_profile_photo(b"x" * 1025, "image/jpeg", max_bytes=1024)


@pytest.mark.unit
def test_encode_profile_photo_default_limit_is_five_megabytes():
    with pytest.raises(ValidationError, match="under 5MB"):
        encode_profile_photo(b"x" * (5 * 1024 * 1024 + 1), "image/webp")
