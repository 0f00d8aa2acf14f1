"""
Intake Context

Responsibilities:
- Validates uploads (PDF MIME type, profile photo type/size, minimum text length)
- Extracts positioned text and link annotations from resume PDFs
- Detects column layouts and orders text into reading order
- Attributes hyperlinks to their nearby visible text

Owns: PDF-to-text extraction and upload validation
Never: Interprets resume semantics (that is the language model's and the structuring context's job)
"""

from folioflow.contexts.intake.extractor import extract_text, extract_text_async
from folioflow.contexts.intake.layout import AttributedLink, LayoutSettings
from folioflow.contexts.intake.validation import (
    encode_profile_photo,
    validate_pdf_upload,
    validate_resume_text,
)

__all__ = [
    "extract_text",
    "extract_text_async",
    "AttributedLink",
    "LayoutSettings",
    "encode_profile_photo",
    "validate_pdf_upload",
    "validate_resume_text",
]
