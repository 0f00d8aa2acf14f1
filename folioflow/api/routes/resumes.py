"""Resume routes for the API."""

from typing import Callable

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from folioflow.api.dependencies import get_provider_factory
from folioflow.api.logger import _log_info, _log_success
from folioflow.api.prompts import RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt
from folioflow.api.schemas import ErrorResponse, ExtractTextResponse, ParseResumeRequest
from folioflow.contexts.intake import extract_text_async, validate_pdf_upload, validate_resume_text
from folioflow.utils.llm import LLMProvider, parse_json_response

router = APIRouter(tags=["resumes"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/parse-resume", responses=ERROR_RESPONSES)
def parse_resume(
    payload: ParseResumeRequest,
    provider_factory: Callable[[], LLMProvider] = Depends(get_provider_factory),
) -> JSONResponse:
    """
    Send resume text to the language model and return its structured JSON.

    The model output is returned as-is; reconciliation into the canonical
    resume happens on the consuming side.
    """
    resume_text = validate_resume_text(payload.resumeText)

    provider = provider_factory()
    _log_info(f"Parsing resume ({len(resume_text)} chars) with {provider.name}")
    response = provider.generate(RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt(resume_text))

    parsed = parse_json_response(response.content)
    full_name = parsed.get("fullName") if isinstance(parsed, dict) else None
    _log_success(
        f"Parsed resume for {full_name or 'Unknown'} "
        f"({response.input_tokens} in / {response.output_tokens} out tokens, {response.model})"
    )
    return JSONResponse(content=parsed)


@router.post(
    "/extract-text",
    response_model=ExtractTextResponse,
    responses={**ERROR_RESPONSES, 422: {"model": ErrorResponse}},
)
async def extract_resume_text(file: UploadFile = File(...)) -> ExtractTextResponse:
    """Extract layout-aware text and attributed links from an uploaded PDF."""
    validate_pdf_upload(file.content_type, filename=file.filename or "")
    data = await file.read()
    text = await extract_text_async(data)
    return ExtractTextResponse(text=text, characters=len(text))
