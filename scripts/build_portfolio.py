#!/usr/bin/env python3
"""
Portfolio Build CLI

Builds a standalone portfolio HTML file from a resume, end to end:
PDF -> extracted text -> language model -> reconciled resume -> HTML.

A JSON file of model output can be given instead of a PDF to skip extraction and
the model call (useful for iterating on templates without spending tokens).

Examples:\n

    build_portfolio.py resume.pdf                                  # Modern template, violet accent

    build_portfolio.py resume.pdf -t bold -a emerald --offline     # Offline bold/emerald export

    build_portfolio.py parsed.json -t minimal                      # Reuse saved model output

    build_portfolio.py resume.pdf --save-json parsed.json          # Keep model output for later
"""

import json
import mimetypes
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folioflow.api.prompts import RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt
from folioflow.contexts.editing import PortfolioStore
from folioflow.contexts.intake import extract_text, validate_resume_text
from folioflow.contexts.rendering import TEMPLATE_NAMES, write_portfolio
from folioflow.contexts.rendering.logger import setup_rendering_logger
from folioflow.contexts.structuring import reconcile
from folioflow.exceptions import (
    ExtractionError,
    LLMConfigurationError,
    UpstreamError,
    ValidationError,
)
from folioflow.utils.llm import get_provider, parse_json_response

app = typer.Typer(
    help="Build a standalone portfolio website from a resume PDF or saved model output",
    add_completion=False,
)


def model_output_from_pdf(pdf_path: Path) -> object:
    """Extract text from the PDF and have the language model structure it."""
    text = validate_resume_text(extract_text(pdf_path))
    provider = get_provider()
    typer.echo(f"Parsing resume with {provider.name}...", err=True)
    response = provider.generate(RESUME_PARSER_SYSTEM_PROMPT, build_user_prompt(text))
    return parse_json_response(response.content)


@app.command()
def main(
    source: Annotated[
        Path,
        typer.Argument(
            help="Resume PDF, or a .json file of saved model output",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the HTML file",
            file_okay=False,
            resolve_path=True,
        ),
    ] = Path("outs/portfolios"),
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help=f"Portfolio template: {', '.join(TEMPLATE_NAMES)}",
        ),
    ] = None,
    accent: Annotated[
        Optional[str],
        typer.Option(
            "--accent",
            "-a",
            help="Accent color: violet, blue, emerald or rose",
        ),
    ] = None,
    offline: Annotated[
        bool,
        typer.Option(
            "--offline",
            help="Inline the stylesheet instead of loading CDN assets",
        ),
    ] = False,
    photo: Annotated[
        Optional[Path],
        typer.Option(
            "--photo",
            "-p",
            help="Profile photo (any image type, max 5 MB)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    save_json: Annotated[
        Optional[Path],
        typer.Option(
            "--save-json",
            help="Also save the raw model output to this file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
):
    """
    Build a portfolio HTML file.

    Exits with code 1 on extraction, validation, or provider errors.
    """
    setup_rendering_logger(template=template or "")

    try:
        if source.suffix.lower() == ".json":
            model_output = json.loads(source.read_text(encoding="utf-8"))
        else:
            model_output = model_output_from_pdf(source)

        if save_json:
            save_json.write_text(json.dumps(model_output, indent=2), encoding="utf-8")
            typer.echo(f"Saved model output to {save_json}", err=True)

        store = PortfolioStore(resume=reconcile(model_output))
        if photo:
            mime_type, _ = mimetypes.guess_type(photo.name)
            store.set_profile_photo(photo.read_bytes(), mime_type)

        output_path = write_portfolio(
            store.data, output_dir, template=template, accent=accent, offline=offline
        )
    except (ExtractionError, ValidationError, UpstreamError) as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    except LLMConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: {source.name} is not valid JSON ({e})", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(output_path))


if __name__ == "__main__":
    app()
