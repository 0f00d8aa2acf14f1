#!/usr/bin/env python3
"""
Resume Text Extraction CLI

Extracts layout-aware text and attributed hyperlinks from a resume PDF: the same
text the API sends to the language model.

Examples:\n

    extract_text.py resume.pdf                        # Print to stdout

    extract_text.py resume.pdf -o resume.txt          # Write to file

    extract_text.py resume.pdf --min-fragments 6      # Looser two-column detection
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folioflow.contexts.intake import extract_text
from folioflow.contexts.intake.extractor import default_layout_settings
from folioflow.contexts.intake.logger import setup_intake_logger
from folioflow.exceptions import ExtractionError

app = typer.Typer(
    help="Extract layout-aware text and links from a resume PDF",
    add_completion=False,
)


@app.command()
def main(
    pdf_path: Annotated[
        Path,
        typer.Argument(
            help="Resume PDF",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_file: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the text here instead of stdout",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    min_fragments: Annotated[
        Optional[int],
        typer.Option(
            "--min-fragments",
            help="Fragments each half needs for a page to count as two-column",
            min=0,
        ),
    ] = None,
    margin_ratio: Annotated[
        Optional[float],
        typer.Option(
            "--margin-ratio",
            help="Midpoint band (fraction of page width) excluded from both columns",
            min=0.0,
            max=0.5,
        ),
    ] = None,
):
    """
    Extract text from a resume PDF.

    Logs go to stderr and LOGS_PATH/intake.log; the extracted text goes to stdout
    (or --output).
    """
    setup_intake_logger(source=pdf_path.name)

    settings = default_layout_settings()
    if min_fragments is not None:
        settings = replace(settings, min_column_fragments=min_fragments)
    if margin_ratio is not None:
        settings = replace(settings, column_margin_ratio=margin_ratio)

    try:
        text = extract_text(pdf_path, settings=settings)
    except ExtractionError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if output_file:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {len(text)} characters to {output_file}", err=True)
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
