#!/usr/bin/env python3
"""
FolioFlow API Server CLI

Runs the FastAPI app with uvicorn.

Examples:\n

    serve.py                          # 0.0.0.0:3001

    serve.py --port 8000 --reload     # Development mode
"""

import os

import typer
import uvicorn
from dotenv import load_dotenv
from typing_extensions import Annotated

load_dotenv()

app = typer.Typer(
    help="Run the FolioFlow API server",
    add_completion=False,
)


@app.command()
def main(
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = os.getenv("HOST", "0.0.0.0"),
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = int(os.getenv("PORT", "3001")),
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Restart on code changes"),
    ] = False,
):
    """Start the API server."""
    if not os.getenv("GROQ_API_KEY"):
        typer.echo("Warning: GROQ_API_KEY is not set; /api/parse-resume will return 500", err=True)
    uvicorn.run("folioflow.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
