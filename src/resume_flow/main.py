"""CLI entry point for resume-flow."""

import logging
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> resume_flow/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402

from resume_flow.config import get_settings  # noqa: E402
from resume_flow.exceptions import ResumeError  # noqa: E402
from resume_flow.models.resume import Document  # noqa: E402
from resume_flow.parsers import ResumeFormat, parse  # noqa: E402
from resume_flow.pdf import generate_pdf  # noqa: E402
from resume_flow.processors import normalize_dates  # noqa: E402

app = typer.Typer(
    name="resume-flow",
    help="resume-flow - parse resumes and render them to PDF",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details")
    ] = False,
) -> None:
    """Parse resumes from JSON, YAML, Markdown or plain text."""
    setup_logging("DEBUG" if verbose else get_settings().log_level)


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def resolve_format(path: Path, fmt: str | None) -> ResumeFormat:
    """Explicit format, else the file suffix, else the configured default."""
    if fmt:
        return ResumeFormat.from_label(fmt)
    try:
        return ResumeFormat.from_path(path)
    except ResumeError:
        default_format = get_settings().default_format
        if default_format is None:
            raise
        return ResumeFormat.from_label(default_format)


def load_document(path: Path, fmt: str | None, raw: bool = False) -> Document:
    """Read, parse and (unless ``raw``) date-normalize a resume file."""
    content = read_file(path)
    try:
        document = parse(content, resolve_format(path, fmt), get_settings().website_types)
    except ResumeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    return document if raw else normalize_dates(document)


FormatOption = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Input format: json, yaml, markdown or plaintext"),
]


@app.command("parse")
def parse_command(
    file: Annotated[Path, typer.Argument(help="Resume file to parse")],
    fmt: FormatOption = None,
    raw: Annotated[
        bool, typer.Option("--raw", help="Skip date normalization")
    ] = False,
) -> None:
    """Print the parsed resume as JSON."""
    document = load_document(file, fmt, raw=raw)
    console.print_json(document.model_dump_json(exclude_none=True))


@app.command("pdf")
def pdf_command(
    file: Annotated[Path, typer.Argument(help="Resume file to render")],
    fmt: FormatOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: input name with .pdf)"),
    ] = None,
) -> None:
    """Render a resume to PDF."""
    settings = get_settings()
    document = load_document(file, fmt)
    output = output or file.with_suffix(".pdf")

    pdf_bytes = generate_pdf(document, settings.page_geometry, settings.website_types)
    output.write_bytes(pdf_bytes)
    console.print(f"[green]PDF saved to:[/green] {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from resume_flow import __version__

    console.print(f"resume-flow v{__version__}")


if __name__ == "__main__":
    app()
