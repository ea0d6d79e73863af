"""Command-line interface for MediAssist."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from mediassist import __version__
from mediassist.config import get_settings, load_settings
from mediassist.core.assistant import MedicalAssistant
from mediassist.formatting.ir import Document
from mediassist.formatting.parser import MarkdownParser
from mediassist.llm.prompts import QUICK_PROMPTS
from mediassist.renderers import get_renderer
from mediassist.renderers.console_renderer import ConsoleRenderer

app = typer.Typer(
    name="mediassist",
    help="Ask a medical assistant model and render its reply as structured text.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"MediAssist v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; debug output only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def check_output_path(output: Optional[Path]) -> None:
    """Fail fast on an output extension no renderer handles."""
    if output is None:
        return
    try:
        get_renderer(output.suffix)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def write_output(document: Document, output: Path, verbose: bool) -> bool:
    """Write the document with the renderer for the output extension."""
    try:
        renderer = get_renderer(output.suffix)()
        renderer.write(document, output)
    except Exception as e:
        console.print(f"[red]Error writing {output.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False
    console.print(f"[green]Success:[/green] {output}")
    return True


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Read settings from this .env file instead of ./.env",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """
    Ask medical questions and render the structured reply.

    Examples:

        mediassist ask "Is Ginger Tea good for nausea?"

        mediassist ask "How to take Amoxicillin?" --output report.docx

        mediassist render reply.md

        mediassist prompts

        mediassist --env-file prod.env ask "Side effects of Ibuprofen"
    """
    if env_file is not None:
        load_settings(env_file)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the reply to a file (.md, .txt or .docx)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="LLM model to use (default: gemini/gemini-2.5-flash)",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print the reply text without parsing it",
    ),
    no_validate: bool = typer.Option(
        False,
        "--no-validate",
        help="Do not re-ask when the reply breaks the formatting rules",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Ask a question and render the structured reply."""
    configure_logging(verbose)
    check_output_path(output)

    settings = get_settings()
    use_model = model or settings.default_model

    if verbose:
        console.print(f"[blue]Model:[/blue] {use_model}")

    try:
        assistant = MedicalAssistant(model=use_model, validate=not no_validate)
        with console.status("Analyzing medical databases & searching sources..."):
            reply = assistant.ask(question)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if raw:
        console.print(reply.text, markup=False, highlight=False)
    else:
        ConsoleRenderer(console).render(reply.document)

    if output is not None and not write_output(reply.document, output, verbose):
        raise typer.Exit(1)


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="Saved reply text to render",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the parsed reply to a file (.md, .txt or .docx)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Parse a saved reply and render it."""
    configure_logging(verbose)
    check_output_path(output)

    document = MarkdownParser().parse(path.read_text(encoding="utf-8"))

    if verbose:
        console.print(f"[blue]Blocks:[/blue] {len(document)}")

    ConsoleRenderer(console).render(document)

    if output is not None and not write_output(document, output, verbose):
        raise typer.Exit(1)


@app.command()
def prompts() -> None:
    """List example questions."""
    for number, prompt in enumerate(QUICK_PROMPTS, start=1):
        console.print(f"[cyan]{number}.[/cyan] {prompt}")


if __name__ == "__main__":
    app()
