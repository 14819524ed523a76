"""Readable CLI."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from readable.config import settings
from readable.exceptions import DocumentLoadError
from readable.log_setup import setup_logging
from readable.models import Document
from readable.pipeline import build_document, is_ocr_placeholder, split_sentences
from readable.qa import answer_question

app = typer.Typer(
    name="readable",
    help="Simplify, segment and question plain text documents",
    add_completion=False,
)
console = Console()


def _read_text(path: str) -> str:
    """Read UTF-8 text from a file, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Cannot read {escape(path)}:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _load_or_build(path: str) -> Document:
    """Load a serialized document (.json) or build one from text."""
    text = _read_text(path)
    if path.endswith(".json"):
        try:
            return Document.load(text)
        except DocumentLoadError as e:
            console.print(
                f"[bold red]Invalid document {escape(path)}:[/bold red] {escape(str(e))}"
            )
            raise typer.Exit(code=1)
    if is_ocr_placeholder(text):
        console.print("[yellow]Input is the OCR placeholder, not recognized text[/yellow]")
    return build_document(text)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Log level (default from settings)"),
) -> None:
    """Configure logging for every command."""
    setup_logging(log_level or settings.log_level)


@app.command()
def build(
    path: str = typer.Argument(..., help="Text file to analyze ('-' for stdin)"),
    as_json: bool = typer.Option(False, "--json", help="Print the document as JSON"),
) -> None:
    """Analyze a text file into a document."""
    doc = _load_or_build(path)
    if as_json:
        typer.echo(doc.to_json(indent=2))
        return

    values = doc.highlights.values()
    table = Table(title=f"Document {doc.id}")
    table.add_column("Field", style="bold blue")
    table.add_column("Value")
    table.add_row("Sentences", str(len(doc.sentences)))
    table.add_row("Dates", escape(", ".join(values["dates"])) or "-")
    table.add_row("Amounts", escape(", ".join(values["amounts"])) or "-")
    table.add_row("Structures", str(len(doc.structures)))
    table.add_row("Summary", escape(doc.summary) or "-")
    table.add_row("Simplified", escape(doc.simplified_text) or "-")
    console.print(table)


@app.command()
def sentences(
    path: str = typer.Argument(..., help="Text file to segment ('-' for stdin)"),
) -> None:
    """Print each sentence with its character offsets."""
    text = _read_text(path)
    for idx, sentence in enumerate(split_sentences(text)):
        offsets = escape(f"[{sentence.start}, {sentence.end})")
        console.print(
            f"[dim]{idx:>3}[/dim] [cyan]{offsets}[/cyan] {escape(sentence.text)}",
            highlight=False,
        )


@app.command()
def ask(
    path: str = typer.Argument(..., help="Text file or serialized document (.json)"),
    question: str = typer.Argument(..., help="Question to answer"),
) -> None:
    """Answer a question about a document."""
    doc = _load_or_build(path)
    result = answer_question(question, doc)
    if result.is_empty:
        console.print("[yellow]No answer found[/yellow]")
        return

    console.print(f"[bold blue]Answer:[/bold blue] {escape(result.answer)}", highlight=False)
    console.print(f"[bold blue]Confidence:[/bold blue] {result.confidence}")
    source = result.source
    if source.sentence_index is not None:
        console.print(f"[dim]Source: sentence {source.sentence_index}[/dim]")
    else:
        console.print(f"[dim]Source: {source.type.value}[/dim]")


if __name__ == "__main__":
    app()
