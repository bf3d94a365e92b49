# src/secondbrain/cli/app.py
"""Command-line interface for SecondBrain.

The corpus lives only in memory, so every invocation ingests its files
first and then answers questions against them:
1. Parse args (via Typer)
2. Build a SecondBrain from secondbrain.yaml / env vars
3. Ingest --file paths and --text snippets
4. Answer and render results with Rich
"""

from __future__ import annotations

try:
    import typer
    from rich.console import Console
    from rich.markdown import Markdown
    from rich.panel import Panel
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install secondbrain-rag[cli]"
    ) from e

from pathlib import Path
from typing import NoReturn

from secondbrain import __version__
from secondbrain.config import ConfigError, create_second_brain, load_config, load_env_file
from secondbrain.exceptions import SecondBrainError
from secondbrain.log import configure_logging
from secondbrain.models import QueryResponse
from secondbrain.secondbrain import SecondBrain

app = typer.Typer(
    name="secondbrain",
    help="SecondBrain - ask questions about your own notes.",
    no_args_is_help=True,
)
console = Console()

EXIT_WORDS = {"exit", "quit", ":q"}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"secondbrain {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log pipeline events at INFO level."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines."),
) -> None:
    """SecondBrain - retrieval-augmented answers over your notes."""
    load_env_file()
    configure_logging("INFO" if verbose else "WARNING", json=json_logs)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _build_brain(
    files: list[Path],
    text: str | None,
    title: str | None,
    config_file: str | None,
) -> SecondBrain:
    """Create a SecondBrain and ingest everything given on the command line."""
    try:
        brain = create_second_brain(load_config(config_file))
    except ConfigError as e:
        _fail(str(e))

    try:
        for path in files:
            result = brain.ingest_file(path)
            console.print(
                f"[dim]Ingested {path.name}: {result.chunks_added} chunk(s)"
                f" (source {result.source_id})[/dim]"
            )
        if text is not None:
            result = brain.ingest_text(text, title=title)
            console.print(
                f"[dim]Ingested inline text: {result.chunks_added} chunk(s)"
                f" (source {result.source_id})[/dim]"
            )
    except FileNotFoundError as e:
        _fail(str(e))
    except UnicodeDecodeError:
        _fail(f"not valid UTF-8 text: {path}")
    except SecondBrainError as e:
        _fail(f"failed to ingest text: {e}")
    return brain


def _render_response(response: QueryResponse, plain: bool) -> None:
    if plain:
        console.print(f"Answer: {response.answer}")
        console.print()
        console.print(f"Context used: {response.context_used_count}")
        for i, item in enumerate(response.results, 1):
            console.print(f"  [{i}] source {item.chunk.source_id} (score: {item.score:.3f})")
        return

    border = "green" if response.generated else "yellow"
    console.print(Panel(Markdown(response.answer), title="Answer", border_style=border))

    table = Table(title=f"Context used ({response.context_used_count})")
    table.add_column("#", style="dim")
    table.add_column("Source", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Preview")
    for i, item in enumerate(response.results, 1):
        preview = item.chunk.content[:80].replace("\n", " ")
        if len(item.chunk.content) > 80:
            preview += "..."
        table.add_row(str(i), str(item.chunk.source_id), f"{item.score:.3f}", preview)
    console.print(table)


def _answer(brain: SecondBrain, question: str, k: int | None, plain: bool) -> None:
    try:
        response = brain.query(question, k=k)
    except SecondBrainError as e:
        _fail(str(e))
    _render_response(response, plain)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    files: list[Path] = typer.Option([], "--file", "-f", help="Text file to ingest (repeatable)"),
    text: str = typer.Option(None, "--text", "-t", help="Inline text to ingest"),
    title: str = typer.Option(None, "--title", help="Title for --text"),
    k: int = typer.Option(None, "--k", "-k", help="Number of chunks to use"),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
    plain: bool = typer.Option(False, "--plain", help="Plain output (no colors/formatting)"),
) -> None:
    """Ingest files and/or text, then answer one question."""
    brain = _build_brain(files, text, title, config_file)
    _answer(brain, question, k, plain)


@app.command()
def chat(
    files: list[Path] = typer.Option([], "--file", "-f", help="Text file to ingest (repeatable)"),
    k: int = typer.Option(None, "--k", "-k", help="Number of chunks to use"),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
    plain: bool = typer.Option(False, "--plain", help="Plain output (no colors/formatting)"),
) -> None:
    """Ingest files, then answer questions until 'exit'."""
    brain = _build_brain(files, None, None, config_file)
    while True:
        try:
            question = console.input("[bold]? [/bold]")
        except EOFError:
            break
        if question.strip().lower() in EXIT_WORDS:
            break
        if not question.strip():
            continue
        try:
            response = brain.query(question, k=k)
        except SecondBrainError as e:
            console.print(f"[red]Error: {e}[/red]")
            continue
        _render_response(response, plain)


@app.command(name="config")
def config_cmd(
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Show the effective configuration."""
    try:
        brain = create_second_brain(load_config(config_file))
    except ConfigError as e:
        _fail(str(e))

    table = Table(title="SecondBrain Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for name, value in brain.settings.model_dump().items():
        shown = str(value).replace("\n", " ")
        if len(shown) > 60:
            shown = shown[:57] + "..."
        table.add_row(name, shown)
    table.add_row("chunk_size_chars", str(brain.settings.chunk_size_chars))
    console.print(table)
