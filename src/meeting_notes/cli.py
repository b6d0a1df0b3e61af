from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich import box
from .bot import ConsoleSink, MeetingNotesBot
from .config import NotesConfig, write_default_config
from .errors import InvalidArgument, ResourceUnavailable
from .log import setup_logging
from .notes import is_note
from .pipeline import NotesPipeline
from .summarizer import check_k

app = typer.Typer(help="Pull meeting notes (nouns and verbs) out of chat text")
console = Console()


def _load_pipeline(config_path: Optional[Path], tagger: Optional[str]) -> NotesPipeline:
    try:
        cfg = NotesConfig.load(config_path) if config_path else NotesConfig()
        if tagger:
            cfg.tagger = tagger
        setup_logging(cfg.log_level)
        return NotesPipeline.from_config(cfg)
    except InvalidArgument as ex:
        console.print(f"[red]Invalid config:[/red] {ex}")
        raise typer.Exit(code=2)
    except ResourceUnavailable as ex:
        console.print(f"[red]Tagger unavailable:[/red] {ex}")
        console.print("Run with a config that sets download_missing, or use --tagger lexicon")
        raise typer.Exit(code=1)


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    return sys.stdin.read()


@app.command()
def init(
    config_path: Path = typer.Option("notes.json", help="Where to create config"),
):
    """Create a default config file."""
    write_default_config(config_path)
    console.print(f"[green]Created[/green] {config_path}")


@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Message text (stdin if omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, help="Read text from file"),
    k: Optional[int] = typer.Option(None, "--k", "-k", help="Number of notes (config top_k by default)"),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True),
    tagger: Optional[str] = typer.Option(None, help="perceptron|lexicon"),
):
    """Print the top-k notes as one line."""
    pipeline = _load_pipeline(config_path, tagger)
    try:
        summ = pipeline.summarize(_read_text(text, file), k)
    except InvalidArgument as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=2)
    typer.echo(summ)


@app.command()
def notes(
    text: Optional[str] = typer.Argument(None, help="Message text (stdin if omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True),
    k: Optional[int] = typer.Option(None, "--k", "-k"),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True),
    tagger: Optional[str] = typer.Option(None, help="perceptron|lexicon"),
):
    """Show ranked notes with their counts."""
    pipeline = _load_pipeline(config_path, tagger)
    try:
        ranked = pipeline.rank(_read_text(text, file), k)
    except InvalidArgument as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=2)
    if not ranked:
        console.print("[yellow]No notes[/yellow]")
        return
    table = Table(title="Meeting Notes", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Note", style="bold")
    table.add_column("Count", justify="right")
    for i, (word, count) in enumerate(ranked, 1):
        table.add_row(str(i), word, str(count))
    console.print(table)


@app.command("tag")
def tag_cmd(
    text: Optional[str] = typer.Argument(None, help="Message text (stdin if omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True),
    tagger: Optional[str] = typer.Option(None, help="perceptron|lexicon"),
):
    """Show every token with its part-of-speech tag."""
    pipeline = _load_pipeline(config_path, tagger)
    table = Table(box=box.MINIMAL_HEAVY_HEAD)
    table.add_column("Token")
    table.add_column("Tag")
    table.add_column("Note", justify="center")
    for tok in pipeline.tag(_read_text(text, file)):
        table.add_row(tok.text, tok.tag, "x" if is_note(tok, pipeline.prefixes) else "")
    console.print(table)


@app.command()
def listen(
    channel: str = typer.Option("#meeting", help="Target name shown with each reply"),
    k: Optional[int] = typer.Option(None, "--k", "-k"),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True),
    tagger: Optional[str] = typer.Option(None, help="perceptron|lexicon"),
):
    """Treat each stdin line as a chat message and reply with its notes."""
    pipeline = _load_pipeline(config_path, tagger)
    bot = MeetingNotesBot(pipeline, ConsoleSink(console), k=k)
    try:
        if k is not None:
            check_k(k)
        for line in sys.stdin:
            if line.strip():
                bot.on_message(line.rstrip("\n"), channel)
    except InvalidArgument as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=2)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
    config_path: Optional[Path] = typer.Option(None, "--config", exists=True),
):
    """Run the HTTP summary service."""
    import uvicorn
    if config_path:
        os.environ["MEETING_NOTES_CONFIG"] = str(config_path)
    uvicorn.run("meeting_notes.server.main:app", host=host, port=port)


def main():
    app()

if __name__ == "__main__":
    main()
