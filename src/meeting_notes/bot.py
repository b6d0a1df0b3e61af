from __future__ import annotations
from typing import Optional, Protocol
from rich.console import Console
from rich.markup import escape
from .log import get_logger
from .pipeline import NotesPipeline

logger = get_logger(__name__)


class SummarySink(Protocol):
    """Where finished summaries go (a chat channel, a console, a queue)."""

    def deliver(self, summary: str, target: str) -> None:
        ...


class ConsoleSink:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def deliver(self, summary: str, target: str) -> None:
        body = escape(summary) if summary else "[dim](no notes)[/dim]"
        self.console.print(f"[bold]{escape(target)}[/bold] {body}")


class MeetingNotesBot:
    """Message callback: summarize incoming text and hand it to the sink.

    Delivery errors are the sink's business and propagate unchanged.
    """

    def __init__(self, pipeline: NotesPipeline, sink: SummarySink, k: Optional[int] = None):
        self.pipeline = pipeline
        self.sink = sink
        self.k = k

    def on_message(self, text: str, target: str) -> str:
        summary = self.pipeline.summarize(text, self.k)
        logger.debug("delivering %d-word summary to %s", len(summary.split()), target)
        self.sink.deliver(summary, target)
        return summary
