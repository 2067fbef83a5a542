"""Transcript output: target resolution and raw writes."""

from typing import TYPE_CHECKING, TextIO

import typer

from timedtask import config

if TYPE_CHECKING:
    from timedtask.task import Task


def resolve_output(explicit: TextIO | None = None, parent: "Task | None" = None) -> TextIO:
    """Explicit target wins, then the parent's target, then the configured default."""
    if explicit is not None:
        return explicit
    if parent is not None:
        return parent.output
    return config.default_output()


def write(stream: TextIO, text: str) -> None:
    if not text:
        return
    typer.echo(text, file=stream, nl=False, color=True)
