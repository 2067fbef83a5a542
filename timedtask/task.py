"""Task lifecycle engine.

A task prints its banner optimistically on one line so that a quick success
can complete on that same line (``Building... done. (0s)``). A log line or a
nested task starting flushes the banner onto a line of its own, after which
the completion line repeats the description.
"""

import logging
import time
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, TextIO, TypeVar

from timedtask.errors import TimedTaskError
from timedtask.format import format_note, format_suffix, indent, round_duration
from timedtask.output import resolve_output, write
from timedtask.summary import Summary

if TYPE_CHECKING:
    from timedtask.options import Checkable, Option

logger = logging.getLogger(__name__)

T = TypeVar("T")

_clock = time.monotonic
_wall = datetime.now


class Phase(Enum):
    PENDING = "pending"
    RUNNING = "running"
    ENDED = "ended"


class Line(Enum):
    OPEN = "open"
    FLUSHED = "flushed"


class Task:
    """A timed unit of work.

    Instances are handed to task functions so they can add notes, log lines
    and start subtasks. A task must not be retained after its function returns.
    """

    def __init__(
        self,
        description: str,
        parent: "Task | None" = None,
        quiet: bool = False,
        output: TextIO | None = None,
    ):
        self.description = description
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self.quiet = quiet
        self.output = resolve_output(output, parent)
        self.checks: list[Checkable] = []
        self.functions: list[Callable[[Task], object]] = []
        self.notes: list[str] = []
        self.err: Exception | None = None

        self.phase = Phase.PENDING
        self.line = Line.OPEN
        self.start_time: datetime | None = None
        self._started = 0.0
        self._ended = 0.0

    def __repr__(self) -> str:
        return f"Task({self.description!r}, depth={self.depth}, phase={self.phase.value})"

    @property
    def flushed(self) -> bool:
        return self.line is Line.FLUSHED

    @property
    def end_time(self) -> datetime | None:
        if self.phase is not Phase.ENDED:
            return None
        return self.start_time + timedelta(seconds=self._ended - self._started)

    def duration(self) -> timedelta:
        """Return the task duration, or the elapsed time so far while running."""
        if self.phase is Phase.PENDING:
            return timedelta(0)
        if self.phase is Phase.RUNNING:
            return timedelta(seconds=max(_clock() - self._started, 0.0))
        return timedelta(seconds=self._ended - self._started)

    def summary(self) -> Summary:
        if self.phase is not Phase.ENDED:
            raise TimedTaskError(f"task {self.description!r} has not ended")
        return Summary(start=self.start_time, end=self.end_time, err=self.err)

    def add_note(self, note: str) -> None:
        self.add_note_with_label("", note)

    def add_note_with_label(self, label: str, note: str) -> None:
        text = format_note(note, label)
        if not text:
            return
        if self.phase is Phase.ENDED:
            logger.debug("ignoring note %r on ended task %r", text, self.description)
            return
        self.notes.append(text)

    def log(self, message: str) -> None:
        """Print a message on its own line, indented one level below the task."""
        if not message.endswith("\n"):
            message += "\n"
        self.flush()
        write(self.output, indent(self.depth + 1) + message)

    def logf(self, fmt: str, *args) -> None:
        self.log(fmt % args if args else fmt)

    def flush(self) -> None:
        """Terminate the banner line ahead of an unrelated write. Idempotent."""
        if self.line is Line.FLUSHED:
            return
        if self.parent is not None:
            self.parent.flush()
        if self.quiet:
            write(self.output, f"{indent(self.depth)}{self.description}...\n")
        else:
            write(self.output, "\n")
        self.line = Line.FLUSHED

    def start(self) -> None:
        if self.phase is not Phase.PENDING:
            raise TimedTaskError(f"task {self.description!r} already started")
        if not self.quiet:
            if self.parent is not None:
                self.parent.flush()
            write(self.output, f"{indent(self.depth)}{self.description}...")
        self.start_time = _wall()
        self._started = _clock()
        self.phase = Phase.RUNNING
        logger.debug("started %r at depth %d", self.description, self.depth)

    def end(self, err: Exception | None = None) -> None:
        if self.phase is not Phase.RUNNING:
            raise TimedTaskError(f"task {self.description!r} is not running")
        self._ended = max(_clock(), self._started)
        self.phase = Phase.ENDED
        self.err = err

        status = "done" if err is None else "failed"
        suffix = format_suffix(round_duration(self.duration()), self.notes)
        logger.debug("ended %r: %s %s", self.description, status, suffix)

        if self.line is Line.FLUSHED:
            write(self.output, f"{indent(self.depth)}{self.description}... {status}. {suffix}\n")
        elif self.quiet:
            if err is None:
                return
            if self.parent is not None:
                self.parent.flush()
            write(self.output, f"{indent(self.depth)}{self.description}... failed. {suffix}\n")
        else:
            write(self.output, f" {status}. {suffix}\n")

    def _preflight(self) -> Exception | None:
        for check in self.checks:
            err = check.err()
            if err is not None:
                return err
        return None

    def _execute(self, work: Callable[["Task"], T] | None = None) -> tuple[T | None, Exception | None]:
        self.start()
        result = None
        try:
            err = self._preflight()
            if err is None:
                for function in self.functions:
                    function(self)
                if work is not None:
                    result = work(self)
        except Exception as exc:
            err = exc
        self.end(err)
        return result, err

    def execute(self, work: Callable[["Task"], T] | None = None) -> T | None:
        """Run checks, functions and work as this task, re-raising any failure."""
        result, err = self._execute(work)
        if err is not None:
            raise err
        return result

    def execute_options(self, options: Iterable["Option"]) -> Summary:
        for option in options:
            option.apply(self)
        self._execute()
        return self.summary()

    def run(self, description: str, *options: "Option") -> Summary:
        """Run a subtask configured by options. Failures land in Summary.err."""
        return Task(description, parent=self).execute_options(options)
