"""Nested, timed task progress for command-line tools."""

from .context import Context
from .errors import Canceled, DeadlineExceeded, TimedTaskError
from .format import format_duration
from .options import Checkable, Option, QuietOption, check, do, quiet, run, write_to
from .spec import Spec, SpecFor
from .summary import Summary
from .task import Task

__all__ = [
    "Canceled",
    "Checkable",
    "Context",
    "DeadlineExceeded",
    "Option",
    "QuietOption",
    "Spec",
    "SpecFor",
    "Summary",
    "Task",
    "TimedTaskError",
    "check",
    "do",
    "format_duration",
    "quiet",
    "run",
    "write_to",
]
