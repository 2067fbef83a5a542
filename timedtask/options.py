"""Option surface: configure a task with composable options, get a Summary back."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TextIO, runtime_checkable

from timedtask.summary import Summary
from timedtask.task import Task


@runtime_checkable
class Checkable(Protocol):
    """Anything that can be checked for an error before a task starts."""

    def err(self) -> Exception | None: ...


class Option(Protocol):
    def apply(self, task: Task) -> None: ...


@dataclass(frozen=True)
class QuietOption:
    """Whether the task's banner is suppressed under normal circumstances."""

    value: bool = True

    def apply(self, task: Task) -> None:
        task.quiet = self.value


quiet = QuietOption(True)


@dataclass(frozen=True)
class CheckableOption:
    checkable: Checkable

    def apply(self, task: Task) -> None:
        task.checks.append(self.checkable)


def check(checkable: Checkable) -> CheckableOption:
    """Consult checkable for an error before the task's functions run."""
    return CheckableOption(checkable)


@dataclass(frozen=True)
class FuncOption:
    func: Callable[[Task], object]

    def apply(self, task: Task) -> None:
        task.functions.append(self.func)


def do(func: Callable[[Task], object]) -> FuncOption:
    """Run func as part of the task. Functions run in order until one fails."""
    return FuncOption(func)


@dataclass(frozen=True)
class OutputOption:
    stream: TextIO

    def apply(self, task: Task) -> None:
        task.output = self.stream


def write_to(stream: TextIO) -> OutputOption:
    return OutputOption(stream)


def run(description: str, *options: Option) -> Summary:
    """Run a root task configured by options.

    Errors raised by task functions or reported by checks are returned in
    the summary rather than raised.
    """
    explicit = [option.stream for option in options if isinstance(option, OutputOption)]
    task = Task(description, output=explicit[-1] if explicit else None)
    return task.execute_options(options)
