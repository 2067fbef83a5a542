"""Spec builders: immutable task configuration with run methods."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TextIO, TypeVar

from timedtask.context import Context
from timedtask.options import Checkable
from timedtask.task import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")

Func = Callable[[Task], None]
SimpleFunc = Callable[[], None]


@dataclass(frozen=True)
class Spec:
    """Specification for a timed task.

    Each run builds a fresh Task from these fields. Failures are printed as
    ``failed`` and then re-raised unchanged.
    """

    description: str
    parent: Task | None = None
    quiet: bool = False
    output: TextIO | None = None

    def build(self) -> Task:
        return Task(self.description, parent=self.parent, quiet=self.quiet, output=self.output)

    def _run_ctx(self, ctx: Checkable, work: Callable[[Task], T]) -> T:
        err = ctx.err()
        if err is not None:
            logger.debug("skipping %r: %s", self.description, err)
            raise err
        return self.build().execute(work)

    def run(self, f: Func) -> None:
        self.run_ctx(Context.background(), f)

    def run_ctx(self, ctx: Checkable, f: Func) -> None:
        """Run f unless ctx is already done, in which case its error is raised."""
        self._run_ctx(ctx, f)

    def run_simple(self, f: SimpleFunc) -> None:
        self.run_simple_ctx(Context.background(), f)

    def run_simple_ctx(self, ctx: Checkable, f: SimpleFunc) -> None:
        self._run_ctx(ctx, lambda task: f())


@dataclass(frozen=True)
class SpecFor(Spec, Generic[T]):
    """Specification for a timed task whose function returns a T."""

    def run(self, f: Callable[[Task], T]) -> T:
        return self.run_ctx(Context.background(), f)

    def run_ctx(self, ctx: Checkable, f: Callable[[Task], T]) -> T:
        return self._run_ctx(ctx, f)

    def run_simple(self, f: Callable[[], T]) -> T:
        return self.run_simple_ctx(Context.background(), f)

    def run_simple_ctx(self, ctx: Checkable, f: Callable[[], T]) -> T:
        return self._run_ctx(ctx, lambda task: f())
