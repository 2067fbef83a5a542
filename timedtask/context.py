"""Cooperative cancellation signal checked once before a task starts."""

import threading
import time

from timedtask.errors import Canceled, DeadlineExceeded


class Context:
    """A cancellation signal.

    A context becomes done when it is canceled, when its deadline passes, or
    when its parent becomes done. Once done, ``err()`` returns the same
    exception instance on every call.
    """

    def __init__(self, parent: "Context | None" = None, deadline: float | None = None):
        self._parent = parent
        self._deadline = deadline
        self._err: Exception | None = None
        self._lock = threading.Lock()

    @classmethod
    def background(cls) -> "Context":
        """Return a context that is never canceled on its own."""
        return cls()

    def with_cancel(self) -> "Context":
        return Context(parent=self, deadline=self._deadline)

    def with_timeout(self, seconds: float) -> "Context":
        deadline = time.monotonic() + seconds
        if self._deadline is not None:
            deadline = min(deadline, self._deadline)
        return Context(parent=self, deadline=deadline)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def cancel(self, cause: Exception | None = None) -> None:
        with self._lock:
            if self._err is None:
                self._err = cause if cause is not None else Canceled()

    def err(self) -> Exception | None:
        with self._lock:
            if self._err is not None:
                return self._err
        if self._parent is not None:
            parent_err = self._parent.err()
            if parent_err is not None:
                with self._lock:
                    if self._err is None:
                        self._err = parent_err
                    return self._err
        if self._deadline is not None and time.monotonic() >= self._deadline:
            with self._lock:
                if self._err is None:
                    self._err = DeadlineExceeded()
                return self._err
        return None

    @property
    def done(self) -> bool:
        return self.err() is not None
