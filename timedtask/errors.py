class TimedTaskError(Exception):
    """Base exception for timedtask errors."""

    pass


class Canceled(TimedTaskError):
    """Raised when a context was canceled before a task started."""

    def __init__(self, message: str = "context canceled"):
        super().__init__(message)


class DeadlineExceeded(TimedTaskError):
    """Raised when a context deadline passed before a task started."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)
