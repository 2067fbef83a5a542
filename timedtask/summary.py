from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Summary:
    """Snapshot of a completed task."""

    start: datetime
    end: datetime
    err: Exception | None = None

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def ok(self) -> bool:
        return self.err is None
