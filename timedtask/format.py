"""Text helpers for task transcripts."""

from datetime import timedelta

MILLISECOND = 1000
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

INDENT = "  "


def indent(depth: int) -> str:
    return INDENT * max(depth, 0)


def round_duration(d: timedelta) -> timedelta:
    """Round to the nearest millisecond, halves away from zero."""
    micros = d // timedelta(microseconds=1)
    if micros < 0:
        return -timedelta(milliseconds=(-micros + 500) // MILLISECOND)
    return timedelta(milliseconds=(micros + 500) // MILLISECOND)


def format_duration(d: timedelta) -> str:
    """Render a duration as short text: 0s, 150ms, 1.5s, 2m3.25s, 1h0m5s.

    The value is rounded to millisecond precision first.
    """
    micros = round_duration(d) // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < SECOND:
        return f"{sign}{micros // MILLISECOND}ms"

    hours, rem = divmod(micros, HOUR)
    minutes, rem = divmod(rem, MINUTE)
    seconds, rem = divmod(rem, SECOND)

    text = str(seconds)
    millis = rem // MILLISECOND
    if millis:
        text += "." + f"{millis:03d}".rstrip("0")
    text += "s"

    if hours:
        return f"{sign}{hours}h{minutes}m{text}"
    if minutes:
        return f"{sign}{minutes}m{text}"
    return sign + text


def format_note(note: str, label: str = "") -> str:
    """Compose a note. Empty notes stay empty regardless of label."""
    if not note:
        return ""
    if label:
        return f"{label}: {note}"
    return note


def format_suffix(duration: timedelta, notes: list[str] | None = None) -> str:
    parts = [format_duration(duration)]
    parts.extend(notes or [])
    return f"({', '.join(parts)})"
