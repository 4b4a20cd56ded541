"""Formatting helpers for log messages."""

from collections.abc import Sequence


def time_str(seconds: float) -> str:
    """Format a search duration for log messages.

    Args:
        seconds: Elapsed wall-clock time in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format a node or solution count for log messages.

    Args:
        n: The count to format.

    Returns:
        The count with commas as thousands separators, e.g. "1,234,567".
    """
    return f"{n:,}"


def preview(solutions: Sequence[Sequence[str]], limit: int = 3) -> str:
    """Short human-readable preview of the first few solutions.

    Args:
        solutions: Solutions in final order.
        limit: Maximum number of solutions to show.

    Returns:
        e.g. `"act | cat | tac"`, with `"..."` appended when solutions were left out.
    """
    shown = " | ".join(" ".join(words) for words in solutions[:limit])
    if len(solutions) > limit:
        shown += " | ..."
    return shown or "-"
