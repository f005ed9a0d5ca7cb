# --- Shared helpers for the search routines ---

from collections.abc import Sequence

NOT_FOUND = -1


def midpoint(start: int, end: int) -> int:
    """
    Returns the middle index of the inclusive range [start, end].
    Rounds down towards start, so the interval always shrinks from one side.
    """
    return start + (end - start) // 2


def resolve_end(seq: Sequence, end: int | None) -> int:
    """Last index of the range to search; None means the end of the sequence."""
    return len(seq) - 1 if end is None else end
