from collections.abc import Sequence

from .searches import binary_search
from .utils import NOT_FOUND, midpoint, resolve_end

# --- Bitonic (mountain) arrays ---

def peak_index(seq: Sequence[int], start: int = 0, end: int | None = None) -> int:
    """
    Index of the peak of a strictly increasing then strictly decreasing sequence.
    A strictly increasing input peaks at its last index, a strictly decreasing one at 0.
    Returns -1 for an empty range.
    """
    end = resolve_end(seq, end)
    if start > end:
        return NOT_FOUND
    while start < end:
        mid = midpoint(start, end)
        if seq[mid] > seq[mid + 1]:
            # descending side, mid may still be the peak
            end = mid
        else:
            start = mid + 1
    return start

def search_mountain(seq: Sequence[int], target: int) -> int:
    """
    Searches a mountain array: the ascending side [0, peak] first,
    then the descending side [peak + 1, n - 1].
    A value present on both sides is reported at its ascending-side index.
    """
    peak = peak_index(seq)
    if peak == NOT_FOUND:
        return NOT_FOUND
    found = binary_search(seq, target, 0, peak, ascending=True)
    if found != NOT_FOUND:
        return found
    return binary_search(seq, target, peak + 1, len(seq) - 1, ascending=False)
