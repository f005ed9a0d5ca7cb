from collections.abc import Sequence

from .utils import NOT_FOUND, midpoint, resolve_end

# --- Reference and order-aware binary searches ---

def search_full_scan(seq: Sequence[int], target: int) -> int:
    """
    Scans the entire sequence to find the element.
    Returns the first index holding target, or -1.
    Used as the brute-force reference for every other search.
    """
    for i in range(len(seq)):
        if seq[i] == target:
            return i
    return NOT_FOUND

def binary_search(seq: Sequence[int], target: int, start: int = 0, end: int | None = None, ascending: bool = True) -> int:
    """
    Binary search over seq[start..end] (inclusive) in a known direction.
    In descending order the branches are inverted: a target smaller than
    seq[mid] lies to the right.
    Returns the index of an element equal to target, or -1.
    """
    end = resolve_end(seq, end)
    while start <= end:
        mid = midpoint(start, end)
        value = seq[mid]
        if value == target:
            return mid
        if ascending:
            if target < value:
                end = mid - 1
            else:
                start = mid + 1
        else:
            if target > value:
                end = mid - 1
            else:
                start = mid + 1
    return NOT_FOUND

def order_agnostic_search(seq: Sequence[int], target: int, start: int = 0, end: int | None = None) -> int:
    """
    Binary search over a monotonic sequence whose direction is not known in advance.
    The direction is read off the two ends of the range before searching.
    """
    end = resolve_end(seq, end)
    if start > end:
        return NOT_FOUND
    ascending = seq[start] <= seq[end]
    return binary_search(seq, target, start, end, ascending=ascending)

# --- First/last occurrence ---

def _search_occurrence(seq: Sequence[int], target: int, find_first: bool) -> int:
    candidate = NOT_FOUND
    start, end = 0, len(seq) - 1
    while start <= end:
        mid = midpoint(start, end)
        if target < seq[mid]:
            end = mid - 1
        elif target > seq[mid]:
            start = mid + 1
        else:
            # keep going past a match, an earlier/later copy may exist
            candidate = mid
            if find_first:
                end = mid - 1
            else:
                start = mid + 1
    return candidate

def find_first(seq: Sequence[int], target: int) -> int:
    """Index of the first element equal to target in an ascending sequence, or -1."""
    return _search_occurrence(seq, target, find_first=True)

def find_last(seq: Sequence[int], target: int) -> int:
    """Index of the last element equal to target in an ascending sequence, or -1."""
    return _search_occurrence(seq, target, find_first=False)

def search_range(seq: Sequence[int], target: int) -> list[int]:
    """
    Returns [first, last], the inclusive range of positions equal to target,
    or [-1, -1] if target does not occur.
    """
    return [find_first(seq, target), find_last(seq, target)]

# --- Wraparound search ---

def next_greatest_letter(letters: Sequence[str], target: str) -> str | None:
    """
    Smallest letter strictly greater than target.
    Wraps around to letters[0] when target is at or past the last letter.
    Returns None for an empty sequence.
    """
    n = len(letters)
    if n == 0:
        return None
    start, end = 0, n - 1
    while start <= end:
        mid = midpoint(start, end)
        if letters[mid] <= target:
            start = mid + 1
        else:
            end = mid - 1
    return letters[start % n]
