from collections.abc import Sequence

from .searches import binary_search
from .utils import NOT_FOUND, midpoint

# --- Rotated sorted arrays ---
#
# A rotated array is an ascending array shifted right by k places, e.g.
# [0, 1, 2, 3, 4, 5, 6, 7] rotated by 4 is [4, 5, 6, 7, 0, 1, 2, 3].
# The pivot is the index of the largest element, the only i with a[i] > a[i + 1],
# so the rotation count is pivot + 1 and an unrotated array reports -1 + 1 = 0.

def find_pivot(seq: Sequence[int]) -> int:
    """
    Finds the pivot of a rotated array with no duplicate elements.
    Returns -1 if the array is not rotated.

    One of the two halves around mid is always sorted; the pivot lives in the other one.
    With duplicates a[mid] <= a[start] no longer tells the halves apart,
    use find_pivot_with_duplicates for those inputs.
    """
    start, end = 0, len(seq) - 1
    while start <= end:
        mid = midpoint(start, end)
        if mid < end and seq[mid] > seq[mid + 1]:
            return mid
        if mid > start and seq[mid] < seq[mid - 1]:
            return mid - 1
        if seq[mid] <= seq[start]:
            end = mid - 1
        else:
            start = mid + 1
    return NOT_FOUND

def find_pivot_with_duplicates(seq: Sequence[int]) -> int:
    """
    Finds the pivot of a rotated array that may contain duplicates.
    Returns -1 if the array is not rotated.

    When a[start], a[mid] and a[end] are all equal there is no way to pick a half,
    so the window shrinks by one from each side instead. Each boundary element is
    checked before it is dropped, since it may be the pivot itself.
    This makes the worst case O(n), e.g. for an array of nearly all equal values.
    """
    start, end = 0, len(seq) - 1
    while start <= end:
        mid = midpoint(start, end)
        if mid < end and seq[mid] > seq[mid + 1]:
            return mid
        if mid > start and seq[mid] < seq[mid - 1]:
            return mid - 1

        if seq[mid] == seq[start] and seq[mid] == seq[end]:
            if start < end and seq[start] > seq[start + 1]:
                return start
            start += 1
            if end > start and seq[end] < seq[end - 1]:
                return end - 1
            end -= 1
        elif seq[start] < seq[mid] or (seq[start] == seq[mid] and seq[mid] > seq[end]):
            # left half is sorted
            start = mid + 1
        else:
            end = mid - 1
    return NOT_FOUND

def count_rotations(seq: Sequence[int], allow_duplicates: bool = False) -> int:
    """Number of places the ascending array was rotated to the right."""
    if allow_duplicates:
        return find_pivot_with_duplicates(seq) + 1
    return find_pivot(seq) + 1

def search_rotated(seq: Sequence[int], target: int, allow_duplicates: bool = False) -> int:
    """
    Searches a rotated ascending array.
    Locates the pivot, then binary searches whichever sorted run can hold target:
    the run before the pivot holds everything >= seq[0], the run after it the rest.
    """
    n = len(seq)
    if n == 0:
        return NOT_FOUND
    pivot = find_pivot_with_duplicates(seq) if allow_duplicates else find_pivot(seq)
    if pivot == NOT_FOUND:
        return binary_search(seq, target)
    if target >= seq[0]:
        return binary_search(seq, target, 0, pivot)
    return binary_search(seq, target, pivot + 1, n - 1)
